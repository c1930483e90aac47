"""Meeting booking API schemas."""

from pydantic import BaseModel, Field

from site_client.schemas import Time


class MeetingSlot(BaseModel):
    """Bookable time slot."""

    id: str
    start_time: Time = Field(alias="startTime")
    duration_minutes: int = Field(alias="durationMinutes")
    description: str = ""
    is_booked: bool = Field(alias="isBooked", default=False)

    class Config:
        populate_by_name = True


class Appointment(BaseModel):
    """Booked appointment."""

    id: str
    customer_name: str = Field(alias="customerName")
    time_slot_id: str = Field(alias="timeSlotId")
    booked_by: str = Field(alias="bookedBy")

    class Config:
        populate_by_name = True
