"""Meeting service - bookable slots and appointments."""

from app.cache import keys
from app.errors import require_text, validate_non_negative
from app.services.base import BaseService
from site_client.meetings import Appointment, MeetingSlot
from site_client.schemas import Time


class MeetingService(BaseService):
    """Meeting slot and appointment queries and mutations."""

    async def available_slots(self) -> list[MeetingSlot]:
        return await self._query(keys.AVAILABLE_SLOTS, lambda c: c.available_meeting_slots(), [])

    async def all_slots(self) -> list[MeetingSlot]:
        return await self._query(keys.ALL_SLOTS, lambda c: c.meeting_slots(), [])

    async def slot(self, slot_id: str) -> MeetingSlot | None:
        if not slot_id:
            return None
        return await self._query(
            keys.with_params(keys.MEETING_SLOT, slot_id),
            lambda c: c.meeting_slot(slot_id),
            None,
        )

    async def add_slot(self, start_time: Time, duration_minutes: int, description: str = "") -> str:
        validate_non_negative(duration_minutes, "duration")
        return await self._mutate(
            "add_meeting_slot",
            lambda c: c.add_meeting_slot(start_time, duration_minutes, description),
        )

    async def update_slot(self, slot: MeetingSlot) -> None:
        validate_non_negative(slot.duration_minutes, "duration")
        await self._mutate("update_meeting_slot", lambda c: c.update_meeting_slot(slot))

    async def book(self, customer_name: str, slot_id: str) -> str:
        """Book a slot for the caller, returns the appointment id."""
        require_text(customer_name, "name")
        require_text(slot_id, "time slot")
        return await self._mutate(
            "book_appointment",
            lambda c: c.book_appointment(customer_name.strip(), slot_id),
        )

    async def cancel(self, appointment_id: str) -> None:
        await self._mutate("cancel_appointment", lambda c: c.cancel_appointment(appointment_id))

    async def my_appointments(self) -> list[Appointment]:
        return await self._query(keys.MY_APPOINTMENTS, lambda c: c.my_appointments(), [])

    async def all_appointments(self) -> list[Appointment]:
        return await self._query(keys.ALL_APPOINTMENTS, lambda c: c.appointments(), [])
