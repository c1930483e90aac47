"""Meeting booking API client - slots and appointments."""

from site_client.base import BaseClient
from site_client.meetings.schemas import Appointment, MeetingSlot
from site_client.schemas import Time


class MeetingsClient(BaseClient):
    """Client for meeting slot and appointment endpoints."""

    async def meeting_slots(self) -> list[MeetingSlot]:
        """GET /meetings/slots - all slots (admin)."""
        return [MeetingSlot.model_validate(s) for s in await self._get("meetings/slots")]

    async def available_meeting_slots(self) -> list[MeetingSlot]:
        """GET /meetings/slots/available - unbooked slots."""
        return [MeetingSlot.model_validate(s) for s in await self._get("meetings/slots/available")]

    async def meeting_slot(self, slot_id: str) -> MeetingSlot | None:
        """GET /meetings/slots/{id} - single slot or None."""
        data = await self._get(f"meetings/slots/{slot_id}")
        return MeetingSlot.model_validate(data) if data is not None else None

    async def add_meeting_slot(self, start_time: Time, duration_minutes: int, description: str) -> str:
        """POST /meetings/slots - returns new slot id."""
        return await self._post(
            "meetings/slots",
            {"startTime": start_time, "durationMinutes": duration_minutes, "description": description},
        )

    async def update_meeting_slot(self, slot: MeetingSlot) -> None:
        """PUT /meetings/slots/{id}."""
        await self._put(
            f"meetings/slots/{slot.id}",
            {"startTime": slot.start_time, "durationMinutes": slot.duration_minutes, "description": slot.description},
        )

    async def book_appointment(self, customer_name: str, time_slot_id: str) -> str:
        """POST /meetings/appointments - returns appointment id."""
        return await self._post(
            "meetings/appointments",
            {"customerName": customer_name, "timeSlotId": time_slot_id},
        )

    async def cancel_appointment(self, appointment_id: str) -> None:
        """DELETE /meetings/appointments/{id}."""
        await self._delete(f"meetings/appointments/{appointment_id}")

    async def appointments(self) -> list[Appointment]:
        """GET /meetings/appointments - all appointments (admin)."""
        return [Appointment.model_validate(a) for a in await self._get("meetings/appointments")]

    async def my_appointments(self) -> list[Appointment]:
        """GET /meetings/appointments/mine - caller's appointments."""
        return [Appointment.model_validate(a) for a in await self._get("meetings/appointments/mine")]
