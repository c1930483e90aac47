"""Meeting booking API client."""

from site_client.meetings.client import MeetingsClient
from site_client.meetings.schemas import Appointment, MeetingSlot

__all__ = [
    "MeetingsClient",
    "MeetingSlot",
    "Appointment",
]
