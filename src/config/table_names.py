from enum import Enum


class TableNames(str, Enum):
    INVITEES = "invitees"
    EVENTS = "events"
    RSVP_RESPONSES = "rsvp_responses"
