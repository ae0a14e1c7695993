SUBMIT_RSVP_URL = "/events/{event_id}/rsvp"
LIST_RSVPS_URL = "/events/{event_id}/rsvps"
