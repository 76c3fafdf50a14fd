VERIFY_NAME_URL = "/verify-name"
SUBMIT_RSVP_URL = "/rsvp"
LIST_GUESTS_URL = "/guests"
LIST_FAMILY_GUESTS_URL = "/guests/family/{family_id}"
FAMILY_GUESTS_ROOT_URL = "/guests/family"
