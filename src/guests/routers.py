from fastapi import APIRouter

from .features.list_guests.router import router as list_guests_router
from .features.submit_rsvp.router import router as submit_rsvp_router
from .features.verify_name.router import router as verify_name_router

router = APIRouter()

router.include_router(verify_name_router)
router.include_router(submit_rsvp_router)
router.include_router(list_guests_router)
