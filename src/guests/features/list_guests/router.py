import logging

from fastapi import APIRouter, Depends, HTTPException

from src.airtable.client import AirtableError
from src.guests.dependencies import get_guest_read_model
from src.guests.repository.read_models import GuestReadModel
from src.guests.schemas import GuestResponse, GuestsResponse
from src.guests.urls import FAMILY_GUESTS_ROOT_URL, LIST_FAMILY_GUESTS_URL, LIST_GUESTS_URL

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(LIST_GUESTS_URL, response_model=GuestsResponse, response_model_exclude_none=True)
async def list_guests(
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> GuestsResponse:
    """Return every guest."""
    try:
        guests = await read_model.list_guests()
    except AirtableError as e:
        logger.error(f"Error fetching guests: {e}")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to fetch guests")

    return GuestsResponse(success=True, guests=[GuestResponse.from_dto(g) for g in guests])


@router.get(FAMILY_GUESTS_ROOT_URL, include_in_schema=False)
@router.get(FAMILY_GUESTS_ROOT_URL + "/", include_in_schema=False)
async def family_id_missing():
    raise HTTPException(status_code=400, detail="Family ID is required")


@router.get(
    LIST_FAMILY_GUESTS_URL, response_model=GuestsResponse, response_model_exclude_none=True
)
async def list_family_guests(
    family_id: str,
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> GuestsResponse:
    """Return every guest belonging to one family."""
    family_id = family_id.strip()
    if not family_id:
        raise HTTPException(status_code=400, detail="Family ID is required")

    try:
        guests = await read_model.list_guests_by_family(family_id)
    except AirtableError as e:
        logger.error(f"Error fetching guests of family {family_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to fetch guests")

    return GuestsResponse(success=True, guests=[GuestResponse.from_dto(g) for g in guests])
