import logging

from fastapi import APIRouter, Depends, HTTPException

from src.airtable.client import AirtableError
from src.guests.dependencies import get_guest_write_model
from src.guests.dtos import FamilyUpdateDTO, GuestUpdateDTO
from src.guests.features.submit_rsvp.write_model import SubmitRSVPWriteModel
from src.guests.repository.write_models import GuestWriteModel
from src.guests.schemas import GuestResponse, RSVPRequest, RSVPResponse
from src.guests.urls import SUBMIT_RSVP_URL

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(SUBMIT_RSVP_URL, response_model=RSVPResponse, response_model_exclude_none=True)
async def submit_rsvp(
    rsvp_data: RSVPRequest,
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> RSVPResponse:
    """
    Submit one guest's RSVP. Only the fields present in the body are written.
    """
    # exclude_unset keeps omitted fields out of the upstream payload
    present = rsvp_data.model_dump(exclude_unset=True, exclude_none=True)
    guest_update = GuestUpdateDTO(
        szertartas=present.get("szertartas"),
        lakodalom=present.get("lakodalom"),
        dietary_restrictions=present.get("dietary_restrictions"),
        transfer=present.get("transfer"),
    )
    family_update = FamilyUpdateDTO(
        email=rsvp_data.family_email,
        notes=rsvp_data.family_notes,
    )

    try:
        result = await SubmitRSVPWriteModel(write_model).submit_rsvp(
            guest_id=rsvp_data.guest_id,
            guest_update=guest_update,
            family_id=rsvp_data.family_id,
            family_update=family_update,
        )
    except AirtableError as e:
        logger.error(f"Error updating guest {rsvp_data.guest_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to update guest")

    return RSVPResponse(
        success=True,
        guest=GuestResponse.from_dto(result.guest),
        warning=result.warning,
    )
