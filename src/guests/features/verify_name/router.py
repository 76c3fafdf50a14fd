import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from src.airtable.client import AirtableError
from src.guests.dependencies import get_guest_read_model
from src.guests.dtos import FamilyIntegrityError
from src.guests.features.verify_name.read_model import VerifyNameReadModel
from src.guests.repository.read_models import GuestReadModel
from src.guests.schemas import GuestResponse, VerifyNameRequest, VerifyNameResponse
from src.guests.urls import VERIFY_NAME_URL

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    VERIFY_NAME_URL,
    response_model=VerifyNameResponse,
    response_model_exclude_none=True,
    responses={404: {"description": "Name not found in guest list"}},
)
async def verify_name(
    request: VerifyNameRequest,
    read_model: GuestReadModel = Depends(get_guest_read_model),
):
    """
    Look up a guest by name and return the guest's whole family.
    Answers 404 with ``found: false`` when nobody has this name.
    """
    try:
        result = await VerifyNameReadModel(read_model).verify(request.name)
    except (AirtableError, FamilyIntegrityError) as e:
        logger.error(f"Error verifying name: {e}")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to verify name")

    if result is None:
        return JSONResponse(
            status_code=404,
            content={"error": "Name not found in guest list", "found": False},
        )

    return VerifyNameResponse(
        success=True,
        found=True,
        guest=GuestResponse.from_dto(result.guest),
        family_members=[GuestResponse.from_dto(member) for member in result.family_members],
        family_id=result.family_id,
        family_email=result.family_email,
        family_notes=result.family_notes,
    )
