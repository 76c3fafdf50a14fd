from src.guests.repository.read_models import AirtableGuestReadModel, GuestReadModel
from src.guests.repository.write_models import AirtableGuestWriteModel, GuestWriteModel


def get_guest_read_model() -> GuestReadModel:
    """Dependency to get the guest read model. Override in tests."""
    return AirtableGuestReadModel()


def get_guest_write_model() -> GuestWriteModel:
    """Dependency to get the guest write model. Override in tests."""
    return AirtableGuestWriteModel()
