from .logging import setup_logging
from .settings import FamilyFieldNames, GuestFieldNames, Settings, get_settings, settings
from .table_names import TableNames

__all__ = [
    "settings",
    "get_settings",
    "setup_logging",
    "Settings",
    "GuestFieldNames",
    "FamilyFieldNames",
    "TableNames",
]
