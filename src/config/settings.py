from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.config.table_names import TableNames


class GuestFieldNames(BaseModel):
    """Airtable column names of the guest table."""

    name: str = "Name"
    surname: str = "Surname"
    family: str = "Family"
    attending: str = "Attending"
    email: str = "Email"
    phone: str = "Phone"
    dietary_restrictions: str = "Dietary Restrictions"
    notes: str = "Notes"
    submitted_at: str = "Submitted At"
    szertartas: str = "Szertartas"
    lakodalom: str = "Lakodalom"
    transfer: str = "Transfer"


class FamilyFieldNames(BaseModel):
    """Airtable column names of the family table."""

    members: str = "Members"
    email: str = "Email"
    notes: str = "Notes"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # App
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = True
    cors_origins: list[str] = ["*"]

    # Where the CLI reaches a running proxy
    api_url: str = "http://localhost:8000"

    ENVIRONMENT: str = "Production"

    # Airtable
    airtable_api_key: str = ""
    airtable_base_id: str = ""
    airtable_api_url: str = "https://api.airtable.com/v0"
    guests_table: str = TableNames.GUESTS.value
    families_table: str = TableNames.FAMILIES.value
    guest_fields: GuestFieldNames = GuestFieldNames()
    family_fields: FamilyFieldNames = FamilyFieldNames()

    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0
    SENTRY_PROFILES_SAMPLE_RATE: float = 0.0


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
