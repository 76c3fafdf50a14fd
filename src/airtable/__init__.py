from .client import AirtableClient, AirtableConfig, AirtableError

__all__ = [
    "AirtableClient",
    "AirtableConfig",
    "AirtableError",
]
