from .api_client import ApiClientError, RSVPApiClient
from .cache import QueryCache
from .flow import (
    InvalidTransitionError,
    MemberDraft,
    RSVPSession,
    RSVPStep,
    SubmissionError,
)

__all__ = [
    "ApiClientError",
    "RSVPApiClient",
    "QueryCache",
    "InvalidTransitionError",
    "MemberDraft",
    "RSVPSession",
    "RSVPStep",
    "SubmissionError",
]
