"""
Rate limiting utilities for API endpoints.
Uses slowapi to throttle public writes such as contact form submissions.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from fastapi import Request

from antique_store.config import settings


def get_client_identifier(request: Request) -> str:
    """
    Get client identifier for rate limiting.
    Uses forwarded IP if behind proxy, otherwise remote address.

    Args:
        request: FastAPI request object

    Returns:
        str: Client identifier (IP address)
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # First IP in chain is the original client
        return forwarded.split(",")[0].strip()

    return get_remote_address(request)


limiter = Limiter(
    key_func=get_client_identifier,
    storage_uri="memory://"
)


RATE_LIMITS = {
    "contact_form": settings.CONTACT_FORM_RATE_LIMIT,
}
