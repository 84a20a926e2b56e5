"""Composite services - Higher-level orchestration built on core services."""
from noresponse.services.composite.no_response_service import NoResponseService

__all__ = [
    "NoResponseService",
]
