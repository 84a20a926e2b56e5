"""Core services - Foundational services providing basic operations."""
from noresponse.services.core.label_service import LabelService

__all__ = [
    "LabelService",
]
