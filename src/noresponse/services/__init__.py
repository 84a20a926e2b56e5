"""Service Layer - Organized by architectural role

Core: Foundational services providing basic operations
Composite: Higher-level orchestration services that use core services
"""
from noresponse.services.core import LabelService
from noresponse.services.composite import NoResponseService

__all__ = [
    # Core
    "LabelService",
    # Composite
    "NoResponseService",
]
