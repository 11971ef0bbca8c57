"""
Services Layer
==============

ServiceResult-wrapped operations used by the CLI and other front-ends.
"""

from .base import BaseService, ServiceResult
from .config import ConfigService
from .factory import ServiceFactory
from .species import SpeciesService

__all__ = [
    "BaseService",
    "ConfigService",
    "ServiceFactory",
    "ServiceResult",
    "SpeciesService",
]
