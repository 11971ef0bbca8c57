"""
HTTP Client Utilities
=====================

Reusable HTTP client functionality for upstream biodiversity APIs.
"""

from .client import APIClient, RateLimiter

__all__ = [
    "APIClient",
    "RateLimiter",
]
