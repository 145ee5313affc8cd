# stores/services/exceptions.py

"""
STORE SERVICE ERRORS

Centralized domain errors for store services.
"""


class StoreServiceError(Exception):
    """Base exception for all store service failures."""


class SlugConflictError(StoreServiceError):
    """Raised when no free slug could be claimed after the allowed retries."""


class InvalidCoordinatesError(StoreServiceError, ValueError):
    """Raised when a latitude / longitude pair is missing or out of range."""


class InvalidPhotoError(StoreServiceError, ValueError):
    """Raised when an uploaded photo is not an accepted image type."""
