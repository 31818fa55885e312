"""
Custom exceptions for NxtHub.
Every core operation fails with one of these; the API layer turns them into responses.
"""
from typing import Optional

from fastapi import status


class NxtHubException(Exception):
    """Base exception for NxtHub"""
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class NotFoundError(NxtHubException):
    """Mutation target not found"""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str = "Resource", resource_id: Optional[str] = None):
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(message)


class UserNotFoundError(NxtHubException):
    """No user registered under the given email"""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, email: Optional[str] = None):
        message = "User not found"
        if email:
            message = f"User with email '{email}' not found"
        super().__init__(message)


class InvalidConfigurationError(NxtHubException):
    """User record is misconfigured (e.g. manager without a department)"""
    status_code = status.HTTP_409_CONFLICT

    def __init__(
        self,
        message: str = "Configuration Error: Manager has no department assigned. Please contact admin."
    ):
        super().__init__(message)


class UnauthorizedError(NxtHubException):
    """Session is not allowed to perform the operation"""
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Unauthorized: Read-only access."):
        super().__init__(message)


class ValidationError(NxtHubException):
    """Validation failed"""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, message: str = "Validation failed", field: Optional[str] = None):
        self.field = field
        if field:
            message = f"Validation failed for field '{field}': {message}"
        super().__init__(message)


class AlreadyCompletedError(NxtHubException):
    """Campaign already reached the terminal Completed state"""
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, campaign_id: Optional[str] = None):
        message = "Campaign is already completed"
        if campaign_id:
            message = f"Campaign with id '{campaign_id}' is already completed"
        super().__init__(message)
