"""
Captains module.

Registration, login and profile for captain (driver) accounts.

Public API:
- ICaptainService: Interface for captain record operations
- Captain: Public captain representation (never includes the password hash)
- Request/response models for the captain endpoints
- Captain exceptions
"""

from .interfaces import ICaptainService
from .models import (
    VehicleType,
    Fullname,
    Vehicle,
    NewCaptain,
    Captain,
    CaptainInDB,
    RegisterCaptainRequest,
    LoginRequest,
    AuthResponse,
    ProfileResponse,
    MessageResponse,
)
from .exceptions import (
    CaptainAlreadyExistsError,
    CaptainNotRegisteredError,
    InvalidCredentialsError,
)

__all__ = [
    # Interface
    "ICaptainService",
    # Models
    "VehicleType",
    "Fullname",
    "Vehicle",
    "NewCaptain",
    "Captain",
    "CaptainInDB",
    "RegisterCaptainRequest",
    "LoginRequest",
    "AuthResponse",
    "ProfileResponse",
    "MessageResponse",
    # Exceptions
    "CaptainAlreadyExistsError",
    "CaptainNotRegisteredError",
    "InvalidCredentialsError",
]
