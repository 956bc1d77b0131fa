"""
Captain module data models.

Request models carry the field rules for registration and login. Each rule
reports the message clients see in the 400 response, and a missing field
fails the same rule as an empty one.

Stored and public representations are kept apart: CaptainInDB holds the
password hash, Captain never does.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Callable, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, BeforeValidator, Field
from pydantic_core import PydanticCustomError


MIN_PASSWORD_LENGTH = 6
MIN_CAPACITY = 1
# Largest integer BSON can store.
MAX_CAPACITY = 2**63 - 1


class VehicleType(str, Enum):
    """Vehicle kinds a captain may register with."""

    CAR = "car"
    BIKE = "bike"
    TRUCK = "truck"
    VAN = "van"


# =============================================================================
# Field rules
# =============================================================================


def _rule(error_type: str, message: str, check: Callable[[Any], Any]) -> BeforeValidator:
    def validate(value: Any) -> Any:
        try:
            return check(value)
        except (TypeError, ValueError):
            raise PydanticCustomError(error_type, message)

    return BeforeValidator(validate)


def not_empty(message: str) -> BeforeValidator:
    def check(value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(message)
        return value

    return _rule("not_empty", message, check)


def email_address(message: str) -> BeforeValidator:
    # Syntax check only; the address is stored exactly as given.
    def check(value: Any) -> str:
        if not isinstance(value, str):
            raise TypeError(message)
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValueError(message) from exc
        return value

    return _rule("email", message, check)


def min_length(length: int, message: str) -> BeforeValidator:
    def check(value: Any) -> str:
        if not isinstance(value, str) or len(value) < length:
            raise ValueError(message)
        return value

    return _rule("min_length", message, check)


def whole_number(message: str, minimum: int, maximum: int) -> BeforeValidator:
    def parse(value: Any) -> int:
        if isinstance(value, bool):
            raise TypeError(message)
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str) and value.strip().lstrip("-").isdigit():
            return int(value)
        raise ValueError(message)

    def check(value: Any) -> int:
        number = parse(value)
        if not minimum <= number <= maximum:
            raise ValueError(message)
        return number

    return _rule("numeric", message, check)


def one_of(choices: type[Enum], message: str) -> BeforeValidator:
    allowed = {choice.value for choice in choices}

    def check(value: Any) -> Any:
        if value not in allowed:
            raise ValueError(message)
        return value

    return _rule("one_of", message, check)


# =============================================================================
# Request models
# =============================================================================


class FullnameInput(BaseModel):
    """Personal name as submitted at registration."""

    firstname: Annotated[str, not_empty("First name is required")] = Field(
        None, validate_default=True
    )
    lastname: Optional[str] = None


class VehicleInput(BaseModel):
    """Vehicle details as submitted at registration."""

    color: Annotated[str, not_empty("Vehicle color is required")] = Field(
        None, validate_default=True
    )
    plate: Annotated[str, not_empty("Vehicle plate is required")] = Field(
        None, validate_default=True
    )
    capacity: Annotated[
        int,
        whole_number("Vehicle capacity must be a number", MIN_CAPACITY, MAX_CAPACITY),
    ] = Field(None, validate_default=True)
    type: Annotated[VehicleType, one_of(VehicleType, "Invalid vehicle type")] = Field(
        None, validate_default=True
    )


class RegisterCaptainRequest(BaseModel):
    """Body of POST /captains/register."""

    fullname: FullnameInput = Field(default_factory=dict, validate_default=True)
    email: Annotated[str, email_address("Invalid email address")] = Field(
        None, validate_default=True
    )
    password: Annotated[
        str,
        min_length(MIN_PASSWORD_LENGTH, "Password must be at least 6 characters long"),
    ] = Field(None, validate_default=True)
    vehicle: VehicleInput = Field(default_factory=dict, validate_default=True)

    def to_new_captain(self, password_hash: str) -> "NewCaptain":
        """Build the record to store, with the plaintext password replaced."""
        return NewCaptain(
            fullname=Fullname(
                firstname=self.fullname.firstname,
                lastname=self.fullname.lastname,
            ),
            email=self.email,
            password=password_hash,
            vehicle=Vehicle(
                color=self.vehicle.color,
                plate=self.vehicle.plate,
                capacity=self.vehicle.capacity,
                vehicle_type=self.vehicle.type,
            ),
        )


class LoginRequest(BaseModel):
    """Body of POST /captains/login."""

    email: Annotated[str, email_address("Please enter a valid email address")] = Field(
        None, validate_default=True
    )
    password: Annotated[
        str,
        min_length(MIN_PASSWORD_LENGTH, "Password must be at least 6 characters long"),
    ] = Field(None, validate_default=True)


# =============================================================================
# Captain representations
# =============================================================================


class Fullname(BaseModel):
    firstname: str
    lastname: Optional[str] = None


class Vehicle(BaseModel):
    color: str
    plate: str
    capacity: int
    vehicle_type: VehicleType


class NewCaptain(BaseModel):
    """A captain about to be inserted. ``password`` is already hashed."""

    fullname: Fullname
    email: str
    password: str
    vehicle: Vehicle


class Captain(BaseModel):
    """
    Public view of a captain.

    This is the only shape returned by the API; it has no password field.
    """

    id: str = Field(..., description="Captain ID (MongoDB ObjectId as hex)")
    fullname: Fullname
    email: str
    vehicle: Vehicle
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}


class CaptainInDB(BaseModel):
    """A captain as stored, including the password hash."""

    id: str
    fullname: Fullname
    email: str
    password: str
    vehicle: Vehicle
    created_at: Optional[datetime] = None

    def to_public(self) -> Captain:
        """Drop the password hash."""
        return Captain(
            id=self.id,
            fullname=self.fullname,
            email=self.email,
            vehicle=self.vehicle,
            created_at=self.created_at,
        )


# =============================================================================
# Response models
# =============================================================================


class AuthResponse(BaseModel):
    """Returned by register and login."""

    token: str
    captain: Captain


class ProfileResponse(BaseModel):
    captain: Captain


class MessageResponse(BaseModel):
    message: str
