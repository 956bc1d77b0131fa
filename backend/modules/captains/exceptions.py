"""
Captain module exceptions.

Login failures answer with 400 rather than 401: the caller is not presenting
a credential for a protected route, it is submitting a form.
"""

from shared.exceptions import AuthenticationError, ConflictError


class CaptainAlreadyExistsError(ConflictError):
    """Raised when registering an email that is already taken."""

    status_code = 400

    def __init__(self, email: str):
        super().__init__(
            "Captain with this email already exists",
            code="CAPTAIN_EXISTS",
            details={"email": email},
        )


class CaptainNotRegisteredError(AuthenticationError):
    """Raised on login when no captain has the given email."""

    status_code = 400

    def __init__(self) -> None:
        super().__init__(
            "Captain with this email does not exists",
            code="CAPTAIN_NOT_REGISTERED",
        )


class InvalidCredentialsError(AuthenticationError):
    """Raised on login when the password does not match."""

    status_code = 400

    def __init__(self) -> None:
        super().__init__("Invalid email or password", code="INVALID_CREDENTIALS")
