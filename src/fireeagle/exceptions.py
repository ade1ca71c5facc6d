"""Typed exceptions for the FireEagle client."""


class FireEagleError(Exception):
    """Base exception for all FireEagle client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(FireEagleError):
    """Required credential missing or configuration unreadable."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class TokenError(FireEagleError):
    """A token needed for the operation is not available."""

    def __init__(self, message: str, *, token_type: str = "access") -> None:
        self.token_type = token_type  # "request" | "access"
        super().__init__(message)


class UnauthorizedError(TokenError):
    """Protected request attempted before an access token was obtained."""

    def __init__(self, message: str = "Unauthorized.") -> None:
        super().__init__(message, token_type="access")


class SignatureError(FireEagleError):
    """A locally signed request failed its own signature verification."""


class TransportError(FireEagleError):
    """Non-2xx response or network failure."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)

    @property
    def status_line(self) -> str | None:
        """Status code and reason phrase, e.g. ``401 Unauthorized``."""
        if self.status_code is None:
            return None
        return f"{self.status_code} {self.reason or ''}".rstrip()


class ProtocolError(FireEagleError):
    """Successful response that lacks the fields the protocol requires."""

    def __init__(
        self,
        message: str,
        *,
        stage: str | None = None,
        missing: tuple[str, ...] = (),
    ) -> None:
        self.stage = stage  # e.g., "request_token", "access_token"
        self.missing = missing
        super().__init__(message)


class ParameterError(FireEagleError):
    """Argument that cannot be turned into request parameters."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)
