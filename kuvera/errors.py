"""Exceptions raised by the Kuvera client.

Every error derives from :class:`KuveraError`. When a response was received
and at least partially decoded, the decoded record is available as
``error.response`` so callers can still inspect what the API sent back.
"""

from __future__ import annotations

from typing import Any


class KuveraError(Exception):
    """Base class for all Kuvera client errors."""

    def __init__(self, message: str, response: Any | None = None):
        super().__init__(message)
        self.response = response


class ConfigError(KuveraError):
    """Raised when KUVERA_* settings are missing or malformed."""

    pass


class MissingCredentialsError(ConfigError):
    """Raised when credentials cannot be found in the environment."""

    pass


class EmptyUsernameError(KuveraError, ValueError):
    def __init__(self) -> None:
        super().__init__("username cannot be empty")


class EmptyPasswordError(KuveraError, ValueError):
    def __init__(self) -> None:
        super().__init__("password cannot be empty")


class NotAuthenticatedError(KuveraError):
    def __init__(self) -> None:
        super().__init__("not authenticated: please login first")


class InvalidCredentialsError(KuveraError):
    """Login returned a body that does not report success."""

    def __init__(self, response: Any | None = None):
        super().__init__("invalid credentials", response=response)


class KuveraRequestError(KuveraError):
    """The HTTP request could not be completed (connection, timeout, ...)."""

    pass


class ResponseDecodeError(KuveraError):
    """The response body is not JSON or does not have the expected shape."""

    def __init__(self, message: str, body: str, response: Any | None = None):
        super().__init__(f"{message} (body: {body})", response=response)
        self.body = body


class UnexpectedStatusError(KuveraError):
    def __init__(self, operation: str, status_code: int, response: Any | None = None):
        super().__init__(
            f"{operation} failed with status code: {status_code}", response=response
        )
        self.operation = operation
        self.status_code = status_code


class APIError(KuveraError):
    """Error body returned by the Kuvera API on a non-200 response."""

    def __init__(
        self,
        code: int,
        message: str,
        error: str = "",
        status_code: int | None = None,
        response: Any | None = None,
    ):
        self.code = code
        self.message = message
        self.error = error
        self.status_code = status_code
        super().__init__(self._format(), response=response)

    def _format(self) -> str:
        if self.error:
            return f"API error {self.code}: {self.message} - {self.error}"
        return f"API error {self.code}: {self.message}"

    @classmethod
    def from_payload(
        cls, payload: Any, status_code: int | None = None, response: Any | None = None
    ) -> APIError | None:
        """Build an APIError from a decoded body, or None if it is not one.

        The body counts as an API error only when it is an object carrying a
        non-zero integer ``code``.
        """
        if not isinstance(payload, dict):
            return None
        code = payload.get("code")
        if isinstance(code, bool) or not isinstance(code, int) or code == 0:
            return None
        message = payload.get("message")
        error = payload.get("error")
        return cls(
            code=code,
            message=message if isinstance(message, str) else "",
            error=error if isinstance(error, str) else "",
            status_code=status_code,
            response=response,
        )
