from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from pydantic import ValidationError as PydanticValidationError


class PaganticError(Exception):
    """Base exception for all Pagantic errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class InvalidPageRequestError(PaganticError):
    """Raised when a PageRequest is built with an out-of-range page number or size."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.field = field
        self.value = value


class PageDecodeError(PaganticError):
    """Raised when a JSON payload does not match the requested type."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.errors = errors or []


class TypeMappingError(PaganticError):
    """Raised when an abstract type cannot be mapped to (or resolved as) a concrete type."""

    def __init__(
        self,
        message: str,
        abstract: Any | None = None,
        concrete: Any | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.abstract = abstract
        self.concrete = concrete


class RegistryFrozenError(PaganticError):
    """Raised when a mapping is added to a registry that a decoder already uses."""

    def __init__(
        self,
        message: str = "Type registry is frozen and can no longer be modified",
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)


@contextmanager
def handle_decode_errors(target: str | None = None) -> Generator[None, None, None]:
    """
    Context manager that catches pydantic.ValidationError
    and raises a PageDecodeError carrying the structured error list.

    Args:
        target: Optional name of the type being decoded, for better error messages

    Usage:
        with handle_decode_errors(target="PageModel[Order]"):
            adapter.validate_json(payload)
    """
    try:
        yield
    except PydanticValidationError as e:
        errors = [dict(err) for err in e.errors(include_url=False)]
        count = e.error_count()
        noun = "error" if count == 1 else "errors"
        raise PageDecodeError(
            message=f"Failed to decode {target or e.title}: {count} validation {noun}",
            errors=errors,
            original_error=e,
        ) from e
