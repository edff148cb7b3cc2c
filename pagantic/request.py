from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ModelWrapValidatorHandler,
    ValidationInfo,
    model_validator,
)

from ._logging import logger
from .abstract import Pageable
from .config import STRICT_PAGE_REQUESTS
from .exceptions import InvalidPageRequestError
from .sort import Sort


def out_of_range_fields(number: int, size: int) -> dict[str, Any]:
    """Returns the page number / size values a validated PageRequest would reject."""
    invalid: dict[str, Any] = {}
    if number < 0:
        invalid["number"] = number
    if size < 1:
        invalid["size"] = size
    return invalid


class PageRequest(BaseModel):
    """
    Describes one page of a result set: page number, page size, sort, and the total
    element count reported by the server that produced the page.

    Two ways to build one:

    - ``PageRequest(number=..., size=...)`` / ``PageRequest.of(...)`` validate the
      bounds and raise InvalidPageRequestError on a negative number or a size below one.
    - ``PageRequest.hydrate(...)`` is what the decoder uses for wire metadata. It skips
      validation entirely, so whatever the server sent is kept as-is. Missing fields
      default to zero, ``size`` included.

    Validating raw data under a decoder's lenient context takes the hydration path too.
    An existing instance is always accepted unchanged.

    Instances are frozen either way; navigation methods return new instances.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: int = 0
    size: int
    total_elements: int = Field(default=0, alias="totalElements")
    sort: Sort | None = None

    @model_validator(mode="wrap")
    @classmethod
    def _check_bounds(
        cls, value: Any, handler: ModelWrapValidatorHandler["PageRequest"], info: ValidationInfo
    ) -> "PageRequest":
        # Existing instances (hydrated ones included) are never re-checked
        if isinstance(value, cls):
            return value

        # A decoder passes a context; without strict mode wire values are hydrated unchecked
        lenient = info.context is not None and not info.context.get(STRICT_PAGE_REQUESTS, True)
        if lenient and isinstance(value, dict):
            metadata = PageMetadata.model_validate(value, context=info.context)
            return cls.from_metadata(metadata)

        request = handler(value)
        # InvalidPageRequestError is not a ValueError, so pydantic lets it propagate unwrapped
        if request.number < 0:
            raise InvalidPageRequestError(
                "Page number must not be less than zero!", field="number", value=request.number
            )
        if request.size < 1:
            raise InvalidPageRequestError(
                "Page size must not be less than one!", field="size", value=request.size
            )
        return request

    @classmethod
    def of(cls, number: int, size: int, sort: Sort | None = None) -> "PageRequest":
        """
        Validated constructor.

        Raises:
            InvalidPageRequestError: If number < 0 or size < 1
        """
        return cls(number=number, size=size, sort=sort)

    @classmethod
    def hydrate(
        cls,
        number: int = 0,
        size: int = 0,
        total_elements: int = 0,
        sort: Sort | None = None,
    ) -> "PageRequest":
        """Builds an instance from already-decoded wire values without any validation."""
        return cls.model_construct(
            number=number, size=size, total_elements=total_elements, sort=sort
        )

    @classmethod
    def from_metadata(cls, metadata: "PageMetadata", strict: bool = False) -> "PageRequest":
        """
        Converts decoded wire metadata into a PageRequest.

        In strict mode the validated constructor is used. Otherwise out-of-range values
        are accepted and only logged.
        """
        if strict:
            return metadata.to_validated_request()

        invalid = metadata.invalid_fields()
        if invalid:
            logger.warning(
                "Accepting out-of-range page metadata without validation",
                extra={"operation": "hydrate", "invalid_fields": invalid},
            )
        return metadata.to_request()

    @property
    def offset(self) -> int:
        return self.number * self.size

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    def next(self) -> "PageRequest":
        # The total of the next page is not known yet, so it is not carried over
        return PageRequest.of(self.number + 1, self.size, self.sort)

    def previous(self) -> "PageRequest":
        """Returns the request for the previous page, or this very instance on page zero."""
        if self.number == 0:
            return self
        return PageRequest.of(self.number - 1, self.size, self.sort)

    def previous_or_first(self) -> "PageRequest":
        return self.previous() if self.has_previous else self.first()

    def first(self) -> "PageRequest":
        return PageRequest.of(0, self.size, self.sort)


Pageable.register(PageRequest)


class PageMetadata(BaseModel):
    """
    Plain record for the ``"page"`` object of a paged payload.

    Only JSON types are checked here; range checks happen (or deliberately don't)
    when converting to a PageRequest. Unknown keys such as ``totalPages`` are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    number: int = 0
    size: int = 0
    total_elements: int = Field(default=0, alias="totalElements")
    sort: Sort | None = None

    def invalid_fields(self) -> dict[str, Any]:
        return out_of_range_fields(self.number, self.size)

    def to_request(self) -> PageRequest:
        return PageRequest.hydrate(
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
            sort=self.sort,
        )

    def to_validated_request(self) -> PageRequest:
        return PageRequest(
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
            sort=self.sort,
        )
