"""
Concrete, read-only page model.

PageModel rebuilds the page abstraction on the consuming side of a JSON API from a payload
shaped like:

    {
        "content": [...],
        "page": {"number": 2, "size": 20, "totalElements": 134, "sort": [...]}
    }

Every page-level number is derived from `content` and `pageable` on access; nothing is
stored besides those two fields.
"""

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ._logging import type_name
from .abstract import Page
from .config import STRICT_PAGE_REQUESTS
from .request import PageMetadata, PageRequest
from .sort import Sort

T = TypeVar("T")
U = TypeVar("U")


class PageModel(BaseModel, Generic[T]):
    """
    A page of results: an ordered, immutable content tuple plus an optional PageRequest.

    Without a PageRequest the model degrades to a single page holding all of its content.

    Attributes:
        content: Elements of this page, in server order
        pageable: Pagination metadata, decoded from the "page" key
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content: tuple[T, ...] = ()
    pageable: PageRequest | None = Field(default=None, alias="page")

    @field_validator("content", mode="before")
    @classmethod
    def _content_never_none(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("pageable", mode="before")
    @classmethod
    def _hydrate_pageable(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or isinstance(value, PageRequest):
            return value

        strict = bool(info.context and info.context.get(STRICT_PAGE_REQUESTS))
        metadata = PageMetadata.model_validate(value, context=info.context)
        return PageRequest.from_metadata(metadata, strict=strict)

    def _total(self) -> int:
        """Total as reported by the server, or the local content length without metadata."""
        if self.pageable is not None:
            return self.pageable.total_elements
        return len(self.content)

    @property
    def number(self) -> int:
        return self.pageable.number if self.pageable is not None else 0

    @property
    def size(self) -> int:
        return self.pageable.size if self.pageable is not None else 0

    @property
    def sort(self) -> Sort | None:
        return self.pageable.sort if self.pageable is not None else None

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def total_pages(self) -> int:
        """Number of pages; always 1 when there is no page size to divide by."""
        size = self.size
        if size == 0:
            return 1
        # ceiling division
        return -(-self._total() // size)

    @property
    def total_elements(self) -> int:
        """
        Total number of elements across all pages.

        The server-reported total can be stale on a trailing page. When the content at
        hand, placed at this page's offset, reaches past that total, the total is raised
        to cover what was actually received.
        """
        total = self._total()
        pageable = self.pageable
        if self.content and pageable is not None and pageable.offset + pageable.size > total:
            return pageable.offset + len(self.content)
        return total

    @property
    def has_content(self) -> bool:
        return len(self.content) > 0

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    def next_pageable(self) -> PageRequest | None:
        """Request for the following page, or None on the last page."""
        if self.has_next and self.pageable is not None:
            return self.pageable.next()
        return None

    def previous_pageable(self) -> PageRequest | None:
        """Request for the preceding page, or None on the first page."""
        if self.has_previous and self.pageable is not None:
            return self.pageable.previous_or_first()
        return None

    def map(self, func: Callable[[T], U]) -> "PageModel[U]":
        """Transforms the content with `func`, keeping the pagination metadata."""
        return PageModel(content=tuple(func(item) for item in self.content), pageable=self.pageable)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.content)

    def __str__(self) -> str:
        content_type = "UNKNOWN"
        if self.content:
            content_type = type_name(type(self.content[0]))
        return f"Page {self.number} of {self.total_pages} containing {content_type} instances"


Page.register(PageModel)
