"""
Abstract pagination capabilities.

Application code declares these in its signatures (``def list_orders() -> Page[Order]``)
without caring which class carries the data. Concrete models are attached as virtual
subclasses through the type registry; see ``pagantic.registry``.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema

from ._logging import logger, type_name
from .exceptions import TypeMappingError

if TYPE_CHECKING:
    from .sort import Sort

T = TypeVar("T")


class _RegistryResolved:
    """
    Lets pydantic build a schema for an abstract capability wherever it appears,
    including fields of user models, by asking the process-wide registry for the
    concrete type.
    """

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from .registry import type_registry

        concrete = type_registry.resolve(source_type)
        if concrete is source_type:
            raise TypeMappingError(
                f"No concrete type registered for {type_name(source_type)}",
                abstract=source_type,
            )

        logger.debug(
            "Substituting abstract type in schema",
            extra={
                "operation": "schema",
                "abstract": type_name(source_type),
                "concrete": type_name(concrete),
            },
        )
        return handler.generate_schema(concrete)


class Pageable(_RegistryResolved, ABC):
    """Describes which slice of a result set to view: page number, page size and sort."""

    @property
    @abstractmethod
    def number(self) -> int: ...

    @property
    @abstractmethod
    def size(self) -> int: ...

    @property
    @abstractmethod
    def sort(self) -> Optional["Sort"]: ...

    @property
    @abstractmethod
    def offset(self) -> int: ...

    @property
    @abstractmethod
    def has_previous(self) -> bool: ...

    @abstractmethod
    def next(self) -> "Pageable": ...

    @abstractmethod
    def previous(self) -> "Pageable": ...

    @abstractmethod
    def previous_or_first(self) -> "Pageable": ...

    @abstractmethod
    def first(self) -> "Pageable": ...


class Page(_RegistryResolved, ABC, Generic[T]):
    """A read-only slice of a larger result set: ordered content plus pagination metadata."""

    @property
    @abstractmethod
    def content(self) -> tuple[T, ...]: ...

    @property
    @abstractmethod
    def number(self) -> int: ...

    @property
    @abstractmethod
    def size(self) -> int: ...

    @property
    @abstractmethod
    def number_of_elements(self) -> int: ...

    @property
    @abstractmethod
    def total_pages(self) -> int: ...

    @property
    @abstractmethod
    def total_elements(self) -> int: ...

    @property
    @abstractmethod
    def sort(self) -> Optional["Sort"]: ...

    @property
    @abstractmethod
    def has_content(self) -> bool: ...

    @property
    @abstractmethod
    def has_next(self) -> bool: ...

    @property
    @abstractmethod
    def has_previous(self) -> bool: ...

    @property
    @abstractmethod
    def is_first(self) -> bool: ...

    @property
    @abstractmethod
    def is_last(self) -> bool: ...

    @abstractmethod
    def next_pageable(self) -> Pageable | None: ...

    @abstractmethod
    def previous_pageable(self) -> Pageable | None: ...

    @abstractmethod
    def __iter__(self) -> Iterator[T]: ...
