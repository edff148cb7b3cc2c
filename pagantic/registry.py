"""
Abstract-to-concrete type substitution for decoding.

A TypeRegistry maps abstract capability types (``Page``, ``Pageable``) to the concrete models
that implement them. Decoders ask the registry to rewrite a requested type expression before
handing it to pydantic, so ``list[Page[Order]]`` is decoded as ``list[PageModel[Order]]``.

The registry is populated once while the application configures its decoders; after that it
is only read. ``freeze()`` enforces this.
"""

from collections.abc import Mapping
from types import MappingProxyType, UnionType
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from ._logging import logger, type_name
from .abstract import Page, Pageable
from .exceptions import RegistryFrozenError, TypeMappingError
from .page import PageModel
from .request import PageRequest


class TypeRegistry:
    """Mapping from abstract types to the concrete types a decoder should instantiate."""

    def __init__(self) -> None:
        self._mappings: dict[type, type] = {}
        self._frozen = False

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def mappings(self) -> Mapping[type, type]:
        """Read-only view of the registered mappings."""
        return MappingProxyType(self._mappings)

    def freeze(self) -> None:
        """Disallows further mappings. Freezing twice is a no-op."""
        if not self._frozen:
            logger.debug(
                "Freezing type registry",
                extra={"operation": "freeze", "mapping_count": len(self._mappings)},
            )
        self._frozen = True

    def add_mapping(self, abstract: type, concrete: type) -> "TypeRegistry":
        """
        Registers `concrete` as the type to build whenever `abstract` is requested.

        Registering the same abstract type again replaces the previous mapping.

        Args:
            abstract: The abstract type found in type hints
            concrete: A (possibly virtual) subclass of `abstract`

        Returns:
            The registry itself, for chaining

        Raises:
            RegistryFrozenError: If the registry has been frozen
            TypeMappingError: If `concrete` is not a subclass of `abstract`
        """
        if self._frozen:
            raise RegistryFrozenError()

        if not isinstance(abstract, type) or not isinstance(concrete, type):
            raise TypeMappingError(
                f"Type mappings must be between classes, got {abstract!r} -> {concrete!r}",
                abstract=abstract,
                concrete=concrete,
            )

        if not issubclass(concrete, abstract):
            raise TypeMappingError(
                f"Cannot map {type_name(abstract)} to {type_name(concrete)}: "
                f"{concrete.__name__} is not a subtype of {abstract.__name__}",
                abstract=abstract,
                concrete=concrete,
            )

        previous = self._mappings.get(abstract)
        if previous is not None and previous is not concrete:
            logger.info(
                "Replacing type mapping",
                extra={
                    "operation": "add_mapping",
                    "abstract": type_name(abstract),
                    "previous": type_name(previous),
                    "concrete": type_name(concrete),
                },
            )

        self._mappings[abstract] = concrete
        logger.debug(
            "Registered type mapping",
            extra={
                "operation": "add_mapping",
                "abstract": type_name(abstract),
                "concrete": type_name(concrete),
            },
        )
        return self

    def get(self, abstract: type) -> type | None:
        return self._mappings.get(abstract)

    def __contains__(self, abstract: object) -> bool:
        return abstract in self._mappings

    def resolve(self, tp: Any) -> Any:
        """
        Rewrites a type expression, replacing every mapped abstract type by its concrete type.

        Handles bare classes, parametrised generics (``Page[Order]``), builtin and ``typing``
        containers, unions, ``Optional`` and ``Annotated``. Expressions without mapped types
        are returned unchanged (the very same object).

        Raises:
            TypeMappingError: If a rewritten generic cannot be re-parametrised
        """
        if isinstance(tp, type) and tp in self._mappings:
            return self._mappings[tp]

        origin = get_origin(tp)
        if origin is None or origin is Literal:
            return tp

        args = get_args(tp)

        if origin is Annotated:
            base = self.resolve(args[0])
            if base is args[0]:
                return tp
            return Annotated[(base, *args[1:])]

        new_args = tuple(self.resolve(arg) for arg in args)
        substituted = isinstance(origin, type) and origin in self._mappings
        if not substituted and all(new is old for new, old in zip(new_args, args)):
            return tp

        try:
            if origin is Union or origin is UnionType:
                return Union[new_args]
            target = self._mappings[origin] if substituted else origin
            return target[new_args]
        except TypeError as e:
            raise TypeMappingError(
                f"Cannot re-parametrise {tp!r} with {new_args!r}",
                abstract=tp,
                original_error=e,
            ) from e


def register_paging_types(registry: TypeRegistry) -> TypeRegistry:
    """Maps Page -> PageModel and Pageable -> PageRequest on `registry`."""
    return registry.add_mapping(Page, PageModel).add_mapping(Pageable, PageRequest)


# Process-wide registry, consulted by the abstract types during pydantic schema generation
# and used by decoders that are not given a registry of their own.
type_registry = register_paging_types(TypeRegistry())
