from .abstract import Page, Pageable
from .config import DecoderConfig
from .decoder import JsonDecoder, decode_page, get_default_decoder
from .exceptions import (
    InvalidPageRequestError,
    PageDecodeError,
    PaganticError,
    RegistryFrozenError,
    TypeMappingError,
)
from .page import PageModel
from .registry import TypeRegistry, register_paging_types, type_registry
from .request import PageMetadata, PageRequest
from .sort import Direction, Order, Sort

__all__ = [
    # Abstract capabilities
    "Page",
    "Pageable",
    # Concrete models
    "PageModel",
    "PageRequest",
    "PageMetadata",
    "Sort",
    "Order",
    "Direction",
    # Decoding
    "JsonDecoder",
    "DecoderConfig",
    "decode_page",
    "get_default_decoder",
    "TypeRegistry",
    "type_registry",  # Process-wide registry
    "register_paging_types",
    # Exceptions
    "PaganticError",
    "InvalidPageRequestError",
    "PageDecodeError",
    "TypeMappingError",
    "RegistryFrozenError",
]
