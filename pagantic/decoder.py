from typing import Any

from pydantic import TypeAdapter

from ._logging import logger, type_name
from .abstract import Page
from .config import DecoderConfig
from .exceptions import handle_decode_errors
from .registry import TypeRegistry, type_registry


class JsonDecoder:
    """
    Decodes JSON payloads into Python objects, substituting abstract types on the way.

    Architectural Note:
    -------------------
    Parsing and field-by-field validation are pydantic's job (TypeAdapter). This class only
    rewrites the requested type through a TypeRegistry first, so that asking for
    ``Page[Order]`` builds a ``PageModel[Order]``, and passes the configured validation
    context down to the models.

    The registry only rewrites the type passed to decode()/convert(). Abstract types
    declared as fields of your own models (``results: Page[Order]``) are resolved when
    pydantic builds that model's schema, always through the process-wide ``type_registry``.
    A decoder with a custom registry therefore only affects top-level types.

    Usage:
        decoder = JsonDecoder()
        page = decoder.decode(response_body, Page[Order])
        for order in page:
            ...
    """

    def __init__(
        self, registry: TypeRegistry | None = None, config: DecoderConfig | None = None
    ) -> None:
        self.registry = registry if registry is not None else type_registry
        self.config = config or DecoderConfig()
        self._adapters: dict[Any, TypeAdapter[Any]] = {}

        if self.config.freeze_registry:
            self.registry.freeze()

    def adapter(self, tp: Any) -> TypeAdapter[Any]:
        """Returns the (cached) TypeAdapter for `tp` after abstract type substitution."""
        return self._adapter_for(self.registry.resolve(tp))

    def decode(self, data: str | bytes, tp: Any) -> Any:
        """
        Parses a JSON document and validates it as `tp`.

        Raises:
            PageDecodeError: If the payload does not match the type
            InvalidPageRequestError: In strict mode, if page metadata is out of range
        """
        resolved = self.registry.resolve(tp)
        target = type_name(resolved)

        logger.debug(
            "Decoding payload",
            extra={"operation": "decode", "target": target, "payload_size": len(data)},
        )

        adapter = self._adapter_for(resolved)
        with handle_decode_errors(target=target):
            return adapter.validate_json(data, context=self.config.validation_context())

    def convert(self, obj: Any, tp: Any) -> Any:
        """Same as decode() for a payload that is already parsed (dicts, lists, scalars)."""
        resolved = self.registry.resolve(tp)
        target = type_name(resolved)

        logger.debug("Converting object", extra={"operation": "convert", "target": target})

        adapter = self._adapter_for(resolved)
        with handle_decode_errors(target=target):
            return adapter.validate_python(obj, context=self.config.validation_context())

    def _adapter_for(self, resolved: Any) -> TypeAdapter[Any]:
        try:
            cached = self._adapters.get(resolved)
        except TypeError:
            # Unhashable type expression (e.g. Annotated metadata): build a fresh adapter
            return TypeAdapter(resolved)

        if cached is None:
            logger.debug(
                "Building type adapter",
                extra={"operation": "adapter", "target": type_name(resolved)},
            )
            cached = TypeAdapter(resolved)
            self._adapters[resolved] = cached
        return cached


_default_decoder: JsonDecoder | None = None


def get_default_decoder() -> JsonDecoder:
    """
    Returns the shared decoder bound to the process-wide registry.

    Created on first use, which also freezes the process-wide registry.
    """
    global _default_decoder
    if _default_decoder is None:
        _default_decoder = JsonDecoder()
    return _default_decoder


def decode_page(data: str | bytes, item_type: Any = Any) -> Any:
    """
    Decodes a paged JSON payload (``{"content": [...], "page": {...}}``) into a PageModel.

    Usage:
        page = decode_page(body, Order)
        page.total_pages, page.has_next, list(page)
    """
    return get_default_decoder().decode(data, Page[item_type])
