from dataclasses import dataclass
from typing import Any

# Validation context key read by PageModel when hydrating the "page" sub-object.
STRICT_PAGE_REQUESTS = "strict_page_requests"


@dataclass
class DecoderConfig:
    """
    Options for a JsonDecoder.

    strict_page_requests:
        When False (the default) page metadata arriving over the wire is hydrated
        without range checks, so a negative page number or a zero page size is
        accepted as-is. When True the validated PageRequest constructor is used and
        such payloads fail with InvalidPageRequestError.
    freeze_registry:
        Freeze the type registry when the decoder is created, so that mappings
        cannot change once decoding has started.
    """

    strict_page_requests: bool = False
    freeze_registry: bool = True

    def validation_context(self) -> dict[str, Any]:
        """Returns the pydantic validation context for this configuration."""
        return {STRICT_PAGE_REQUESTS: self.strict_page_requests}
