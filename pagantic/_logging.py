import logging
from typing import Any, get_origin

# Create the library logger
logger = logging.getLogger("pagantic")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def type_name(tp: Any) -> str:
    """
    Renders a type (or type expression) as a short string for log records.
    Plain classes use their qualified name, generic aliases fall back to repr().
    """
    if isinstance(tp, type) and get_origin(tp) is None:
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)
