import re
from typing import Callable


NAMESPACE_PATTERN = re.compile(r'^[a-zA-Z][a-zA-Z0-9_]*$')
NS_SEPARATOR = "-"


def validate_namespace(namespace: str) -> str:
    if not NAMESPACE_PATTERN.match(namespace or ""):
        raise ValueError(f"Invalid namespace '{namespace}': must start with a letter and contain only letters, digits and underscores")
    return namespace


def NS(namespace: str) -> Callable[[str], str]:
    """Return a function that prefixes element ids with ``namespace``.

    An empty namespace leaves ids unchanged.
    """
    if not namespace:
        return lambda element_id: element_id
    validate_namespace(namespace)
    return lambda element_id: f"{namespace}{NS_SEPARATOR}{element_id}"
