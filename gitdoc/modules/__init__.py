"""Reusable UI modules mounted under a namespace prefix."""

from .namespace import NS, validate_namespace
from .echo import echo_router, echo_ui

__all__ = ["NS", "validate_namespace", "echo_router", "echo_ui"]
