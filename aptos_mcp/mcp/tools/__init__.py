"""FastMCP tool registrations."""

from . import aptos  # noqa: F401

__all__ = ["aptos"]
