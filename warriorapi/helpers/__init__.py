"""Small helpers shared across the warrior API."""

from warriorapi.helpers.debug import log_call

__all__ = ["log_call"]
