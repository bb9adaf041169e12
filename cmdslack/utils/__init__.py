"""Utility functions for cmdslack."""

from cmdslack.utils.logging import (
    configure_logging,
    get_request_id,
    set_request_id,
)

__all__ = [
    "configure_logging",
    "get_request_id",
    "set_request_id",
]
