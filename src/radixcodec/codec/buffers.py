"""Helpers for writing conversion results into caller-owned buffers."""
from __future__ import annotations

from typing import Union

from .errors import BufferTooSmallError

WritableBuffer = Union[bytearray, memoryview]


def write_prefix(buffer: WritableBuffer, payload: bytes) -> int:
    """Copy *payload* into the start of *buffer* and return its length.

    Raises:
        BufferTooSmallError: If *payload* does not fit. *buffer* is left
            unmodified in that case.
    """

    view = memoryview(buffer)
    if view.readonly:
        raise TypeError("output buffer must be writable")
    view = view.cast("B")
    if len(payload) > len(view):
        raise BufferTooSmallError(len(payload), len(view))
    view[: len(payload)] = payload
    return len(payload)


__all__ = ["WritableBuffer", "write_prefix"]
