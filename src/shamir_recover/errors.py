# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Error taxonomy for share loading and secret reconstruction."""

from __future__ import annotations

from typing import Any

_MAX_SHOWN_BITS = 4000


def abbreviate(value: int) -> str:
    """Render ``value`` in decimal, or by bit length when it is too wide to print."""
    if value.bit_length() > _MAX_SHOWN_BITS:
        return f"<{value.bit_length()}-bit integer>"
    return str(value)


class ReconstructionError(ValueError):
    """Base class for every failure of a single reconstruction attempt."""


class MalformedShare(ReconstructionError):
    """A share field name, base or encoded value cannot be parsed."""

    def __init__(self, field: str | None, message: str, *, value: Any = None) -> None:
        self.field = field
        self.value = value
        where = f"share {field!r}" if field is not None else "document"
        super().__init__(f"{where}: {message}")


class MissingMetadata(ReconstructionError):
    """The ``keys`` block or one of its ``n``/``k`` entries is absent or invalid."""

    def __init__(self, message: str, *, field: str | None = None, value: Any = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


class InsufficientShares(ReconstructionError):
    """Fewer points are available than the threshold requires."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(f"need {abbreviate(required)} shares, only {available} available")


class DuplicateAbscissa(ReconstructionError):
    """Two points share the same x, so interpolation is undefined."""

    def __init__(self, x: int, fields: tuple[str, ...] = ()) -> None:
        self.x = x
        self.fields = fields
        detail = f" (fields {', '.join(repr(f) for f in fields)})" if fields else ""
        super().__init__(f"duplicate x={abbreviate(x)}{detail}")


__all__ = [
    "abbreviate",
    "ReconstructionError",
    "MalformedShare",
    "MissingMetadata",
    "InsufficientShares",
    "DuplicateAbscissa",
]
