# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Share:
    """One raw entry of a share document, before its value is decoded."""

    field: str
    x: int
    base: int
    encoded_value: str


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ShareSet:
    """All decoded points of one test case, sorted by ``x``."""

    n: int
    k: int
    points: tuple[Point, ...]


__all__ = ["Share", "Point", "ShareSet"]
