# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Secret reconstruction for one or many share documents."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any, Iterable, Mapping

from .errors import ReconstructionError, abbreviate
from .interpolate import interpolate, lagrange_at
from .loader import load_share_file, load_share_set
from .models import Point, ShareSet

_logger = logging.getLogger(__name__)


def select_points(share_set: ShareSet) -> tuple[Point, ...]:
    """Return the ``k`` points with the smallest x.

    The remaining points are not checked against the polynomial; use
    :func:`find_inconsistent_points` for that.
    """
    return share_set.points[: share_set.k]


def reconstruct(share_set: ShareSet) -> int:
    """Recover the secret (the polynomial's value at x=0)."""
    return interpolate(select_points(share_set), 0)


def reconstruct_document(document: Mapping[str, Any]) -> int:
    return reconstruct(load_share_set(document))


def reconstruct_file(path: str | PathLike[str]) -> int:
    return reconstruct(load_share_file(path))


def find_inconsistent_points(share_set: ShareSet) -> list[int]:
    """Return x of every unused point that is off the reconstructed polynomial."""
    selected = select_points(share_set)
    bad: list[int] = []
    for point in share_set.points[share_set.k :]:
        if lagrange_at(selected, point.x) != point.y:
            bad.append(point.x)
    return bad


@dataclass(frozen=True)
class CaseResult:
    """Outcome of one test case: exactly one of ``secret``/``error`` is set."""

    name: str
    secret: int | None = None
    error: ReconstructionError | OSError | None = None
    inconsistent: tuple[int, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None


def _run_case(path: Path, verify: bool) -> CaseResult:
    name = str(path)
    try:
        share_set = load_share_file(path)
        secret = reconstruct(share_set)
        inconsistent = tuple(find_inconsistent_points(share_set)) if verify else ()
    except (ReconstructionError, OSError) as exc:
        _logger.error("case %s failed: %s", name, exc)
        return CaseResult(name=name, error=exc)
    if inconsistent:
        shown = [abbreviate(x) for x in inconsistent]
        _logger.warning("case %s: shares %s disagree with the selected points", name, shown)
    _logger.info("case %s reconstructed from %d of %d shares", name, share_set.k, len(share_set.points))
    return CaseResult(name=name, secret=secret, inconsistent=inconsistent)


def reconstruct_many(
    paths: Iterable[str | PathLike[str]],
    *,
    max_workers: int | None = None,
    verify: bool = False,
) -> list[CaseResult]:
    """Reconstruct every file in ``paths`` independently.

    A failing case is reported in its :class:`CaseResult` and does not stop
    the others. Results keep the input order.
    """
    files = [Path(p) for p in paths]
    if not max_workers or max_workers <= 1 or len(files) <= 1:
        return [_run_case(p, verify) for p in files]
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda p: _run_case(p, verify), files))


__all__ = [
    "CaseResult",
    "select_points",
    "reconstruct",
    "reconstruct_document",
    "reconstruct_file",
    "find_inconsistent_points",
    "reconstruct_many",
]
