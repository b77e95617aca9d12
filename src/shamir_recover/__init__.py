# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Recover Shamir-style secrets from threshold share documents.

``load_share_set`` / ``load_share_file``
    Validate a share document and decode its points.

``interpolate``
    Exact Lagrange interpolation of ``k`` points at an abscissa.

``reconstruct`` / ``reconstruct_many``
    Recover the secret of one share set, or of many files independently.
"""

from __future__ import annotations

from .errors import (
    DuplicateAbscissa,
    InsufficientShares,
    MalformedShare,
    MissingMetadata,
    ReconstructionError,
)
from .interpolate import interpolate, lagrange_at, round_half_away
from .loader import load_share_file, load_share_set, parse_numeral, read_document
from .models import Point, Share, ShareSet
from .reconstruct import (
    CaseResult,
    find_inconsistent_points,
    reconstruct,
    reconstruct_document,
    reconstruct_file,
    reconstruct_many,
    select_points,
)

__all__ = [
    "ReconstructionError",
    "MalformedShare",
    "MissingMetadata",
    "InsufficientShares",
    "DuplicateAbscissa",
    "Share",
    "Point",
    "ShareSet",
    "parse_numeral",
    "read_document",
    "load_share_set",
    "load_share_file",
    "lagrange_at",
    "round_half_away",
    "interpolate",
    "select_points",
    "reconstruct",
    "reconstruct_document",
    "reconstruct_file",
    "find_inconsistent_points",
    "CaseResult",
    "reconstruct_many",
]
