# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Runtime settings for batch reconstruction.

Values come from environment variables so that the command line and
library callers share one source of defaults. Unparseable values fall
back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    return default


@dataclass(frozen=True)
class RecoveryPolicy:
    """Tunables for :func:`shamir_recover.reconstruct.reconstruct_many`."""

    max_workers: int = 1
    log_level: str = "WARNING"
    verify_consistency: bool = False


def load_policy() -> RecoveryPolicy:
    """Load the policy considering environment overrides."""

    return RecoveryPolicy(
        max_workers=max(1, _load_int("SHAMIR_RECOVER_MAX_WORKERS", 1)),
        log_level=os.environ.get("SHAMIR_RECOVER_LOG_LEVEL", "WARNING").upper(),
        verify_consistency=_load_bool("SHAMIR_RECOVER_VERIFY", False),
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "policy", "load_policy"]
