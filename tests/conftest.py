"""Test configuration helpers."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()


def to_base(value: int, base: int) -> str:
    if value == 0:
        return "0"
    out = []
    while value:
        value, r = divmod(value, base)
        out.append(DIGITS[r])
    return "".join(reversed(out))


def evaluate(coeffs: list[int], x: int) -> int:
    y = 0
    for c in reversed(coeffs):
        y = y * x + c
    return y


@pytest.fixture
def make_document():
    """Build a share document for the polynomial with ``coeffs`` (constant first)."""

    def _make(coeffs, xs, *, k=None, bases=(10,)):
        doc = {"keys": {"n": len(xs), "k": k if k is not None else len(coeffs)}}
        for i, x in enumerate(xs):
            base = bases[i % len(bases)]
            doc[str(x)] = {"base": str(base), "value": to_base(evaluate(coeffs, x), base)}
        return doc

    return _make


@pytest.fixture
def write_json(tmp_path):
    def _write(name, document):
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_document():
    """Points on x**2 + 3, one of them in base 2 and one in base 4."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }
