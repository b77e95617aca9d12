# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Turn share documents into validated :class:`ShareSet` objects.

A share document looks like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Every top-level field except ``keys`` is the decimal x coordinate of one
share; ``value`` is the y coordinate written in radix ``base``.

YAML documents follow the same layout. Mapping keys are always taken as
written, and ``base``/``value`` scalars are read as text, so ``010:`` is
x=10 and ``value: 0111`` keeps its digits.
"""

from __future__ import annotations

import json
import logging
import re
from os import PathLike
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import DuplicateAbscissa, InsufficientShares, MalformedShare, MissingMetadata, ReconstructionError, abbreviate
from .models import Point, Share, ShareSet

_logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"
DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(DIGITS)

_DIGIT_VALUES = {ch: i for i, ch in enumerate(DIGITS)}
_DIGIT_VALUES.update({ch.upper(): i for i, ch in enumerate(DIGITS) if ch.isalpha()})

_YAML_SUFFIXES = {".yaml", ".yml"}
_TEXT_FIELDS = {"base", "value"}


def parse_numeral(value: str, base: int, *, field: str | None = None) -> int:
    """Decode ``value`` written in radix ``base`` (2..36, ASCII, case-insensitive)."""
    if not MIN_BASE <= base <= MAX_BASE:
        raise MalformedShare(field, f"base {abbreviate(base)} outside {MIN_BASE}..{MAX_BASE}", value=base)
    if not value:
        raise MalformedShare(field, "empty value", value=value)
    result = 0
    for ch in value:
        digit = _DIGIT_VALUES.get(ch, base)
        if digit >= base:
            raise MalformedShare(field, f"invalid digit {ch!r} for base {base}", value=value)
        result = result * base + digit
    return result


def _parse_decimal(raw: Any, field: str) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw:
        try:
            return parse_numeral(raw, 10, field=field)
        except MalformedShare:
            return None
    return None


def parse_share(field: str, descriptor: Any) -> Share:
    """Validate one ``"<x>": {"base": ..., "value": ...}`` entry."""
    x = _parse_decimal(field, field)
    if x is None:
        raise MalformedShare(field, "field name is not a decimal integer", value=field)
    if x < 1:
        raise MalformedShare(field, "x must be positive", value=field)

    if not isinstance(descriptor, Mapping):
        raise MalformedShare(field, "share must be an object with 'base' and 'value'", value=descriptor)
    if "base" not in descriptor or "value" not in descriptor:
        raise MalformedShare(field, "share must define both 'base' and 'value'", value=descriptor)

    base = _parse_decimal(descriptor["base"], field)
    if base is None:
        raise MalformedShare(field, "base is not a decimal integer", value=descriptor["base"])
    if base < MIN_BASE:
        raise MalformedShare(field, f"base must be at least {MIN_BASE}", value=base)

    encoded = descriptor["value"]
    if not isinstance(encoded, str):
        raise MalformedShare(field, "value must be a string numeral", value=encoded)
    return Share(field=field, x=x, base=base, encoded_value=encoded)


def decode_share(share: Share) -> Point:
    return Point(share.x, parse_numeral(share.encoded_value, share.base, field=share.field))


def _read_metadata(document: Mapping[str, Any]) -> tuple[int, int]:
    keys = document.get(KEYS_FIELD)
    if not isinstance(keys, Mapping):
        raise MissingMetadata(f"missing {KEYS_FIELD!r} object", field=KEYS_FIELD, value=keys)

    values: dict[str, int] = {}
    for name in ("n", "k"):
        if name not in keys:
            raise MissingMetadata(f"missing {KEYS_FIELD}.{name}", field=name)
        raw = keys[name]
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise MissingMetadata(f"{KEYS_FIELD}.{name} must be an integer", field=name, value=raw)
        values[name] = raw

    n, k = values["n"], values["k"]
    if k < 1:
        raise MissingMetadata(f"{KEYS_FIELD}.k must be positive", field="k", value=k)
    if n < k:
        raise MissingMetadata(
            f"{KEYS_FIELD}.n ({abbreviate(n)}) is smaller than k ({abbreviate(k)})", field="n", value=n
        )
    return n, k


def load_share_set(document: Mapping[str, Any]) -> ShareSet:
    """Parse ``document`` into a :class:`ShareSet` with points sorted by x.

    Raises :class:`MissingMetadata`, :class:`MalformedShare`,
    :class:`DuplicateAbscissa` or :class:`InsufficientShares`.
    """
    if not isinstance(document, Mapping):
        raise MalformedShare(None, "share document must be an object", value=document)
    n, k = _read_metadata(document)

    by_x: dict[int, str] = {}
    points: list[Point] = []
    for field, descriptor in document.items():
        if field == KEYS_FIELD:
            continue
        share = parse_share(str(field), descriptor)
        if share.x in by_x:
            raise DuplicateAbscissa(share.x, (by_x[share.x], share.field))
        by_x[share.x] = share.field
        points.append(decode_share(share))

    points.sort(key=lambda p: p.x)
    if len(points) != n:
        _logger.warning("keys.n is %s but %d shares were found", abbreviate(n), len(points))
    if len(points) < k:
        raise InsufficientShares(required=k, available=len(points))

    _logger.debug("loaded %d shares (n=%s, k=%d)", len(points), abbreviate(n), k)
    return ShareSet(n=n, k=k, points=tuple(points))


class _Pairs(list):
    """Key/value pairs of one parsed mapping, repeats included, in document order."""


def _repeated_key(key: str, field: str | None) -> ReconstructionError:
    if field is None:
        x = _parse_decimal(key, key)
        if x is not None:
            return DuplicateAbscissa(x, (key, key))
        return MalformedShare(key, "field appears more than once")
    if field == KEYS_FIELD:
        return MissingMetadata(f"{KEYS_FIELD}.{key} appears more than once", field=key)
    return MalformedShare(field, f"{key!r} appears more than once")


def _to_mapping(value: Any, field: str | None = None, *, top: bool = False) -> Any:
    if isinstance(value, _Pairs):
        return _merge_pairs(value, field, top)
    if isinstance(value, list):
        return [_to_mapping(item, field) for item in value]
    return value


def _merge_pairs(pairs: _Pairs, field: str | None, top: bool) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, item in pairs:
        if key in result:
            raise _repeated_key(key, None if top else field)
        result[key] = _to_mapping(item, key if top else field)
    return result


class _ShareYamlLoader(yaml.SafeLoader):
    """SafeLoader that keeps mapping keys as text and repeats visible."""

    def construct_share_mapping(self, node: yaml.MappingNode) -> _Pairs:
        self.flatten_mapping(node)
        pairs = _Pairs()
        for key_node, value_node in node.value:
            if not isinstance(key_node, yaml.ScalarNode):
                raise MalformedShare(None, f"mapping keys must be plain text (line {key_node.start_mark.line + 1})")
            key = key_node.value
            if key in _TEXT_FIELDS and isinstance(value_node, yaml.ScalarNode):
                value = value_node.value
            else:
                value = self.construct_object(value_node, deep=True)
            pairs.append((key, value))
        return pairs

    def construct_decimal(self, node: yaml.ScalarNode) -> int:
        return int(self.construct_scalar(node))


# YAML 1.1 reads 010 as octal and accepts 0x/0b/underscores; only plain decimals are ints here.
_ShareYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:int"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_ShareYamlLoader.add_implicit_resolver("tag:yaml.org,2002:int", re.compile(r"^[-+]?[0-9]+$"), list("-+0123456789"))
_ShareYamlLoader.add_constructor("tag:yaml.org,2002:int", _ShareYamlLoader.construct_decimal)
_ShareYamlLoader.add_constructor("tag:yaml.org,2002:map", _ShareYamlLoader.construct_share_mapping)


def read_document(path: str | PathLike[str]) -> dict[str, Any]:
    """Read a share document from a ``.json`` or ``.yaml``/``.yml`` file.

    Repeated keys are rejected: a repeated x as :class:`DuplicateAbscissa`,
    a repeated ``n``/``k`` as :class:`MissingMetadata`, anything else as
    :class:`MalformedShare` naming the share it belongs to.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedShare(None, f"{p.name} is not UTF-8 text") from exc
    try:
        if p.suffix.lower() in _YAML_SUFFIXES:
            parsed = yaml.load(text, Loader=_ShareYamlLoader)
        else:
            parsed = json.loads(text, object_pairs_hook=_Pairs)
        data = _to_mapping(parsed, top=True)
    except ReconstructionError:
        raise
    except (ValueError, RecursionError, yaml.YAMLError) as exc:
        raise MalformedShare(None, f"cannot parse {p.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise MalformedShare(None, f"{p.name} does not contain an object")
    return data


def load_share_file(path: str | PathLike[str]) -> ShareSet:
    return load_share_set(read_document(path))


__all__ = [
    "KEYS_FIELD",
    "parse_numeral",
    "parse_share",
    "decode_share",
    "load_share_set",
    "read_document",
    "load_share_file",
]
