"""Parse share documents into :class:`~sharecheck.shares.Share` records.

A document is a JSON object of the form::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Every key other than ``keys`` is a share id, which doubles as the share's
x-coordinate. ``value`` is written in the declared ``base`` (2 to 36).
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping

from sharecheck.errors import ShareFormatError
from sharecheck.shares import Share, lift_int_digit_limit

_logger = logging.getLogger(__name__)

MIN_BASE = 2
MAX_BASE = 36


@dataclass(frozen=True)
class ShareDocument:
    n: int
    k: int
    shares: tuple[Share, ...]


def _is_ascii_decimal(text: str) -> bool:
    return text.isascii() and text.isdecimal()


def decode_value(value: str, base: int) -> int:
    """Decode ``value`` written in ``base`` into an integer."""

    if not MIN_BASE <= base <= MAX_BASE:
        raise ShareFormatError(f"Base {base} is outside {MIN_BASE}..{MAX_BASE}")
    text = value.strip()
    if not text or not (text.isascii() and text.isalnum()):
        raise ShareFormatError(f"Value {value!r} is not a valid base-{base} number")
    lift_int_digit_limit()
    try:
        return int(text, base)
    except ValueError as exc:
        raise ShareFormatError(f"Value {value!r} is not a valid base-{base} number") from exc


def _as_int(raw: Any, field: str) -> int:
    if isinstance(raw, bool):
        raise ShareFormatError(f"{field} must be an integer")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _is_ascii_decimal(raw.strip()):
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise ShareFormatError(f"{field} must be an integer, got {raw!r}") from exc
    raise ShareFormatError(f"{field} must be an integer, got {raw!r}")


def _parse_share(share_id: str, entry: Any) -> Share:
    if not isinstance(entry, Mapping):
        raise ShareFormatError(f"Share {share_id!r} must be an object")
    if not _is_ascii_decimal(share_id):
        raise ShareFormatError(f"Share id {share_id!r} is not an integer")
    lift_int_digit_limit()
    x = int(share_id)
    if "base" not in entry or "value" not in entry:
        raise ShareFormatError(f"Share {share_id!r} needs both 'base' and 'value'")
    base = _as_int(entry["base"], f"Share {share_id!r} base")
    value = entry["value"]
    if not isinstance(value, str):
        value = str(value)
    return Share(share_id, x, decode_value(value, base))


def parse_document(data: Mapping[str, Any]) -> ShareDocument:
    """Build a :class:`ShareDocument` from an already-decoded mapping."""

    if not isinstance(data, Mapping):
        raise ShareFormatError("Share document must be a JSON object")
    keys = data.get("keys")
    if not isinstance(keys, Mapping) or "k" not in keys:
        raise ShareFormatError("Share document needs a 'keys' object with 'k'")
    k = _as_int(keys["k"], "keys.k")
    shares = tuple(
        _parse_share(share_id, entry) for share_id, entry in data.items() if share_id != "keys"
    )
    n = _as_int(keys["n"], "keys.n") if "n" in keys else len(shares)
    if n != len(shares):
        _logger.warning("Document declares n=%d but contains %d shares", n, len(shares))
    return ShareDocument(n=n, k=k, shares=shares)


def loads(text: str | bytes) -> ShareDocument:
    """Parse a share document from JSON text or UTF-8 encoded bytes."""
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ShareFormatError(f"Share document is not valid UTF-8: {exc}") from exc
    lift_int_digit_limit()
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ShareFormatError(f"Invalid JSON: {exc}") from exc
    return parse_document(data)


__all__ = ["ShareDocument", "decode_value", "parse_document", "loads", "MIN_BASE", "MAX_BASE"]
