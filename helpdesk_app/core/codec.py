"""Delimited-text <-> record codec, plus the structured (JSON) export form.

Decoding never fails on malformed quoting: an unterminated quote is closed
implicitly at end of input. The only hard failure is input that is not text
at all, surfaced as :class:`DecodeError` so callers can tell it apart from an
export that simply has zero rows.
"""

from __future__ import annotations

import csv
import io
import json
import logging
import re
from collections.abc import Iterable, Mapping, Sequence

from .config import (
    BYTE_ORDER_MARK,
    FIELD_DELIMITER,
    FORMAT_CSV,
    FORMAT_JSON,
    QUOTE_CHAR,
    RECORD_DELIMITER,
)
from .models import RawRecord

logger = logging.getLogger(__name__)

_SEPARATOR_RUN = re.compile(r"[^a-zA-Z0-9]+(.)?")


class DecodeError(ValueError):
    """Raised when the raw input cannot be read as text at all."""


class FormatConversionError(ValueError):
    """Raised when converting between the tabular and structured forms fails."""


def normalize_header(text: str) -> str:
    """Turn arbitrary header text into a camelCase field key.

    >>> normalize_header("Ticket IDs Sequence")
    'ticketIDsSequence'
    >>> normalize_header("Open Time (hours)")
    'openTimeHours'
    """
    joined = _SEPARATOR_RUN.sub(lambda m: m.group(1).upper() if m.group(1) else "", text.strip())
    return joined[:1].lower() + joined[1:]


class _Field:
    __slots__ = ("chars", "quoted", "quoted_end")

    def __init__(self):
        self.chars: list[str] = []
        self.quoted = False
        self.quoted_end = 0

    def value(self) -> str:
        if not self.quoted:
            return "".join(self.chars).strip()
        inside = "".join(self.chars[: self.quoted_end])
        return inside + "".join(self.chars[self.quoted_end :]).rstrip()


def _tokenize(text: str) -> list[tuple[list[str], bool]]:
    """Split text into rows of field values.

    Unlike ``csv.reader`` this keeps track of whether a field was quoted,
    which decides if its surrounding whitespace is trimmed.

    Each row is returned with a flag telling whether it is blank (a single
    empty, unquoted field, i.e. an empty line).
    """
    rows: list[tuple[list[str], bool]] = []
    row: list[_Field] = []
    current = _Field()
    in_quotes = False
    i = 0
    n = len(text)

    def finish_row():
        row.append(current)
        blank = len(row) == 1 and not row[0].quoted and not row[0].value()
        rows.append(([f.value() for f in row], blank))

    while i < n:
        ch = text[i]
        if in_quotes:
            if ch == QUOTE_CHAR:
                if i + 1 < n and text[i + 1] == QUOTE_CHAR:
                    current.chars.append(QUOTE_CHAR)
                    i += 1
                else:
                    in_quotes = False
                    current.quoted_end = len(current.chars)
            else:
                current.chars.append(ch)
        elif ch == QUOTE_CHAR:
            if not current.quoted and not "".join(current.chars).strip():
                current.chars = []
            in_quotes = True
            current.quoted = True
        elif ch == FIELD_DELIMITER:
            row.append(current)
            current = _Field()
        elif ch in ("\n", "\r"):
            if ch == "\r" and i + 1 < n and text[i + 1] == "\n":
                i += 1
            finish_row()
            row = []
            current = _Field()
        else:
            current.chars.append(ch)
        i += 1

    if in_quotes:
        logger.debug("Unterminated quote closed at end of input")
        current.quoted_end = len(current.chars)
    if row or current.chars or current.quoted:
        finish_row()
    return rows


def _as_text(raw) -> str:
    if isinstance(raw, bytes | bytearray):
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Input is not valid UTF-8 text: {exc}") from exc
    if not isinstance(raw, str):
        raise DecodeError(f"Expected text input, got {type(raw).__name__}")
    return raw


def header_names(raw) -> list[str]:
    """Return the raw (un-normalized) header names of a tabular text."""
    text = _as_text(raw).lstrip(BYTE_ORDER_MARK)
    for values, blank in _tokenize(text):
        if not blank:
            return values
    return []


def decode(raw) -> list[RawRecord]:
    """Decode delimited text into an ordered list of records.

    Parameters
    ----------
    raw : str or bytes
        The delimited text (UTF-8 when bytes).

    Returns
    -------
    list[dict[str, str]]
        One mapping per data row keyed by normalized header names. Rows with
        fewer fields than headers are padded with empty strings; extra
        trailing fields are dropped.

    Raises
    ------
    DecodeError
        If the input cannot be read as text.
    """
    text = _as_text(raw)
    if text.startswith(BYTE_ORDER_MARK):
        text = text[len(BYTE_ORDER_MARK) :]
    rows = [values for values, blank in _tokenize(text) if not blank]
    if not rows:
        return []

    headers = [normalize_header(h) for h in rows[0]]
    records: list[RawRecord] = []
    for line_no, values in enumerate(rows[1:], start=2):
        if len(values) < len(headers):
            logger.debug("Row %s has %s of %s fields; padding", line_no, len(values), len(headers))
            values = values + [""] * (len(headers) - len(values))
        elif len(values) > len(headers):
            logger.debug("Row %s has %s extra field(s); dropping", line_no, len(values) - len(headers))
        records.append(dict(zip(headers, values, strict=False)))
    return records


def _field_order(records: Sequence[Mapping[str, object]]) -> list[str]:
    seen: dict[str, None] = {}
    for rec in records:
        for key in rec:
            seen.setdefault(key, None)
    return list(seen)


def encode(records: Iterable[Mapping[str, object]], fields: Sequence[str] | None = None) -> str:
    """Encode records back into delimited text, quoting every field."""
    records = list(records)
    header = list(fields) if fields is not None else _field_order(records)
    if not header:
        return ""
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=FIELD_DELIMITER,
        quotechar=QUOTE_CHAR,
        quoting=csv.QUOTE_ALL,
        lineterminator=RECORD_DELIMITER,
    )
    writer.writerow(header)
    writer.writerows([rec.get(h, "") for h in header] for rec in records)
    # no terminator after the last record
    return buffer.getvalue()[: -len(RECORD_DELIMITER)]


def records_to_json(records: Iterable[Mapping[str, object]]) -> str:
    return json.dumps([dict(r) for r in records], indent=2, ensure_ascii=False)


def json_to_records(text: str) -> list[RawRecord]:
    """Parse the structured (array-of-objects) form back into records."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise FormatConversionError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise FormatConversionError("JSON data must be an array of objects")
    records: list[RawRecord] = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            raise FormatConversionError(f"Item {idx} is not an object")
        records.append({str(k): "" if v is None else str(v) for k, v in item.items()})
    return records


def convert_format(text: str, source: str, target: str) -> str:
    """Convert the edit buffer between the ``csv`` and ``json`` forms.

    The input text is never modified; on failure a
    :class:`FormatConversionError` is raised and the caller keeps its buffer.
    """
    known = {FORMAT_CSV, FORMAT_JSON}
    if source not in known or target not in known:
        raise FormatConversionError(f"Unsupported conversion {source!r} -> {target!r}")
    if source == target:
        return text
    if source == FORMAT_CSV:
        try:
            records = decode(text)
        except DecodeError as exc:
            raise FormatConversionError(str(exc)) from exc
        return records_to_json(records)
    return encode(json_to_records(text))
