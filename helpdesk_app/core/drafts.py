"""Persisted draft boundary: the current edit text and its format flag.

The store is any mutable string mapping (a dict in tests, the Streamlit
session state in the app). The pipeline never touches it; callers load the
text, hand it to :class:`~helpdesk_app.core.service.TicketService`, and save
edits back explicitly.
"""

from __future__ import annotations

from collections.abc import MutableMapping

from .codec import convert_format
from .config import DRAFT_FORMAT_KEY, DRAFT_TEXT_KEY, FORMAT_CSV, FORMAT_JSON


class DraftStore:
    def __init__(self, backend: MutableMapping[str, str]):
        self.backend = backend

    def load(self, default: str) -> tuple[str, str]:
        """Return ``(text, format)``, falling back to ``default`` CSV text."""
        text = self.backend.get(DRAFT_TEXT_KEY)
        if not text:
            return default, FORMAT_CSV
        fmt = self.backend.get(DRAFT_FORMAT_KEY) or FORMAT_CSV
        return text, fmt if fmt in (FORMAT_CSV, FORMAT_JSON) else FORMAT_CSV

    def load_tabular(self, default: str) -> str:
        """Return the draft as tabular text, converting a JSON draft first.

        Raises
        ------
        FormatConversionError
            When a JSON draft is not an array of objects.
        """
        text, fmt = self.load(default)
        return convert_format(text, fmt, FORMAT_CSV)

    def save(self, text: str, fmt: str = FORMAT_CSV) -> None:
        if fmt not in (FORMAT_CSV, FORMAT_JSON):
            raise ValueError(f"Unknown draft format: {fmt!r}")
        self.backend[DRAFT_TEXT_KEY] = text
        self.backend[DRAFT_FORMAT_KEY] = fmt

    def reset(self) -> None:
        for key in (DRAFT_TEXT_KEY, DRAFT_FORMAT_KEY):
            self.backend.pop(key, None)
