"""TicketService: orchestrates decoding, normalization and daily aggregation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

from helpdesk_app.analytics.aggregations.daily import build_daily_dataset

from .codec import decode, header_names
from .config import REQUIRED_HEADERS
from .models import Dataset, UpcomingProject

ProgressCallback = Callable[[str, int | None, int | None], None]

logger = logging.getLogger(__name__)

SAMPLE_EXPORT = "sample_export.csv"


def load_sample_text() -> str:
    """Return the bundled sample export used when no draft text exists."""
    path = Path(__file__).resolve().parent.parent / "data" / SAMPLE_EXPORT
    return path.read_text(encoding="utf-8")


def missing_required_headers(text: str) -> list[str]:
    """List required ingest columns absent from the header row of ``text``."""
    present = {h.strip() for h in header_names(text)}
    return [h for h in REQUIRED_HEADERS if h not in present]


class TicketService:
    """Runs one full pass from raw export text to the per-day dataset.

    Each call to :meth:`build` is independent: the result depends only on the
    text (and optional upcoming projects) passed in, so the caller publishes
    the returned dataset only once it is complete.
    """

    def __init__(self, upcoming: Mapping[str, Sequence[UpcomingProject]] | None = None):
        self.upcoming = dict(upcoming or {})

    def build(self, text, *, progress: ProgressCallback | None = None) -> Dataset:
        """Decode ``text`` and aggregate it.

        Raises
        ------
        DecodeError
            When ``text`` cannot be read at all. An export with zero data rows
            is not an error and yields an empty dataset.
        """
        if progress:
            progress("Decoding export", None, None)
        records = decode(text)
        logger.debug("Decoded %s row(s)", len(records))

        if progress:
            progress("Grouping tickets by day", None, None)
        dataset = build_daily_dataset(records, upcoming=self.upcoming)
        logger.info(
            "%s row(s) aggregated into %s day(s); %s excluded (unparsable date)",
            len(records) - dataset.excluded_count,
            len(dataset.days),
            dataset.excluded_count,
        )
        return dataset
