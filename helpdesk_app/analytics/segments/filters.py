"""Natural-order sorting and predicate filtering over classified ticket lists."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass

from helpdesk_app.analytics.metrics.derived import parse_number
from helpdesk_app.core.config import MATCH_ALL, NUMERIC_SORT_FIELDS, SEARCH_FIELDS
from helpdesk_app.core.models import Ticket

ASC = "asc"
DESC = "desc"

_DIGIT_RUN = re.compile(r"(\d+)")


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def natural_key(value) -> tuple:
    """Sort key treating embedded digit runs as numbers.

    ``re.split`` with a capture group alternates text and digits, so text
    chunks always sit at even positions and numbers at odd ones; keys of
    different values therefore compare position by position without type
    clashes. Case and accents are ignored.
    """
    parts = _DIGIT_RUN.split("" if value is None else str(value))
    return tuple(int(p) if i % 2 else _fold(p) for i, p in enumerate(parts))


def natural_compare(a, b) -> int:
    ka, kb = natural_key(a), natural_key(b)
    return (ka > kb) - (ka < kb)


def _field_value(ticket: Ticket, key: str):
    if hasattr(ticket, key):
        return getattr(ticket, key)
    return ticket.extra.get(key, "")


def sort_tickets(tickets: Iterable[Ticket], key: str | None, direction: str = ASC) -> list[Ticket]:
    """Stable sort by any ticket field.

    Age-in-hours and duration compare numerically (non-numeric as 0); every
    other field uses :func:`natural_key`. ``key=None`` keeps the input order.
    """
    items = list(tickets)
    if key is None:
        return items
    if key in NUMERIC_SORT_FIELDS:

        def sort_key(t: Ticket):
            return parse_number(_field_value(t, key))

    else:

        def sort_key(t: Ticket):
            return natural_key(_field_value(t, key))

    return sorted(items, key=sort_key, reverse=direction == DESC)


@dataclass(frozen=True, slots=True)
class SortConfig:
    key: str | None = None
    direction: str = ASC

    def toggle(self, key: str) -> SortConfig:
        """Flip direction on a repeated key, reset to ascending on a new one."""
        if self.key == key and self.direction == ASC:
            return SortConfig(key, DESC)
        return SortConfig(key, ASC)

    def apply(self, tickets: Iterable[Ticket]) -> list[Ticket]:
        return sort_tickets(tickets, self.key, self.direction)


@dataclass(frozen=True, slots=True)
class TicketFilter:
    status: str = MATCH_ALL
    priority: str = MATCH_ALL
    search: str = ""

    def matches(self, ticket: Ticket) -> bool:
        if self.status != MATCH_ALL and ticket.status != self.status:
            return False
        if self.priority != MATCH_ALL and ticket.priority != self.priority:
            return False
        term = self.search.strip().lower()
        if not term:
            return True
        return any(term in str(_field_value(ticket, f) or "").lower() for f in SEARCH_FIELDS)


def filter_tickets(tickets: Iterable[Ticket], flt: TicketFilter | None = None) -> list[Ticket]:
    flt = flt or TicketFilter()
    return [t for t in tickets if flt.matches(t)]


def sort_and_filter(
    tickets: Iterable[Ticket],
    flt: TicketFilter | None = None,
    sort: SortConfig | None = None,
) -> list[Ticket]:
    filtered = filter_tickets(tickets, flt)
    return (sort or SortConfig()).apply(filtered)


def filter_options(tickets: Iterable[Ticket]) -> tuple[list[str], list[str]]:
    """Unique non-empty statuses and priorities, sorted, for filter pickers."""
    items = list(tickets)
    statuses = sorted({t.status for t in items if t.status})
    priorities = sorted({t.priority for t in items if t.priority})
    return statuses, priorities
