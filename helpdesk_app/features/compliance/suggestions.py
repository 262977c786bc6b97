"""Request/response boundary for an external clause-suggestion service.

Nothing here performs I/O. The app builds a request payload, hands it to
whatever service it talks to, and passes the reply text back through
:func:`parse_suggestions`. Accepted suggestions are applied to copies of the
raw records, which then go through a normal pipeline pass.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from helpdesk_app.core.config import DEFAULT_ISO_CLAUSE, RAW_FIELDS
from helpdesk_app.core.models import RawRecord, Ticket
from helpdesk_app.features.compliance.catalog import COMPLIANCE_STANDARDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ClauseSuggestion:
    ticket_id: str
    suggested_clause: str
    reason: str = ""
    confidence: float = 0.0


def build_suggestion_request(tickets: Iterable[Ticket], standards=COMPLIANCE_STANDARDS) -> dict:
    """Payload listing each ticket's subject and clause plus the catalog."""
    return {
        "tickets": [
            {
                "ticketId": t.ticket_number,
                "subject": t.item,
                "description": t.description,
                "currentClause": t.iso_clause or DEFAULT_ISO_CLAUSE,
            }
            for t in tickets
        ],
        "catalog": [s.to_dict() for s in standards],
    }


def _confidence(value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if number != number:
        return 0.0
    return min(max(number, 0.0), 1.0)


def parse_suggestions(text: str) -> list[ClauseSuggestion]:
    """Parse a JSON array of ``{ticketId, suggestedClause, reason, confidence}``.

    Items missing a ticket id or clause are skipped.

    Raises
    ------
    ValueError
        When the reply is not JSON or not an array.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ValueError(f"Suggestion reply is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ValueError("Suggestion reply must be a JSON array")

    out: list[ClauseSuggestion] = []
    for item in data:
        if not isinstance(item, dict):
            continue
        ticket_id = str(item.get("ticketId") or "").strip()
        clause = str(item.get("suggestedClause") or "").strip()
        if not ticket_id or not clause:
            continue
        out.append(
            ClauseSuggestion(
                ticket_id=ticket_id,
                suggested_clause=clause,
                reason=str(item.get("reason") or ""),
                confidence=_confidence(item.get("confidence")),
            )
        )
    if len(out) < len(data):
        logger.debug("Skipped %s malformed suggestion item(s)", len(data) - len(out))
    return out


def apply_suggestions(records: Iterable[Mapping[str, str]], accepted: Iterable[ClauseSuggestion]) -> list[RawRecord]:
    """Copies of ``records`` with accepted clauses written into the clause field."""
    clause_by_id = {s.ticket_id: s.suggested_clause for s in accepted}
    id_key, clause_key = RAW_FIELDS["ticket_number"], RAW_FIELDS["iso_clause"]
    updated: list[RawRecord] = []
    for record in records:
        copy = dict(record)
        ticket_id = copy.get(id_key, "")
        if ticket_id in clause_by_id:
            copy[clause_key] = clause_by_id[ticket_id]
        updated.append(copy)
    return updated
