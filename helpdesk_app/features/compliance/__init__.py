"""Compliance feature: standards catalog and clause-suggestion boundary."""

from helpdesk_app.features.compliance.catalog import (
    ALL_DOMAINS,
    COMPLIANCE_STANDARDS,
    ComplianceStandard,
    search_standards,
    standard_domains,
)
from helpdesk_app.features.compliance.suggestions import (
    ClauseSuggestion,
    apply_suggestions,
    build_suggestion_request,
    parse_suggestions,
)

__all__ = [
    "ALL_DOMAINS",
    "COMPLIANCE_STANDARDS",
    "ClauseSuggestion",
    "ComplianceStandard",
    "apply_suggestions",
    "build_suggestion_request",
    "parse_suggestions",
    "search_standards",
    "standard_domains",
]
