"""Catalog of regulatory standards that ticket compliance clauses map onto."""

from __future__ import annotations

from dataclasses import asdict, dataclass

ALL_DOMAINS = "All"


@dataclass(frozen=True, slots=True)
class ComplianceStandard:
    domain: str
    standard: str
    code: str
    scope: str
    applicability: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


COMPLIANCE_STANDARDS: tuple[ComplianceStandard, ...] = (
    # ISO 41001 facility management
    ComplianceStandard(
        "Facility Management",
        "ISO 41001 (Clause 8.1)",
        "ISO 41001:2018",
        "Operational planning and control: criteria for FM processes and their control.",
        "Core FM delivery and service scheduling",
    ),
    ComplianceStandard(
        "Facility Management",
        "ISO 41001 (Clause 8.2)",
        "ISO 41001:2018",
        "Management of facility management processes and activities to ensure service quality.",
        "Helpdesk workflow and task execution",
    ),
    ComplianceStandard(
        "Facility Management",
        "ISO 41001",
        "ISO 41001:2018",
        "FM policy, leadership, planning, operation, performance evaluation, improvement",
        "Organization-wide FM system backbone",
    ),
    # ISO 9001 quality management
    ComplianceStandard(
        "Quality Management",
        "ISO 9001 (Clause 7.1.3)",
        "ISO 9001:2015",
        "Infrastructure: determine, provide and maintain the infrastructure needed to operate processes.",
        "General building and systems maintenance",
    ),
    ComplianceStandard(
        "Quality Management",
        "ISO 9001 (Clause 8.5.1)",
        "ISO 9001:2015",
        "Control of production and service provision under controlled conditions.",
        "Service level agreements and delivery quality",
    ),
    ComplianceStandard(
        "Quality Management",
        "ISO 9001",
        "ISO 9001:2015",
        "Quality management principles: customer focus, leadership, engagement, improvement.",
        "Customer satisfaction and audit compliance",
    ),
    # ISO 45001 health and safety
    ComplianceStandard(
        "Workplace Safety",
        "ISO 45001 (Clause 8.1.1)",
        "ISO 45001:2018",
        "General OH&S operational planning and control to eliminate hazards and reduce risks.",
        "Risk assessments and safe work practices",
    ),
    ComplianceStandard(
        "Workplace Safety",
        "ISO 45001",
        "ISO 45001:2018",
        "Occupational health and safety (OH&S) management system requirements.",
        "Worker safety and health protection protocols",
    ),
    # ISO 14001 environmental
    ComplianceStandard(
        "Environmental Management",
        "ISO 14001",
        "ISO 14001:2015",
        "Environmental management system: environmental performance and fulfilment of obligations.",
        "Waste management, energy efficiency, and spills",
    ),
    # Contact center
    ComplianceStandard(
        "Contact Center",
        "ISO 18295-1",
        "ISO 18295-1:2017",
        "Customer interaction standards, performance metrics, complaints handling, outsourced provider controls",
        "Contact center operations and SLAs",
    ),
    ComplianceStandard(
        "Contact Center",
        "ISO 10002",
        "ISO 10002:2018",
        "Complaints handling process, continual improvement",
        "Customer service and CCC support",
    ),
    # Information security
    ComplianceStandard(
        "Information Security",
        "ISO 27001",
        "ISO/IEC 27001:2022",
        "ISMS requirements, risk assessment, controls",
        "Data handling in CCC and IT facilities",
    ),
    # Statutory safety
    ComplianceStandard(
        "Workplace Safety",
        "OSHA General Duty Clause",
        "Section 5(a)(1)",
        "Maintain workplace free of recognized hazards",
        "All facilities",
    ),
    ComplianceStandard(
        "Workplace Safety",
        "OSHA General Industry",
        "29 CFR 1910",
        "Hazard assessment, PPE, emergency action, fire prevention, electrical safety",
        "Building operations",
    ),
    ComplianceStandard(
        "Telecom Safety",
        "OSHA Telecommunications",
        "29 CFR 1910.268",
        "Worker safety, telecom installations, cabling, practices",
        "Contact center telecom rooms, MDF/IDF",
    ),
    ComplianceStandard(
        "Malaysia Safety",
        "DOSH OSHA Act",
        "Act 514 (1994)",
        "Employer duties, safety committees, risk control, self-regulation",
        "Malaysia workplaces",
    ),
    # Fire and life safety
    ComplianceStandard("Fire Code", "NFPA 1", "NFPA 1 Fire Code", "General fire safety, occupancy, operations", "Building-wide compliance"),
    ComplianceStandard(
        "Life Safety",
        "NFPA 101",
        "NFPA 101 Life Safety Code",
        "Means of egress, occupancy features, emergency planning",
        "All building levels",
    ),
    ComplianceStandard(
        "Electrical Install",
        "NFPA 70",
        "NFPA 70 NEC",
        "Electrical installations, grounding, bonding, clearances",
        "Panels, feeders, building electrical",
    ),
    ComplianceStandard(
        "Electrical Maintenance",
        "NFPA 70B",
        "NFPA 70B:2023",
        "Mandatory inspection and maintenance programs",
        "Preventive/condition-based PMs",
    ),
    ComplianceStandard(
        "Fire Alarm",
        "NFPA 72",
        "NFPA 72",
        "Design, installation, testing, maintenance of fire alarm systems",
        "Alarm systems and documentation",
    ),
    ComplianceStandard("Sprinklers", "NFPA 13", "NFPA 13", "Sprinkler installation standards", "Water-based fire protection systems"),
    ComplianceStandard(
        "Sprinklers ITM",
        "NFPA 25",
        "NFPA 25",
        "Inspection, testing, maintenance of water-based systems",
        "Sprinklers, standpipes, fire pumps",
    ),
    ComplianceStandard(
        "HVAC Fire Protection",
        "NFPA 90A",
        "NFPA 90A",
        "Fire protection of HVAC systems, dampers, detectors",
        "HVAC and smoke control",
    ),
    ComplianceStandard(
        "Emergency Power",
        "NFPA 110",
        "NFPA 110",
        "Emergency/standby power systems, generator classification, testing",
        "Podium L2 & Basement B2 gensets",
    ),
    ComplianceStandard(
        "IT Equipment",
        "NFPA 75",
        "NFPA 75",
        "Protection of IT equipment rooms, fire detection/suppression",
        "Data floors, server rooms",
    ),
    ComplianceStandard(
        "Telecom Facilities",
        "NFPA 76",
        "NFPA 76:2024",
        "Fire protection of telecom facilities, cable routing, suppression",
        "Contact center telecom infrastructure",
    ),
    ComplianceStandard(
        "Electrical Safety",
        "NFPA 70E",
        "NFPA 70E",
        "Arc flash, electrical safety work practices",
        "Electrical maintenance staff",
    ),
)


def standard_domains(standards=COMPLIANCE_STANDARDS) -> list[str]:
    """Picker options: ``"All"`` followed by the sorted unique domains."""
    return [ALL_DOMAINS, *sorted({s.domain for s in standards})]


def search_standards(term: str = "", domain: str = ALL_DOMAINS, standards=COMPLIANCE_STANDARDS):
    """Standards whose name, code or scope contains ``term`` (case-insensitive)."""
    needle = (term or "").lower()
    return [
        s
        for s in standards
        if (needle in s.standard.lower() or needle in s.code.lower() or needle in s.scope.lower())
        and (domain == ALL_DOMAINS or s.domain == domain)
    ]
