"""
Field-level lookups: discipline affinity, adjacent journal fields, and the
mapping from a paper to the discipline used for affinity.
"""

from types import MappingProxyType

# Pairwise affinity between primary fields, in [0, 1]. Lookups are
# symmetric: a missing A->B entry falls back to B->A.
FIELD_AFFINITY: dict[str, dict[str, float]] = {
    "Development Economics": {
        "Labor Economics": 0.7, "Public Economics": 0.7, "Health Economics": 0.65,
        "Microeconomics": 0.5, "International Economics": 0.6, "Environmental Economics": 0.55,
        "Agricultural Economics": 0.7, "Urban Economics": 0.5, "Behavioral Economics": 0.45,
        "Economic History": 0.5, "Political Economy": 0.75, "Comparative Politics": 0.6,
        "Public Policy": 0.65, "Demography": 0.55, "Sociology": 0.45,
    },
    "Labor Economics": {
        "Public Economics": 0.7, "Development Economics": 0.7, "Health Economics": 0.6,
        "Microeconomics": 0.6, "Behavioral Economics": 0.55, "Urban Economics": 0.6,
        "Industrial Organization": 0.5, "Economic History": 0.45, "Demography": 0.6,
        "Sociology": 0.5, "Public Policy": 0.6, "Law and Economics": 0.45,
        "Management / Organization Studies": 0.5, "Econometrics": 0.4,
    },
    "Public Economics": {
        "Labor Economics": 0.7, "Development Economics": 0.7, "Health Economics": 0.65,
        "Microeconomics": 0.6, "Macroeconomics": 0.55, "Urban Economics": 0.55,
        "Environmental Economics": 0.55, "Political Economy": 0.7, "Public Policy": 0.75,
        "Law and Economics": 0.6, "Public Administration": 0.6, "Behavioral Economics": 0.5,
    },
    "Macroeconomics": {
        "Financial Economics": 0.65, "International Economics": 0.7, "Public Economics": 0.55,
        "Econometrics": 0.55, "Economic History": 0.55, "Development Economics": 0.45,
        "Labor Economics": 0.4, "Political Economy": 0.5,
    },
    "Microeconomics": {
        "Industrial Organization": 0.75, "Behavioral Economics": 0.7, "Labor Economics": 0.6,
        "Public Economics": 0.6, "Health Economics": 0.55, "Econometrics": 0.5,
        "Law and Economics": 0.6, "Management / Organization Studies": 0.5,
    },
    "Financial Economics": {
        "Macroeconomics": 0.65, "Industrial Organization": 0.5, "Econometrics": 0.5,
        "International Economics": 0.5, "Behavioral Economics": 0.5, "Law and Economics": 0.55,
        "Management / Organization Studies": 0.55,
    },
    "Econometrics": {
        "Microeconomics": 0.5, "Macroeconomics": 0.55, "Labor Economics": 0.4,
        "Financial Economics": 0.5, "Political Methodology": 0.65,
    },
    "International Economics": {
        "Macroeconomics": 0.7, "Development Economics": 0.6, "Financial Economics": 0.5,
        "Political Economy": 0.6, "International Relations": 0.65, "Economic History": 0.45,
    },
    "Industrial Organization": {
        "Microeconomics": 0.75, "Law and Economics": 0.65, "Financial Economics": 0.5,
        "Management / Organization Studies": 0.6, "Labor Economics": 0.5, "Public Economics": 0.5,
        "Behavioral Economics": 0.5,
    },
    "Behavioral Economics": {
        "Microeconomics": 0.7, "Psychology (Behavioral/Social)": 0.75, "Health Economics": 0.5,
        "Public Economics": 0.5, "Labor Economics": 0.55, "Industrial Organization": 0.5,
        "Development Economics": 0.45, "Management / Organization Studies": 0.55,
    },
    "Health Economics": {
        "Public Economics": 0.65, "Labor Economics": 0.6, "Development Economics": 0.65,
        "Behavioral Economics": 0.5, "Microeconomics": 0.55, "Demography": 0.6,
        "Public Policy": 0.6, "Psychology (Behavioral/Social)": 0.45,
    },
    "Environmental Economics": {
        "Public Economics": 0.55, "Development Economics": 0.55, "International Economics": 0.4,
        "Agricultural Economics": 0.6, "Urban Economics": 0.5, "Political Economy": 0.45,
        "Public Policy": 0.55,
    },
    "Urban Economics": {
        "Labor Economics": 0.6, "Public Economics": 0.55, "Environmental Economics": 0.5,
        "Development Economics": 0.5, "Sociology": 0.5, "Demography": 0.55,
    },
    "Economic History": {
        "Macroeconomics": 0.55, "Development Economics": 0.5, "Political Economy": 0.6,
        "International Economics": 0.45, "Labor Economics": 0.45, "Comparative Politics": 0.5,
    },
    "Agricultural Economics": {
        "Development Economics": 0.7, "Environmental Economics": 0.6, "Health Economics": 0.4,
        "International Economics": 0.4,
    },
    "Political Economy": {
        "Public Economics": 0.7, "Development Economics": 0.75, "Comparative Politics": 0.75,
        "International Relations": 0.5, "Public Policy": 0.7, "Economic History": 0.6,
        "Labor Economics": 0.5, "Macroeconomics": 0.5, "Sociology": 0.5,
        "Public Administration": 0.55,
    },
    "Comparative Politics": {
        "Political Economy": 0.75, "International Relations": 0.55, "Public Policy": 0.6,
        "Development Economics": 0.6, "Sociology": 0.55, "Economic History": 0.5,
        "Security Studies": 0.45, "Public Administration": 0.55,
    },
    "International Relations": {
        "Political Economy": 0.5, "Comparative Politics": 0.55, "Security Studies": 0.7,
        "International Economics": 0.65, "Public Policy": 0.45, "Economic History": 0.4,
    },
    "American Politics": {
        "Public Policy": 0.65, "Political Economy": 0.5, "Comparative Politics": 0.45,
        "Public Administration": 0.55, "Sociology": 0.45, "Law and Economics": 0.5,
    },
    "Public Policy": {
        "Public Economics": 0.75, "Political Economy": 0.7, "Public Administration": 0.7,
        "Health Economics": 0.6, "Labor Economics": 0.6, "Development Economics": 0.65,
        "American Politics": 0.65, "Comparative Politics": 0.6, "Sociology": 0.5,
    },
    "Security Studies": {
        "International Relations": 0.7, "Comparative Politics": 0.45, "Political Economy": 0.35,
    },
    "Political Methodology": {
        "Econometrics": 0.65, "Political Economy": 0.4, "Comparative Politics": 0.4,
    },
}

DEFAULT_FIELD_AFFINITY = 0.2

# Journal fields scored with the adjacent-field modifier.
CORE_JOURNAL_FIELDS = frozenset({"economics", "polisci"})
ADJACENT_FIELDS = frozenset({
    "psychology", "sociology", "management", "demography", "public_health", "law",
})

# Discipline assumed for a paper whose text yields no topic.
JOURNAL_FIELD_DISCIPLINE = MappingProxyType({
    "economics": "Microeconomics",
    "polisci": "Comparative Politics",
    "psychology": "Psychology (Behavioral/Social)",
    "sociology": "Sociology",
    "management": "Management / Organization Studies",
    "demography": "Demography",
    "public_health": "Health Economics",
    "law": "Law and Economics",
})

# Topic id -> owning discipline.
_FIELD_TOPICS: dict[str, tuple[str, ...]] = {
    "Public Economics": (
        "inequality", "poverty", "welfare_programs", "redistribution", "top_incomes",
        "taxation", "public_economics", "regulation",
    ),
    "Labor Economics": (
        "mobility", "labor", "wages", "minimum_wage", "employment", "human_capital",
        "monopsony", "unions", "automation", "education", "schools", "higher_ed",
        "teachers", "achievement_gap", "child_development", "gender", "family",
        "immigration", "race", "discrimination", "aging",
    ),
    "Health Economics": ("health", "healthcare", "mortality"),
    "Urban Economics": ("housing", "urban", "segregation"),
    "Financial Economics": ("finance",),
    "Macroeconomics": (
        "monetary_policy", "inflation", "fiscal_policy", "business_cycles", "growth",
        "productivity",
    ),
    "International Economics": ("trade", "globalization"),
    "Development Economics": (
        "development", "aid", "microfinance", "colonial_legacy",
    ),
    "Agricultural Economics": ("agriculture", "land"),
    "Environmental Economics": (
        "environment", "climate_change", "energy", "natural_disasters",
    ),
    "Industrial Organization": (
        "innovation", "entrepreneurship", "organizations", "corporate_governance",
        "industrial_organization", "market_design",
    ),
    "Law and Economics": ("crime", "policing", "incarceration"),
    "Comparative Politics": (
        "democracy", "authoritarianism", "conflict", "accountability", "corruption",
        "institutions", "state_capacity",
    ),
    "American Politics": ("elections", "polarization", "public_opinion"),
    "International Relations": ("international_relations",),
    "Political Economy": ("political_economy", "media", "social_media", "misinformation"),
    "Sociology": ("social_networks", "peer_effects", "social_capital", "norms", "religion"),
    "Behavioral Economics": ("behavioral", "biases", "nudges", "decision_making", "risk"),
    "Economic History": ("economic_history",),
}

TOPIC_FIELD = MappingProxyType({
    topic_id: field for field, topic_ids in _FIELD_TOPICS.items() for topic_id in topic_ids
})


def get_field_affinity(field_a: str, field_b: str) -> float:
    """Affinity between two primary fields (1.0 when identical, 0.2 when unknown)."""
    if field_a == field_b:
        return 1.0
    forward = FIELD_AFFINITY.get(field_a, {})
    if field_b in forward:
        return forward[field_b]
    reverse = FIELD_AFFINITY.get(field_b, {})
    if field_a in reverse:
        return reverse[field_a]
    return DEFAULT_FIELD_AFFINITY


def is_adjacent_field(journal_field: str | None) -> bool:
    """True for journal fields outside the core economics/political science set."""
    return bool(journal_field) and journal_field.lower() in ADJACENT_FIELDS


def map_paper_field(journal_field: str | None, topic_ids: list[str]) -> str | None:
    """
    Discipline a paper belongs to for field-affinity purposes.

    ``topic_ids`` must be ordered by confidence; the first one with a known
    discipline wins. Otherwise the journal field's default discipline is used.
    """
    for topic_id in topic_ids:
        field = TOPIC_FIELD.get(topic_id)
        if field:
            return field
    if journal_field:
        return JOURNAL_FIELD_DISCIPLINE.get(journal_field.lower())
    return None
