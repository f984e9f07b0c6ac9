"""
Selectable profile options and generalist markers.

The option lists feed the onboarding form; every interest and method listed
here has an entry in ``taxonomy.mappings``.
"""

from relevance_engine.models.schemas import UserProfile

ACADEMIC_LEVELS = (
    "Curious Learner",
    "Undergraduate",
    "Masters Student",
    "PhD Student",
    "Postdoc",
    "Assistant Professor",
    "Associate Professor",
    "Full Professor",
    "Industry Researcher",
    "Policy Analyst",
    "Independent Researcher",
)

PRIMARY_FIELDS = (
    "General Interest (Show me everything)",
    "Interdisciplinary",
    "Microeconomics",
    "Macroeconomics",
    "Econometrics",
    "Labor Economics",
    "Public Economics",
    "International Economics",
    "Development Economics",
    "Financial Economics",
    "Industrial Organization",
    "Behavioral Economics",
    "Health Economics",
    "Environmental Economics",
    "Urban Economics",
    "Economic History",
    "Political Economy",
    "Comparative Politics",
    "International Relations",
    "American Politics",
    "Public Policy",
    "Political Methodology",
)

RESEARCH_INTERESTS = (
    "Causal Inference",
    "Machine Learning",
    "Field Experiments",
    "Natural Experiments",
    "Structural Estimation",
    "Mechanism Design",
    "Policy Evaluation",
    "Inequality",
    "Climate and Energy",
    "Education",
    "Housing",
    "Trade",
    "Monetary Policy",
    "Fiscal Policy",
    "Innovation",
    "Gender",
    "Crime and Justice",
    "Health",
    "Immigration",
    "Elections and Voting",
    "Conflict and Security",
    "Social Mobility",
    "Poverty and Welfare",
    "Labor Markets",
    "Taxation",
    "Development",
)

METHODOLOGIES = (
    "Difference-in-Differences",
    "Regression Discontinuity",
    "Instrumental Variables",
    "Randomized Experiments",
    "Structural Models",
    "Machine Learning Methods",
    "Panel Data",
    "Time Series",
    "Text Analysis",
    "Synthetic Control",
    "Bunching Estimation",
    "Event Studies",
)

REGIONS = (
    "Global / No Preference",
    "United States",
    "Europe",
    "United Kingdom",
    "China",
    "India",
    "Latin America",
    "Africa",
    "Middle East",
    "Southeast Asia",
)

GENERALIST_FIELDS = frozenset({"General Interest (Show me everything)", "Interdisciplinary"})
GENERALIST_LEVELS = frozenset({"Curious Learner"})
GENERALIST_EXPERIENCE = frozenset({"generalist", "explorer"})


def is_generalist_field(field: str) -> bool:
    return field in GENERALIST_FIELDS


def is_generalist_level(level: str) -> bool:
    return level in GENERALIST_LEVELS


def get_profile_options() -> dict[str, list[str]]:
    """Option lists for the onboarding form, keyed by profile attribute."""
    return {
        "academic_levels": list(ACADEMIC_LEVELS),
        "primary_fields": list(PRIMARY_FIELDS),
        "interests": list(RESEARCH_INTERESTS),
        "methods": list(METHODOLOGIES),
        "regions": list(REGIONS),
    }


def create_default_profile(name: str) -> UserProfile:
    """An explorer profile with no selections: quality-ranked, broad results."""
    return UserProfile(
        name=name,
        academic_level="Curious Learner",
        primary_field="General Interest (Show me everything)",
        interests=[],
        methods=[],
        region="Global / No Preference",
        experience_type="explorer",
        include_adjacent_fields=False,
        selected_adjacent_fields=[],
    )
