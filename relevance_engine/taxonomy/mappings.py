"""
Name -> taxonomy id lookups for user selections.

Interest names may point at topic ids or method ids (methodological
interests such as "Causal Inference"). Unknown names map to nothing.
"""

from types import MappingProxyType

_INTEREST_TO_TAXONOMY: dict[str, tuple[str, ...]] = {
    # Methods as interests
    "Causal Inference": ("causal_inference",),
    "Machine Learning / AI": ("machine_learning", "causal_ml", "automation"),
    "Experimental Methods": ("rct", "field_experiment", "survey_experiment"),
    "Formal Theory / Game Theory": ("game_theory", "theory", "market_design"),
    # Economics topics
    "Inequality": ("inequality", "top_incomes", "mobility"),
    "Education": ("education", "schools", "higher_ed", "teachers", "child_development"),
    "Housing": ("housing", "urban", "segregation"),
    "Health": ("health", "healthcare", "mortality"),
    "Labor Markets": ("labor", "wages", "employment", "monopsony", "unions"),
    "Poverty and Welfare": ("poverty", "welfare_programs"),
    "Taxation": ("taxation", "public_economics"),
    "Trade and Globalization": ("trade", "globalization"),
    "Monetary Policy": ("monetary_policy", "inflation", "finance"),
    "Fiscal Policy": ("fiscal_policy", "public_economics"),
    "Innovation and Technology": ("innovation", "entrepreneurship", "automation"),
    "Development": ("development", "aid", "microfinance", "agriculture", "colonial_legacy"),
    "Climate and Energy": ("environment", "climate_change", "energy", "natural_disasters"),
    "Agriculture and Food": ("agriculture", "development", "land"),
    "Finance and Banking": ("finance", "monetary_policy"),
    "Entrepreneurship": ("entrepreneurship", "innovation"),
    "Economic Growth": ("growth", "productivity"),
    # Political topics
    "Elections and Voting": ("elections",),
    "Democracy and Democratization": ("democracy", "authoritarianism"),
    "Conflict and Security": ("conflict",),
    "International Cooperation": ("international_relations",),
    "Political Institutions": ("institutions", "state_capacity"),
    "Public Opinion": ("public_opinion", "polarization"),
    "Political Behavior": ("elections", "public_opinion", "polarization"),
    "Accountability and Transparency": ("accountability",),
    "Corruption": ("corruption",),
    "Rule of Law": ("institutions", "crime"),
    "State Capacity": ("state_capacity", "institutions", "development"),
    "Authoritarianism": ("authoritarianism", "democracy"),
    "Political Polarization": ("polarization", "public_opinion", "media"),
    # Social topics
    "Gender": ("gender", "family", "discrimination"),
    "Race and Ethnicity": ("race", "segregation", "discrimination"),
    "Immigration": ("immigration",),
    "Crime and Justice": ("crime", "policing", "incarceration"),
    "Social Mobility": ("mobility", "inequality"),
    "Social Networks": ("social_networks", "peer_effects"),
    "Media and Information": ("media", "social_media"),
    "Social Media and Digital Platforms": ("social_media",),
    "Misinformation and Fake News": ("misinformation",),
    "Trust and Social Capital": ("social_capital",),
    "Norms and Culture": ("norms", "colonial_legacy"),
    "Religion": ("religion",),
    "Economic History": ("economic_history", "colonial_legacy"),
    # Organizational / Behavioral
    "Organizations and Firms": ("organizations", "corporate_governance"),
    "Corporate Governance": ("corporate_governance",),
    "Leadership": ("organizations",),
    "Decision Making": ("decision_making", "behavioral"),
    "Behavioral Biases": ("biases", "behavioral"),
    "Nudges and Choice Architecture": ("nudges", "behavioral"),
    "Risk and Uncertainty": ("risk",),
    "Prosocial Behavior": ("social_capital",),
    # Aliases used by the profile options
    "Machine Learning": ("machine_learning", "causal_ml"),
    "Field Experiments": ("field_experiment", "rct"),
    "Natural Experiments": ("diff_in_diff", "regression_discontinuity", "instrumental_variables"),
    "Structural Estimation": ("structural_estimation", "discrete_choice"),
    "Mechanism Design": ("game_theory", "market_design"),
    "Policy Evaluation": ("causal_inference", "public_economics"),
    "Trade": ("trade", "globalization"),
    "Innovation": ("innovation", "entrepreneurship"),
}

_METHOD_TO_TAXONOMY: dict[str, tuple[str, ...]] = {
    # Quantitative
    "Difference-in-Differences": ("diff_in_diff", "causal_inference"),
    "Regression Discontinuity": ("regression_discontinuity", "causal_inference"),
    "Instrumental Variables": ("instrumental_variables", "causal_inference"),
    "Randomized Experiments (RCTs)": ("rct", "field_experiment", "causal_inference"),
    "Synthetic Control": ("synthetic_control", "causal_inference"),
    "Bunching Estimation": ("bunching", "causal_inference"),
    "Event Studies": ("event_studies", "diff_in_diff", "causal_inference"),
    "Structural Models": ("structural_estimation", "discrete_choice"),
    "Game Theoretic Models": ("game_theory", "theory"),
    "Mechanism Design": ("game_theory", "market_design"),
    "Machine Learning Methods": ("machine_learning", "causal_ml"),
    "Panel Data Methods": ("panel_data",),
    "Time Series Analysis": ("time_series",),
    "Bayesian Methods": ("bayesian",),
    "Network Analysis": ("network_analysis",),
    "Text Analysis / NLP": ("text_analysis",),
    "Spatial Analysis / GIS": ("spatial",),
    "Survey Experiments": ("survey_experiment", "rct"),
    # Qualitative
    "Case Studies": ("case_study", "qualitative"),
    "Comparative Historical Analysis": ("comparative_historical", "qualitative"),
    "Process Tracing": ("process_tracing", "qualitative"),
    "Interviews": ("interviews", "qualitative"),
    "Ethnography": ("ethnography", "qualitative"),
    "Focus Groups": ("interviews", "qualitative"),
    "Content Analysis": ("content_analysis", "qualitative"),
    "Discourse Analysis": ("discourse_analysis", "qualitative"),
    "Archival Research": ("comparative_historical", "qualitative"),
    "Participant Observation": ("ethnography", "qualitative"),
    # Mixed
    "Meta-Analysis": ("meta_analysis", "synthesis"),
    "Systematic Review": ("meta_analysis", "literature_review", "synthesis"),
    "Mixed Methods Design": ("qualitative", "quantitative"),
    "Multi-Method Research": ("qualitative", "quantitative"),
    "Replication Studies": ("quantitative",),
    "Literature Review / Survey": ("literature_review", "synthesis"),
    # Aliases used by the profile options
    "Randomized Experiments": ("rct", "field_experiment", "causal_inference"),
    "Panel Data": ("panel_data",),
    "Time Series": ("time_series",),
    "Text Analysis": ("text_analysis",),
}

INTEREST_TO_TAXONOMY = MappingProxyType(_INTEREST_TO_TAXONOMY)
METHOD_TO_TAXONOMY = MappingProxyType(_METHOD_TO_TAXONOMY)


def lookup_interest(name: str) -> tuple[str, ...]:
    """Taxonomy ids for an interest name; empty for unknown names."""
    return INTEREST_TO_TAXONOMY.get(name.strip(), ()) if name else ()


def lookup_method(name: str) -> tuple[str, ...]:
    """Taxonomy ids for a method name; empty for unknown names."""
    return METHOD_TO_TAXONOMY.get(name.strip(), ()) if name else ()
