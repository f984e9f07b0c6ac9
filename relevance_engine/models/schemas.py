"""
Pydantic schemas for the Paper Relevance Engine.

This module contains the records exchanged with the outside world: the paper
records handed in by the metadata fetcher, the user profile built by the UI,
and the scored results handed back. Follows Pydantic V2 syntax.

Validators coerce missing or malformed optional values to conservative
defaults so the scoring pipeline never has to guard against them.
"""

import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Supporting Enums and Types
Confidence = Literal["high", "medium", "low"]
TopicSource = Literal["text", "externalTags", "both"]
MatchTier = Literal["core", "explore", "discovery"]
TopicMatchType = Literal["direct", "related", "adjacent", "none"]

DEFAULT_JOURNAL_TIER = 4


class Concept(BaseModel):
    """
    Externally supplied concept tag (e.g. an OpenAlex concept).

    Used as a second, independent topic-detection channel.
    """
    name: str = Field(..., description="Display name of the concept")
    score: float = Field(
        default=0.0,
        description="Tagger confidence for this concept, clamped to [0, 1]"
    )

    @field_validator("score", mode="before")
    @classmethod
    def clamp_score(cls, v):
        """Clamp concept scores to [0, 1]; unusable values become 0."""
        try:
            value = float(v)
        except (TypeError, ValueError):
            return 0.0
        if math.isnan(value):
            return 0.0
        return max(0.0, min(1.0, value))


class Paper(BaseModel):
    """
    Paper record as supplied by the metadata fetcher.

    Unknown keys are preserved so a scored paper echoes the full input record.
    """
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Stable paper identifier")
    title: str = Field(default="", description="Paper title")
    abstract: str = Field(default="", description="Abstract text (may be empty)")
    journal: str = Field(default="", description="Journal display name")
    journal_tier: int = Field(
        default=DEFAULT_JOURNAL_TIER,
        description="Journal tier: 1 = top general, 2 = top field, 3 = excellent, 4 = other"
    )
    journal_field: str | None = Field(
        default=None,
        description="Journal discipline (economics, polisci, psychology, sociology, management, ...)"
    )
    publication_date: str | None = Field(
        default=None,
        description="Publication date as an ISO date string"
    )
    cited_by_count: int = Field(default=0, description="Citation count (>= 0)")
    concepts: list[Concept] = Field(
        default_factory=list,
        description="External concept tags with confidence scores"
    )
    doi: str | None = Field(default=None, description="Digital Object Identifier")
    authors: list[str] = Field(default_factory=list, description="List of authors")

    @field_validator("id", mode="before")
    @classmethod
    def numeric_id_to_string(cls, v):
        """Numeric identifiers are accepted and kept as strings."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("title", "abstract", "journal", mode="before")
    @classmethod
    def none_to_empty_string(cls, v):
        return v if v is not None else ""

    @field_validator("concepts", "authors", mode="before")
    @classmethod
    def none_to_empty_list(cls, v):
        return v if v is not None else []

    @field_validator("journal_tier", mode="before")
    @classmethod
    def default_journal_tier(cls, v):
        """Missing or out-of-range tiers fall back to tier 4."""
        try:
            tier = int(v)
        except (TypeError, ValueError):
            return DEFAULT_JOURNAL_TIER
        return tier if 1 <= tier <= DEFAULT_JOURNAL_TIER else DEFAULT_JOURNAL_TIER

    @field_validator("cited_by_count", mode="before")
    @classmethod
    def non_negative_citations(cls, v):
        try:
            count = int(v)
        except (TypeError, ValueError):
            return 0
        return max(0, count)


class UserProfile(BaseModel):
    """
    Raw user selections from the onboarding form.

    ``interests`` and ``methods`` are ordered display names; they are mapped
    onto taxonomy ids by the profile expander.
    """
    model_config = ConfigDict(extra="allow")

    name: str = Field(default="", description="Display name of the user")
    academic_level: str = Field(default="", description="Career stage")
    primary_field: str = Field(default="", description="Primary research field")
    interests: list[str] = Field(
        default_factory=list,
        description="Selected research interests, in order of selection"
    )
    methods: list[str] = Field(
        default_factory=list,
        description="Preferred methodologies, in order of selection"
    )
    region: str = Field(default="", description="Regional focus (informational only)")
    experience_type: str | None = Field(
        default=None,
        description="Self-described reading style; 'generalist' or 'explorer' mark generalists"
    )
    exploration_level: float | None = Field(
        default=None,
        description="0.0 = narrow focus, 1.0 = broad discovery; None uses the configured default"
    )
    include_adjacent_fields: bool = Field(
        default=False,
        description="Whether the user opted in to papers from adjacent disciplines"
    )
    selected_adjacent_fields: list[str] = Field(
        default_factory=list,
        description="Adjacent journal fields the user explicitly selected"
    )

    @field_validator("name", "academic_level", "primary_field", "region", mode="before")
    @classmethod
    def none_to_empty_string(cls, v):
        return v if v is not None else ""

    @field_validator("interests", "methods", "selected_adjacent_fields", mode="before")
    @classmethod
    def none_to_empty_list(cls, v):
        return v if v is not None else []

    @field_validator("exploration_level", mode="before")
    @classmethod
    def clamp_exploration_level(cls, v):
        """NaN and unusable values become None; numbers are clamped to [0, 1]."""
        if v is None:
            return None
        try:
            value = float(v)
        except (TypeError, ValueError):
            return None
        if math.isnan(value):
            return None
        return max(0.0, min(1.0, value))


class ScoredPaper(Paper):
    """A paper record extended with its personalized relevance result."""
    relevance_score: float = Field(
        ...,
        ge=1.0,
        le=10.0,
        description="Final relevance score, one decimal"
    )
    matched_interests: list[str] = Field(
        default_factory=list,
        description="Interest-side topic names that matched"
    )
    matched_methods: list[str] = Field(
        default_factory=list,
        description="Method names that matched the user's preferences"
    )
    matched_topics: list[str] = Field(
        default_factory=list,
        description="The paper's own confidently detected topics"
    )
    match_explanation: str = Field(..., description="Short human-readable reason")
    is_adjacent_field: bool = Field(
        default=False,
        description="True when the paper comes from an adjacent discipline"
    )
    match_tier: MatchTier = Field(..., description="Coarse core/explore/discovery bucket")


class RecommendationBatch(BaseModel):
    """Result of scoring a paper collection for one user."""
    papers: list[ScoredPaper] = Field(
        default_factory=list,
        description="Scored papers, best first, capped at the configured maximum"
    )
    summary: str = Field(..., description="One-line summary of the batch")

    def to_response(self) -> dict[str, Any]:
        """Plain-JSON representation (extra paper keys included)."""
        return self.model_dump(mode="json")
