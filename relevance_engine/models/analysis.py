"""
Internal analysis records.

These are produced and consumed inside the engine: what a paper is
(``PaperProfile``), what a user wants (``ExpandedUserProfile``), the weights
derived from the exploration level, and the full score breakdown.
All records are frozen; a scoring call builds fresh ones and never mutates them.
"""

from pydantic import BaseModel, ConfigDict, Field

from relevance_engine.models.schemas import Confidence, MatchTier, TopicMatchType, TopicSource


class DetectedMethod(BaseModel):
    """A method found in the paper text."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Method taxonomy id")
    name: str = Field(..., description="Display name")
    confidence: Confidence
    evidence: tuple[str, ...] = Field(
        default=(),
        description="Up to three matched phrases that led to the detection"
    )


class DetectedTopic(BaseModel):
    """A topic found in the paper text and/or its external concept tags."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Topic taxonomy id")
    name: str = Field(..., description="Display name")
    confidence: Confidence
    evidence: tuple[str, ...] = Field(default=(), description="Up to three matched phrases")
    source: TopicSource = Field(default="text", description="Which channel detected the topic")


class PaperProfile(BaseModel):
    """
    What a paper is, independent of any reader.

    A pure function of the paper record; computed fresh on every scoring call.
    """
    model_config = ConfigDict(frozen=True)

    methods: tuple[DetectedMethod, ...] = Field(default=())
    topics: tuple[DetectedTopic, ...] = Field(default=())
    is_empirical: bool = False
    is_theoretical: bool = False
    is_review: bool = False
    is_quantitative: bool = False
    is_qualitative: bool = False
    quality_score: float = Field(default=0.0, ge=0.0, le=1.0)


class ExpandedUserProfile(BaseModel):
    """
    A user's selections expanded over the knowledge graph.

    Topic sets are disjoint from the adjacent set: direct and expanded ids take
    priority. ``expanded_topic_ids`` holds related ids only (direct ids are
    kept in their own set).
    """
    model_config = ConfigDict(frozen=True)

    direct_topic_ids: frozenset[str] = Field(default=frozenset())
    expanded_topic_ids: frozenset[str] = Field(default=frozenset())
    adjacent_topic_ids: frozenset[str] = Field(default=frozenset())
    direct_method_ids: frozenset[str] = Field(default=frozenset())
    expanded_method_ids: frozenset[str] = Field(default=frozenset())
    is_generalist: bool = False
    has_interests: bool = False
    has_methods: bool = False
    exploration_level: float = Field(default=0.5, ge=0.0, le=1.0)
    primary_field: str = ""


class ScoringWeights(BaseModel):
    """Score caps and hop weights for one exploration level."""
    model_config = ConfigDict(frozen=True)

    topic_max: float
    method_max: float
    discovery_max: float
    field_affinity_max: float
    quality_baseline_max: float
    direct_hop_weight: float = Field(..., description="Credit multiplier for related topics")
    adjacent_hop_weight: float = Field(..., description="Credit multiplier for adjacent topics")


class TopicAffinity(BaseModel):
    """Alignment between the paper's topics and the user's interest sets."""
    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0.0, le=1.0)
    matched_topics: tuple[str, ...] = ()
    match_type: TopicMatchType = "none"


class MethodAffinity(BaseModel):
    """Alignment between the paper's methods and the user's method sets."""
    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0.0, le=1.0)
    matched_methods: tuple[str, ...] = ()
    paradigm_match: bool = False


class MatchScore(BaseModel):
    """
    Full scoring breakdown for one (user, paper) pair.

    ``topic_score``, ``method_score``, ``quality_score`` and
    ``discovery_score`` are normalized to [0, 1] before weighting;
    ``baseline_score`` and the ``*_bonus`` fields are the weighted point
    contributions that add up (before the field modifier) to the total.
    """
    model_config = ConfigDict(frozen=True)

    total: float = Field(..., ge=1.0, le=10.0)
    match_tier: MatchTier
    baseline_score: float
    topic_score: float
    method_score: float
    quality_score: float
    field_relevance_score: float
    discovery_score: float
    topic_bonus: float
    method_bonus: float
    discovery_bonus: float
    topic_match_type: TopicMatchType
    matched_interests: list[str] = Field(default_factory=list)
    matched_methods: list[str] = Field(default_factory=list)
    matched_topics: list[str] = Field(default_factory=list)
    explanation: str
    is_adjacent_field: bool = False
    weights: ScoringWeights
