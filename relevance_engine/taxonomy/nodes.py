"""
Knowledge graph node types.

Nodes are frozen pydantic models: built once from the static lexicon tables
and shared read-only by every scoring call.
"""

from pydantic import BaseModel, ConfigDict, Field


class ContextualSignal(BaseModel):
    """An ambiguous term that only counts when a companion term co-occurs."""
    model_config = ConfigDict(frozen=True)

    term: str = Field(..., description="Ambiguous term, e.g. a bare 'network'")
    requires: tuple[str, ...] = Field(
        default=(),
        description="At least one of these must also appear in the text"
    )


class _SignalNode(BaseModel):
    """Fields shared by method and topic nodes."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable taxonomy id (snake_case)")
    name: str = Field(..., description="Human-readable display name")
    parent: str | None = Field(default=None, description="Hierarchy parent id")
    strong_signals: tuple[str, ...] = Field(
        default=(),
        description="Precise phrases; one occurrence is confident evidence"
    )
    moderate_signals: tuple[str, ...] = Field(
        default=(),
        description="Suggestive phrases that need corroboration"
    )
    weak_signals: tuple[str, ...] = Field(
        default=(),
        description="Phrases that only matter alongside stronger evidence"
    )


class MethodNode(_SignalNode):
    """
    A node in the methods graph.

    Edges: ``siblings`` (alternative designs), ``implies`` (methods this one
    entails) and ``implied_by`` (methods that entail this one).
    """
    siblings: tuple[str, ...] = Field(default=())
    implies: tuple[str, ...] = Field(default=())
    implied_by: tuple[str, ...] = Field(default=())
    negative_signals: tuple[str, ...] = Field(
        default=(),
        description="Phrases that demote or disqualify a detection"
    )


class TopicNode(_SignalNode):
    """
    A node in the topics graph.

    ``related`` topics belong to the same research conversation; ``adjacent``
    topics are one step removed and feed discovery.
    """
    related: tuple[str, ...] = Field(default=())
    adjacent: tuple[str, ...] = Field(default=())
    contextual_signals: tuple[ContextualSignal, ...] = Field(default=())
