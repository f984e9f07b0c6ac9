"""
Paper Profiler service.

Works out what a paper IS before anything is known about the reader:
which methods it uses, which topics it covers, its quality and whether it
is empirical, theoretical, a review, quantitative or qualitative.

Steps:
    1. Match every method node's phrase lexicon against title + abstract.
    2. Match every topic node against the text (title counted twice) and,
       separately, against the paper's external concept tags.
    3. Merge the two topic channels and drop redundant hierarchy parents.
    4. Score quality from journal tier, citations and recency.
    5. Derive the meta-characteristic flags.

Everything here is a pure function of the paper record (plus ``now`` for the
recency rule); profiles are rebuilt on every scoring call.
"""

from datetime import datetime, timezone
from functools import lru_cache

from loguru import logger

from relevance_engine.models.analysis import DetectedMethod, DetectedTopic, PaperProfile
from relevance_engine.models.schemas import Concept, Confidence, Paper
from relevance_engine.services.text_matching import (
    CONFIDENCE_ORDER,
    ConfidenceThresholds,
    classify_confidence,
    contains_term,
    count_term_matches,
    normalize_text,
)
from relevance_engine.taxonomy.graph import METHOD_TAXONOMY, TOPIC_TAXONOMY

MAX_EVIDENCE = 3

METHOD_THRESHOLDS = ConfidenceThresholds(high_strong=2, medium_moderate=2, low_moderate=1, low_weak=1)
TOPIC_TEXT_THRESHOLDS = ConfidenceThresholds(high_strong=2, medium_moderate=3, low_moderate=2, low_weak=0)
# Concept tags: a lone strong match is corroborated by tag score > 0.5; a
# moderate-only match counts double when the tag score exceeds 0.6.
CONCEPT_THRESHOLDS = ConfidenceThresholds(high_strong=2, medium_moderate=2, low_moderate=1, low_weak=0)
CONCEPT_CORROBORATION_SCORE = 0.5
CONCEPT_MODERATE_BOOST_SCORE = 0.6

# Journal tier -> quality component
TIER_SCORES: dict[int, float] = {1: 1.0, 2: 0.8, 3: 0.6}
DEFAULT_TIER_SCORE = 0.35

# (minimum citations, score), checked top-down
CITATION_BANDS: tuple[tuple[int, float], ...] = (
    (100, 1.0),
    (50, 0.9),
    (20, 0.75),
    (10, 0.6),
    (5, 0.45),
    (1, 0.35),
)
UNCITED_SCORE = 0.25

RECENT_CITATION_LIMIT = 10
# (maximum age in months, citation score floor)
RECENCY_FLOORS: tuple[tuple[float, float], ...] = ((6, 0.5), (12, 0.4))
DAYS_PER_MONTH = 30
PARTIAL_DATE_FORMATS = ("%Y-%m", "%Y")

QUALITATIVE_METHOD_IDS = frozenset({
    "case_study", "ethnography", "interviews", "process_tracing",
    "comparative_historical", "content_analysis", "discourse_analysis", "qualitative",
})
REVIEW_METHOD_IDS = frozenset({"meta_analysis", "literature_review", "synthesis"})
THEORY_METHOD_IDS = frozenset({"game_theory", "theory"})


def _collect_evidence(strong: list[str], moderate: list[str]) -> tuple[str, ...]:
    if len(strong) >= 2:
        return tuple(strong[:MAX_EVIDENCE])
    return tuple((strong + moderate)[:MAX_EVIDENCE])


def _by_confidence(detection) -> int:
    return CONFIDENCE_ORDER[detection.confidence]


def detect_methods(title: str, abstract: str) -> list[DetectedMethod]:
    """
    Methods found in title + abstract, high confidence first.

    A detected parent is dropped whenever one of its children is detected,
    so "difference-in-differences" plus generic identification language
    reports only the specific design.
    """
    text = f"{title} {abstract}"
    detected: list[DetectedMethod] = []

    for method_id, node in METHOD_TAXONOMY.items():
        strong = count_term_matches(text, node.strong_signals)
        moderate = count_term_matches(text, node.moderate_signals)
        weak = count_term_matches(text, node.weak_signals)
        negative = count_term_matches(text, node.negative_signals)

        confidence = classify_confidence(
            strong.count,
            moderate.count,
            weak.count,
            negative.count,
            thresholds=METHOD_THRESHOLDS,
        )
        if confidence is None:
            continue
        detected.append(DetectedMethod(
            id=method_id,
            name=node.name,
            confidence=confidence,
            evidence=_collect_evidence(strong.matched, moderate.matched),
        ))

    detected_parents = {
        METHOD_TAXONOMY[method.id].parent
        for method in detected
        if METHOD_TAXONOMY[method.id].parent
    }
    methods = [m for m in detected if m.id not in detected_parents]
    methods.sort(key=_by_confidence)
    return methods


def _detect_topics_from_text(title: str, abstract: str) -> dict[str, tuple[Confidence, tuple[str, ...]]]:
    text = f"{title} {title} {abstract}"
    detections: dict[str, tuple[Confidence, tuple[str, ...]]] = {}

    for topic_id, node in TOPIC_TAXONOMY.items():
        strong = count_term_matches(text, node.strong_signals)
        moderate = count_term_matches(text, node.moderate_signals)

        contextual = sum(
            1
            for signal in node.contextual_signals
            if contains_term(text, signal.term)
            and any(contains_term(text, companion) for companion in signal.requires)
        )

        confidence = classify_confidence(
            strong.count,
            moderate.count,
            thresholds=TOPIC_TEXT_THRESHOLDS,
            corroboration=contextual,
        )
        if confidence is not None:
            detections[topic_id] = (confidence, _collect_evidence(strong.matched, moderate.matched))

    return detections


@lru_cache(maxsize=None)
def _normalized_topic_signals(topic_id: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    node = TOPIC_TAXONOMY[topic_id]
    strong = tuple(s for s in map(normalize_text, node.strong_signals) if s)
    moderate = tuple(s for s in map(normalize_text, node.moderate_signals) if s)
    return strong, moderate


def _tag_matches(tag: str, signals: tuple[str, ...]) -> bool:
    return any(signal in tag or tag in signal for signal in signals)


def _concept_confidence(matches_strong: bool, score: float) -> Confidence | None:
    if matches_strong:
        return classify_confidence(
            1, 0,
            thresholds=CONCEPT_THRESHOLDS,
            corroboration=int(score > CONCEPT_CORROBORATION_SCORE),
        )
    return classify_confidence(
        0, 1 + int(score > CONCEPT_MODERATE_BOOST_SCORE),
        thresholds=CONCEPT_THRESHOLDS,
    )


def _detect_topics_from_concepts(concepts: list[Concept]) -> dict[str, tuple[Confidence, float]]:
    """Per topic, the confidence given by the best-scoring matching tag."""
    detections: dict[str, tuple[Confidence, float]] = {}

    for concept in concepts:
        tag = normalize_text(concept.name)
        if not tag:
            continue
        for topic_id in TOPIC_TAXONOMY:
            strong_signals, moderate_signals = _normalized_topic_signals(topic_id)
            matches_strong = _tag_matches(tag, strong_signals)
            if not matches_strong and not _tag_matches(tag, moderate_signals):
                continue

            existing = detections.get(topic_id)
            if existing is not None and concept.score <= existing[1]:
                continue
            confidence = _concept_confidence(matches_strong, concept.score)
            if confidence is not None:
                detections[topic_id] = (confidence, concept.score)

    return detections


def _combine_topic_detections(
    text_detections: dict[str, tuple[Confidence, tuple[str, ...]]],
    concept_detections: dict[str, tuple[Confidence, float]],
) -> list[DetectedTopic]:
    combined: dict[str, DetectedTopic] = {}

    for topic_id, (confidence, evidence) in text_detections.items():
        combined[topic_id] = DetectedTopic(
            id=topic_id,
            name=TOPIC_TAXONOMY[topic_id].name,
            confidence=confidence,
            evidence=evidence,
            source="text",
        )

    for topic_id, (confidence, _score) in concept_detections.items():
        existing = combined.get(topic_id)
        if existing is None:
            combined[topic_id] = DetectedTopic(
                id=topic_id,
                name=TOPIC_TAXONOMY[topic_id].name,
                confidence=confidence,
                source="externalTags",
            )
            continue
        # Independent agreement of both channels upgrades to high.
        merged_confidence = existing.confidence
        if existing.confidence != "high" and confidence != "low":
            merged_confidence = "high"
        combined[topic_id] = existing.model_copy(
            update={"confidence": merged_confidence, "source": "both"}
        )

    topics = sorted(combined.values(), key=_by_confidence)

    high_ids = {t.id for t in topics if t.confidence == "high"}
    suppressed_parents = {
        TOPIC_TAXONOMY[topic_id].parent
        for topic_id in high_ids
        if TOPIC_TAXONOMY[topic_id].parent in high_ids
    }
    return [t for t in topics if t.id not in suppressed_parents]


def detect_topics(title: str, abstract: str, concepts: list[Concept] | None = None) -> list[DetectedTopic]:
    """Topics from the text and concept-tag channels, merged, high confidence first."""
    return _combine_topic_detections(
        _detect_topics_from_text(title, abstract),
        _detect_topics_from_concepts(concepts or []),
    )


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _parse_publication_date(value: str | None) -> datetime | None:
    """ISO date or datetime; a bare year or year-month means the first day of that period."""
    if not value:
        return None
    text = value.strip()
    try:
        return _as_utc(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass
    for fmt in PARTIAL_DATE_FORMATS:
        try:
            return _as_utc(datetime.strptime(text, fmt))
        except ValueError:
            continue
    logger.debug(f"Unparseable publication date {value!r}; recency rule skipped")
    return None


def _citation_score(cites: int) -> float:
    for minimum, score in CITATION_BANDS:
        if cites >= minimum:
            return score
    return UNCITED_SCORE


def calculate_quality_score(paper: Paper, now: datetime | None = None) -> float:
    """
    Quality in [0, 1]: ``0.6 * tier score + 0.4 * citation score``.

    Papers with fewer than 10 citations that are under six (twelve) months
    old get their citation score floored at 0.5 (0.4), since they have not
    had time to be cited.
    """
    tier_score = TIER_SCORES.get(paper.journal_tier, DEFAULT_TIER_SCORE)
    cites = paper.cited_by_count
    cite_score = _citation_score(cites)

    published = _parse_publication_date(paper.publication_date)
    if published is not None and cites < RECENT_CITATION_LIMIT:
        reference = _as_utc(now) if now is not None else datetime.now(timezone.utc)
        age_months = (reference - published).total_seconds() / 86400 / DAYS_PER_MONTH
        for max_age, floor in RECENCY_FLOORS:
            if age_months < max_age:
                cite_score = max(cite_score, floor)
                break

    return tier_score * 0.6 + cite_score * 0.4


def detect_meta_characteristics(text: str, methods: list[DetectedMethod]) -> dict[str, bool]:
    """The five paper-type flags, keyed by ``PaperProfile`` field name."""
    method_ids = {m.id for m in methods}

    is_review = bool(method_ids & REVIEW_METHOD_IDS) or (
        contains_term(text, "review")
        and (contains_term(text, "literature") or contains_term(text, "systematic"))
    )
    is_theoretical = (
        bool(method_ids & THEORY_METHOD_IDS)
        or contains_term(text, "theorem")
        or contains_term(text, "proposition")
        or (contains_term(text, "model") and contains_term(text, "prove"))
    )
    is_qualitative = bool(method_ids & QUALITATIVE_METHOD_IDS)
    is_quantitative = not is_qualitative and not is_theoretical and (
        "quantitative" in method_ids
        or contains_term(text, "regression")
        or contains_term(text, "estimate")
        or (contains_term(text, "data") and contains_term(text, "sample"))
    )
    evidentiary = (
        contains_term(text, "data")
        or contains_term(text, "evidence")
        or contains_term(text, "empirical")
    )
    is_empirical = (
        (is_quantitative or is_qualitative or evidentiary)
        and not is_review
        and not is_theoretical
    )

    return {
        "is_empirical": is_empirical,
        "is_theoretical": is_theoretical,
        "is_review": is_review,
        "is_quantitative": is_quantitative,
        "is_qualitative": is_qualitative,
    }


def analyze_paper(paper: Paper, now: datetime | None = None) -> PaperProfile:
    """Build the reader-independent profile of one paper."""
    title = paper.title
    abstract = paper.abstract

    methods = detect_methods(title, abstract)
    topics = detect_topics(title, abstract, paper.concepts)
    meta = detect_meta_characteristics(f"{title} {abstract}", methods)
    quality = calculate_quality_score(paper, now=now)

    logger.debug(
        f"Profiled paper {paper.id}: methods={[m.id for m in methods]} "
        f"topics={[t.id for t in topics]} quality={quality:.3f}"
    )
    return PaperProfile(
        methods=tuple(methods),
        topics=tuple(topics),
        quality_score=quality,
        **meta,
    )


# Display helpers


def get_method_tags(profile: PaperProfile) -> list[str]:
    """Names of high/medium confidence methods (at most 2)."""
    return [m.name for m in profile.methods if m.confidence in ("high", "medium")][:2]


def get_topic_tags(profile: PaperProfile) -> list[str]:
    """Names of high/medium confidence topics (at most 3)."""
    return [t.name for t in profile.topics if t.confidence in ("high", "medium")][:3]


def get_paper_type(profile: PaperProfile) -> str:
    """Short characterization of the kind of contribution."""
    if profile.is_review:
        return "Review/Synthesis"
    if profile.is_theoretical:
        return "Theoretical"
    if profile.is_qualitative:
        return "Qualitative"
    if profile.is_quantitative:
        return "Empirical"
    return "Research"
