"""
Batch orchestration: score a paper collection for one user.

Papers are scored independently (optionally on a thread pool), sorted best
first, capped, and summarized in one line.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

from loguru import logger

from relevance_engine.config import get_settings
from relevance_engine.models.schemas import Paper, RecommendationBatch, ScoredPaper, UserProfile
from relevance_engine.services.relevance_scorer import RelevanceScorer

EMPTY_SUMMARY = "No papers found."


def build_summary(profile: UserProfile, total: int, shown: int, core: int) -> str:
    prefix = "Analyzed" if profile.interests else "Showing quality research:"
    return f"{prefix} {total} papers · showing {shown} · {core} core matches"


def process_papers(
    profile: UserProfile,
    papers: list[Paper],
    max_results: int | None = None,
    max_workers: int = 1,
    now: datetime | None = None,
) -> RecommendationBatch:
    """Score ``papers`` for ``profile`` and return the best ones first.

    Args:
        profile: The user's raw selections.
        papers: Candidate papers (any order).
        max_results: Output cap; defaults to the configured ``max_results``.
        max_workers: Threads used for scoring; 1 scores sequentially.
        now: Reference time for the recency rule (defaults to the current time).

    Returns:
        RecommendationBatch with at most ``max_results`` scored papers.
    """
    if not papers:
        return RecommendationBatch(papers=[], summary=EMPTY_SUMMARY)

    settings = get_settings()
    limit = max_results if max_results is not None else settings.max_results
    scorer = RelevanceScorer(profile, now=now, default_exploration=settings.default_exploration_level)

    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            scored: list[ScoredPaper] = list(pool.map(scorer.to_scored_paper, papers))
    else:
        scored = [scorer.to_scored_paper(paper) for paper in papers]

    # Stable sort keeps input order among equal scores.
    scored.sort(key=lambda p: p.relevance_score, reverse=True)
    shown = scored[:max(0, limit)]
    core = sum(1 for p in shown if p.match_tier == "core")

    logger.info(
        f"Scored {len(papers)} papers: showing {len(shown)}, {core} core matches "
        f"(exploration={scorer.expanded_profile.exploration_level:.2f})"
    )
    return RecommendationBatch(
        papers=shown,
        summary=build_summary(profile, total=len(papers), shown=len(shown), core=core),
    )
