"""Test configuration and fixtures for pytest."""

from datetime import datetime, timezone

import pytest

from relevance_engine.config import get_settings
from relevance_engine.models.schemas import Concept, Paper, UserProfile
from relevance_engine.taxonomy.profile_options import create_default_profile


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_now():
    """Reference time for the recency rule."""
    return datetime(2024, 6, 1, tzinfo=timezone.utc)


@pytest.fixture
def minimum_wage_paper():
    """Top-journal difference-in-differences paper on minimum wages."""
    return Paper(
        id="W2001",
        title="The Effect of Minimum Wage Increases on Employment: A Difference-in-Differences Approach",
        abstract=(
            "We exploit staggered state-level minimum wage increases to study employment "
            "effects in low-wage labor markets. Relying on the parallel trends assumption, "
            "we estimate two-way fixed effects models and find small negative employment "
            "effects for teenage workers."
        ),
        journal="American Economic Review",
        journal_tier=1,
        journal_field="economics",
        publication_date="2020-03-15",
        cited_by_count=80,
        concepts=[Concept(name="Minimum wage", score=0.9)],
        doi="10.1257/aer.2020.0001",
        authors=["Card, D.", "Krueger, A."],
    )


@pytest.fixture
def class_size_paper():
    """Field-journal regression discontinuity paper on education."""
    return Paper(
        id="W2002",
        title="Class Size and Student Achievement: Evidence from a Regression Discontinuity Design",
        abstract=(
            "Using a maximum class size rule, we compare students in schools just above and "
            "just below the enrollment cutoff. The regression discontinuity estimates show that "
            "smaller classes raise test scores and educational attainment."
        ),
        journal="Journal of Labor Economics",
        journal_tier=2,
        journal_field="economics",
        publication_date="2019-09-01",
        cited_by_count=35,
    )


@pytest.fixture
def interview_paper():
    """Adjacent-field qualitative paper."""
    return Paper(
        id="W2003",
        title="Street-Level Bureaucrats and Welfare Access",
        abstract=(
            "Drawing on semi-structured interviews and in-depth interview material with "
            "caseworkers, we trace how discretion shapes access to welfare benefits."
        ),
        journal="American Sociological Review",
        journal_tier=2,
        journal_field="sociology",
        publication_date="2021-01-10",
        cited_by_count=12,
    )


@pytest.fixture
def theory_paper():
    """Game-theoretic paper with no empirical content."""
    return Paper(
        id="W2004",
        title="Electoral Accountability with Strategic Voters",
        abstract=(
            "We develop a formal model of elections in which voters and politicians play a "
            "signaling game. We characterize the perfect Bayesian equilibrium and prove a "
            "theorem on when incumbents pander."
        ),
        journal="American Political Science Review",
        journal_tier=1,
        journal_field="polisci",
        publication_date="2018-05-01",
        cited_by_count=140,
    )


@pytest.fixture
def obscure_paper():
    """Low-tier, uncited paper with little recognizable content."""
    return Paper(
        id="W2005",
        title="Notes on an Archive",
        abstract="",
        journal="Regional Bulletin",
        journal_tier=4,
        publication_date="2015-01-01",
        cited_by_count=0,
    )


@pytest.fixture
def sample_papers(minimum_wage_paper, class_size_paper, interview_paper, theory_paper, obscure_paper):
    return [obscure_paper, interview_paper, minimum_wage_paper, theory_paper, class_size_paper]


@pytest.fixture
def causal_inference_profile():
    """Focused methodologist: one methodological interest, no listed methods."""
    return UserProfile(
        name="Test Researcher",
        academic_level="PhD Student",
        primary_field="Labor Economics",
        interests=["Causal Inference"],
        methods=[],
        exploration_level=0.0,
    )


@pytest.fixture
def labor_profile():
    """Topic-focused user with method preferences."""
    return UserProfile(
        name="Test Researcher",
        academic_level="Assistant Professor",
        primary_field="Labor Economics",
        interests=["Labor Markets"],
        methods=["Difference-in-Differences"],
        exploration_level=0.5,
    )


@pytest.fixture
def generalist_profile():
    return create_default_profile("Test Reader")
