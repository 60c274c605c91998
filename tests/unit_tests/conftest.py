import pytest

from bezierscore.system import ScoringSystem


@pytest.fixture
def example_system():
    """Scoring system with 500 participants scored between 1000 and 100000."""
    return ScoringSystem(500, 1000.0, 100000.0, 0.5, 1.33)
