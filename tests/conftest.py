import pytest

from party_core.config import SAMPLE_ROSTER_TEXT
from party_core.io import parse_roster_text, rows_to_players
from party_core.models import GenerationOptions
from party_core.testing_helpers import quick_players


@pytest.fixture
def eight_players():
    return quick_players(["A", "B", "S", "C", "B", "A", "B", "C"])


@pytest.fixture
def sample_players():
    return rows_to_players(parse_roster_text(SAMPLE_ROSTER_TEXT))


@pytest.fixture
def fast_options():
    return GenerationOptions(candidate_attempts=3, swap_iterations=60)
