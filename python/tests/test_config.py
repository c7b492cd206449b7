"""Search configuration."""

from __future__ import annotations

import pytest

from toadsfrogs.config import DEFAULT_STEP_LIMIT, MAX_SIZE, SearchConfig, SearchMode


def test_defaults_are_astar() -> None:
    config = SearchConfig()
    assert config.use_heuristic and config.deduplicate
    assert config.step_limit == DEFAULT_STEP_LIMIT == 2_000_000
    assert config.max_size == MAX_SIZE == 15
    assert config.mode is SearchMode.ASTAR
    assert config.solution_output and not config.trace


def test_for_mode() -> None:
    bnb = SearchConfig.for_mode(SearchMode.BNB)
    assert not bnb.use_heuristic and not bnb.deduplicate
    assert bnb.mode.label == "B&B"

    astar = SearchConfig.for_mode("astar", step_limit=10)
    assert astar.use_heuristic and astar.deduplicate
    assert astar.step_limit == 10
    assert astar.mode.label == "A*"


def test_with_mode_keeps_other_options() -> None:
    config = SearchConfig(step_limit=5, trace=True).with_mode(SearchMode.BNB)
    assert config.step_limit == 5 and config.trace
    assert config.mode is SearchMode.BNB


@pytest.mark.parametrize(
    "kwargs", [{"step_limit": -1}, {"max_size": 0}, {"max_size": 16}]
)
def test_rejects_bad_values(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        SearchConfig(**kwargs)
