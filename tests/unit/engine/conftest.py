from typing import Callable

import pytest

from liftload.engine import StressEngine


@pytest.fixture
def engine_for(catalog, make_day) -> Callable[..., StressEngine]:
    """
    Build a StressEngine over days given as lists of (name, sets) pairs.
    Example:
        engine = engine_for([("Squat", 3)], [], use_felt_sets=False)
    """

    def _make(*days: list[tuple[str, int]], **kwargs) -> StressEngine:
        built = [
            make_day(*entries, name=f"Day {i + 1}") for i, entries in enumerate(days)
        ]
        return StressEngine(catalog, built, **kwargs)

    return _make
