import pytest

from liftload.services.workspace import PlannerWorkspace
from tests.unit.services.fakes import FakeCatalogRepo, FakeCycleRepo, FakeRoutineRepo


# ─────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────


@pytest.fixture
def catalog_repo(catalog) -> FakeCatalogRepo:
    return FakeCatalogRepo(catalog)


@pytest.fixture
def cycle_repo(make_cycle) -> FakeCycleRepo:
    return FakeCycleRepo([make_cycle("Micro Cycle 1", days=2)])


@pytest.fixture
def routine_repo() -> FakeRoutineRepo:
    return FakeRoutineRepo()


@pytest.fixture
def workspace(catalog_repo, cycle_repo, routine_repo) -> PlannerWorkspace:
    """A loaded workspace: 3-exercise catalog, one cycle of two squat days."""
    ws = PlannerWorkspace(catalog_repo, cycle_repo, routine_repo)
    ws.load()
    return ws
