class RepoError(Exception):
    """Base class for repository-level errors."""

    pass


# ------------------------- CATALOG -------------------------


class CatalogRepoError(RepoError):
    """Generic exercise catalog repository error."""

    pass


# ------------------------- CYCLES -------------------------


class CycleRepoError(RepoError):
    """Generic micro-cycle repository error."""

    pass


# ------------------------- ROUTINES -------------------------


class RoutineRepoError(RepoError):
    pass
