# Run using uv run python -m scripts.seed

from liftload.repositories.catalog import DynamoCatalogRepository
from liftload.repositories.cycles import DynamoCycleRepository
from liftload.settings import settings
from liftload.utils.db import get_table
from liftload.utils.seed_data import build_default_catalog, build_default_cycles


def seed_catalog(table):
    exercises = build_default_catalog()
    DynamoCatalogRepository(table=table).save_catalog(exercises)
    print(f"Seeded {len(exercises)} exercises")


def seed_cycles(table):
    cycles = build_default_cycles()
    DynamoCycleRepository(table=table).save_cycles(cycles)
    for cycle in cycles:
        print(f"Seeded micro cycle {cycle.name} with {len(cycle.days)} days")


def clear_store(table):
    DynamoCatalogRepository(table=table).clear_all()
    print(f"Cleared stored collections for {settings.STORE_OWNER}")


def main():
    table = get_table()
    print(f"Seeding {settings.DDB_TABLE_NAME} for owner {settings.STORE_OWNER}")

    clear_store(table)

    seed_catalog(table)
    seed_cycles(table)


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print("Seeding failed:", e)
        raise
