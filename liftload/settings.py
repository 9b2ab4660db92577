from dotenv import find_dotenv, load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(find_dotenv(), override=False)


class Settings(BaseSettings):
    PROJECT_NAME: str = "liftload"
    REGION: str = "eu-west-2"
    ENV: str = "dev"
    LOG_LEVEL: str = "DEBUG"
    model_config = SettingsConfigDict(env_file=None)

    # ──────────────────── Storage ─────────────────────

    DDB_TABLE_NAME: str = "liftload-dev-table"
    # e.g. http://localhost:8000 for DynamoDB Local
    DDB_ENDPOINT_URL: str | None = None
    STORE_OWNER: str = "local"

    # ──────────────────── Engine ─────────────────────

    STRESS_FLOOR: float = 0.01
    MIN_TIMELINE_CYCLE_LENGTH: int = 7
    MAX_TIMELINE_CYCLES: int = 52
    USE_FELT_SETS_DEFAULT: bool = True

    # ──────────────────── Messages ─────────────────────

    MESSAGE_TTL_SECONDS: int = 4

    # ─────────────────────────────────────────

    @property
    def is_local_store(self) -> bool:
        return self.DDB_ENDPOINT_URL is not None


settings = Settings()
