from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field can be set with a ``REVDIFF_`` prefixed variable, e.g.
    ``REVDIFF_REPO_PATH=/srv/checkout``. Command-line flags take precedence
    over these values.
    """

    model_config = SettingsConfigDict(env_prefix="REVDIFF_")

    # Repository to inspect and directory the CSV report is written to
    REPO_PATH: str = "."
    OUTPUT_DIR: str = "."

    # "checkout" stats the working tree, "tree" reads the object store
    MODE: str = "checkout"

    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
