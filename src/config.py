"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class KinshipSettings(BaseSettings):
    """Kinship engine defaults."""

    model_config = SettingsConfigDict(env_prefix="KINSHIP_")

    preferred_root_id: int = 1
    lineage_root_ids: list[int] = [1, 2]
    pair_couples: bool = False
    lineage_only: bool = False
    no_data_name: str = "No Family Data"


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    kinship: KinshipSettings = KinshipSettings()
    logging: LoggingSettings = LoggingSettings()


settings = Settings()
