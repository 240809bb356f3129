from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WIRELANG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "WireLang"
    debug: bool = False
    log_level: str = "INFO"

    # Source generation (db -> dsl)
    module_import: str = "wirelang"
    export_name: str = "schematic"
    preserve_ids: bool = True

    # Circuit() builder
    auto_ground: bool = True

    # Document output
    json_indent: int = 2


@lru_cache()
def get_settings() -> Settings:
    return Settings()
