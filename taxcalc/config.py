from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic import ConfigDict, field_validator

ENV_BOOL_TRUE = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ENV_BOOL_TRUE


def _env_regions() -> list[str]:
    raw = os.getenv("TAXCALC_DEFAULT_REGIONS", "CA,BC")
    return [part for part in raw.split(",") if part.strip()]


class Settings(BaseModel):
    default_tax_year: int = Field(
        default_factory=lambda: int(os.getenv("TAXCALC_DEFAULT_YEAR", "2019")), validate_default=True
    )
    default_regions: list[str] = Field(default_factory=_env_regions, validate_default=True)
    log_sink_enabled: bool = Field(default_factory=lambda: _env_bool("TAXCALC_LOG_SINK", True))
    log_dir: str = Field(default_factory=lambda: os.getenv("TAXCALC_LOG_DIR", "logs"))
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))

    model_config = ConfigDict(frozen=True)

    @field_validator("default_regions")
    @classmethod
    def _normalize_regions(cls, value: list[str]) -> list[str]:
        regions = [code.strip().upper() for code in value if code.strip()]
        if not regions:
            raise ValueError("TAXCALC_DEFAULT_REGIONS must name at least one region")
        return regions

    @field_validator("default_tax_year")
    @classmethod
    def _validate_year(cls, value: int) -> int:
        if value < 1917:
            raise ValueError(f"TAXCALC_DEFAULT_YEAR predates federal income tax, got {value}")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
