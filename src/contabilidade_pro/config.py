"""Runtime settings read from the environment."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from contabilidade_pro.core.models.enums import Anexo

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    """CLI defaults. Calculators take no configuration."""

    log_level: str = Field(default_factory=lambda: os.getenv("CONTABIL_LOG_LEVEL", "WARNING"))
    default_annex: Anexo = Field(
        default_factory=lambda: os.getenv("CONTABIL_DEFAULT_ANEXO", Anexo.I.value).strip().upper()
    )
    report_dir: Path = Field(default_factory=lambda: Path(os.getenv("CONTABIL_REPORT_DIR", ".")))

    model_config = {"frozen": True, "validate_default": True}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level deve ser um de {sorted(LOG_LEVELS)}, recebido {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Settings built once per process."""
    return Settings()
