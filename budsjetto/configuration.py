"""Mini README: Centralised configuration for Budsjetto.

Structure:
    * BudsjettoSettings - Pydantic settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values are read from ``BUDSJETTO_*`` environment variables or a local
    ``.env`` file. ``data_directory`` holds the JSON state file and, unless
    ``export_directory`` is set, the ``exports`` folder used for CSV files.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BudsjettoSettings(BaseSettings):
    """Runtime configuration for the Budsjetto tracker."""

    model_config = SettingsConfigDict(
        env_prefix="BUDSJETTO_",
        env_file=".env",
        case_sensitive=False,
    )

    log_level: str = Field("INFO", description="Root logging level name.")
    data_directory: Path = Field(
        Path("~/.budsjetto"),
        description="Directory holding the persisted budget document.",
    )
    data_file_name: str = Field(
        "budget_data.json",
        description="File name of the persisted budget document.",
    )
    export_directory: Optional[Path] = Field(
        None,
        description="Where CSV exports are written. Defaults to <data_directory>/exports.",
    )
    default_currency: str = Field(
        "NOK",
        description="Currency label used when no state file exists yet.",
    )
    trend_months: int = Field(
        6,
        description="Number of months shown by default in trend reports.",
        ge=1,
        le=120,
    )
    strict_load: bool = Field(
        False,
        description=(
            "Raise instead of resetting to an empty state when the data file"
            " cannot be read or parsed."
        ),
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the local web application.",
    )
    interface_port: int = Field(
        8000,
        description="Port the local web application listens on.",
        ge=1,
        le=65535,
    )

    @field_validator("data_directory", "export_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Optional[str | Path]) -> Optional[Path]:
        """Expand user directories so ``~`` works in environment variables."""

        if value is None or value == "":
            return None
        return Path(value).expanduser().resolve()

    @field_validator("default_currency")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def data_file(self) -> Path:
        """Full path of the persisted state document."""

        return self.data_directory / self.data_file_name

    @property
    def resolved_export_directory(self) -> Path:
        """Directory CSV exports are written to."""

        return self.export_directory or self.data_directory / "exports"


@lru_cache()
def get_settings() -> BudsjettoSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudsjettoSettings()
