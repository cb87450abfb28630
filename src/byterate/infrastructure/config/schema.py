"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import AliasChoices, AliasPath, BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (logging/parser/display).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="byterate", description="Program name in messages.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="WARNING",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description="Log format (json/console). Derived from environment if unset.",
    )

    # Parser (YAML section: parser.*)
    strict_units: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "strict_units",
            AliasPath("parser", "strict_units"),
        ),
        description="Reject expressions without a unit instead of assuming bytes.",
    )

    # Output (YAML section: display.*)
    display_precision: int = Field(
        default=3,
        ge=0,
        le=12,
        validation_alias=AliasChoices(
            "display_precision",
            AliasPath("display", "precision"),
        ),
        description="Decimal places for rate values.",
    )
    display_value_width: int = Field(
        default=7,
        ge=1,
        validation_alias=AliasChoices(
            "display_value_width",
            AliasPath("display", "value_width"),
        ),
        description="Minimum right-aligned width of the value column.",
    )
    display_unit_width: int = Field(
        default=2,
        ge=1,
        validation_alias=AliasChoices(
            "display_unit_width",
            AliasPath("display", "unit_width"),
        ),
        description="Minimum right-aligned width of the unit column.",
    )

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    load.py creates EnvOverrides() to read BYTERATE_* variables, keeps the
    ones that are set and merges them over YAML/defaults before validating
    AppConfig.

    Supported env var examples (flat, explicit):
    - BYTERATE_LOG_LEVEL
    - BYTERATE_STRICT_UNITS
    - BYTERATE_DISPLAY_PRECISION
    """

    model_config = SettingsConfigDict(
        env_prefix="BYTERATE_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    strict_units: Optional[bool] = None

    display_precision: Optional[int] = None
    display_value_width: Optional[int] = None
    display_unit_width: Optional[int] = None

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
