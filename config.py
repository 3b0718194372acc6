"""
config.py — Application configuration from environment variables.
All variables use the INTCALC_ prefix; the trace switch also honours the
legacy STEP_MODE variable.
"""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Stepwise (trace) output instead of a single result
    trace: bool = Field(
        default=False,
        validation_alias=AliasChoices("INTCALC_TRACE", "STEP_MODE"),
    )

    # Logging
    log_level: str = "WARNING"

    # App
    app_title: str = "IntCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="INTCALC_", env_file=".env", extra="ignore")
