from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from plankflow.workouts.levels import validate_time_scale


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="PLANKFLOW_LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="PLANKFLOW_LOG_FILE",
        description="Optional rotating log file path",
    )
    default_level: int = Field(
        default=2,  # Intermediate
        validation_alias="PLANKFLOW_DEFAULT_LEVEL",
        description="Difficulty level preselected on the config screen (0-4)",
    )
    time_scale: float = Field(
        default=1.0,
        validation_alias="PLANKFLOW_TIME_SCALE",
        description="Multiplier applied to every configured duration (e.g. 0.1 for quick dry runs)",
    )
    countdown_seconds: int = Field(
        default=10,
        validation_alias="PLANKFLOW_COUNTDOWN_SECONDS",
        description="Get-into-position countdown before the first exercise",
    )
    tick_interval_seconds: float = Field(
        default=1.0,
        validation_alias="PLANKFLOW_TICK_INTERVAL_SECONDS",
        description="Wall-clock seconds between clock ticks",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid PLANKFLOW_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("default_level")
    @classmethod
    def validate_default_level(cls, value: int) -> int:
        """Clamp the preselected level into the supported 0-4 range."""
        if not 0 <= value <= 4:
            logger.warning(f"PLANKFLOW_DEFAULT_LEVEL must be between 0 and 4, got {value}. Defaulting to 2.")
            return 2
        return value

    @field_validator("time_scale")
    @classmethod
    def check_time_scale(cls, value: float) -> float:
        """Every level must keep enough ticks per exercise to switch sides."""
        return validate_time_scale(value)

    @field_validator("tick_interval_seconds")
    @classmethod
    def validate_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"must be greater than zero, got {value}")
        return value

    @field_validator("countdown_seconds")
    @classmethod
    def validate_countdown(cls, value: int) -> int:
        if value < 0:
            raise ValueError(f"must not be negative, got {value}")
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
