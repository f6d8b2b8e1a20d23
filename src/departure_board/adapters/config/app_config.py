"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from departure_board.domain.errors import ConfigurationError

PROVIDERS = ("nationalrail", "hsl")
MAX_OFFSET_MINUTES = 120
MAX_WINDOW_MINUTES = 120


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles.

    Built once at startup and passed down. Settings are read from
    DEPARTURE_BOARD_* variables; command-line flags override them.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEPARTURE_BOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    provider: str = Field(
        default="nationalrail", description="Upstream provider: 'nationalrail' or 'hsl'"
    )

    # Credentials keep their provider-issued names, without the prefix
    darwin_token: str | None = Field(
        default=None,
        validation_alias="darwin_token",
        description="National Rail Darwin OpenLDBWS access token",
    )
    digitransit_subscription_key: str | None = Field(
        default=None,
        validation_alias="digitransit_subscription_key",
        description="Digitransit API subscription key for HSL",
    )

    # Query configuration
    timeout: int = Field(default=5, description="Timeout for each upstream request in seconds")
    rows: int = Field(default=10, description="Number of results to fetch per station")
    offset: int = Field(
        default=0, description="Minutes to offset the current time (-120 to 120)"
    )
    window: int = Field(default=0, description="Width of the query window in minutes (0 to 120)")
    limit: int | None = Field(
        default=None,
        description="Total number of departures to show (defaults to rows per station)",
    )
    max_concurrency: int = Field(
        default=4, description="Maximum number of stations queried at the same time"
    )

    # Output configuration
    json_output: bool = Field(default=False, description="Render JSON instead of a table")
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        """Validate provider is a known backend."""
        if v.lower() not in PROVIDERS:
            raise ValueError(f"provider must be one of {', '.join(PROVIDERS)}")
        return v.lower()

    @field_validator("offset")
    @classmethod
    def validate_offset(cls, v: int) -> int:
        if not -MAX_OFFSET_MINUTES <= v <= MAX_OFFSET_MINUTES:
            raise ValueError(
                f"offset must be between {-MAX_OFFSET_MINUTES} and {MAX_OFFSET_MINUTES}"
            )
        return v

    @field_validator("window")
    @classmethod
    def validate_window(cls, v: int) -> int:
        if not 0 <= v <= MAX_WINDOW_MINUTES:
            raise ValueError(f"window must be between 0 and {MAX_WINDOW_MINUTES}")
        return v

    @field_validator("timeout", "max_concurrency")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v.upper()

    def token_for_provider(self) -> str:
        """Return the credential for the configured provider.

        Raises:
            ConfigurationError: If the credential is not set.
        """
        if self.provider == "hsl":
            token, variable = self.digitransit_subscription_key, "DIGITRANSIT_SUBSCRIPTION_KEY"
        else:
            token, variable = self.darwin_token, "DARWIN_TOKEN"
        if not token:
            raise ConfigurationError(f"no token: set {variable}")
        return token
