"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Optional integrations (Redis, n8n, Gemini) default to None; their presence
  is turned into capability flags once at startup (see Capabilities)

Usage:
    from exitplans.core.config import settings

    if settings.redis_url:
        ...

    # Derived webhook URLs
    url = settings.n8n_coach_nudge_url
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from exitplans.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    app_name: str = Field(
        default="ExitPlans API",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Public base URL of this API (used for callback URLs and error types)",
    )

    # Shared store (Redis)
    redis_url: str | None = Field(
        default=None,
        description="Redis connection URL (e.g., redis://host:port/db). "
        "When unset, rate limiting degrades open and jobs are kept in memory.",
    )
    rate_limit_enabled: bool = Field(
        default=True,
        description="Master switch for admission control",
    )

    # n8n workflow engine
    n8n_base_url: str | None = Field(
        default=None,
        description="n8n base URL; webhook URLs are derived from it when not set explicitly",
    )
    n8n_validation_webhook_url: str | None = Field(
        default=None,
        description="n8n webhook that returns an idea validation synchronously",
    )
    n8n_job_webhook_url: str | None = Field(
        default=None,
        description="n8n webhook that accepts asynchronous jobs",
    )
    n8n_coach_nudge_webhook_url: str | None = Field(
        default=None,
        description="n8n webhook that generates and emails a coaching nudge",
    )

    # Gemini
    google_gemini_api_key: str | None = Field(
        default=None,
        description="Google Gemini API key (provider is skipped when unset)",
    )
    gemini_model: str = Field(
        default="gemini-1.5-flash-latest",
        description="Gemini model name",
    )
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Gemini REST API base URL",
    )

    # Timeouts (seconds)
    n8n_validation_timeout_seconds: float = Field(
        default=10.0,
        description="Per-attempt timeout for the n8n validation provider",
    )
    gemini_timeout_seconds: float = Field(
        default=15.0,
        description="Per-attempt timeout for Gemini providers",
    )
    nudge_timeout_seconds: float = Field(
        default=5.0,
        description="Bound on the fire-and-forget coaching nudge send",
    )
    job_dispatch_timeout_seconds: float = Field(
        default=10.0,
        description="Bound on the fire-and-forget job dispatch send",
    )

    # Jobs
    job_ttl_seconds: int = Field(
        default=7 * 24 * 60 * 60,
        description="How long job records are kept after their last write",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "api_base_url",
        "n8n_base_url",
        "n8n_validation_webhook_url",
        "n8n_job_webhook_url",
        "n8n_coach_nudge_webhook_url",
        "gemini_base_url",
    )
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """
        Remove trailing slashes from URLs and treat blank values as unset.

        Args:
            v: URL string or None.

        Returns:
            str | None: URL without trailing slash, or None.
        """
        if v is None or not v.strip():
            return None
        return v.strip().rstrip("/")

    @field_validator(
        "n8n_validation_timeout_seconds",
        "gemini_timeout_seconds",
        "nudge_timeout_seconds",
        "job_dispatch_timeout_seconds",
    )
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        Validate timeouts are positive.

        Args:
            v: Timeout in seconds.

        Returns:
            float: Validated timeout.

        Raises:
            ValueError: If timeout is not positive.
        """
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    # Derived webhook URLs
    @property
    def n8n_validation_url(self) -> str | None:
        """Validation webhook URL (explicit, else derived from n8n_base_url)."""
        return self._n8n_url(self.n8n_validation_webhook_url, "validate-idea")

    @property
    def n8n_jobs_url(self) -> str | None:
        """Job webhook URL (explicit, else derived from n8n_base_url)."""
        return self._n8n_url(self.n8n_job_webhook_url, "jobs")

    @property
    def n8n_coach_nudge_url(self) -> str | None:
        """Coach nudge webhook URL (explicit, else derived from n8n_base_url)."""
        return self._n8n_url(self.n8n_coach_nudge_webhook_url, "coach-nudge")

    @property
    def job_callback_url(self) -> str:
        """URL the workflow engine posts job results to."""
        return f"{self.api_base_url}/webhooks/job-result"

    def _n8n_url(self, explicit: str | None, webhook_path: str) -> str | None:
        if explicit:
            return explicit
        if self.n8n_base_url:
            return f"{self.n8n_base_url}/webhook/{webhook_path}"
        return None

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
