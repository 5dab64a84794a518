"""
Logging settings domain model.

Controls the dispatch loop timing, the shutdown flush, and the set of
providers registered at startup.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from sqladminlog.domain.log_models import LogLevel

from .enums import LogFileFormat, ProviderType

DEFAULT_RUNSPACE_NAME = "sqladminlog.logging"


class ProviderSettings(BaseModel):
    """Configuration for one provider instance."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Unique provider name")
    type: ProviderType = Field(..., description="Built-in provider implementation")
    enabled: bool = Field(True, description="Enable the provider when the runspace starts")
    min_level: LogLevel = Field(LogLevel.INFO, description="Entries below this level are ignored")
    include_origins: List[str] = Field(default_factory=list, description="Only accept these origin prefixes")
    exclude_origins: List[str] = Field(default_factory=list, description="Reject these origin prefixes")
    include_tags: List[str] = Field(default_factory=list, description="Require at least one of these tags")
    path: Optional[str] = Field(None, description="Output file (logfile provider)")
    format: LogFileFormat = Field(LogFileFormat.JSON, description="Output format (logfile provider)")
    max_entries: int = Field(1024, description="History size (memory provider)", ge=1, le=1_000_000)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Provider names cannot be blank."""
        if not v or not v.strip():
            raise ValueError("Provider name cannot be empty")
        return v.strip()

    @field_validator("min_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept level names in any case."""
        if isinstance(v, str):
            parsed = LogLevel.from_string(v)
            if parsed is None:
                raise ValueError(f"Unknown log level: {v}")
            return parsed
        return v

    @model_validator(mode="after")
    def validate_logfile_path(self) -> "ProviderSettings":
        """The logfile provider needs somewhere to write."""
        if self.type == ProviderType.LOGFILE and not self.path:
            raise ValueError(f"Provider '{self.name}' of type logfile requires a path")
        return self


class LoggingSettings(BaseModel):
    """
    Settings for the logging runspace.

    The dispatch loop reads `disable_flush_on_exit` at stop time, so it
    can be changed while the runspace is running.
    """

    model_config = ConfigDict(extra="ignore")

    interval_ms: int = Field(
        default=100,
        description="Sleep between dispatch cycles in milliseconds",
        ge=10,
        le=5000
    )

    disable_flush_on_exit: bool = Field(
        default=False,
        description="Skip the final queue drain when the runspace stops"
    )

    error_history_size: int = Field(
        default=128,
        description="Hook failures kept per provider",
        ge=1,
        le=10000
    )

    runspace_name: str = Field(
        default=DEFAULT_RUNSPACE_NAME,
        description="Name of the background runspace"
    )

    stop_timeout_seconds: float = Field(
        default=30.0,
        description="How long stop waits for the loop to signal it stopped",
        gt=0
    )

    providers: List[ProviderSettings] = Field(default_factory=list)

    @field_validator("providers")
    @classmethod
    def validate_unique_names(cls, v: List[ProviderSettings]) -> List[ProviderSettings]:
        """Provider names must be unique."""
        seen = set()
        for provider in v:
            if provider.name in seen:
                raise ValueError(f"Duplicate provider name: {provider.name}")
            seen.add(provider.name)
        return v

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000.0
