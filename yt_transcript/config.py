"""Configuration management using environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from yt_transcript.models.transcript import DebugConfig, DebugOverrides, NodeOptions


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="YT_TRANSCRIPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    # Debug overrides, OR-ed with the per-item options
    debug_mode: bool = Field(default=False, description="Force debug mode (non-headless)")
    slow_mo: bool = Field(default=False, description="Slow down browser operations")
    devtools: bool = Field(default=False, description="Open Chrome DevTools automatically")
    wait_after: bool = Field(
        default=False, description="Keep the browser open after the transcript is extracted"
    )
    debugger: bool = Field(default=False, description="Break before opening the transcript")
    no_headless: bool = Field(default=False, description="Force non-headless mode")

    # Timing and layout policy
    slow_mo_delay_ms: int = Field(default=100, ge=0, description="Per-operation delay in slow motion")
    navigation_timeout_ms: int = Field(default=30_000, gt=0)
    consent_timeout_ms: int = Field(default=5_000, gt=0)
    consent_settle_ms: int = Field(default=1_000, ge=0)
    transcript_timeout_ms: int = Field(default=10_000, gt=0)
    debug_transcript_timeout_ms: int = Field(
        default=30_000, gt=0, description="Transcript wait budget when the browser is kept open"
    )
    viewport_width: int = Field(default=1920, gt=0)
    viewport_height: int = Field(default=1080, gt=0)

    @property
    def overrides(self) -> DebugOverrides:
        """Returns the override switches set through the environment."""
        return DebugOverrides(
            debug_mode=self.debug_mode,
            slow_mo=self.slow_mo,
            devtools=self.devtools,
            wait_after=self.wait_after,
            debugger=self.debugger,
            no_headless=self.no_headless,
        )


@lru_cache
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config()


def merge_overrides(*sources: DebugOverrides) -> DebugOverrides:
    """Combine override sources; a switch is on when any source turns it on."""
    merged = DebugOverrides()
    for source in sources:
        merged = DebugOverrides(
            **{name: getattr(merged, name) or getattr(source, name) for name in DebugOverrides.model_fields}
        )
    return merged


def resolve_debug_config(
    options: NodeOptions,
    overrides: DebugOverrides | None = None,
    config: Config | None = None,
) -> DebugConfig:
    """
    Resolve the debug configuration for a run.

    Each switch is enabled when either the item options or the overrides enable it.
    The browser only runs headless when no debug-oriented switch is on.
    """
    overrides = overrides or DebugOverrides()
    config = config or get_config()

    debug_mode = options.debug_mode or overrides.debug_mode
    slow_mo = options.slow_mo or overrides.slow_mo
    devtools = options.devtools or overrides.devtools
    wait_after = options.wait_after_transcript or overrides.wait_after
    debugger = options.debugger_statement or overrides.debugger

    headless = not (debug_mode or slow_mo or devtools or wait_after or debugger or overrides.no_headless)

    return DebugConfig(
        slow_motion_delay_ms=config.slow_mo_delay_ms if slow_mo else 0,
        open_devtools=devtools,
        keep_session_alive=wait_after,
        pause_before_extraction=debugger,
        headless=headless,
        navigation_timeout_ms=config.navigation_timeout_ms,
        consent_timeout_ms=config.consent_timeout_ms,
        consent_settle_ms=config.consent_settle_ms,
        transcript_timeout_ms=config.transcript_timeout_ms,
        debug_transcript_timeout_ms=config.debug_transcript_timeout_ms,
        viewport_width=config.viewport_width,
        viewport_height=config.viewport_height,
    )
