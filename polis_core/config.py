"""Settings of the POLIS tools, loaded from `POLIS_*` environment variables."""
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import BIG_BANG_POLIS_DOMAIN
from .finder import FileResourceFinder, RemoteResourceFinder
from .implementation import Implementation
from .registry import SupportedImplementations, resolve_registry


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class PolisSettings(BaseSettings):
    """Defaults for the local provider root and the remote provider domain.

    Environment variables (or a `.env` file) override the defaults,
    e.g. `POLIS_ROOT=/srv/polis`.
    """

    model_config = SettingsConfigDict(
        env_prefix="POLIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    root: Path = Field(default=Path("/tmp/"), description="Root folder of a local provider")
    domain: str = Field(default=BIG_BANG_POLIS_DOMAIN, description="Domain of a remote provider")
    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Level of the polis_core logger")

    def configure_logging(self) -> None:
        """Set level of the package logger (handlers are left to the application)."""
        logging.getLogger("polis_core").setLevel(self.log_level.value)

    def make_file_finder(
        self,
        implementation: Optional[Implementation] = None,
        *,
        registry: Optional[SupportedImplementations] = None,
    ) -> FileResourceFinder:
        """Return a finder for the configured root (oldest supported implementation by default)."""
        impl = implementation or resolve_registry(registry).oldest()
        return FileResourceFinder(self.root, impl, registry=registry)

    def make_remote_finder(
        self,
        implementation: Optional[Implementation] = None,
        *,
        registry: Optional[SupportedImplementations] = None,
    ) -> RemoteResourceFinder:
        impl = implementation or resolve_registry(registry).oldest()
        return RemoteResourceFinder(self.domain, impl, registry=registry)
