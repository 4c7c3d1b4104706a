"""Pydantic configuration models for pathvalue."""

from enum import StrEnum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class DefaultInputValue(StrEnum):
    """Where the initial path comes from."""

    ACTIVE_FILE_DIR = "activeFile"
    PROJECT_ROOT = "projectRoot"
    NONE = "none"


class InputConfig(BaseModel):
    """Initial path input configuration."""

    default_input_value: DefaultInputValue = DefaultInputValue.ACTIVE_FILE_DIR


class PlatformConfig(BaseModel):
    """Path flavor and home directory used by the local platform adapter."""

    flavor: Literal["native", "posix", "nt"] = "native"
    home_directory: str | None = None


class WorkspaceConfig(BaseModel):
    """Project roots and active document known to the host."""

    project_paths: list[str] = Field(default_factory=list)
    active_document: str | None = None

    @field_validator("project_paths")
    @classmethod
    def strip_trailing_separators(cls, v: list[str]) -> list[str]:
        """Drop trailing separators so roots compare by exact string.

        Empty entries are not projects and are dropped.
        """
        stripped = []
        for path in v:
            if not path:
                continue
            trimmed = path.rstrip("/\\")
            # Keep bare roots such as "/" or "C:\"
            if not trimmed or trimmed.endswith(":"):
                trimmed = path
            stripped.append(trimmed)
        return stripped


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class Config(BaseSettings):
    """Root configuration for pathvalue."""

    input: InputConfig = Field(default_factory=InputConfig)
    platform: PlatformConfig = Field(default_factory=PlatformConfig)
    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "PATHVALUE_",
        "env_nested_delimiter": "__",
    }
