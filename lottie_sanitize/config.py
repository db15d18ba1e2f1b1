"""Configuration models and loader for lottie-sanitize."""
from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .normalize import DEFAULT_TARGET_KEYS, POLICIES


class PathsConfig(BaseModel):
    input: Path = Field(Path("animation.json"), description="Lottie JSON file to repair.")
    output: Path = Field(Path("animation-fixed.json"), description="Destination of the repaired file.")


class SanitizeConfig(BaseModel):
    target_keys: List[str] = Field(
        default_factory=lambda: sorted(DEFAULT_TARGET_KEYS),
        description="Object keys removed (or refilled) when their value is null.",
    )
    policy: str = Field("drop", description="Null policy: 'drop' or 'zero'.")

    @field_validator("target_keys", mode="before")
    @classmethod
    def split_single_key(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("target_keys")
    @classmethod
    def validate_keys(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("target_keys must name at least one key")
        if any(not key for key in value):
            raise ValueError("target_keys must not contain empty names")
        return value

    @field_validator("policy")
    @classmethod
    def validate_policy(cls, value: str) -> str:
        if value not in POLICIES:
            raise ValueError(f"policy must be one of {sorted(POLICIES)}")
        return value


class OutputConfig(BaseModel):
    indent: Optional[int] = Field(None, ge=0, description="Pretty-print indent; compact when unset.")
    report: Optional[Path] = Field(
        None,
        description="When set, a JSON size report is written here with a Markdown copy beside it.",
    )

    @field_validator("report")
    @classmethod
    def validate_report(cls, value: Optional[Path]) -> Optional[Path]:
        if value is not None and value.suffix.lower() == ".md":
            raise ValueError("report must not be a .md path; the Markdown copy is written next to it")
        return value


class AppConfig(BaseModel):
    paths: PathsConfig = Field(default_factory=PathsConfig)
    sanitize: SanitizeConfig = Field(default_factory=SanitizeConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: Path | str) -> AppConfig:
    """Load configuration from YAML, falling back to defaults when missing."""

    cfg_path = Path(path)
    if not cfg_path.exists():
        return AppConfig()
    data = yaml.safe_load(cfg_path.read_text()) or {}
    return AppConfig.model_validate(data)
