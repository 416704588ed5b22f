from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AssertConfig(BaseModel):
    """Rendering settings shared by an assertion and everything derived from it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    none_token: str = Field("None", description="Text shown for a None value")
    quote: str = Field('"', description="Quote placed around displayed strings")
    diff_context: int = Field(
        20,
        ge=0,
        description="Characters of common prefix/suffix kept around a highlighted diff",
    )
    heading: str = Field(
        "The following assertions failed",
        description="Header of a combined failure report",
    )
    indent: str = Field("\t", description="Indent used for items of a combined report")

    @field_validator("heading")
    @classmethod
    def heading_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("heading must not be blank")
        return v


DEFAULT_CONFIG = AssertConfig()


def load_config(path: Path) -> AssertConfig:
    """Load and validate assertion settings from a YAML file.

    The settings may sit at the top level or under an ``assertkit:`` key.
    An empty file yields the defaults.
    """
    with open(path) as f:
        raw = yaml.safe_load(f)

    if isinstance(raw, dict) and "assertkit" in raw:
        raw = raw["assertkit"]
    if raw is None:
        return AssertConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    return AssertConfig(**raw)
