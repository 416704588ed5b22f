"""Generate JSON Schema and docs for the assertkit YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from assertkit.config import AssertConfig


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    return AssertConfig.model_json_schema()


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def generate_schema_doc() -> str:
    schema = generate_json_schema()
    props = schema.get("properties", {})

    lines: list[str] = []
    lines.append("# assertkit YAML Schema")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("")
    lines.append("Settings may be written at the top level or under an `assertkit:` key.")
    lines.append("")
    lines.append("## Settings")
    for key, prop in props.items():
        kind = prop.get("type", "any")
        default = json.dumps(prop.get("default"))
        description = prop.get("description", "")
        lines.append(f"- `{key}`: {kind} (default {default}) - {description}")

    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
