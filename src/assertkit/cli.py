from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="assertkit", help="Inspect assertkit configuration")
config_app = typer.Typer(name="config", help="Show and validate assertion settings")
schema_app = typer.Typer(name="schema", help="Generate schema tooling for the config file")
app.add_typer(config_app, name="config")
app.add_typer(schema_app, name="schema")


@config_app.command("show")
def config_show(
    path: str | None = typer.Argument(None, help="Path to a YAML config file"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Print the effective settings as YAML."""
    import yaml
    from pydantic import ValidationError

    from assertkit.config import AssertConfig, load_config
    from assertkit.verbose import setup_logger

    logger = setup_logger(verbose=verbose)

    if path is None:
        logger.debug("No config file given, using defaults")
        config = AssertConfig()
    else:
        config_path = Path(path)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {path}", err=True)
            raise typer.Exit(1)
        try:
            config = load_config(config_path)
        except (ValueError, ValidationError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
        logger.debug(f"Loaded config from {config_path}")

    typer.echo(yaml.safe_dump(config.model_dump(), sort_keys=False), nl=False)


@schema_app.command("generate")
def schema_generate(
    dir: str = typer.Option(
        "assertkit", "--dir", help="Project directory for default schema/doc outputs"
    ),
    out: str | None = typer.Option(
        None,
        help="Output path for JSON Schema (defaults to <dir>/schemas/assertkit.schema.json)",
    ),
    doc: str | None = typer.Option(
        None, help="Output path for schema docs (defaults to <dir>/docs/schema.md)"
    ),
):
    """Generate JSON Schema and docs for the config file."""
    from assertkit.schema import write_json_schema, write_schema_doc

    project_dir = Path(dir)
    out_path = (
        Path(out)
        if out is not None
        else project_dir / "schemas" / "assertkit.schema.json"
    )
    doc_path = Path(doc) if doc is not None else project_dir / "docs" / "schema.md"
    write_json_schema(out_path)
    write_schema_doc(doc_path)
    typer.echo(f"Wrote schema: {out_path}")
    typer.echo(f"Wrote docs: {doc_path}")
