"""CLI entry point for hookify."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from hookify import __version__
from hookify.analyzer.models import ScanReport
from hookify.scanner import scan
from hookify.schemas.settings import SettingsError, find_settings_file, load_settings


@click.command()
@click.argument(
    "paths", nargs=-1, required=True,
    type=click.Path(exists=True, resolve_path=True, path_type=Path),
)
@click.option(
    "-f", "--format", "fmt",
    type=click.Choice(["md", "json"], case_sensitive=False),
    default="md",
    help="Output format (default: md).",
)
@click.option(
    "-o", "--output",
    type=click.Path(resolve_path=True, path_type=Path),
    default=None,
    help="Output file path. Defaults to stdout.",
)
@click.option(
    "-c", "--config",
    type=click.Path(dir_okay=False, resolve_path=True, path_type=Path),
    default=None,
    help="Settings file. Defaults to <path>/.hookify.yaml when present.",
)
@click.option(
    "--union-bases", is_flag=True, default=False,
    help="Report classes of every base class, not only the first one found.",
)
@click.option(
    "--strict", is_flag=True, default=False,
    help="Also skip classes with methods other than render.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose logging.")
@click.version_option(version=__version__)
def main(
    paths: tuple[Path, ...],
    fmt: str,
    output: Path | None,
    config: Path | None,
    union_bases: bool,
    strict: bool,
    verbose: bool,
) -> None:
    """Find React class components that can be migrated to function components."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if config is None and len(paths) == 1 and paths[0].is_dir():
        config = find_settings_file(paths[0])
    try:
        settings = load_settings(config)
    except SettingsError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc

    if union_bases:
        settings.union_base_classes = True
    if strict:
        settings.require_render_only = True

    result = scan(list(paths), settings)

    if fmt == "json":
        _output_json(result, output)
    else:
        _output_md(result, output)


def _output_md(result: ScanReport, output: Path | None) -> None:
    from hookify.render.markdown import render_markdown
    md = render_markdown(result)
    if output:
        output.write_text(md)
        click.echo(f"Report written to {output}")
    else:
        click.echo(md)


def _output_json(result: ScanReport, output: Path | None) -> None:
    text = json.dumps(result.model_dump(), indent=2)
    if output:
        output.write_text(text)
        click.echo(f"JSON report written to {output}")
    else:
        click.echo(text)


if __name__ == "__main__":
    main()
