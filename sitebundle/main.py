"""
sitebundle — CLI entrypoint.

Usage:
    sitebundle --help
    sitebundle build --mode development
    sitebundle resolve @frontity/mars-theme --type client
    sitebundle config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from sitebundle import __version__
from sitebundle.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="sitebundle")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to sitebundle.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """sitebundle — generate bundler entry points for your sites."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("SITEBUNDLE_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("SITEBUNDLE_LOG_FILE"),
        log_file_level=os.environ.get("SITEBUNDLE_LOG_FILE_LEVEL"),
    )


@cli.command()
@click.option(
    "--out-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory (default: from settings).",
)
@click.option("--mode", default=None, help="Build mode, e.g. development or production.")
@click.option("--no-clean", is_flag=True, help="Don't empty the output directory first.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def build(
    ctx: click.Context,
    out_dir: Path | None,
    mode: str | None,
    no_clean: bool,
    as_json: bool,
) -> None:
    """Generate server and client entry points for all sites."""
    from sitebundle.core.use_cases.build import run_build

    result = run_build(
        config_path=ctx.obj.get("config_path"),
        out_dir=out_dir,
        mode=mode,
        clean=not no_clean,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    settings = result.settings
    assert settings is not None

    if not ctx.obj.get("quiet"):
        click.secho(f"\n📦 Entry points ({settings.mode})", fg="cyan", bold=True)
        click.echo(f"   Output: {settings.out_dir}")
        click.echo()

    for bundle in result.bundles:
        click.secho(f"   ✓ {bundle.name:<20}", fg="green", nl=False)
        click.echo(f" → {bundle.path}")

    click.echo()


@cli.command()
@click.argument("name")
@click.option("--mode", default="default", show_default=True, help="Site mode.")
@click.option("--type", "type_", default="client", show_default=True, help="Bundle type.")
@click.option(
    "--package-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Package root (default: from settings).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def resolve(
    ctx: click.Context,
    name: str,
    mode: str,
    type_: str,
    package_root: Path | None,
    as_json: bool,
) -> None:
    """Show which entry point NAME resolves to.

    Examples:

        sitebundle resolve @frontity/mars-theme

        sitebundle resolve my-theme --mode amp --type server
    """
    from sitebundle.core.use_cases.resolve import run_resolve

    result = run_resolve(
        name,
        mode,
        type_,
        config_path=ctx.obj.get("config_path"),
        package_root=package_root,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if result.found:
        click.secho(f"✓ {result.path}", fg="green")
    else:
        click.secho(f"⊘ {name} has no {type_} entry point", fg="yellow")

    if ctx.obj.get("verbose"):
        click.echo()
        click.echo("   Candidates (in order):")
        for candidate in result.candidates:
            marker = " ←" if candidate == result.path else ""
            click.echo(f"     • {candidate}{marker}")


@cli.command()
@click.option(
    "--out-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory (default: from settings).",
)
@click.pass_context
def clean(ctx: click.Context, out_dir: Path | None) -> None:
    """Empty the output directory and recreate its layout."""
    from sitebundle.core.use_cases.build import run_clean

    result = run_clean(config_path=ctx.obj.get("config_path"), out_dir=out_dir)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    assert result.settings is not None
    click.secho(f"🧹 Cleaned {result.settings.out_dir}", fg="green")


@cli.group()
def config() -> None:
    """Settings commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate sitebundle.yml."""
    from sitebundle.core.use_cases.config_check import check_settings

    result = check_settings(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.settings is not None
        click.secho("✅ Settings are valid", fg="green", bold=True)
        click.echo(f"   Sites: {len(result.settings.sites)}")
        click.echo(f"   Mode:  {result.settings.mode}")
    else:
        click.secho("❌ Settings errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


if __name__ == "__main__":
    cli()
