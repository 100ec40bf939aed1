# file: phonemetagen/cli.py
"""
phonemetagen CLI.

Commands:
  - build: generate one Rust metadata file from a metadata XML file
  - generate-all: build every configured artifact, then write mod.rs
  - aggregate: write mod.rs for already generated files
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from phonemetagen import __version__
from phonemetagen.config import MetagenSettings, load_settings
from phonemetagen.core.build import BUILD_ERRORS, MetadataBuildCommand, describe_failure
from phonemetagen.core.options import Options, UsageError
from phonemetagen.io.aggregate import ModuleEntry, entry_for, write_module
from phonemetagen.logging_config import configure_logging

logger = logging.getLogger(__name__)

_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config path.",
)


def _setup(config_path: Path | None) -> MetagenSettings:
    settings = load_settings(yaml_path=config_path)
    configure_logging(level=settings.log_level, json_logging=settings.json_logging)
    return settings


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__)
def main() -> None:
    """Compile phone number metadata into embeddable Rust sources."""


@main.command(
    "build",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@_config_option
@click.pass_context
def build_cmd(ctx: click.Context, args: tuple[str, ...], config_path: Path | None) -> None:
    """
    Generate a Rust source file from a metadata XML file.

    ARGS: <inputXmlFile> <outputDir> ( <type> | test_<type> | lite_<type> )
    [--const-name=<NAME>]
    """

    settings = _setup(config_path)
    command = MetadataBuildCommand(settings.converter(), command_name=ctx.command_path)
    ok = command.start([ctx.info_name or "build", *args])
    ctx.exit(0 if ok else 1)


@main.command("generate-all")
@_config_option
@click.option(
    "--resources-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory containing the metadata XML files.",
)
@click.option(
    "--generated-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory receiving the generated Rust files.",
)
@click.option("--skip-aggregate", is_flag=True, help="Do not write mod.rs.")
def generate_all_cmd(
    config_path: Path | None,
    resources_dir: Path | None,
    generated_dir: Path | None,
    skip_aggregate: bool,
) -> None:
    """Generate every configured metadata file, then mod.rs."""

    settings = _setup(config_path)
    resources = resources_dir or settings.resources_dir
    generated = generated_dir or settings.generated_dir

    # Validate the whole batch before generating anything.
    try:
        entries = [entry_for(a.basename, a.constant_name) for a in settings.artifacts]
    except UsageError as exc:
        raise click.ClickException(str(exc)) from exc

    command = MetadataBuildCommand(settings.converter(), command_name="generate-all")
    for artifact in settings.artifacts:
        args = [
            "generate-all",
            str(resources / artifact.source),
            str(generated),
            artifact.basename,
            f"--const-name={artifact.constant_name}",
        ]
        try:
            command.run(Options.parse(command.command_name, args))
        except BUILD_ERRORS as exc:
            raise click.ClickException(
                f"Failed to generate {artifact.basename}: {describe_failure(exc)}"
            ) from exc

    if not skip_aggregate:
        try:
            path = write_module(generated, entries)
        except OSError as exc:
            raise click.ClickException(f"I/O error: {exc}") from exc
        click.echo(str(path))


@main.command("aggregate")
@click.argument(
    "generated_dir", type=click.Path(file_okay=False, path_type=Path)
)
@click.argument("modules", nargs=-1, required=True)
@_config_option
def aggregate_cmd(
    generated_dir: Path, modules: tuple[str, ...], config_path: Path | None
) -> None:
    """
    Write mod.rs re-exporting generated constants.

    MODULES are BASENAME=CONSTANT pairs, e.g. metadata=METADATA
    test_metadata=TEST_METADATA. Test-variant modules are gated by #[cfg(test)].
    """

    _setup(config_path)
    entries: list[ModuleEntry] = []
    for item in modules:
        basename, sep, constant = item.partition("=")
        if not sep:
            raise click.BadParameter(
                f"Expected BASENAME=CONSTANT, got {item!r}", param_hint="MODULES"
            )
        try:
            entries.append(entry_for(basename, constant))
        except UsageError as exc:
            raise click.BadParameter(str(exc), param_hint="MODULES") from exc

    try:
        path = write_module(generated_dir, entries)
    except OSError as exc:
        raise click.ClickException(f"I/O error: {exc}") from exc
    click.echo(str(path))
