import dataclasses
import logging
import os
from pathlib import Path

import click

from uvs.cli.ensure import Ensure
from uvs.cli.output import machine_output, user_output
from uvs.cli.prompt import choose_project
from uvs.core.configuration import ordered_version_keys
from uvs.core.context import SelectorContext, create_context
from uvs.core.errors import SelectorError
from uvs.core.registry import LoadedRegistry, RegistryOrigin, load_or_rebuild
from uvs.core.resolver import resolve
from uvs.core.scanner import ScanSettings

logger = logging.getLogger(__name__)

# Enable debug logging if UVS_DEBUG environment variable is set
if os.getenv("UVS_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _scan_settings(
    base: ScanSettings,
    program_dir: Path | None,
    dir_pattern: str | None,
    scan_timeout: float | None,
) -> ScanSettings:
    overrides: dict[str, object] = {}
    if program_dir is not None:
        overrides["installation_root"] = program_dir
    if dir_pattern is not None:
        overrides["directory_pattern"] = dir_pattern
    if scan_timeout is not None:
        overrides["timeout_seconds"] = scan_timeout
    return dataclasses.replace(base, **overrides)


def _report_rebuild(
    selector: SelectorContext, settings: ScanSettings, registry: LoadedRegistry
) -> None:
    if registry.origin is not RegistryOrigin.REBUILT:
        return
    for skipped in registry.skipped:
        user_output(
            click.style("Warning: ", fg="yellow")
            + f"{skipped.name} has no {settings.executable_name}, skipped"
        )
    user_output(
        click.style(
            f"Registered {len(registry.config.versions)} version(s) in {selector.store.path()}",
            dim=True,
        )
    )


def _list_versions(registry: LoadedRegistry) -> None:
    config = registry.config
    for version in ordered_version_keys(config):
        machine_output(f"{version} : {config.versions[version]}")


def _open_project(
    selector: SelectorContext, registry: LoadedRegistry, project: Path | None
) -> None:
    if project is None:
        recents = Ensure.truthy(
            selector.recent_projects.list_recent(), "No recently used projects found"
        )
        project = choose_project(recents)

    project = project.absolute()
    Ensure.invariant(project.is_dir(), f"Project directory not found: {project}")

    executable = resolve(registry.config, project)
    selector.launcher.launch(executable, project)
    user_output(f"Opening {click.style(str(project), fg='cyan')} with {executable}")


@click.command("uvs", context_settings=CONTEXT_SETTINGS)
@click.argument("project", required=False, type=click.Path(path_type=Path))
@click.option(
    "--reload",
    "reload_registry",
    is_flag=True,
    help="Rescan installed Unity versions and rewrite the registry.",
)
@click.option(
    "--list",
    "list_only",
    is_flag=True,
    help="Show the registered Unity versions and exit.",
)
@click.option(
    "--config",
    "registry_path",
    type=click.Path(path_type=Path, dir_okay=False),
    envvar="UVS_CONFIG",
    help="Registry file to use instead of the per-user default.",
)
@click.option(
    "--program-dir",
    type=click.Path(path_type=Path, file_okay=False),
    help="Installation root to scan when the registry is rebuilt.",
)
@click.option(
    "--dir-pattern",
    help="Regex with one capture group matching version directories (used on rebuild).",
)
@click.option(
    "--scan-timeout",
    type=click.FloatRange(min=0, min_open=True),
    help="Abort a rebuild scan that takes longer than this many seconds.",
)
@click.version_option(package_name="unity-version-selector")
@click.pass_context
def cli(
    ctx: click.Context,
    project: Path | None,
    reload_registry: bool,
    list_only: bool,
    registry_path: Path | None,
    program_dir: Path | None,
    dir_pattern: str | None,
    scan_timeout: float | None,
) -> None:
    """Open a Unity project with the editor version it was saved with.

    PROJECT is the project directory. When omitted, pick one of the
    recently used projects interactively.
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(registry_path=registry_path)
    selector: SelectorContext = ctx.obj
    settings = _scan_settings(selector.scan_settings, program_dir, dir_pattern, scan_timeout)

    try:
        registry = load_or_rebuild(selector.store, settings, reload=reload_registry)
        _report_rebuild(selector, settings, registry)

        if list_only:
            _list_versions(registry)
            return

        _open_project(selector, registry, project)
    except SelectorError as e:
        logger.debug("Command failed", exc_info=True)
        Ensure.fail(str(e))


def main() -> None:
    """CLI entry point used by the `uvs` console script."""
    cli()
