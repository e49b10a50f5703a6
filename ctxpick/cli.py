import logging
from pathlib import Path

import click

from . import __version__
from .bundle import format_json, format_markdown
from .config import Config, ConfigError, set_config
from .constants import PROVIDERS
from .editor import TerminalEditor
from .init import init_logging
from .paths import get_project_root
from .ranges import RANGE_PATTERN, RangeError
from .selector import FileSelector
from .sources import ToggleResult
from .util import console

logger = logging.getLogger(__name__)


docstring = """
ctxpick collects files (or line ranges of files) and prints them as context for an LLM prompt.

Each PATH can be suffixed with :START-END to include only those lines,
e.g. `ctxpick src/app.py:10-40 src/app.py:90-95 README.md`.
"""


def split_path_range(arg: str) -> tuple[str, str | None]:
    """Split ``path:start-end`` into its path and range parts."""
    path, sep, suffix = arg.rpartition(":")
    if sep and path and RANGE_PATTERN.match(suffix):
        return path, suffix
    return arg, None


@click.command(help=docstring)
@click.argument("paths", nargs=-1)
@click.option(
    "-w",
    "--workspace",
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project root. Defaults to the nearest directory with a ctxpick.toml or git repo.",
)
@click.option(
    "-q",
    "--quickfix",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Add the files referenced in an errorformat file (path:line[:col]: message).",
)
@click.option(
    "-c",
    "--current",
    default=None,
    help="Toggle this path as the active document.",
)
@click.option(
    "-p",
    "--pick",
    count=True,
    help="Open the file picker. Repeat to pick several files.",
)
@click.option(
    "--provider",
    default=None,
    type=click.Choice(PROVIDERS),
    help="Picker to use, overrides the config.",
)
@click.option(
    "--format",
    "output_format",
    default="markdown",
    type=click.Choice(["markdown", "json"]),
    help="Output format.",
)
@click.option("-v", "--verbose", is_flag=True, help="Show verbose output.")
@click.version_option(__version__)
def main(
    paths: tuple[str, ...],
    workspace: Path | None,
    quickfix: Path | None,
    current: str | None,
    pick: int,
    provider: str | None,
    output_format: str,
    verbose: bool,
):
    init_logging(verbose)

    workspace = workspace.absolute() if workspace else get_project_root()
    try:
        config = Config.from_workspace(workspace)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    if provider:
        config.selector.provider = provider
    set_config(config)

    editor = TerminalEditor(root=workspace)
    selector = FileSelector(editor=editor, config=config, root=workspace)

    for arg in paths:
        path, file_range = split_path_range(arg)
        if file_range is None:
            selector.add_selected_file(path)
            continue
        try:
            selector.add_selected_file_ranges(path, file_range)
        except RangeError as e:
            raise click.BadParameter(str(e), param_hint="PATHS") from e

    if quickfix:
        editor.load_quickfix(quickfix)
        added = selector.add_quickfix_files()
        logger.info(f"Added {added} files from quickfix list")

    if current:
        editor.set_current(current)
        if selector.toggle_current_document() == ToggleResult.IGNORED:
            logger.warning(f"Ignoring {current}: not a file on disk")

    for _ in range(pick):
        future = selector.open()
        if future is None or future.result() is None:
            break

    selected = selector.get_selected_filepaths()
    if not selected:
        console.print("[yellow]No files selected.[/yellow]")
        return

    contents = selector.get_selected_files_contents()
    resolved = {f.path for f in contents}
    for path in selected:
        if path not in resolved:
            logger.warning(f"Could not read {path}, skipping")

    if output_format == "json":
        click.echo(format_json(contents))
    else:
        click.echo(format_markdown(contents))


if __name__ == "__main__":
    main()
