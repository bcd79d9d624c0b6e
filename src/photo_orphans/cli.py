"""Command-line interface for photo-orphans."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from photo_orphans import __version__
from photo_orphans.core.catalog import Catalog, CatalogBuilder
from photo_orphans.core.errors import PhotoToolError
from photo_orphans.core.models import (
    DEFAULT_IMG_EXTENSION,
    DEFAULT_RAW_EXTENSION,
    FilterMode,
    PhotoDirectory,
)
from photo_orphans.core.resolver import OrphanResolver
from photo_orphans.utils.config import Config
from photo_orphans.utils.logger import setup_logger
from photo_orphans.utils.paths import resolve_photo_dir

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _strip_dot(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[str]:
    """Accept extensions written as '.NEF' as well as 'NEF'."""
    if value is None:
        return None
    return value[1:] if value.startswith(".") else value


def _fail(error: PhotoToolError) -> NoReturn:
    """Print a diagnostic and exit with the OS error code when there is one."""
    err_console.print(f"[red]✗ Error:[/red] {escape(str(error))}", soft_wrap=True)
    sys.exit(error.errno or 1)


def _load_config(ctx: click.Context) -> Config:
    """Load the config file, failing with a diagnostic on OS errors."""
    config_file = ctx.obj.get("config_file") or Config.DEFAULT_CONFIG_FILE
    try:
        return Config(config_file)
    except OSError as e:
        _fail(PhotoToolError("Could not load configuration", config_file, e))


def photo_options(func):
    """Options shared by commands that read a photo directory."""
    func = click.option(
        "--photoext",
        "-j",
        "img_extension",
        callback=_strip_dot,
        help="Extension of the image files (default: from config, JPG)",
    )(func)
    func = click.option(
        "--rawext",
        "-r",
        "raw_extension",
        callback=_strip_dot,
        help="Extension of the raw files (default: from config, RAF)",
    )(func)
    func = click.option(
        "--path",
        "-p",
        "path",
        default="",
        help="Path of the folder (default: current directory)",
    )(func)
    func = click.argument(
        "filter_name",
        metavar="FILTER",
        type=click.Choice(["RAW", "IMG"], case_sensitive=False),
    )(func)
    return func


def _build_photo_dir(
    config: Config,
    filter_name: str,
    path: str,
    raw_extension: Optional[str],
    img_extension: Optional[str],
) -> PhotoDirectory:
    directory = resolve_photo_dir(path)
    logger.info(f"Using {directory} as the photo source directory.")

    return PhotoDirectory(
        path=directory,
        filter_mode=FilterMode.parse(filter_name.upper()),
        raw_extension=raw_extension or config.get("raw_extension", DEFAULT_RAW_EXTENSION),
        img_extension=img_extension or config.get("img_extension", DEFAULT_IMG_EXTENSION),
    )


@click.group()
@click.version_option(version=__version__, prog_name="photo-orphans")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose mode")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write a detailed log to this file",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="PHOTO_ORPHANS_CONFIG",
    help="Config file (default: ~/.photo-orphans/config.json)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_file: Optional[Path],
    config_file: Optional[Path],
) -> None:
    """
    Photo Orphans - find photos missing their RAW or developed counterpart.

    FILTER selects the orphans: with IMG, images without a RAW file are
    discarded; with RAW, raw files without a developed image are discarded.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_file"] = config_file

    setup_logger(
        "photo_orphans",
        level=logging.DEBUG if verbose else logging.WARNING,
        log_file=log_file,
    )


@cli.command()
@photo_options
@click.option("--delete", "-d", is_flag=True, help="Delete filtered photos")
@click.option(
    "--recycle-bin",
    is_flag=True,
    help="Move the discarded folder to the recycle bin (requires --delete)",
)
@click.option(
    "--show-progress/--no-progress",
    default=None,
    help="Show a progress bar while relocating (default: from config)",
)
@click.pass_context
def clean(
    ctx: click.Context,
    filter_name: str,
    path: str,
    raw_extension: Optional[str],
    img_extension: Optional[str],
    delete: bool,
    recycle_bin: bool,
    show_progress: Optional[bool],
) -> None:
    """
    Move orphan files to the to_delete folder, or delete them.

    Example:
        photo-orphans clean IMG --path ~/Pictures/2024-05 --rawext NEF
    """
    if recycle_bin and not delete:
        raise click.UsageError("--recycle-bin requires --delete")

    config = _load_config(ctx)

    if ctx.obj.get("verbose"):
        console.print(
            f"photo-orphans - log - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n"
        )
        console.print(f"\tFiltering orphan files by {filter_name.upper()}!")

    if show_progress is None:
        show_progress = config.get("show_progress", True)
    use_recycle_bin = recycle_bin or config.get("safety.use_recycle_bin", False)

    try:
        photo_dir = _build_photo_dir(
            config, filter_name, path, raw_extension, img_extension
        )
        catalog = CatalogBuilder(photo_dir).build()
        resolver = OrphanResolver(
            photo_dir,
            show_progress=show_progress,
            operations_log=config.get_operations_log(),
        )
        summary = resolver.resolve(
            catalog, permanently_delete=delete, use_recycle_bin=use_recycle_bin
        )
    except PhotoToolError as e:
        _fail(e)

    if summary.deleted:
        where = "moved to the recycle bin" if summary.used_recycle_bin else "deleted"
        console.print(f"Folder with discarded files {where}!")
    else:
        console.print(
            f"The folder {escape(str(summary.quarantine_dir))} contains the discarded files.",
            soft_wrap=True,
        )
    console.print(
        f"[green]✓[/green] {len(summary.relocated)} of {summary.catalog_size} photos discarded."
    )
    console.print("All done!")


@cli.command()
@photo_options
@click.pass_context
def scan(
    ctx: click.Context,
    filter_name: str,
    path: str,
    raw_extension: Optional[str],
    img_extension: Optional[str],
) -> None:
    """
    Show the photo catalog and the orphans 'clean' would discard.

    Nothing is moved or deleted.
    """
    config = _load_config(ctx)

    try:
        photo_dir = _build_photo_dir(
            config, filter_name, path, raw_extension, img_extension
        )
        catalog = CatalogBuilder(photo_dir).build()
    except PhotoToolError as e:
        _fail(e)

    orphans = OrphanResolver(photo_dir, show_progress=False).plan(catalog)
    _display_catalog(photo_dir, catalog)

    if not orphans:
        console.print("[green]✓ No orphan files found![/green]")
        return

    console.print(f"\n[bold yellow]{len(orphans)} orphan files:[/bold yellow]")
    for identity, _ in orphans:
        console.print(f"  • {escape(identity.name)}")


@cli.command(name="set-extensions")
@click.option("--raw", "raw_extension", callback=_strip_dot, help="Default RAW extension")
@click.option("--img", "img_extension", callback=_strip_dot, help="Default IMG extension")
@click.pass_context
def set_extensions(
    ctx: click.Context,
    raw_extension: Optional[str],
    img_extension: Optional[str],
) -> None:
    """
    Store the default RAW and IMG extensions.
    """
    config = _load_config(ctx)

    new_raw = raw_extension or config.get("raw_extension", DEFAULT_RAW_EXTENSION)
    new_img = img_extension or config.get("img_extension", DEFAULT_IMG_EXTENSION)

    # Validate the pair before saving it
    try:
        PhotoDirectory(
            path=Path.cwd(),
            filter_mode=FilterMode.RAW,
            raw_extension=new_raw,
            img_extension=new_img,
        )
    except PhotoToolError as e:
        _fail(e)

    try:
        config.set("raw_extension", new_raw)
        config.set("img_extension", new_img)
    except OSError as e:
        _fail(PhotoToolError("Could not save configuration", config.config_file, e))

    console.print(f"[green]✓ Default extensions:[/green] RAW={new_raw} IMG={new_img}")


def _display_catalog(photo_dir: PhotoDirectory, catalog: Catalog) -> None:
    """Display catalog counts in a table."""
    counts = catalog.counts()

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Photos")
    table.add_column("Count", justify="right")

    table.add_row(
        f"{photo_dir.raw_extension} + {photo_dir.img_extension}",
        str(counts["complete"]),
    )
    table.add_row(f"{photo_dir.raw_extension} only", str(counts["raw_only"]))
    table.add_row(f"{photo_dir.img_extension} only", str(counts["img_only"]))
    table.add_row("[bold]Total[/bold]", f"[bold]{len(catalog)}[/bold]")

    console.print(f"\n[bold cyan]{escape(str(photo_dir.path))}[/bold cyan]", soft_wrap=True)
    console.print(table)


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
