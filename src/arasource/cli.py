# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line tool for inspecting the sources a project root yields."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from .collection import SourceCollection
from .config import LoaderConfig
from .errors import SourceError
from .loaders import load_directories
from .logging import ConsoleReporter, build_reporter, enable_debug_logging

app = typer.Typer(
    name="arasource",
    help="Discover and inspect Ara sources beneath a project root.",
    no_args_is_help=True,
    add_completion=False,
)

RootArgument = Annotated[
    Path,
    typer.Argument(help="Project root used to resolve directories and compute origins."),
]
ColorOption = Annotated[bool, typer.Option("--color/--no-color", help="Enable ANSI colour output.")]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Prefix messages with emoji.")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Stream loader debug logs to stderr.")]


def _load(
    root: Path,
    directories: list[Path] | None,
    *,
    config: LoaderConfig,
    reporter: ConsoleReporter,
) -> SourceCollection:
    """Load ``directories`` under ``root`` translating failures into exit codes.

    Args:
        root: Project root.
        directories: Directories to load; the root itself when omitted.
        config: Loader configuration built from CLI options.
        reporter: Reporter receiving the failure message.

    Returns:
        SourceCollection: Loaded sources.

    Raises:
        typer.Exit: When loading fails.
    """

    try:
        return load_directories(root, directories or [Path()], config=config)
    except SourceError as exc:
        reporter.fail(str(exc))
        raise typer.Exit(code=1) from exc


def _build_table(collection: SourceCollection, *, show_hash: bool) -> Table:
    """Return a table with one row per source in collection order.

    Args:
        collection: Sources to tabulate.
        show_hash: Whether to add a column with each content hash in hex.
            Filling it reads every source from disk.

    Returns:
        Table: Table with index, kind, origin and optional hash columns.

    Raises:
        SourceError: If a content hash is requested and a source cannot be read.
    """

    table = Table(show_header=True)
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Origin")
    if show_hash:
        table.add_column("Hash")
    for index, source in enumerate(collection, start=1):
        row = [str(index), source.kind.value, source.name]
        if show_hash:
            row.append(f"{source.content_hash():016x}")
        table.add_row(*row)
    return table


@app.command("list")
def list_sources(
    root: RootArgument,
    directories: Annotated[
        list[Path] | None,
        typer.Argument(help="Directories to load, relative to ROOT. Defaults to ROOT itself."),
    ] = None,
    show_hash: Annotated[bool, typer.Option("--hash", help="Include each source's content hash.")] = False,
    sort_entries: Annotated[
        bool,
        typer.Option("--sorted/--unsorted", help="Sort directory entries by name before walking."),
    ] = True,
    deep: Annotated[bool, typer.Option("--deep", help="Validate nested directories before loading.")] = False,
    color: ColorOption = True,
    use_emoji: EmojiOption = True,
    verbose: VerboseOption = False,
) -> None:
    """List the sources found beneath ROOT."""

    reporter = build_reporter(color=color, emoji=use_emoji)
    if verbose:
        enable_debug_logging()
    targets = directories or [Path()]
    reporter.info(f"Loading {len(targets)} directories under {root}")
    config = LoaderConfig(sort_entries=sort_entries, deep_supports=deep)
    collection = _load(root, targets, config=config, reporter=reporter)
    if not collection:
        reporter.warn("No sources found.")
        return
    try:
        table = _build_table(collection, show_hash=show_hash)
    except SourceError as exc:
        reporter.fail(str(exc))
        raise typer.Exit(code=1) from exc
    reporter.section("Sources")
    reporter.render(table)
    reporter.ok(f"Loaded {len(collection)} sources.")


@app.command("show")
def show_source(
    root: RootArgument,
    origin: Annotated[str, typer.Argument(help="Origin of the source, relative to ROOT.")],
    directories: Annotated[
        list[Path] | None,
        typer.Option("--dir", "-d", help="Directory to load; repeatable. Defaults to ROOT itself."),
    ] = None,
    color: ColorOption = True,
    use_emoji: EmojiOption = True,
    verbose: VerboseOption = False,
) -> None:
    """Print the content of the source with ORIGIN."""

    reporter = build_reporter(color=color, emoji=use_emoji)
    if verbose:
        enable_debug_logging()
    collection = _load(root, directories, config=LoaderConfig(), reporter=reporter)
    try:
        content = collection.named(origin).content()
    except SourceError as exc:
        reporter.fail(str(exc))
        raise typer.Exit(code=1) from exc
    typer.echo(content, nl=not content.endswith("\n"))


__all__ = ["app"]
