"""Format, check or rewrite AssemblyScript files from the command line."""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskProgressColumn, TextColumn

from as_prettier.core.errors import AsPrettierError
from as_prettier.core.format import check_file, format_file, format_source, resolve_filepath
from as_prettier.core.ports.formatter import CodeFormatter
from as_prettier.models import FormatOptions

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _get_formatter() -> CodeFormatter:
    from as_prettier.formatter.prettier import PrettierFormatter

    return PrettierFormatter()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _fail(path: str, exc: Exception) -> typer.Exit:
    err_console.print(f"{escape(path)}\n{escape(str(exc))}", highlight=False, soft_wrap=True)
    return typer.Exit(1)


def _progress() -> Progress:
    return Progress(
        BarColumn(),
        TaskProgressColumn(),
        MofNCompleteColumn(),
        TextColumn("{task.description} '{task.fields[file]}'"),
        console=err_console,
        transient=True,
    )


async def _run_all(files: list[str], jobs: int, description: str, work: Callable[[str], bool]) -> list[str]:
    """Run ``work`` over ``files`` in worker threads; return the files it returned False for."""
    semaphore = asyncio.Semaphore(jobs)
    rejected: set[str] = set()

    with _progress() as progress:
        task = progress.add_task(description, total=len(files), file="N/A")

        async def _one(path: str) -> None:
            async with semaphore:
                try:
                    ok = await asyncio.to_thread(work, path)
                except (AsPrettierError, OSError) as exc:
                    raise _fail(path, exc) from exc
            if not ok:
                rejected.add(path)
            progress.update(task, advance=1, file=path)

        await asyncio.gather(*(_one(path) for path in files))

    return [path for path in files if path in rejected]


def _check(files: list[str], options: FormatOptions, formatter: CodeFormatter, jobs: int) -> None:
    def _work(path: str) -> bool:
        return check_file(path, options, formatter=formatter)

    failed = asyncio.run(_run_all(files, jobs, "checking", _work))

    if failed:
        console.print("[bold yellow]Code style issues found in the following files. Forgot to run Prettier?[/bold yellow]")
        for path in failed:
            console.print(f"- '{escape(path)}'", highlight=False, soft_wrap=True)
        raise typer.Exit(1)
    console.print("[bold green]Perfect code style![/bold green]")


def _write(files: list[str], options: FormatOptions, formatter: CodeFormatter, jobs: int) -> None:
    def _work(path: str) -> bool:
        formatted = format_file(path, options, formatter=formatter)
        target = Path(resolve_filepath(path, options))
        if target.read_bytes().decode("utf-8", errors="replace") != formatted:
            target.write_bytes(formatted.encode("utf-8"))
            logger.debug("Rewrote %s", path)
        return True

    asyncio.run(_run_all(files, jobs, "formatting", _work))


def _print_formatted(files: list[str], options: FormatOptions, formatter: CodeFormatter) -> None:
    for path in files:
        try:
            formatted = format_file(path, options, formatter=formatter)
        except (AsPrettierError, OSError) as exc:
            raise _fail(path, exc) from exc
        typer.echo(formatted, nl=False)


def _format_stdin(stdin_filepath: str | None, options: FormatOptions, formatter: CodeFormatter) -> None:
    if not stdin_filepath:
        err_console.print("[bold red]--stdin-filepath must be specified when piping to stdin[/bold red]")
        raise typer.Exit(1)

    code = sys.stdin.read()
    try:
        formatted = format_source(code, stdin_filepath, options, formatter=formatter)
    except AsPrettierError as exc:
        raise _fail(stdin_filepath, exc) from exc
    typer.echo(formatted, nl=False)


def format_command(
    files: Annotated[list[str] | None, typer.Argument(help="Files to format.", show_default=False)] = None,
    check: Annotated[bool, typer.Option("--check", "-c", help="Check if the given files are formatted.")] = False,
    write: Annotated[bool, typer.Option("--write", "-w", help="Edit files in-place. (Beware!)")] = False,
    config: Annotated[
        str | None,
        typer.Option(help="Path to a Prettier configuration file (.prettierrc, package.json, prettier.config.js)."),
    ] = None,
    stdin_filepath: Annotated[
        str | None,
        typer.Option(help="Path to the file to pretend that stdin comes from. Must be set when stdin is used."),
    ] = None,
    jobs: Annotated[
        int | None, typer.Option("--jobs", "-j", min=1, help="Files to process concurrently with --check/--write.")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr.")] = False,
) -> None:
    """Format AssemblyScript files with Prettier.

    By default, output is written to stdout. Stdin is read if it is piped to
    as-prettier and no files are given.
    """
    _configure_logging(verbose)
    options = FormatOptions(config=config)
    formatter = _get_formatter()

    if not files:
        if stdin_filepath is not None or not sys.stdin.isatty():
            _format_stdin(stdin_filepath, options, formatter)
            return
        err_console.print("[bold red]No input files given.[/bold red] Run with --help for usage.")
        raise typer.Exit(1)

    worker_count = jobs or os.cpu_count() or 1
    if check:
        _check(files, options, formatter, worker_count)
    elif write:
        _write(files, options, formatter, worker_count)
    else:
        _print_formatted(files, options, formatter)
