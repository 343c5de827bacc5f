"""Format AssemblyScript through prettier with decorators hidden in comments."""

from pathlib import Path

from as_prettier.core.markers import mark_code, unmark
from as_prettier.core.ports.formatter import CodeFormatter
from as_prettier.core.ports.parser import DialectParser
from as_prettier.models import FormatOptions


def _default_parser() -> DialectParser:
    from as_prettier.parser.tree_sitter_parser import TreeSitterDialectParser

    return TreeSitterDialectParser()


def _default_formatter() -> CodeFormatter:
    from as_prettier.formatter.prettier import PrettierFormatter

    return PrettierFormatter()


def format_code(
    code: str,
    filepath: str,
    config: str | None = None,
    *,
    parser: DialectParser | None = None,
    formatter: CodeFormatter | None = None,
) -> str:
    marked = mark_code(code, parser or _default_parser())
    formatted = (formatter or _default_formatter()).format(marked, filepath, config)
    return unmark(formatted)


def check_code(
    code: str,
    filepath: str,
    config: str | None = None,
    *,
    parser: DialectParser | None = None,
    formatter: CodeFormatter | None = None,
) -> bool:
    """Return True if prettier would leave ``code`` untouched."""
    marked = mark_code(code, parser or _default_parser())
    return (formatter or _default_formatter()).format(marked, filepath, config) == marked


def resolve_filepath(path: str, options: FormatOptions) -> str:
    cwd = Path(options.cwd) if options.cwd else Path.cwd()
    return str((cwd / path).resolve())


def format_source(
    code: str,
    path: str,
    options: FormatOptions | None = None,
    *,
    parser: DialectParser | None = None,
    formatter: CodeFormatter | None = None,
) -> str:
    options = options or FormatOptions()
    return format_code(code, resolve_filepath(path, options), options.config, parser=parser, formatter=formatter)


def check_source(
    code: str,
    path: str,
    options: FormatOptions | None = None,
    *,
    parser: DialectParser | None = None,
    formatter: CodeFormatter | None = None,
) -> bool:
    options = options or FormatOptions()
    return check_code(code, resolve_filepath(path, options), options.config, parser=parser, formatter=formatter)


def format_file(
    path: str,
    options: FormatOptions | None = None,
    *,
    parser: DialectParser | None = None,
    formatter: CodeFormatter | None = None,
) -> str:
    options = options or FormatOptions()
    code = _read_source(path, options)
    return format_source(code, path, options, parser=parser, formatter=formatter)


def check_file(
    path: str,
    options: FormatOptions | None = None,
    *,
    parser: DialectParser | None = None,
    formatter: CodeFormatter | None = None,
) -> bool:
    options = options or FormatOptions()
    code = _read_source(path, options)
    return check_source(code, path, options, parser=parser, formatter=formatter)


def _read_source(path: str, options: FormatOptions) -> str:
    file_path = Path(resolve_filepath(path, options))
    try:
        return file_path.read_bytes().decode("utf-8", errors="replace")
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None
