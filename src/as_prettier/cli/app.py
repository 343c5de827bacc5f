import typer

from as_prettier.cli.format import format_command

app = typer.Typer(
    name="as-prettier",
    help="Prettier for AssemblyScript: format TypeScript-dialect code with decorators anywhere.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("format")(format_command)


def main() -> None:
    app()
