import logging
import os
import shlex
import subprocess
from collections.abc import Sequence

from as_prettier.core.errors import FormatterError

logger = logging.getLogger(__name__)


def get_prettier_command() -> list[str]:
    return shlex.split(os.getenv("AS_PRETTIER_COMMAND") or "prettier")


class PrettierFormatter:
    """Run prettier over stdin with the TypeScript parser.

    Implements the ``CodeFormatter`` protocol. Prettier resolves its own
    configuration from ``filepath`` unless ``config`` names a file.
    """

    def __init__(self, command: Sequence[str] | None = None) -> None:
        self._command = list(command) if command is not None else get_prettier_command()

    def build_args(self, filepath: str, config: str | None = None) -> list[str]:
        args = [*self._command, "--stdin-filepath", filepath, "--parser", "typescript"]
        if config:
            args.extend(["--config", config])
        return args

    def format(self, code: str, filepath: str, config: str | None = None) -> str:
        args = self.build_args(filepath, config)
        logger.debug("Running %s", shlex.join(args))
        try:
            result = subprocess.run(
                args,
                input=code,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except FileNotFoundError:
            raise FormatterError(
                f"Prettier executable not found: {self._command[0]!r}. Set AS_PRETTIER_COMMAND to override."
            ) from None

        if result.returncode != 0:
            raise FormatterError(result.stderr.strip() or f"prettier exited with code {result.returncode}")
        return result.stdout
