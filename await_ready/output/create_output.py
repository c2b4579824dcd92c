import sys
from typing import TextIO

from .dots import Dots
from .output_mode import OutputMode
from .output_strategy import OutputStrategy
from .silent import Silent
from .spinner import Spinner


def create_output(
    mode: OutputMode | str,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> OutputStrategy:
    mode = OutputMode(mode)

    match mode:
        case OutputMode.DOTS:
            return Dots(stdout=stdout, stderr=stderr)

        case OutputMode.SPINNER:
            # No cursor control without a terminal.
            if not (stdout or sys.stdout).isatty():
                return Dots(stdout=stdout, stderr=stderr)

            return Spinner(stdout=stdout, stderr=stderr)

        case OutputMode.SILENT:
            return Silent(stdout=stdout, stderr=stderr)
