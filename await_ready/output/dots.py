from termcolor import colored

from .format_elapsed import format_elapsed
from .output_strategy import OutputStrategy


class Dots(OutputStrategy):
    """Prints one dot per failed attempt, then a single result line."""

    def __init__(self, stdout=None, stderr=None) -> None:
        super().__init__(stdout=stdout, stderr=stderr)
        self._dots_printed = False

    def on_retry(self, attempt: int, elapsed: int):
        self._dots_printed = True
        self._write(self.stdout, ".")

    async def on_success(self, host: str, port: int, elapsed: int):
        self._end_dots()
        self._write(
            self.stdout,
            f"{colored('✔', 'green')} Connected to {host}:{port} ({format_elapsed(elapsed)})\n",
        )

    async def on_failure(self, message: str, elapsed: int):
        self._end_dots()
        self._write(
            self.stderr,
            f"{colored('✖', 'red')} {message} ({format_elapsed(elapsed)})\n",
        )

    def _end_dots(self):
        if self._dots_printed:
            self._write(self.stdout, "\n")
            self._dots_printed = False
