import sys
from typing import TextIO


class OutputStrategy:
    """
    Terminal feedback for a single readiness wait. Subclasses override
    only the hooks they render, the defaults do nothing.
    """

    def __init__(
        self,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    async def on_start(self, host: str, port: int):
        pass

    def on_retry(self, attempt: int, elapsed: int):
        pass

    async def on_success(self, host: str, port: int, elapsed: int):
        pass

    async def on_failure(self, message: str, elapsed: int):
        pass

    async def dispose(self):
        pass

    def _write(self, stream: TextIO, text: str):
        stream.write(text)
        stream.flush()
