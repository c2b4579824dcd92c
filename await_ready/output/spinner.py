import asyncio
import itertools

from termcolor import colored

from .format_elapsed import format_elapsed
from .output_strategy import OutputStrategy


SPINNER_FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
SPINNER_INTERVAL = 80

CLEAR_LINE = "\033[2K\r"


class Spinner(OutputStrategy):
    def __init__(
        self,
        stdout=None,
        stderr=None,
        interval: int = SPINNER_INTERVAL,
    ) -> None:
        super().__init__(stdout=stdout, stderr=stderr)
        self._interval = interval / 1000
        self._cycle = itertools.cycle(SPINNER_FRAMES)
        self._text = ""
        self._stop_spin: asyncio.Event | None = None
        self._spin_task: asyncio.Task | None = None

    async def on_start(self, host: str, port: int):
        self._text = f"Connecting to {host}:{port}..."
        self._render()

        if self._spin_task is None:
            self._stop_spin = asyncio.Event()
            self._spin_task = asyncio.create_task(self._spin())

    def on_retry(self, attempt: int, elapsed: int):
        self._text = f"Waiting... (attempt {attempt}, {format_elapsed(elapsed)})"
        self._render()

    async def on_success(self, host: str, port: int, elapsed: int):
        await self._stop()
        self._write(
            self.stdout,
            f"{CLEAR_LINE}{colored('✔', 'green')} Connected to {host}:{port} ({format_elapsed(elapsed)})\n",
        )

    async def on_failure(self, message: str, elapsed: int):
        await self._stop()
        self._write(self.stdout, CLEAR_LINE)
        self._write(
            self.stderr,
            f"{colored('✖', 'red')} {message} ({format_elapsed(elapsed)})\n",
        )

    async def dispose(self):
        await self._stop()

    async def _spin(self):
        while not self._stop_spin.is_set():
            try:
                await asyncio.wait_for(
                    self._stop_spin.wait(),
                    timeout=self._interval,
                )

            except asyncio.TimeoutError:
                self._render()

    async def _stop(self):
        if self._spin_task is None:
            return

        self._stop_spin.set()
        await self._spin_task

        self._spin_task = None
        self._stop_spin = None

    def _render(self):
        frame = next(self._cycle)
        self._write(
            self.stdout,
            f"{CLEAR_LINE}{colored(frame, 'yellow')} {self._text}",
        )
