from .create_output import create_output as create_output
from .dots import Dots as Dots
from .format_elapsed import format_elapsed as format_elapsed
from .output_mode import (
    OutputMode as OutputMode,
    output_mode_names as output_mode_names,
)
from .output_strategy import OutputStrategy as OutputStrategy
from .silent import Silent as Silent
from .spinner import (
    SPINNER_FRAMES as SPINNER_FRAMES,
    Spinner as Spinner,
)
