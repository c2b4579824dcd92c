from enum import Enum


class OutputMode(Enum):
    DOTS = "dots"
    SPINNER = "spinner"
    SILENT = "silent"


def output_mode_names() -> list[str]:
    return [mode.value for mode in OutputMode]
