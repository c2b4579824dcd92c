from .output_strategy import OutputStrategy


class Silent(OutputStrategy):
    pass
