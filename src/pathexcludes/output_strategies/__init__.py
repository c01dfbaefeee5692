"""Output strategies for rendering generated path excludes."""

from .base_strategy import OutputStrategy
from .json_strategy import JSONOutputStrategy
from .text_strategy import TextOutputStrategy

OUTPUT_STRATEGIES = {
    "json": JSONOutputStrategy,
    "text": TextOutputStrategy,
}


def create_output_strategy(output_format: str) -> OutputStrategy:
    """Create the output strategy for a format name ("json" or "text").

    Raises:
        ValueError: If the format is not supported.
    """
    if output_format not in OUTPUT_STRATEGIES:
        raise ValueError(f"Unsupported output format: {output_format}")
    return OUTPUT_STRATEGIES[output_format]()


__all__ = [
    "OUTPUT_STRATEGIES",
    "JSONOutputStrategy",
    "OutputStrategy",
    "TextOutputStrategy",
    "create_output_strategy",
]
