"""
Text helpers shared by the node catalog.
"""


def indent(text: str, width: int) -> str:
    """Prefix every line of a text block with spaces.

    The text is split on newlines and each piece, the first one included,
    gets ``width`` spaces in front. An empty string still receives the
    prefix on its single empty line.

    Args:
        text: Rendered text, possibly spanning several lines
        width: Number of spaces to prefix (must be non-negative)

    Returns:
        str: The indented text

    Raises:
        ValueError: If width is negative
    """
    if width < 0:
        raise ValueError(f"Indent width must be non-negative, got {width}")

    prefix = " " * width
    return "\n".join(prefix + line for line in text.split("\n"))
