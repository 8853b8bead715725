from enum import StrEnum

from rich.markup import escape


class Tone(StrEnum):
    """
    Standardized colors for status markers in text output.
    """

    SUCCESS = "green"
    FAILURE = "red"
    NOTICE = "yellow"
    INFO = "blue"
    MUTED = "dim"


def colorize(text: str, tone: Tone) -> str:
    """
    Wraps text in Rich-compatible color tags.

    The text is escaped first, so bucket and object names containing square
    brackets are printed literally.

    Args:
        text: The string to be colored.
        tone: The Tone enum value (e.g., Tone.SUCCESS).

    Returns:
        String formatted as '[color]text[/color]'
    """
    return f"[{tone}]{escape(text)}[/{tone}]"


def visibility_marker(is_public: bool) -> str:
    if is_public:
        return colorize("🌐 Public", Tone.NOTICE)
    return colorize("🔒 Private", Tone.SUCCESS)


def outcome_marker(succeeded: bool) -> str:
    if succeeded:
        return colorize("✓", Tone.SUCCESS)
    return colorize("✗", Tone.FAILURE)
