"""
RESULT blocks for step outcomes.
"""

from typing import Optional

from rich.text import Text

from .console import ScenarioConsole, get_console


def print_result(
    content: str,
    *,
    success: bool = True,
    title: Optional[str] = None,
    console: Optional[ScenarioConsole] = None,
) -> None:
    """
    Print a RESULT block displaying a step outcome.

    Args:
        content: The result content to display
        success: Whether the step passed
        title: Custom title (overrides default "[RESULT]")
        console: Console to use (defaults to global console)
    """
    console = console or get_console()

    text = Text()
    status_icon = "✓" if success else "✗"
    status_style = "green" if success else "red"
    text.append(f"{status_icon} ", style=f"bold {status_style}")
    text.append(content)

    console.print_block(text, "result", title=title)


def print_error(
    error_message: str,
    *,
    error_type: Optional[str] = None,
    suggestion: Optional[str] = None,
    console: Optional[ScenarioConsole] = None,
) -> None:
    """
    Print an error result block.

    Args:
        error_message: The error message
        error_type: Type/category of error
        suggestion: Suggestion for resolution
        console: Console to use (defaults to global console)
    """
    console = console or get_console()

    content = Text()
    content.append("❌ Error", style="bold red")
    if error_type:
        content.append(f" ({error_type})", style="dim red")
    content.append("\n\n")
    content.append(error_message)

    if suggestion:
        content.append("\n\n")
        content.append("💡 ", style="bold")
        content.append(suggestion, style="italic")

    console.print_block(content, "result", border_style="red")
