"""
ACTION blocks for browser steps.
"""

from typing import Optional

from rich.text import Text

from .console import ScenarioConsole, get_console


def print_navigation(
    url: str,
    *,
    console: Optional[ScenarioConsole] = None,
) -> None:
    """
    Print a navigation action block.

    Args:
        url: Target URL
        console: Console to use (defaults to global console)
    """
    console = console or get_console()

    content = Text()
    content.append("🌐 ", style="bold")
    content.append("Navigate", style="bold green")
    content.append("\n\n")
    content.append("URL: ", style="dim")
    content.append(url, style="underline")

    console.print_block(content, "action")


def print_interaction(
    element_description: str,
    interaction_type: str,
    *,
    value: Optional[str] = None,
    console: Optional[ScenarioConsole] = None,
) -> None:
    """
    Print an element interaction action block.

    Args:
        element_description: Selector or description of the element
        interaction_type: Type of interaction (type, submit)
        value: Value for the interaction (e.g., text to type)
        console: Console to use (defaults to global console)
    """
    console = console or get_console()

    interaction_icons = {
        "type": "⌨️",
        "submit": "⏎",
    }
    icon = interaction_icons.get(interaction_type, "⚡")

    content = Text()
    content.append(f"{icon} ", style="bold")
    content.append(interaction_type.capitalize(), style="bold green")
    content.append("\n\n")
    content.append("Element: ", style="dim")
    content.append(element_description)

    if value is not None:
        content.append("\n")
        content.append("Value: ", style="dim")
        content.append(f'"{value}"')

    console.print_block(content, "action")
