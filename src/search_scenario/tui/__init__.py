"""
Rich TUI Module

Terminal output for scenario steps using the Rich library.
"""

from search_scenario.tui.console import (
    BlockType,
    ScenarioConsole,
    TUIConfig,
    create_console,
    get_console,
    set_console,
)
from search_scenario.tui.action import print_interaction, print_navigation
from search_scenario.tui.result import print_error, print_result

__all__ = [
    "BlockType",
    "ScenarioConsole",
    "TUIConfig",
    "create_console",
    "get_console",
    "set_console",
    "print_interaction",
    "print_navigation",
    "print_error",
    "print_result",
]
