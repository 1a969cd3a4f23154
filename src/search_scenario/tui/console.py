"""
Rich Console Setup

Console infrastructure for scenario step output, configured via
environment variables.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Mapping, Optional

from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.theme import Theme


BlockType = Literal["action", "result"]


@dataclass
class TUIConfig:
    """
    TUI configuration loaded from environment variables.

    Attributes:
        color_action: Color for ACTION blocks (browser steps)
        color_result: Color for RESULT blocks (outcomes)
        show_timestamps: Whether to display timestamps
    """

    color_action: str = "green"
    color_result: str = "yellow"
    show_timestamps: bool = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "TUIConfig":
        """Load configuration from environment variables."""
        env = os.environ if env is None else env
        return cls(
            color_action=env.get("COLOR_ACTION", "green"),
            color_result=env.get("COLOR_RESULT", "yellow"),
            show_timestamps=env.get("SHOW_TIMESTAMPS", "true").lower() == "true",
        )


def create_theme(config: TUIConfig) -> Theme:
    """Create a Rich theme from TUI configuration."""
    return Theme(
        {
            "action": Style(color=config.color_action, bold=True),
            "action.text": Style(color=config.color_action),
            "result": Style(color=config.color_result, bold=True),
            "result.text": Style(color=config.color_result),
            "timestamp": Style(dim=True),
            "label": Style(bold=True),
        }
    )


class ScenarioConsole:
    """
    Rich console wrapper for scenario output.

    Prints browser steps and their outcomes as styled panels with
    optional timestamps.
    """

    def __init__(
        self,
        config: Optional[TUIConfig] = None,
        console: Optional[Console] = None,
    ):
        """
        Initialize the scenario console.

        Args:
            config: TUI configuration. If None, loads from environment.
            console: Underlying Rich console (e.g. one recording to a buffer)
        """
        self.config = config or TUIConfig.from_env()
        self._theme = create_theme(self.config)
        self.console = console or Console(theme=self._theme)

    def _get_timestamp(self) -> str:
        """Get formatted timestamp if enabled."""
        if self.config.show_timestamps:
            return datetime.now().strftime("%H:%M:%S")
        return ""

    def format_title(self, label: str) -> str:
        """Prefix a block label with the timestamp when enabled."""
        timestamp = self._get_timestamp()
        if timestamp:
            return f"{timestamp} {label}"
        return label

    def print_block(
        self,
        content,
        block_type: BlockType,
        title: Optional[str] = None,
        border_style: Optional[str] = None,
    ) -> None:
        """
        Print a styled block to the console.

        Args:
            content: Text or renderable to display
            block_type: Type of block (action, result)
            title: Optional title to override default label
            border_style: Override the block colour
        """
        color = (
            self.config.color_action
            if block_type == "action"
            else self.config.color_result
        )
        panel = Panel(
            content,
            title=self.format_title(title or f"[{block_type.upper()}]"),
            title_align="left",
            border_style=border_style or color,
            padding=(0, 1),
        )
        self.console.print(panel)

    def print(self, *args, **kwargs) -> None:
        """Passthrough to underlying Rich console."""
        self.console.print(*args, **kwargs)


_console: Optional[ScenarioConsole] = None


def get_console() -> ScenarioConsole:
    """Get or create the global console instance."""
    global _console
    if _console is None:
        _console = ScenarioConsole()
    return _console


def set_console(console: Optional[ScenarioConsole]) -> None:
    """Replace the global console (None resets to lazy creation)."""
    global _console
    _console = console


def create_console(
    config: Optional[TUIConfig] = None,
    console: Optional[Console] = None,
) -> ScenarioConsole:
    """Create a new console instance with optional configuration."""
    return ScenarioConsole(config, console)
