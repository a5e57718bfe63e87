"""
Terminal rendering for the console: toasts, alerts and page payloads
"""
import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from bmcpage.page.notification import Toast

console = Console()


def show_toast(toast: Toast) -> None:
    """Render a save notification the way the web console's toast looks"""
    style = "bold red" if toast.severity == "error" else f"bold {toast.color}"
    body = Text(toast.message, style=style)
    console.print(
        Panel(
            body,
            title=toast.kind,
            subtitle=f"{toast.duration_ms} ms",
            border_style=style,
            expand=False,
        ),
        justify="center" if toast.position.endswith("center") else "left",
    )


def alert(message: str) -> None:
    console.print(Panel(Text(message, style="bold red"), title="alert", border_style="red", expand=False))


def make_payload_printer(tag: str):
    """Build a renderer that pretty-prints a payload under a heading for ``tag``"""

    def _render(payload: Any) -> None:
        text = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
        console.print(Panel(Syntax(text, "json", word_wrap=True), title=tag, expand=False))

    return _render
