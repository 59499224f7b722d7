"""Rich console singleton and theme for filelog."""

from rich.console import Console
from rich.theme import Theme

FILELOG_THEME = Theme({
    "status.logged": "bold green",
    "status.skipped": "dim",
    "status.failed": "bold red",
    "timestamp": "cyan",
    "error.code": "bold red",
    "header": "bold #e94560",
    "path": "bold white",
})

console = Console(theme=FILELOG_THEME)
error_console = Console(stderr=True, theme=FILELOG_THEME)
