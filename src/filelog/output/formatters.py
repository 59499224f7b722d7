"""Rich output formatters for the CLI."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from filelog.core.formatting import SEPARATOR
from filelog.models.result import WriteResult

_STATUS_STYLES = {
    "LOGGED": "status.logged",
    "SKIPPED": "status.skipped",
    "FAILED": "status.failed",
}


def format_write_result(result: WriteResult, console: Console) -> None:
    """Print one line describing an error write outcome."""
    label = result.status_label
    text = Text(f"[{label}]", style=_STATUS_STYLES.get(label, "dim"))
    if result.path is not None:
        text.append(f" {result.path}", style="path")
    if result.reason:
        text.append(f" ({result.reason})")
    console.print(text)


def format_log_lines(lines: list[str], console: Console) -> None:
    """Print log file lines with the timestamp highlighted."""
    for line in lines:
        stamp, sep, rest = line.rstrip("\n").partition(SEPARATOR)
        if not sep:
            console.print(Text(stamp))
            continue
        text = Text(stamp, style="timestamp")
        text.append(sep)
        if rest.startswith("Error "):
            code, colon, message = rest.partition(":")
            text.append(code, style="error.code")
            text.append(colon + message)
        else:
            text.append(rest)
        console.print(text)
