"""Text helpers for the log panes: greedy word wrap and clock labels."""
from datetime import datetime


def wrap_text(text: str, width: int) -> list[str]:
    """Greedy word-wrap of text to width columns.

    Words are split on single spaces and never broken, so a line may exceed
    width when a single word is longer than width. A non-positive width
    returns the text unchanged as a single line.
    """
    if width <= 0:
        return [text]

    lines: list[str] = []
    current = ""

    for word in text.split(" "):
        if not current:
            current = word
            continue

        if len(current) + 1 + len(word) > width:
            lines.append(current)
            current = word
        else:
            current += f" {word}"

    if current:
        lines.append(current)

    return lines


def format_time(timestamp: datetime) -> str:
    """12-hour clock label, e.g. "09:05 PM"."""
    return timestamp.strftime("%I:%M %p")
