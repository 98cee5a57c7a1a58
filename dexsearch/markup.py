# ABOUTME: The small closed markup vocabulary used in replies (bold, links, spans, lists).
# ABOUTME: Also converts that vocabulary to Rich console markup for the CLI.

import html
import re
from collections.abc import Iterable

from rich.markup import escape as rich_escape


def text(value: object) -> str:
    """Escape plain text (names from the dataset or user input) for use in a reply."""
    return html.escape(str(value), quote=False)


def bold(content: str) -> str:
    """Wrap already escaped content in bold."""
    return f"<b>{content}</b>"


def link(label: str, href: str) -> str:
    """Hyperlink anchor; label and href are escaped here."""
    return f'<a href="{html.escape(href)}">{text(label)}</a>'


def span(content: str, css_class: str) -> str:
    """Wrap already escaped content in a styled span."""
    return f'<span class="{html.escape(css_class)}">{content}</span>'


def bullet_list(items: Iterable[str], css_class: str | None = None) -> str:
    """Render already escaped items as an unordered list."""
    opening = f'<ul class="{html.escape(css_class)}">' if css_class else "<ul>"
    return opening + "".join(f"<li>{item}</li>" for item in items) + "</ul>"


_CONSOLE_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"<b>"), "[bold]"),
    (re.compile(r"</b>"), "[/bold]"),
    (re.compile(r'<a href="([^"]*)">'), r"[link=\1]"),
    (re.compile(r"</a>"), "[/link]"),
    (re.compile(r'<span class="[^"]*">|</span>'), ""),
    (re.compile(r'<ul(?: class="[^"]*")?>|</ul>|</li>'), ""),
    (re.compile(r"<li>"), "\n  - "),
)


def to_console(markup: str) -> str:
    """Convert reply markup to Rich console markup.

    Examples:
        >>> to_console("<b>Ground</b>, Water")
        '[bold]Ground[/bold], Water'
    """
    result = rich_escape(markup)
    for pattern, replacement in _CONSOLE_RULES:
        result = pattern.sub(replacement, result)
    return html.unescape(result)
