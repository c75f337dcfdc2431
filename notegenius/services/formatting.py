"""
Markdown formatting actions for the editor.

Pure string transforms: wrapping a selection, appending snippets and a small
markdown-to-HTML preview. The editor session records an undo snapshot
before applying any of them.
"""

import html
import re
from datetime import datetime
from enum import Enum

from notegenius.services.tasks import format_task_line


class FormatType(str, Enum):
    """Selection formatting actions."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    UL = "ul"
    OL = "ol"
    QUOTE = "quote"
    CODE = "code"
    INDENT = "indent"
    OUTDENT = "outdent"


INDENT = "    "

_WRAPPERS: dict[FormatType, tuple[str, str]] = {
    FormatType.BOLD: ("**", "**"),
    FormatType.ITALIC: ("*", "*"),
    FormatType.UNDERLINE: ("<u>", "</u>"),
    FormatType.STRIKETHROUGH: ("~~", "~~"),
    FormatType.H1: ("# ", ""),
    FormatType.H2: ("## ", ""),
    FormatType.H3: ("### ", ""),
    FormatType.UL: ("- ", ""),
    FormatType.OL: ("1. ", ""),
    FormatType.QUOTE: ("> ", ""),
    FormatType.CODE: ("`", "`"),
    FormatType.INDENT: (INDENT, ""),
}

TABLE_SNIPPET = (
    "\n"
    "| Header 1 | Header 2 | Header 3 |\n"
    "|----------|----------|----------|\n"
    "| Cell 1   | Cell 2   | Cell 3   |\n"
    "| Cell 4   | Cell 5   | Cell 6   |\n"
)
DIVIDER_SNIPPET = "\n\n---\n\n"
CHECKBOX_SNIPPET = "\n" + format_task_line("")


def format_selection(selected: str, fmt: FormatType) -> str:
    """Apply one formatting action to the selected text."""
    fmt = FormatType(fmt)
    if fmt is FormatType.OUTDENT:
        return selected[len(INDENT) :] if selected.startswith(INDENT) else selected
    prefix, suffix = _WRAPPERS[fmt]
    return f"{prefix}{selected}{suffix}"


def apply_format(content: str, fmt: FormatType, start: int, end: int) -> str:
    """
    Format the content[start:end] selection in place.

    The range is clamped to the buffer and reordered if start > end, so an
    empty selection inserts the bare markers at the caret.
    """
    start, end = sorted((max(0, min(start, len(content))), max(0, min(end, len(content)))))
    return content[:start] + format_selection(content[start:end], fmt) + content[end:]


def link_snippet(text: str, url: str) -> str:
    return f"[{text}]({url})"


def image_snippet(alt_text: str, url: str) -> str:
    return f"![{alt_text}]({url})"


def code_block_snippet(language: str = "") -> str:
    return f"\n```{language}\n// Your code here\n```\n"


def timestamp_snippet(now: datetime | None = None) -> str:
    now = now or datetime.now()
    return f"\n\n**{now.strftime('%Y-%m-%d %H:%M:%S')}**\n"


def find_replace(content: str, find: str, replacement: str) -> tuple[str, int]:
    """
    Replace every occurrence of find.

    Empty find or empty replacement is a no-op.

    Returns:
        (new content, number of replacements)
    """
    if not find or not replacement:
        return content, 0
    count = content.count(find)
    return content.replace(find, replacement), count


_PREVIEW_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^### (.*)$", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^## (.*)$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^# (.*)$", re.MULTILINE), r"<h1>\1</h1>"),
    (re.compile(r"\*\*(.*?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.*?)\*"), r"<em>\1</em>"),
    (re.compile(r"&lt;u&gt;(.*?)&lt;/u&gt;"), r"<u>\1</u>"),
    (re.compile(r"^- (.*)$", re.MULTILINE), r"<li>\1</li>"),
    (re.compile(r"^\d+\. (.*)$", re.MULTILINE), r"<li>\1</li>"),
]


def render_preview(content: str) -> str:
    """
    Render the markdown subset the editor produces as HTML.

    Headings, bold, italic, underline and list items are converted; all
    other text is escaped and newlines become <br>.
    """
    rendered = html.escape(content, quote=False)
    for pattern, replacement in _PREVIEW_RULES:
        rendered = pattern.sub(replacement, rendered)
    return rendered.replace("\n", "<br>")
