"""Render the markdown subset used in chat replies as safe HTML.

Supported: pipe tables, **bold**, *italic*, `code`, ``#`` to ``###``
headings (rendered as a bold lead-in), ``-``/``•`` bullet lists and
paragraphs. The input is escaped before any markup is introduced, so the
only tags in the output are the ones emitted here.
"""

import re

TABLE_CLASS = "qb-table"
HEADING_CLASS = "qb-heading"

_TABLE_BLOCK = re.compile(r"^\|[^\n]*\|[ \t]*(?:\n\|[^\n]*\|[ \t]*)*$", re.MULTILINE)
_BOLD = re.compile(r"\*\*([^<>\n]+?)\*\*")
_ITALIC = re.compile(r"\*([^*<>\n]+?)\*")
_CODE = re.compile(r"`([^`<>]+)`")
_HEADING = re.compile(r"^#{1,3}[ \t]+(.+)$", re.MULTILINE)
_LIST_ITEM = re.compile(r"^[-•][ \t]+(.+)$", re.MULTILINE)
_LIST_RUN = re.compile(r"(?:<li>.*?</li>\n?)+")
_PARAGRAPH_BREAK = re.compile(r"\n{2,}")
_BLOCK = re.compile(rf'(<table class="{TABLE_CLASS}">.*?</table>|<ul>.*?</ul>)')


def escape_html(text: str) -> str:
    """Escape the characters that are significant in HTML text content."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _drop_trailing_partial_row(text: str) -> str:
    cut = text.rfind("\n")
    if cut < 0:
        return text
    last = text[cut + 1:]
    if last.startswith("|") and not last.rstrip().endswith("|"):
        return text[:cut]
    return text


def _cells(row: str) -> list[str]:
    return [cell.strip() for cell in row.split("|")[1:-1]]


def render_table(block: str) -> str:
    """Render a block of pipe rows; the second row is the separator."""
    rows = [row.strip() for row in block.strip().split("\n")]
    rows = [row for row in rows if row.startswith("|") and row.endswith("|")]
    if len(rows) < 2:
        return block

    header, _separator, *body = rows
    head = "".join(f"<th>{cell}</th>" for cell in _cells(header))
    body_rows = "".join(
        "<tr>" + "".join(f"<td>{cell}</td>" for cell in _cells(row)) + "</tr>"
        for row in body
    )
    return (
        f'<table class="{TABLE_CLASS}"><thead><tr>{head}</tr></thead>'
        f"<tbody>{body_rows}</tbody></table>"
    )


def _render_list_run(match: re.Match[str]) -> str:
    return "<ul>" + match.group(0).replace("\n", "") + "</ul>"


def _render_paragraph(chunk: str) -> str:
    parts = []
    for piece in _BLOCK.split(chunk):
        if _BLOCK.fullmatch(piece):
            parts.append(piece)
            continue
        piece = piece.strip("\n")
        if piece.strip():
            parts.append("<p>" + piece.replace("\n", "<br/>") + "</p>")
    return "".join(parts)


def render_markdown(text: str) -> str:
    """Convert chat markdown to HTML.

    Never raises: unbalanced or unknown markup is left as escaped text.

    Args:
        text: Markdown text (usually a shaped reply)

    Returns:
        HTML fragment safe to insert without further escaping
    """
    out = escape_html(text)
    out = _drop_trailing_partial_row(out)
    out = _TABLE_BLOCK.sub(lambda m: render_table(m.group(0)), out)

    out = _BOLD.sub(r"<strong>\1</strong>", out)
    out = _ITALIC.sub(r"<em>\1</em>", out)
    out = _CODE.sub(r"<code>\1</code>", out)

    out = _HEADING.sub(rf'<strong class="{HEADING_CLASS}">\1</strong>', out)
    out = _LIST_ITEM.sub(r"<li>\1</li>", out)
    out = _LIST_RUN.sub(_render_list_run, out)

    return "".join(_render_paragraph(chunk) for chunk in _PARAGRAPH_BREAK.split(out))
