"""Markdown table rendering and parsing for column metadata."""

import re
from typing import List, Sequence

from schema_docs.schemas import ColumnMeta

TABLE_HEADER = ["Column", "Type", "Nullable", "Confidential", "Description", "Notes"]

MIN_CELL_WIDTH = 3
YES, NO = "YES", "NO"

_CELL_SPLIT = re.compile(r"(?<!\\)\|")


def _escape(value: str) -> str:
    # after escaping, the only "<" left in a cell is the one in "<br>"
    value = value.replace("&", "&amp;").replace("<", "&lt;")
    return value.replace("|", "\\|").replace("\r\n", "\n").replace("\n", "<br>")


def _unescape(value: str) -> str:
    value = value.replace("<br>", "\n").replace("\\|", "|")
    return value.replace("&lt;", "<").replace("&amp;", "&")


def _flag(value: bool) -> str:
    return YES if value else NO


def _parse_flag(token: str) -> bool:
    if token == YES:
        return True
    if token == NO:
        return False
    raise ValueError(f"Expected {YES} or {NO}, got {token!r}")


def column_row(column: ColumnMeta) -> List[str]:
    """Cells for one column, in header order."""
    return [
        column.name,
        column.type,
        _flag(column.nullable),
        _flag(column.confidential),
        column.description,
        column.notes or "",
    ]


def render_table(columns: Sequence[ColumnMeta]) -> str:
    """
    Render columns as an aligned pipe table.

    Args:
        columns: Columns in display order

    Returns:
        Markdown table text without a trailing newline
    """
    rows = [TABLE_HEADER] + [column_row(column) for column in columns]
    rows = [[_escape(cell) for cell in row] for row in rows]

    widths = [
        max(MIN_CELL_WIDTH, *(len(row[index]) for row in rows))
        for index in range(len(TABLE_HEADER))
    ]

    def format_row(cells: Sequence[str]) -> str:
        padded = [cell.ljust(width) for cell, width in zip(cells, widths)]
        return "| " + " | ".join(padded) + " |"

    lines = [format_row(rows[0]), format_row(["-" * width for width in widths])]
    lines.extend(format_row(row) for row in rows[1:])
    return "\n".join(lines)


def _split_cells(line: str) -> List[str]:
    inner = line.strip()
    if inner.startswith("|"):
        inner = inner[1:]
    if inner.endswith("|") and not inner.endswith("\\|"):
        inner = inner[:-1]
    return [_unescape(cell.strip()) for cell in _CELL_SPLIT.split(inner)]


def parse_table(text: str) -> List[ColumnMeta]:
    """
    Read a table produced by render_table back into column metadata.

    Raises:
        ValueError: If the text is not a column table
    """
    lines = [line for line in text.splitlines() if line.strip().startswith("|")]
    if len(lines) < 2:
        raise ValueError("Markdown table needs a header and a delimiter row")

    header = _split_cells(lines[0])
    if header != TABLE_HEADER:
        raise ValueError(f"Unexpected table header: {header}")

    columns = []
    for line in lines[2:]:
        cells = _split_cells(line)
        if len(cells) != len(TABLE_HEADER):
            raise ValueError(f"Expected {len(TABLE_HEADER)} cells, got {len(cells)}")
        name, type_, nullable, confidential, description, notes = cells
        columns.append(
            ColumnMeta(
                name=name,
                type=type_,
                nullable=_parse_flag(nullable),
                confidential=_parse_flag(confidential),
                description=description,
                notes=notes or None,
            )
        )
    return columns
