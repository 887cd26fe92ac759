"""Changelog and summary document assembly."""

from typing import Optional, Sequence, Tuple

from schema_docs.schemas import SchemaVersion
from schema_docs.services.markdown_table import render_table
from schema_docs.services.semver import sort_descending

SECTION_SEPARATOR = "\n\n"
SUMMARY_SEPARATOR = "\n\n---\n\n"


def _finish(text: str) -> str:
    return text.rstrip() + "\n"


def render_version_section(record: SchemaVersion) -> str:
    """Version heading followed by the column table."""
    return f"## Version {record.version}\n\n{render_table(record.columns)}"


def render_view_section(record: SchemaVersion) -> str:
    """View heading, version heading and column table for one record."""
    return f"# {record.view}\n\n{render_version_section(record)}"


def render_changelog(records: Sequence[SchemaVersion]) -> Optional[str]:
    """
    Build a view's changelog, newest version first.

    The top heading uses the view name of the first record as given,
    before sorting.

    Args:
        records: Valid records for one view, in listing order

    Returns:
        Markdown document, or None when there are no records
    """
    if not records:
        return None

    heading = f"# {records[0].view}"
    sections = [render_version_section(record) for record in sort_descending(records)]
    return _finish(SECTION_SEPARATOR.join([heading, *sections]))


def add_summary_section(
    sections: Tuple[str, ...], latest: Optional[SchemaVersion]
) -> Tuple[str, ...]:
    """Fold one view's latest record into the summary accumulator."""
    if latest is None:
        return sections
    return sections + (render_view_section(latest),)


def render_summary(
    sections: Sequence[str], title: str, description: str
) -> Optional[str]:
    """
    Build the combined summary document.

    Args:
        sections: Rendered view sections in discovery order
        title: Top-level heading text
        description: Introductory line under the heading

    Returns:
        Markdown document, or None when no view contributed a section
    """
    if not sections:
        return None

    intro = f"# {title}\n\n{description}"
    return _finish(intro + SECTION_SEPARATOR + SUMMARY_SEPARATOR.join(sections))
