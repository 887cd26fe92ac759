"""View processor - writes one view's changelog."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from schema_docs.config import Settings
from schema_docs.schemas import SchemaVersion
from schema_docs.services.documents import render_changelog
from schema_docs.services.semver import select_latest
from schema_docs.storage import FileSystem
from generator.schema_loader import SchemaLoader

logger = logging.getLogger("schema_docs")


class ViewResult(BaseModel):
    """Outcome of processing one view directory."""

    name: str
    versions_written: int = 0
    changelog_path: Optional[str] = None
    latest: Optional[SchemaVersion] = None


class ViewProcessor:
    """
    Processes one view directory.

    Handles:
    - Loading and filtering the view's schema files
    - Rewriting the view's changelog from the records present
    - Picking the latest record for the summary
    """

    def __init__(self, fs: FileSystem, loader: SchemaLoader, settings: Settings):
        self.fs = fs
        self.loader = loader
        self.settings = settings

    def process(self, view_dir: Path) -> ViewResult:
        """
        Process a view directory.

        A view without valid records gets no changelog; an existing
        changelog from an earlier run is left as it is.

        Args:
            view_dir: View directory

        Returns:
            ViewResult with the count written and the latest record
        """
        records = self.loader.load_view(view_dir)
        document = render_changelog(records)
        if document is None:
            return ViewResult(name=view_dir.name)

        changelog_path = view_dir / self.settings.CHANGELOG_FILENAME
        self.fs.write_text(changelog_path, document)
        logger.info(f"Wrote {len(records)} versions to {changelog_path}")

        return ViewResult(
            name=view_dir.name,
            versions_written=len(records),
            changelog_path=str(changelog_path),
            latest=select_latest(records),
        )
