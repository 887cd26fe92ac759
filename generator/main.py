"""
Generator main entry point - rewrites changelogs and the schema summary.

Run with: python -m generator.main
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel

from schema_docs.config import Settings, get_settings
from schema_docs.core.exceptions import SchemaDocsError
from schema_docs.core.logging_config import setup_logging
from schema_docs.services.documents import add_summary_section, render_summary
from schema_docs.storage import FileSystem, LocalFileSystem
from generator.schema_loader import SchemaLoader
from generator.view_processor import ViewProcessor, ViewResult

logger = logging.getLogger("schema_docs")


class RunReport(BaseModel):
    """Outcome of one generator run."""

    views: List[ViewResult] = []
    summary_path: Optional[str] = None
    summary_views: int = 0


class DocGenerator:
    """
    Single pass over the schemas root.

    Views are processed one at a time in listing order; each view's latest
    record is folded into the summary sections as the view completes.
    """

    def __init__(
        self,
        fs: Optional[FileSystem] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.fs = fs or LocalFileSystem()
        self.loader = SchemaLoader(self.fs, self.settings)
        self.processor = ViewProcessor(self.fs, self.loader, self.settings)

    def run(self) -> RunReport:
        """
        Write every view's changelog, then the combined summary.

        Returns:
            RunReport describing what was written

        Raises:
            SchemaRootNotFound: If the schemas root is missing
            SchemaParseError: If a schema file cannot be decoded
        """
        report = RunReport()
        sections: Tuple[str, ...] = ()

        for view_dir in self.loader.list_views():
            result = self.processor.process(view_dir)
            report.views.append(result)
            sections = add_summary_section(sections, result.latest)

        document = render_summary(
            sections,
            title=self.settings.SUMMARY_TITLE,
            description=self.settings.SUMMARY_DESCRIPTION,
        )
        if document is None:
            return report

        summary_path = Path(self.settings.SUMMARY_PATH)
        self.fs.write_text(summary_path, document)
        logger.info(f"Wrote combined {summary_path} with {len(sections)} views.")

        report.summary_path = str(summary_path)
        report.summary_views = len(sections)
        return report


def main():
    """Entry point for the generator."""
    settings = get_settings()
    setup_logging(settings)
    logger.debug(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.debug(f"Schemas directory: {settings.SCHEMAS_DIR}")

    try:
        DocGenerator(settings=settings).run()
    except KeyboardInterrupt:
        logger.info("Generator interrupted")
        sys.exit(130)
    except SchemaDocsError as e:
        logger.error(e.message)
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Generator crashed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
