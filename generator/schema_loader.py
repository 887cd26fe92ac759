"""Schema loader - discovers views and decodes their schema files."""

import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from schema_docs.config import Settings
from schema_docs.core.exceptions import SchemaParseError, SchemaRootNotFound
from schema_docs.schemas import SchemaVersion
from schema_docs.services.semver import check_version
from schema_docs.storage import FileSystem

logger = logging.getLogger("schema_docs")


class SchemaLoader:
    """
    Reads schema files from the schemas root.

    Each subdirectory of the root is a view; each file in it with the
    schema suffix holds one SchemaVersion.
    """

    def __init__(self, fs: FileSystem, settings: Settings):
        self.fs = fs
        self.settings = settings
        self.root = Path(settings.SCHEMAS_DIR)

    def list_views(self) -> List[Path]:
        """
        List view directories in listing order.

        Raises:
            SchemaRootNotFound: If the schemas root is not a directory
        """
        if not self.fs.is_dir(self.root):
            raise SchemaRootNotFound(str(self.root))
        return self.fs.list_subdirectories(self.root)

    def load_record(self, path: Path) -> Optional[SchemaVersion]:
        """
        Decode one schema file.

        The version is checked on the raw document before the rest of it is
        validated, so a draft with a malformed version is dropped even when
        its other fields are incomplete.

        Args:
            path: Schema file path

        Returns:
            Decoded record, or None if the file was dropped or skipped

        Raises:
            SchemaParseError: If the file cannot be decoded and skipping is off
        """
        try:
            payload = json.loads(self.fs.read_text(path))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            return self._reject_file(path, e, str(e))

        version = payload.get("version") if isinstance(payload, dict) else None
        check = check_version(version)
        if not check.is_valid:
            logger.debug(f"Ignoring {path}: {check.reason}")
            return None

        try:
            return SchemaVersion.model_validate(payload)
        except ValidationError as e:
            return self._reject_file(path, e, e.errors()[0]["msg"])

    def _reject_file(self, path: Path, cause: Exception, detail: str) -> None:
        """Raise SchemaParseError, or log and skip when skipping is on."""
        error = SchemaParseError(str(path), detail)
        if not self.settings.SKIP_INVALID_FILES:
            raise error from cause
        logger.warning(f"Skipping {path}: {error.detail}")
        return None

    def load_view(self, view_dir: Path) -> List[SchemaVersion]:
        """
        Load the records of one view that carry a valid version.

        Args:
            view_dir: View directory

        Returns:
            Valid records in listing order
        """
        records = []
        for path in self.fs.list_files(view_dir, self.settings.SCHEMA_SUFFIX):
            record = self.load_record(path)
            if record is not None:
                records.append(record)
        return records
