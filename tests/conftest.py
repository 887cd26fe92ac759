"""Pytest configuration and fixtures."""

import json
from pathlib import Path
from typing import Dict, List, Set

import pytest

from schema_docs.config import Settings
from schema_docs.schemas import ColumnMeta, SchemaVersion


class InMemoryFileSystem:
    """FileSystem kept in a dict, for exercising the generator without disk I/O."""

    def __init__(self):
        self.files: Dict[Path, str] = {}
        self.dirs: Set[Path] = set()
        self.writes: List[Path] = []

    def add_dir(self, path) -> Path:
        path = Path(path)
        self.dirs.add(path)
        self.dirs.update(p for p in path.parents if p != Path("."))
        return path

    def add_file(self, path, content: str) -> Path:
        path = Path(path)
        self.add_dir(path.parent)
        self.files[path] = content
        return path

    def add_schema(self, view_dir, filename: str, payload: dict) -> Path:
        return self.add_file(Path(view_dir) / filename, json.dumps(payload))

    def is_dir(self, path: Path) -> bool:
        return path in self.dirs

    def list_subdirectories(self, path: Path) -> List[Path]:
        return sorted((d for d in self.dirs if d.parent == path), key=lambda d: d.name)

    def list_files(self, path: Path, suffix: str) -> List[Path]:
        return sorted(
            (f for f in self.files if f.parent == path and f.name.endswith(suffix)),
            key=lambda f: f.name,
        )

    def read_text(self, path: Path) -> str:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    def write_text(self, path: Path, content: str) -> None:
        self.files[path] = content
        self.writes.append(path)


ID_COLUMN = {
    "name": "id",
    "type": "int",
    "nullable": False,
    "confidential": False,
    "description": "Order ID",
}

EMAIL_COLUMN = {
    "name": "email",
    "type": "text",
    "nullable": True,
    "confidential": True,
    "description": "Customer email",
}


def schema_payload(version: str, view: str, columns: list) -> dict:
    return {"version": version, "view": view, "columns": columns}


@pytest.fixture
def memory_fs() -> InMemoryFileSystem:
    """Empty in-memory file system."""
    return InMemoryFileSystem()


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def orders_fs(memory_fs) -> InMemoryFileSystem:
    """Schemas root with an orders view holding versions 1.0.0 and 2.0.0."""
    root = Path("src/schemas")
    memory_fs.add_schema(
        root / "orders", "1.0.0.json", schema_payload("1.0.0", "orders", [ID_COLUMN])
    )
    memory_fs.add_schema(
        root / "orders",
        "2.0.0.json",
        schema_payload("2.0.0", "orders", [ID_COLUMN, EMAIL_COLUMN]),
    )
    return memory_fs


@pytest.fixture
def id_column() -> ColumnMeta:
    return ColumnMeta(**ID_COLUMN)


@pytest.fixture
def email_column() -> ColumnMeta:
    return ColumnMeta(**EMAIL_COLUMN)


@pytest.fixture
def make_record():
    """Factory for SchemaVersion records."""

    def _make(version: str, view: str = "orders", columns=None) -> SchemaVersion:
        return SchemaVersion(
            version=version,
            view=view,
            columns=columns if columns is not None else [ColumnMeta(**ID_COLUMN)],
        )

    return _make
