"""File system access used by the generator."""

from pathlib import Path
from typing import List, Protocol


class FileSystem(Protocol):
    """Capabilities the generator needs from a file system."""

    def is_dir(self, path: Path) -> bool: ...

    def list_subdirectories(self, path: Path) -> List[Path]: ...

    def list_files(self, path: Path, suffix: str) -> List[Path]: ...

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, content: str) -> None: ...


class LocalFileSystem:
    """
    Disk-backed file system.

    Listings are sorted by entry name so repeated runs see entries in the
    same order regardless of the underlying directory implementation.
    """

    encoding = "utf-8"

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def list_subdirectories(self, path: Path) -> List[Path]:
        return sorted(
            (entry for entry in path.iterdir() if entry.is_dir()),
            key=lambda entry: entry.name,
        )

    def list_files(self, path: Path, suffix: str) -> List[Path]:
        return sorted(
            (
                entry
                for entry in path.iterdir()
                if entry.name.endswith(suffix) and entry.is_file()
            ),
            key=lambda entry: entry.name,
        )

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding=self.encoding)

    def write_text(self, path: Path, content: str) -> None:
        # newline="" keeps "\n" line endings on every platform
        with open(path, "w", encoding=self.encoding, newline="") as handle:
            handle.write(content)
