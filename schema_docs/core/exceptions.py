"""Custom exception classes."""


class SchemaDocsError(Exception):
    """Base exception for documentation generation failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SchemaRootNotFound(SchemaDocsError):
    """Exception for a missing or unreadable schemas root."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Schemas directory not found: {path}")


class SchemaParseError(SchemaDocsError):
    """Exception for a schema file that cannot be decoded."""

    def __init__(self, path: str, detail: str = ""):
        self.path = path
        self.detail = detail
        message = f"Failed to parse schema file {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
