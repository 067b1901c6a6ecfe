from typing import Any


class ConversionError(Exception):
    """Base exception for all markdown to Block Kit conversion errors."""

    def __init__(self, message: str):
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for diagnostics."""
        return {"detail": str(self)}


class StructureError(ConversionError):
    """Raised when a node of a specific kind was required but another was found."""

    def __init__(self, expected: str, actual: str, *, message: str | None = None):
        super().__init__(message or f"Expected a {expected} node, got {actual}")
        self.expected = expected
        self.actual = actual

    def to_dict(self) -> dict[str, Any]:
        return {"detail": str(self), "expected": self.expected, "actual": self.actual}


class UnsupportedNodeError(ConversionError):
    """Raised when a markup node kind has no rendering rule (tables, images, code...)."""

    def __init__(self, kind: str, *, message: str | None = None):
        super().__init__(message or f"Unsupported node type: {kind}")
        self.kind = kind

    def to_dict(self) -> dict[str, Any]:
        return {"detail": str(self), "kind": self.kind}


class UnsupportedElementError(ConversionError):
    """Raised when a rendered element cannot be flattened into its container."""

    def __init__(self, element_type: str, container: str, *, message: str | None = None):
        super().__init__(message or f"Unsupported element type inside {container}: {element_type}")
        self.element_type = element_type
        self.container = container

    def to_dict(self) -> dict[str, Any]:
        return {"detail": str(self), "element_type": self.element_type, "container": self.container}


class NestedQuoteError(ConversionError):
    """Raised when a blockquote is found inside another blockquote."""

    def __init__(self, *, message: str | None = None):
        super().__init__(message or "Nested blockquotes are not supported")
