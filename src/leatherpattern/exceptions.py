"""Exception hierarchy for Leatherpattern."""


class LeatherPatternError(Exception):
    """Base exception for all Leatherpattern errors."""

    pass


class DocumentError(LeatherPatternError):
    """Errors related to pattern document loading or saving."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading a pattern document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load pattern '{path}': {reason}")


class DocumentSaveError(DocumentError):
    """Error saving pattern geometry."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save geometry '{path}': {reason}")


class DocumentFormatError(DocumentError):
    """Pattern document content is malformed."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid pattern document: {details}")


class GeometryError(LeatherPatternError):
    """Errors in geometric calculations."""

    pass


class BooleanOperationError(GeometryError):
    """The polygon clipping library rejected an operation."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Boolean {operation} failed: {reason}")
