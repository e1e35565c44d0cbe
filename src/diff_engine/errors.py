"""
Exceptions raised by the key resolver and entry matcher.

The service layer catches these and turns them into DiffDiagnostic entries,
so a caller comparing many record types still gets results for the types
that succeeded.
"""

from typing import Optional

from .models import DiagnosticKind, DiffDiagnostic, SnapshotSide


class DiffEngineError(ValueError):
    """Base class for structural input problems."""

    kind: DiagnosticKind

    def __init__(
        self,
        message: str,
        record_type: str,
        key: Optional[str] = None,
        side: Optional[SnapshotSide] = None,
        record_index: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.record_type = record_type
        self.key = key
        self.side = side
        self.record_index = record_index

    def to_diagnostic(self) -> DiffDiagnostic:
        return DiffDiagnostic(
            kind=self.kind,
            record_type=self.record_type,
            message=self.message,
            key=self.key,
            side=self.side,
            record_index=self.record_index,
        )


class InvalidKeyError(DiffEngineError):
    """An identity or scenario field is blank, so the record has no key."""

    kind = DiagnosticKind.INVALID_KEY


class DuplicateKeyError(DiffEngineError):
    """Two records in the same snapshot resolve to the same key."""

    kind = DiagnosticKind.DUPLICATE_KEY


class SchemaMismatchError(DiffEngineError):
    """Records of one declared type expose different field sets."""

    kind = DiagnosticKind.SCHEMA_MISMATCH
