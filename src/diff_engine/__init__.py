"""
Study Dataset Diff Engine

Deterministic, structural comparison of two power-system study snapshots.
Every record is classified as unchanged, added, removed or modified, with
field-level old/new values for modified records.
"""

__version__ = "0.1.0"
__engine_version__ = "DIFF-0.1.0"

from .models import (
    ChangeType,
    SimpleKey,
    CompositeKey,
    RecordKey,
    PropertyChange,
    EntryDiff,
    DiagnosticKind,
    SnapshotSide,
    DiffDiagnostic,
    DataSetDiff,
    ProjectDiff,
)
from .errors import (
    DiffEngineError,
    InvalidKeyError,
    DuplicateKeyError,
    SchemaMismatchError,
)
from .keys import resolve_key
from .matcher import MatchResult, MatchedPair, match_entries, check_schemas
from .differ import diff_fields, diff_values
from .service import aggregate, diff_records, diff_datasets, diff_projects

__all__ = [
    "__version__",
    "__engine_version__",
    "ChangeType",
    "SimpleKey",
    "CompositeKey",
    "RecordKey",
    "PropertyChange",
    "EntryDiff",
    "DiagnosticKind",
    "SnapshotSide",
    "DiffDiagnostic",
    "DataSetDiff",
    "ProjectDiff",
    "DiffEngineError",
    "InvalidKeyError",
    "DuplicateKeyError",
    "SchemaMismatchError",
    "resolve_key",
    "MatchResult",
    "MatchedPair",
    "match_entries",
    "check_schemas",
    "diff_fields",
    "diff_values",
    "aggregate",
    "diff_records",
    "diff_datasets",
    "diff_projects",
]
