"""
Diff endpoints for study snapshots.

These endpoints run the deterministic diff engine.
No persistence - computation only.
"""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field, ConfigDict

from app.config import settings
from src.diff_engine import (
    ChangeType,
    DataSetDiff,
    ProjectDiff,
    diff_datasets,
    diff_projects,
    __engine_version__,
)
from src.power_records import DataSet, Project

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Request/Response Models ---

class DataSetDiffRequest(BaseModel):
    """
    Request body for a snapshot comparison.

    Each snapshot lists its records per record type. Set
    ``include_unchanged`` to false to get only changed entries back.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "old": {
                    "buses": [{"id": "BUS-1", "base_kv": "13.8"}],
                    "arc_flash": [
                        {"id": "BUS-1", "scenario": "Main-Max", "incident_energy": "8.5"}
                    ]
                },
                "new": {
                    "buses": [{"id": "BUS-1", "base_kv": "4.16"}],
                    "arc_flash": [
                        {"id": "BUS-1", "scenario": "Main-Max", "incident_energy": "9.1"}
                    ]
                },
                "include_unchanged": False
            }
        }
    )

    old: DataSet = Field(..., description="Old snapshot")
    new: DataSet = Field(..., description="New snapshot")
    include_unchanged: bool = Field(
        default=True,
        description="Whether unchanged entries are returned"
    )


class ProjectDiffRequest(BaseModel):
    """Request body for a project comparison."""

    old: Project = Field(..., description="Old project")
    new: Project = Field(..., description="New project")
    include_unchanged: bool = Field(
        default=True,
        description="Whether unchanged entries are returned"
    )


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(description="Error type")
    message: str = Field(description="Error message")
    detail: Any = Field(default=None, description="Additional error details")


# --- Helpers ---

def _check_size(dataset: DataSet, side: str) -> None:
    """Reject snapshots with oversized collections."""
    limit = settings.max_records_per_type
    for record_type, records in dataset.collections():
        if len(records) > limit:
            raise HTTPException(
                status_code=status.HTTP_413_CONTENT_TOO_LARGE,
                detail={
                    "error": "too_many_records",
                    "message": (
                        f"{side} snapshot has {len(records)} {record_type} records "
                        f"(limit {limit})"
                    ),
                },
            )


def _without_unchanged(result: DataSetDiff) -> DataSetDiff:
    return DataSetDiff(
        entries=[e for e in result.entries if e.change_type != ChangeType.UNCHANGED],
        diagnostics=result.diagnostics,
    )


# --- Endpoints ---

@router.post(
    "/datasets",
    response_model=DataSetDiff,
    responses={
        200: {"description": "Diff computed"},
        413: {"model": ErrorResponse, "description": "Snapshot too large"},
        422: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Diff error"},
    },
    summary="Compare two study snapshots",
    description="""
Compare an old and a new snapshot record by record.

**Classification:**
- added / removed: key present on one side only
- modified: key on both sides, at least one field differs
- unchanged: key on both sides, all fields equal

**Notes:**
- Equipment is keyed by id, study results by (id, scenario)
- Values are compared as exact strings
- Blank or duplicate keys and schema mismatches come back as diagnostics
""",
)
async def compare_datasets(request: DataSetDiffRequest) -> DataSetDiff:
    """Diff two snapshots across all record types."""
    logger.info(
        "Comparing datasets | engine=%s old=%d new=%d",
        __engine_version__,
        request.old.total_entries,
        request.new.total_entries,
    )
    _check_size(request.old, "old")
    _check_size(request.new, "new")

    try:
        result = diff_datasets(request.old, request.new)
    except ValueError as e:
        logger.error("Validation error: %s", str(e))
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail={"error": "validation_error", "message": str(e)},
        )
    except Exception as e:
        logger.exception("Diff error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "diff_error", "message": str(e)},
        )

    if not request.include_unchanged:
        result = _without_unchanged(result)
    return result


@router.post(
    "/projects",
    response_model=ProjectDiff,
    responses={
        200: {"description": "Diff computed"},
        413: {"model": ErrorResponse, "description": "Snapshot too large"},
        500: {"model": ErrorResponse, "description": "Diff error"},
    },
    summary="Compare two projects",
)
async def compare_projects(request: ProjectDiffRequest) -> ProjectDiff:
    """Diff project metadata, settings and record snapshots."""
    logger.info("Comparing projects | engine=%s", __engine_version__)
    _check_size(request.old.data, "old")
    _check_size(request.new.data, "new")

    try:
        result = diff_projects(request.old, request.new)
    except Exception as e:
        logger.exception("Diff error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "diff_error", "message": str(e)},
        )

    if not request.include_unchanged:
        result = ProjectDiff(
            project_property_changes=result.project_property_changes,
            data_diff=_without_unchanged(result.data_diff),
        )
    return result
