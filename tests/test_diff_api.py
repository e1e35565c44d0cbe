"""Tests for /diff endpoints."""

import warnings
from unittest.mock import patch

import pytest

from app.config import settings


class TestDiffDatasets:
    """Tests for POST /diff/datasets endpoint."""

    @pytest.mark.asyncio
    async def test_basic_diff(self, client):
        """Should classify entries and report counts."""
        payload = {
            "old": {"buses": [{"id": "BUS1", "base_kv": "13.8"}, {"id": "BUS3"}]},
            "new": {"buses": [{"id": "BUS1", "base_kv": "4.16"}, {"id": "BUS2"}]},
        }

        response = await client.post("/diff/datasets", json=payload)
        assert response.status_code == 200

        data = response.json()
        assert [(e["key"], e["change_type"]) for e in data["entries"]] == [
            ("BUS1", "modified"),
            ("BUS3", "removed"),
            ("BUS2", "added"),
        ]
        assert data["entries"][0]["property_changes"] == [
            {"path": "base_kv", "old_value": "13.8", "new_value": "4.16", "change_type": "modified"}
        ]
        assert data["added_count"] == 1
        assert data["removed_count"] == 1
        assert data["modified_count"] == 1
        assert data["unchanged_count"] == 0
        assert data["diagnostics"] == []

    @pytest.mark.asyncio
    async def test_scenario_keys(self, client):
        """Study results are keyed by id and scenario."""
        payload = {
            "old": {"arc_flash": [{"id": "AF1", "scenario": "Normal", "incident_energy": "1.2"}]},
            "new": {"arc_flash": [{"id": "AF1", "scenario": "Alt", "incident_energy": "1.2"}]},
        }

        response = await client.post("/diff/datasets", json=payload)
        assert response.status_code == 200
        keys = [(e["key"], e["change_type"]) for e in response.json()["entries"]]
        assert keys == [("AF1|Normal", "removed"), ("AF1|Alt", "added")]

    @pytest.mark.asyncio
    async def test_exclude_unchanged(self, client):
        """Unchanged entries can be left out."""
        payload = {
            "old": {"buses": [{"id": "A"}, {"id": "B", "base_kv": "1"}]},
            "new": {"buses": [{"id": "A"}, {"id": "B", "base_kv": "2"}]},
            "include_unchanged": False,
        }

        response = await client.post("/diff/datasets", json=payload)
        data = response.json()
        assert [e["key"] for e in data["entries"]] == ["B"]
        assert data["unchanged_count"] == 0

    @pytest.mark.asyncio
    async def test_duplicate_key_diagnostic(self, client):
        """Duplicate keys are reported, not rejected."""
        payload = {
            "old": {"buses": [{"id": "A"}, {"id": "A"}]},
            "new": {"buses": [{"id": "A"}]},
        }

        response = await client.post("/diff/datasets", json=payload)
        assert response.status_code == 200
        data = response.json()
        assert data["entries"] == []
        assert data["diagnostics"][0]["kind"] == "duplicate_key"
        assert data["diagnostics"][0]["side"] == "old"

    @pytest.mark.asyncio
    async def test_unknown_field(self, client):
        """Fields outside the record type are rejected."""
        payload = {
            "old": {"buses": [{"id": "A", "kv": "13.8"}]},
            "new": {},
        }
        response = await client.post("/diff/datasets", json=payload)
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_missing_snapshot(self, client):
        response = await client.post("/diff/datasets", json={"old": {}})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_too_many_records(self, client):
        """Collections above the configured limit are refused."""
        payload = {
            "old": {"buses": [{"id": "A"}, {"id": "B"}, {"id": "C"}]},
            "new": {},
        }
        with patch.object(settings, "max_records_per_type", 2):
            response = await client.post("/diff/datasets", json=payload)

        assert response.status_code == 413
        assert response.json()["detail"]["error"] == "too_many_records"

    @pytest.mark.asyncio
    async def test_status_codes_not_deprecated(self, client):
        """Error responses use current status names without warnings."""
        payload = {"old": {"buses": [{"id": "A"}, {"id": "B"}]}, "new": {}}
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            with patch.object(settings, "max_records_per_type", 1):
                response = await client.post("/diff/datasets", json=payload)

        assert response.status_code == 413
        assert not [w for w in caught if "HTTP_4" in str(w.message)]

    @pytest.mark.asyncio
    async def test_unexpected_error(self, client):
        """Engine failures come back as diff_error."""
        payload = {"old": {}, "new": {}}
        with patch("app.api.diff.diff_datasets", side_effect=RuntimeError("boom")):
            response = await client.post("/diff/datasets", json=payload)

        assert response.status_code == 500
        assert response.json()["detail"] == {"error": "diff_error", "message": "boom"}


class TestDiffProjects:
    """Tests for POST /diff/projects endpoint."""

    @pytest.mark.asyncio
    async def test_project_diff(self, client):
        payload = {
            "old": {
                "revision": "A",
                "properties": {"Units": "Imperial"},
                "data": {"buses": [{"id": "BUS1"}]},
            },
            "new": {
                "revision": "B",
                "properties": {"Units": "Metric"},
                "data": {"buses": [{"id": "BUS1"}]},
            },
        }

        response = await client.post("/diff/projects", json=payload)
        assert response.status_code == 200

        data = response.json()
        assert [c["path"] for c in data["project_property_changes"]] == [
            "revision",
            "properties.Units",
        ]
        assert data["data_diff"]["unchanged_count"] == 1

    @pytest.mark.asyncio
    async def test_empty_projects(self, client):
        response = await client.post("/diff/projects", json={"old": {}, "new": {}})
        assert response.status_code == 200
        data = response.json()
        assert data["project_property_changes"] == []
        assert data["data_diff"]["entries"] == []
