"""Tests for the simulated bulk-operation runner and import validation."""
import random

import pandas as pd
import pytest

from common import data_access
from common.bulk_jobs import (
    BULK_OPERATION_TYPES,
    advance_operation,
    has_running,
    import_template_frame,
    new_operation,
    operation_summary,
    pause_operation,
    resume_operation,
    validate_import_frame,
    validate_import_record,
)

EXISTING = ["employee@company.com", "manager@company.com"]


class TestOperations:

    def test_new_operation(self):
        op = new_operation("op-1", "import", "Import", "desc", 40)
        assert op["status"] == "running"
        assert op["progress"] == 0
        assert op["processed_records"] == 0
        assert op["total_records"] == 40

    def test_rejects_unknown_type_and_bad_ratio(self):
        with pytest.raises(ValueError):
            new_operation("op-1", "explode", "x", "x", 1)
        with pytest.raises(ValueError):
            new_operation("op-1", "import", "x", "x", 1, success_ratio=1.5)

    def test_advance_runs_to_completion(self):
        rng = random.Random(42)
        op = new_operation("op-1", "update", "Bulk Update", "desc", 50, success_ratio=0.96)
        last = 0
        for _ in range(1000):
            advance_operation(op, rng, max_step=15)
            assert op["progress"] >= last
            assert op["processed_records"] <= op["total_records"]
            last = op["progress"]
            if op["status"] == "completed":
                break

        assert op["status"] == "completed"
        assert op["progress"] == 100
        assert op["processed_records"] == 50
        assert op["success_count"] == 48
        assert op["error_count"] == 2
        assert op["completed_at"]

    def test_same_seed_same_progress(self):
        a = new_operation("a", "import", "x", "x", 10)
        b = new_operation("b", "import", "x", "x", 10)
        advance_operation(a, random.Random(7))
        advance_operation(b, random.Random(7))
        assert a["progress"] == b["progress"]

    def test_progress_step_is_bounded(self):
        op = new_operation("op-1", "notify", "x", "x", 100)
        advance_operation(op, random.Random(1), max_step=5)
        assert 0 <= op["progress"] < 5

    def test_paused_operation_does_not_move(self):
        op = new_operation("op-1", "import", "x", "x", 10)
        pause_operation(op)
        assert op["status"] == "paused"
        advance_operation(op, random.Random(1))
        assert op["progress"] == 0

        resume_operation(op)
        assert op["status"] == "running"
        advance_operation(op, random.Random(1))
        assert op["progress"] > 0

    def test_pause_and_resume_ignore_finished_operations(self):
        op = new_operation("op-1", "import", "x", "x", 10, status="completed")
        pause_operation(op)
        resume_operation(op)
        assert op["status"] == "completed"

    def test_summary_of_demo_history(self):
        ops = data_access.get_bulk_operations()
        summary = operation_summary(ops)
        assert summary["total"] == 3
        assert summary["completed"] == 1
        assert summary["paused"] == 1
        assert summary["pending"] == 1
        assert summary["running"] == 0
        assert summary["records_processed"] == 50 + 78
        assert summary["errors"] == 2 + 3
        assert not has_running(ops)

    def test_every_type_has_a_label(self):
        assert set(BULK_OPERATION_TYPES) == {"import", "export", "update", "delete", "notify", "sync"}


class TestImportValidation:

    def test_valid_record(self):
        record = {"name": "Alice", "email": "alice@company.com", "role": "employee", "department": "Eng"}
        assert validate_import_record(record, EXISTING) == []

    def test_invalid_email(self):
        record = {"name": "Bob", "email": "invalid-email", "role": "EMPLOYEE", "department": "Marketing"}
        assert validate_import_record(record, EXISTING) == ["Invalid email format"]

    def test_invalid_role(self):
        record = {"name": "Charlie", "email": "c@company.com", "role": "INVALID_ROLE", "department": "Sales"}
        assert validate_import_record(record, EXISTING) == ["Invalid role specified"]

    def test_duplicate_email(self):
        record = {"name": "Diana", "email": "Employee@Company.com", "role": "TEAMLEAD", "department": "HR"}
        assert validate_import_record(record, EXISTING) == ["Employee with this email already exists"]

    def test_missing_fields(self):
        errors = validate_import_record({"name": "", "email": "x@y.com"}, EXISTING)
        assert errors == ["Missing required field(s): name, role, department"]

    def test_demo_preview(self):
        df = validate_import_frame(pd.DataFrame(data_access.get_import_preview()), EXISTING)
        assert list(df["status"]) == ["valid", "error", "error", "error"]
        assert df.loc[1, "errors"] == "Invalid email format"
        assert df.loc[2, "errors"] == "Invalid role specified"
        assert df.loc[3, "errors"] == "Employee with this email already exists"

    def test_duplicates_inside_the_sheet(self):
        df = pd.DataFrame([
            {"name": "A", "email": "a@company.com", "role": "EMPLOYEE", "department": "Eng"},
            {"name": "A again", "email": "A@company.com", "role": "EMPLOYEE", "department": "Eng"},
        ])
        assert list(validate_import_frame(df)["status"]) == ["valid", "error"]

    def test_headers_are_normalised_and_missing_columns_added(self):
        df = pd.DataFrame([{" Name ": "A", "EMAIL": "a@company.com", "Role": "HR", "Department": "HR"}])
        out = validate_import_frame(df)
        assert out.loc[0, "status"] == "valid"
        assert "project" in out.columns

    def test_blank_cells_count_as_missing(self):
        df = pd.DataFrame([{"name": "A", "email": "a@company.com", "role": "HR", "department": None}])
        out = validate_import_frame(df)
        assert out.loc[0, "errors"] == "Missing required field(s): department"

    def test_template_passes_validation(self):
        out = validate_import_frame(import_template_frame())
        assert list(out["status"]) == ["valid"]
