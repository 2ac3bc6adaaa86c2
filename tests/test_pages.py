"""Tests for the non-UI helpers that live beside the pages."""
from datetime import date

import pandas as pd
import pytest

from apps.goals.goal_operations import goal_view
from apps.kra_management.kra_bulk_operations import validate_kra_rows
from apps.kra_management.kra_mapping import mapping_graph
from apps.kra_management.kra_operations import change_status, validate_kra
from apps.kra_management.kra_templates import set_default, set_published
from apps.reports.export_center import DATASETS, dataset_frame, datasets_for_role
from apps.reports.review_reports import department_frame, stage_delays
from apps.reviews.performance_assessment import allowed_review_types, submission_errors
from apps.reviews.review_operations import advance_review, extend_due_date, overdue_reviews
from apps.reviews.review_templates import duplicate_template, make_default
from apps.reviews.review_workflows import workflow_graph
from apps.settings.system_settings import settings_key, validate_settings
from apps.user_management.user_operations import filter_employees
from common import data_access
from common.master_page import Field, validate_master_record
from common.page_state import clear_page_rows

FIELDS = [Field("name", "Department Name", required=True), Field("code", "Code", required=True)]


class TestMasterValidation:

    def test_valid_new_record(self):
        records = data_access.get_departments()
        assert validate_master_record({"name": "Legal", "code": "LEG"}, records, FIELDS) == []

    def test_required_fields(self):
        assert validate_master_record({"name": " ", "code": ""}, [], FIELDS) == [
            "Department Name is required", "Code is required"]

    def test_duplicate_code_is_case_insensitive(self):
        records = data_access.get_departments()
        assert validate_master_record({"name": "Eng 2", "code": "eng"}, records, FIELDS) == [
            "Code 'eng' is already used"]

    def test_editing_a_record_keeps_its_own_code(self):
        records = data_access.get_departments()
        edited = dict(records[0], name="Engineering & Platform")
        assert validate_master_record(edited, records, FIELDS) == []


class TestExportCenter:

    def test_employee_sees_only_personal_datasets(self):
        assert datasets_for_role("EMPLOYEE") == ["My Goals", "My Reviews", "Goal Evidence"]

    def test_admin_sees_everything(self):
        assert datasets_for_role("ADMIN") == list(DATASETS)

    def test_manager_sees_team_but_not_org_data(self):
        names = datasets_for_role("MANAGER")
        assert "Team Goals" in names
        assert "Employees" not in names

    def test_dataset_frame_flattens_lists_and_dicts(self):
        df = dataset_frame("Domains")
        assert df.loc[0, "skills"] == "React; Node.js; Python; TypeScript; AWS; Docker"
        zones = dataset_frame("Department Metrics").loc[0, "zones"]
        assert zones == "GREEN=45; YELLOW=15; RED=5"


class TestSystemSettings:

    def test_defaults_are_valid(self):
        for settings_type in ("system", "goals", "notifications"):
            assert validate_settings(settings_type, data_access.get_system_settings(settings_type)) == []

    def test_invalid_values(self):
        values = dict(data_access.get_system_settings("system"), organization_name="", password_min_length=4)
        assert validate_settings("system", values) == [
            "Organisation name is required", "Passwords must be at least 6 characters"]
        values = dict(data_access.get_system_settings("goals"), min_goal_weightage=0)
        assert validate_settings("goals", values) == ["Minimum goal weightage must be between 1 and 100"]

    def test_settings_key(self):
        assert settings_key("goals") == "pms-settings-goals"


class TestMisc:

    def test_filter_employees(self):
        employees = data_access.get_employees()
        assert [e["employee_id"] for e in filter_employees(employees, role="HR")] == ["EMP004"]
        assert [e["employee_id"] for e in filter_employees(employees, status="Pending")] == ["EMP007"]
        assert len(filter_employees(employees, term="@company.com")) == 8

    def test_workflow_graph_has_one_node_per_stage(self):
        workflow = data_access.get_review_workflows()[0]
        source = workflow_graph(workflow).source
        for stage in workflow["stages"]:
            assert stage in source
        assert "start" in source and "end" in source


class TestPageRows:

    def test_clear_page_rows_only_drops_row_keys(self):
        state = {
            "rows::my_goals": [{"id": "goal-001"}],
            "rows::employees": [],
            "auth_store": object(),
            "active_menu": "my-goals",
        }
        assert clear_page_rows(state) == 2
        assert sorted(state) == ["active_menu", "auth_store"]

    def test_clear_page_rows_with_nothing_to_clear(self):
        state = {"active_menu": None}
        assert clear_page_rows(state) == 0
        assert state == {"active_menu": None}


class TestKraOperations:

    def test_new_kra_is_valid(self):
        values = {"title": "Security Posture", "description": "Keep audits clean", "weightage": 20}
        assert validate_kra(values, data_access.get_kra_library()) == []

    def test_required_fields_and_weightage(self):
        assert validate_kra({"title": " ", "description": "", "weightage": 0}, []) == [
            "Title is required", "Description is required", "Weightage must be between 1 and 100"]

    def test_duplicate_title_is_case_insensitive(self):
        kras = data_access.get_kra_library()
        values = {"title": "customer satisfaction excellence", "description": "x", "weightage": 20}
        assert validate_kra(values, kras) == ["A KRA called 'customer satisfaction excellence' already exists"]
        assert validate_kra(dict(values, id="kra-lib-001"), kras) == []

    def test_status_moves(self):
        kra = data_access.get_kra_library()[3]
        assert kra["status"] == "DRAFT"
        change_status(kra, "ACTIVE", {"role": "MANAGER", "name": "Mike"})
        change_status(kra, "APPROVED", {"role": "HR", "name": "Jessica Wong"})
        assert kra["status"] == "APPROVED"
        assert kra["approved_by"] == "Jessica Wong"

    def test_only_admin_and_hr_approve(self):
        kra = data_access.get_kra_library()[0]
        with pytest.raises(PermissionError):
            change_status(kra, "APPROVED", {"role": "MANAGER"})
        assert kra["status"] == "ACTIVE"

    def test_draft_cannot_skip_to_approved(self):
        kra = data_access.get_kra_library()[3]
        with pytest.raises(ValueError, match="Cannot move a DRAFT KRA to APPROVED"):
            change_status(kra, "APPROVED", {"role": "ADMIN"})


class TestKraBulkImport:

    def test_rows_are_checked_one_by_one(self):
        df = pd.DataFrame([
            {"title": "New KRA", "description": "d", "category": "team", "department": "Eng", "weightage": 20},
            {"title": "Strategic Market Expansion", "description": "d", "category": "TEAM", "department": "Sales",
             "weightage": 20},
            {"title": "new kra", "description": "d", "category": "TEAM", "department": "Eng", "weightage": 20},
            {"title": "Bad", "description": None, "category": "OTHER", "department": "Eng", "weightage": 150},
        ])
        out = validate_kra_rows(df, [k["title"] for k in data_access.get_kra_library()])
        assert list(out["status"]) == ["valid", "error", "error", "error"]
        assert out.loc[1, "errors"] == "Duplicate KRA title"
        assert out.loc[2, "errors"] == "Duplicate KRA title"
        assert out.loc[3, "errors"] == (
            "Missing description; Unknown category 'OTHER'; Weightage must be between 1 and 100")
        assert "status" not in df.columns


class TestKraMappingAndTemplates:

    def test_graph_shows_active_mappings_only(self):
        source = mapping_graph(data_access.get_kra_mappings()).source
        assert "Finance Manager" in source
        assert "45%" in source
        # map-004 (Team Lead) is inactive
        assert "Team Lead" not in source

    def test_publish_needs_weights_adding_up(self):
        template = data_access.get_kra_templates()[3]
        assert set_published(template, True)["is_published"]
        template["kras"][0]["weightage"] = 40
        with pytest.raises(ValueError, match="Weights add up to 90%"):
            set_published(template, True)
        assert set_published(template, False)["is_published"] is False

    def test_one_default_per_department(self):
        templates = data_access.get_kra_templates()
        templates.append(dict(templates[1], id="ktmpl-new", is_default=False))
        set_default(templates, "ktmpl-new")
        defaults = [t["id"] for t in templates if t["is_default"]]
        assert defaults == ["ktmpl-new"]


class TestReviewTemplates:

    def test_duplicate(self):
        original = data_access.get_review_templates()[0]
        copy_ = duplicate_template(original, "Jessica Wong")
        assert copy_["name"] == "Standard Annual Review (Copy)"
        assert copy_["id"].startswith("rtmpl-") and copy_["id"] != original["id"]
        assert (copy_["is_default"], copy_["is_active"], copy_["usage_count"]) == (False, False, 0)
        copy_["sections"][0]["weight"] = 1
        assert original["sections"][0]["weight"] != 1
        assert original["is_default"]

    def test_make_default_within_category(self):
        templates = data_access.get_review_templates()
        make_default(templates, "rtmpl-003")
        assert [t["id"] for t in templates if t["is_default"]] == ["rtmpl-003"]

    def test_default_is_activated(self):
        templates = data_access.get_review_templates()
        make_default(templates, "rtmpl-004")
        chosen = templates[3]
        assert chosen["is_default"] and chosen["is_active"]
        assert templates[0]["is_default"]


class TestPerformanceAssessment:

    def test_review_types_by_role(self):
        assert allowed_review_types("EMPLOYEE") == ["Self-Assessment"]
        assert allowed_review_types("TEAMLEAD") == ["Self-Assessment", "R1-Review"]
        assert allowed_review_types("MANAGER") == ["Self-Assessment", "R1-Review", "R2-Review"]

    def test_submission_errors(self):
        sections = data_access.get_assessment_sections()
        assert submission_errors(sections, {"strengths": "Ownership", "improvement_areas": "Delegation"}) == []
        sections[0]["items"][0]["rating"] = None
        assert submission_errors(sections, {"strengths": "Ownership", "improvement_areas": " "}) == [
            "'Software Development & Code Quality' is not rated", "Improvement areas is required"]


class TestReviewReports:

    def test_department_frame(self):
        df = department_frame(data_access.get_review_report()["departments"])
        engineering = df[df["department"] == "Engineering"].iloc[0]
        assert engineering["total"] == 45
        assert engineering["completion_rate"] == 93

    def test_only_stages_well_over_target_are_late(self):
        df = stage_delays(data_access.get_review_report()["timeline"])
        assert list(df[df["late"]]["stage"]) == ["R1 Review"]
        assert df.set_index("stage").loc["Final", "over_by"] == 0.5


class TestReviewOperations:

    def test_advance_through_stages(self):
        review = data_access.get_team_reviews()[0]
        assert (review["stage"], review["status"]) == ("Self-Assessment", "In Progress")
        advance_review(review)
        assert (review["stage"], review["status"]) == ("Manager Review", "In Progress")
        advance_review(review)
        advance_review(review)
        assert (review["stage"], review["status"]) == ("HR Calibration", "Completed")
        with pytest.raises(ValueError):
            advance_review(review)

    def test_completed_review_does_not_move(self):
        review = data_access.get_team_reviews()[2]
        with pytest.raises(ValueError, match="already completed"):
            advance_review(review)

    def test_extend_reopens_overdue(self):
        review = extend_due_date(data_access.get_team_reviews()[3], 7)
        assert review["due_date"] == "2025-03-07"
        assert review["status"] == "In Progress"

    def test_overdue_reviews(self):
        reviews = data_access.get_team_reviews()
        assert [r["id"] for r in overdue_reviews(reviews, today=date(2025, 3, 1))] == ["treview-4"]
        assert [r["id"] for r in overdue_reviews(reviews, today=date(2025, 3, 20))] == [
            "treview-4", "treview-1", "treview-2", "treview-5"]


class TestGoalOperations:

    GOALS = [
        {"id": "g1", "owner": "Sarah", "status": "ACTIVE", "manager_approved": True},
        {"id": "g2", "owner": "Alex", "status": "ACTIVE", "manager_approved": False},
        {"id": "g3", "owner": "Sarah", "status": "COMPLETED", "manager_approved": False},
    ]

    @pytest.mark.parametrize("view, expected", [
        ("all", ["g1", "g2", "g3"]),
        ("my", ["g1", "g3"]),
        ("approved", ["g1"]),
        ("pending", ["g2"]),
        ("completed", ["g3"]),
    ])
    def test_views(self, view, expected):
        assert [g["id"] for g in goal_view(self.GOALS, view, "Sarah")] == expected
