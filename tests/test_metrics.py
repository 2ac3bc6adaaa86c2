"""Tests for the shared statistics and list filters."""
from datetime import date

from common import data_access
from common.metrics import (
    achievement_rates,
    category_breakdown,
    completion_rate,
    days_remaining,
    department_changes,
    departments_needing_attention,
    employee_trends,
    evidence_summary,
    filter_categories,
    filter_evidence,
    filter_goals,
    filter_kras,
    filter_mappings,
    filter_templates,
    goal_summary,
    kra_alignment,
    kra_overview,
    kra_summary,
    mapping_conflicts,
    master_summary,
    review_summary,
    reviewer_coverage,
    score_trajectory,
    search_records,
    split_tags,
    team_summary,
    template_summary,
    weightage_issues,
    zone_distribution,
)


class TestSearchAndTags:

    def test_search_is_case_insensitive(self):
        rows = data_access.get_departments()
        assert [r["code"] for r in search_records(rows, "engin", ("name",))] == ["ENG"]

    def test_search_matches_list_fields(self):
        rows = data_access.get_domains()
        hits = search_records(rows, "kubernetes", ("name", "skills"))
        assert [r["code"] for r in hits] == ["DEVOPS"]

    def test_empty_term_returns_everything(self):
        rows = data_access.get_projects()
        assert len(search_records(rows, "  ", ("name",))) == len(rows)

    def test_none_fields_are_skipped(self):
        rows = [{"name": None}, {"name": "x"}]
        assert search_records(rows, "x", ("name",)) == [{"name": "x"}]

    def test_split_tags(self):
        assert split_tags("a, b,,c ") == ["a", "b", "c"]
        assert split_tags("") == []
        assert split_tags(None) == []


class TestGoals:

    def test_goal_summary_on_demo_goals(self):
        s = goal_summary(data_access.get_my_goals())
        assert s["total"] == 5
        assert s["active"] == 4
        assert s["completed"] == 1
        assert s["pending_approval"] == 1
        # (75 + 45 + 100 + 60 + 30) / 5
        assert s["overall_progress"] == 62

    def test_goal_summary_empty(self):
        assert goal_summary([])["overall_progress"] == 0

    def test_filter_goals(self):
        goals = data_access.get_my_goals()
        assert [g["id"] for g in filter_goals(goals, status="COMPLETED")] == ["goal-003"]
        assert [g["id"] for g in filter_goals(goals, category="LEADERSHIP", priority="HIGH")] == ["goal-002"]
        assert [g["id"] for g in filter_goals(goals, term="aws")] == ["goal-001"]
        assert len(filter_goals(goals)) == 5

    def test_days_remaining(self):
        today = date(2025, 3, 1)
        assert days_remaining("2025-03-31", today) == 30
        assert days_remaining("2025-02-27", today) == -2
        assert days_remaining(None, today) is None
        assert days_remaining("not a date", today) is None

    def test_template_summary_and_filter(self):
        templates = data_access.get_goal_templates()
        s = template_summary(templates)
        assert s["total"] == 5
        assert s["approved"] == 4
        assert s["total_usage"] == 42 + 18 + 7 + 11 + 25
        assert [t["id"] for t in filter_templates(templates, category="TECHNICAL")] == ["tmpl-001"]
        assert "tmpl-003" not in [t["id"] for t in filter_templates(templates, approved_only=True)]
        assert [t["id"] for t in filter_templates(templates, term="communication")] == ["tmpl-002"]


class TestEvidenceAndReviews:

    def test_evidence_summary(self):
        s = evidence_summary(data_access.get_evidence())
        assert s["total"] == 5
        assert s["approved"] == 2
        assert s["pending"] == 1
        assert s["needs_revision"] == 1
        assert s["rejected"] == 1
        # ratings 4, 5, 2
        assert s["avg_rating"] == 3.7

    def test_evidence_summary_without_ratings(self):
        assert evidence_summary([{"status": "PENDING", "rating": None}])["avg_rating"] is None

    def test_filter_evidence(self):
        evidence = data_access.get_evidence()
        assert [e["id"] for e in filter_evidence(evidence, evidence_type="LINK")] == ["ev-003"]
        assert [e["id"] for e in filter_evidence(evidence, goal_id="goal-001")] == ["ev-001"]

    def test_review_summary(self):
        s = review_summary(data_access.get_my_reviews())
        assert s["total"] == 4
        assert s["completed"] == 2
        assert s["in_progress"] == 1
        assert s["submitted"] == 1
        assert s["avg_score"] == 4.05


class TestTeamAndOrganization:

    def test_team_summary(self):
        s = team_summary(data_access.get_team_members())
        assert s["size"] == 5
        assert s["at_risk"] == 1
        assert s["reviews_done"] == 1
        assert s["avg_score"] == 3.94

    def test_team_summary_empty(self):
        assert team_summary([]) == {"size": 0, "avg_score": 0, "avg_goal_progress": 0,
                                    "reviews_done": 0, "at_risk": 0}

    def test_zone_distribution(self):
        zones = zone_distribution(data_access.get_department_metrics())
        assert zones == {"GREEN": 170, "YELLOW": 58, "RED": 17}

    def test_departments_needing_attention(self):
        flagged = departments_needing_attention(data_access.get_department_metrics())
        # sorted worst score first
        assert [d["name"] for d in flagged] == ["Operations", "Design"]

    def test_reviewer_coverage(self):
        cov = reviewer_coverage(data_access.get_employees())
        assert cov["total"] == 8
        assert cov["with_r1"] == 6
        assert cov["with_r2"] == 2
        assert cov["unmapped"] == 2
        assert cov["coverage_pct"] == 75

    def test_completion_rate(self):
        assert completion_rate(3, 4) == 75
        assert completion_rate(0, 0) == 0
        assert completion_rate(1, 3) == 33

    def test_master_summary_counts_active_only(self):
        rows = data_access.get_departments()
        rows[0]["is_active"] = False
        s = master_summary(rows)
        assert s == {"total": 4, "active": 3, "inactive": 1, "people": 12 + 28 + 15}

    def test_category_breakdown(self):
        counts = category_breakdown(data_access.get_my_goals())
        assert counts == {"LEADERSHIP": 2, "TECHNICAL": 1, "PROFESSIONAL": 1, "PERSONAL": 1}
        assert list(counts)[0] == "LEADERSHIP"


class TestDataAccess:

    def test_getters_return_independent_copies(self):
        first = data_access.get_my_goals()
        first[0]["title"] = "changed"
        first.append({})
        second = data_access.get_my_goals()
        assert second[0]["title"] != "changed"
        assert len(second) == 5

    def test_unknown_settings_type_is_empty(self):
        assert data_access.get_system_settings("nope") == {}
        assert "max_goals_per_employee" in data_access.get_system_settings("goals")


class TestKraManagement:

    def test_filter_kras(self):
        kras = data_access.get_kra_library()
        assert [k["id"] for k in filter_kras(kras, category="TEAM")] == ["kra-lib-002", "kra-lib-004"]
        assert [k["id"] for k in filter_kras(kras, status="ACTIVE")] == ["kra-lib-001", "kra-lib-003", "kra-lib-006"]
        assert [k["id"] for k in filter_kras(kras, "market")] == ["kra-lib-006"]
        # "quality" is a tag on kra-lib-001 and in the title of kra-lib-005
        assert [k["id"] for k in filter_kras(kras, "quality")] == ["kra-lib-001", "kra-lib-005"]

    def test_kra_summary(self):
        s = kra_summary(data_access.get_kra_library())
        assert (s["total"], s["active"], s["approved"], s["draft"], s["archived"]) == (6, 3, 1, 1, 1)
        assert s["total_usage"] == 207
        assert s["avg_rating"] == 4.6

    def test_kra_summary_without_ratings(self):
        assert kra_summary([{"status": "DRAFT"}])["avg_rating"] == 0

    def test_filter_mappings(self):
        mappings = data_access.get_kra_mappings()
        assert [m["id"] for m in filter_mappings(mappings, mapping_type="ROLE")] == ["map-001", "map-003", "map-004"]
        assert [m["id"] for m in filter_mappings(mappings, mapping_type="ROLE", active_only=True)] == [
            "map-001", "map-003"]
        assert [m["id"] for m in filter_mappings(mappings, "engineering")] == ["map-002"]
        assert [m["id"] for m in filter_mappings(mappings, kra_id="kra-lib-006")] == ["map-006"]

    def test_demo_mappings_have_no_conflicts(self):
        assert mapping_conflicts(data_access.get_kra_mappings()) == []

    def test_same_kra_mapped_twice(self):
        mappings = data_access.get_kra_mappings()
        mappings.append(dict(mappings[0], id="map-new", weightage=10))
        assert mapping_conflicts(mappings) == [
            {"target": "Sales Representative", "kra_id": "kra-lib-001", "issue": "KRA mapped more than once"}]

    def test_weightage_over_limit(self):
        mappings = [
            {"kra_id": "a", "target_name": "Team X", "weightage": 60, "is_active": True},
            {"kra_id": "b", "target_name": "Team X", "weightage": 50, "is_active": True},
            {"kra_id": "c", "target_name": "Team X", "weightage": 90, "is_active": False},
        ]
        assert mapping_conflicts(mappings) == [
            {"target": "Team X", "kra_id": None, "issue": "Mapped weightage is 110%, above 100%"}]

    def test_weightage_issues(self):
        assert weightage_issues([]) == ["Add at least one entry"]
        assert weightage_issues([{"title": "A", "weightage": 60}, {"title": "B", "weightage": 40}]) == []
        assert weightage_issues([{"title": "A", "weightage": 120}, {"weightage": 0}]) == [
            "A: weight 120 is outside 1-100",
            "Entry 2: weight 0 is outside 1-100",
            "Weights add up to 120%, not 100%",
        ]
        assert weightage_issues([{"name": "KRA", "weight": 50}], field="weight") == [
            "Weights add up to 50%, not 100%"]

    def test_demo_kra_templates_add_up(self):
        for template in data_access.get_kra_templates():
            assert weightage_issues(template["kras"]) == [], template["id"]

    def test_kra_overview(self):
        stats = kra_overview(data_access.get_kra_library(), data_access.get_kra_mappings(),
                             data_access.get_kra_templates(), data_access.get_kra_bulk_operations())
        assert (stats["mappings"], stats["active_mappings"]) == (6, 5)
        assert (stats["templates"], stats["published_templates"]) == (4, 3)
        assert (stats["operations"], stats["running_operations"]) == (5, 0)
        assert stats["by_category"] == {"INDIVIDUAL": 2, "TEAM": 2, "ORGANIZATIONAL": 2}
        assert stats["departments"][0] == {"department": "Sales & Marketing", "kras": 2, "mappings": 2}

    def test_filter_categories(self):
        categories = data_access.get_goal_categories()
        assert [c["id"] for c in filter_categories(categories, status="INACTIVE")] == ["cat-005"]
        assert len(filter_categories(categories, status="ACTIVE")) == 4
        assert [c["id"] for c in filter_categories(categories, "leadership")] == ["cat-003"]

    def test_kra_alignment(self):
        a = kra_alignment(data_access.get_my_goals())
        assert (a["total"], a["linked"], a["unlinked"], a["alignment_pct"]) == (5, 3, 2, 60)
        assert a["by_kra"] == {"Innovation & Learning": 1, "Team Collaboration": 1, "Code Quality & Review": 1}


class TestCrossCycle:

    def test_score_trajectory(self):
        assert score_trajectory([4.0, 4.2]) == "Improving"
        assert score_trajectory([4.0, 3.8]) == "Declining"
        assert score_trajectory([4.0, 4.1]) == "Stable"
        assert score_trajectory([3.0]) == "Stable"
        assert score_trajectory([None, 4.0, 3.0]) == "Declining"

    def test_employee_trends(self):
        trends = employee_trends(data_access.get_employee_score_history())
        assert {t["employee"]: t["trajectory"] for t in trends} == {
            "Sarah Johnson": "Improving",
            "Alex Kumar": "Improving",
            "Michael Chen": "Stable",
            "Daniel Lee": "Declining",
            "Emily Davis": "Declining",
        }
        assert trends[-1]["employee"] == "Emily Davis"
        assert trends[-1]["change"] == -0.6

    def test_history_without_cycles_is_skipped(self):
        assert employee_trends([{"employee": "New Joiner", "cycles": []}]) == []

    def test_department_changes(self):
        changes = {d["department"]: d for d in department_changes(data_access.get_department_cycles())}
        assert changes["Engineering"]["change"] == 0.3
        assert changes["Engineering"]["latest_completion"] == 90
        assert changes["Design"]["trajectory"] == "Stable"
        assert changes["Product"]["trajectory"] == "Improving"

    def test_achievement_rates(self):
        rows = achievement_rates(data_access.get_goal_achievement_cycles())
        assert rows[0]["rate"] == 75
        assert achievement_rates([{"achieved": 0, "total": 0}])[0]["rate"] == 0
