"""Tests for performance assessment scoring."""
from common import data_access
from common.assessment import gaps_to_target, performance_zone, rating_label, score_assessment, weighted_rating


def _section(section_id, section_type, weight, *ratings):
    items = [{"id": f"{section_id}-{i}", "description": f"Item {i}", "rating": r, "weight": 10, "target_score": 4}
             for i, r in enumerate(ratings, start=1)]
    return {"id": section_id, "title": section_id.title(), "type": section_type, "weight": weight, "items": items}


class TestScoring:

    def test_demo_assessment_is_green(self):
        scores = score_assessment(data_access.get_assessment_sections())
        assert scores["kra_score"] == 4.0
        assert scores["goal_score"] == 4.5
        assert scores["competency_score"] == 4.0
        assert 4.1 <= scores["overall_score"] <= 4.2
        assert scores["zone"] == "GREEN"

    def test_weighted_overall(self):
        sections = [
            _section("kra", "KRA", 60, 3, 3),
            _section("goal", "Goal", 30, 5),
            _section("comp", "Competency", 10, 5),
        ]
        scores = score_assessment(sections)
        # 0.6 * 3 + 0.3 * 5 + 0.1 * 5
        assert scores["overall_score"] == 3.8
        assert scores["zone"] == "YELLOW"
        assert scores["sections"] == {"kra": 3.0, "goal": 5.0, "comp": 5.0}

    def test_unrated_section_is_left_out(self):
        sections = [_section("kra", "KRA", 60, 2, 2), _section("goal", "Goal", 30, None)]
        scores = score_assessment(sections)
        assert scores["goal_score"] is None
        assert scores["overall_score"] == 2.0
        assert scores["zone"] == "RED"

    def test_nothing_rated(self):
        scores = score_assessment([_section("kra", "KRA", 60)])
        assert scores["overall_score"] == 0.0
        assert scores["kra_score"] is None
        assert scores["competency_score"] is None

    def test_weighted_rating_ignores_weightless_items(self):
        assert weighted_rating([{"rating": 5, "weight": 0}]) is None
        assert weighted_rating([{"rating": 4, "weight": 30}, {"rating": 2, "weight": 10}]) == 3.5


class TestZonesAndLabels:

    def test_zone_boundaries(self):
        assert performance_zone(4.0)[0] == "GREEN"
        assert performance_zone(3.99)[0] == "YELLOW"
        assert performance_zone(3.0)[0] == "YELLOW"
        assert performance_zone(2.9)[0] == "RED"

    def test_recommendation_follows_zone(self):
        assert "improvement plan" in performance_zone(1.5)[1]

    def test_rating_label(self):
        assert rating_label(5) == "Outstanding"
        assert rating_label(3) == "Meets Expectations"
        assert rating_label(None) == "Not Rated"


class TestGaps:

    def test_demo_assessment_has_no_gaps(self):
        assert gaps_to_target(data_access.get_assessment_sections()) == []

    def test_biggest_gap_first(self):
        gaps = gaps_to_target([_section("kra", "KRA", 60, 3, 1, 5)])
        assert [(g["item"], g["gap"]) for g in gaps] == [("Item 2", 3), ("Item 1", 1)]
