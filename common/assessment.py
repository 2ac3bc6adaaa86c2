# common/assessment.py

"""
Performance assessment scoring.

An assessment is a list of sections (KRAs, goals, competencies), each with
a weight and rated items. Item ratings are on a 1-5 scale:

- each section scores the weighted average of its item ratings;
- the overall score is the section scores weighted by section weight;
- the overall score maps to a zone: GREEN from 4.0, YELLOW from 3.0,
  RED below that.

With the standard 60 / 30 / 10 section weights this is
0.6 * KRA + 0.3 * Goal + 0.1 * Competency.
"""

from typing import Dict, Iterable, List, Optional, Tuple

RATING_LABELS = {
    5: "Outstanding",
    4: "Exceeds Expectations",
    3: "Meets Expectations",
    2: "Below Expectations",
    1: "Unsatisfactory",
}

ZONE_RECOMMENDATIONS = {
    "GREEN": "Exceeds expectations - consider for advancement opportunities",
    "YELLOW": "Meets expectations - focus on development areas",
    "RED": "Below expectations - requires an improvement plan",
}


def rating_label(rating) -> str:
    return RATING_LABELS.get(rating, "Not Rated")


def performance_zone(score: float) -> Tuple[str, str]:
    """(zone, recommendation) for an overall score."""
    if score >= 4.0:
        zone = "GREEN"
    elif score >= 3.0:
        zone = "YELLOW"
    else:
        zone = "RED"
    return zone, ZONE_RECOMMENDATIONS[zone]


def weighted_rating(items: Iterable[Dict]) -> Optional[float]:
    """Weighted average rating of rated items; None when nothing carries weight."""
    rated = [i for i in items if i.get("rating") and (i.get("weight") or 0) > 0]
    total_weight = sum(i["weight"] for i in rated)
    if not total_weight:
        return None
    return sum(i["rating"] * i["weight"] for i in rated) / total_weight


def score_assessment(sections: List[Dict]) -> Dict:
    """
    Score every section and the assessment as a whole.

    Sections without any rated item are left out of the overall score and
    the remaining section weights are rescaled.
    """
    section_scores = {}
    weighted_sum = 0.0
    weight_used = 0.0
    for section in sections:
        score = weighted_rating(section.get("items", []))
        section_scores[section["id"]] = None if score is None else round(score, 1)
        if score is not None and section.get("weight"):
            weighted_sum += score * section["weight"]
            weight_used += section["weight"]

    overall = round(weighted_sum / weight_used, 1) if weight_used else 0.0
    zone, recommendation = performance_zone(overall)
    by_type = {s.get("type"): section_scores[s["id"]] for s in sections}
    return {
        "sections": section_scores,
        "kra_score": by_type.get("KRA"),
        "goal_score": by_type.get("Goal"),
        "competency_score": by_type.get("Competency"),
        "overall_score": overall,
        "zone": zone,
        "recommendation": recommendation,
    }


def gaps_to_target(sections: Iterable[Dict]) -> List[Dict]:
    """Items rated below their target score, biggest gap first."""
    gaps = []
    for section in sections:
        for item in section.get("items", []):
            target = item.get("target_score")
            if target and item.get("rating") and item["rating"] < target:
                gaps.append({"section": section.get("title"), "item": item.get("description"),
                             "rating": item["rating"], "target": target, "gap": target - item["rating"]})
    return sorted(gaps, key=lambda g: g["gap"], reverse=True)
