# common/metrics.py

"""
Summary statistics and list filters shared by the PMS pages.

Everything here works on plain lists of dicts (the shape returned by
common/data_access.py) so it can be tested without Streamlit.
"""

from collections import Counter
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Sequence

ALL = "ALL"

ZONES = ("GREEN", "YELLOW", "RED")


def search_records(records: Iterable[Dict], term: str, fields: Sequence[str]) -> List[Dict]:
    """
    Case-insensitive substring match of `term` against `fields`.
    List-valued fields match when any element matches. An empty term
    returns every record.
    """
    records = list(records)
    term = (term or "").strip().lower()
    if not term:
        return records

    def _hit(record):
        for field in fields:
            value = record.get(field)
            if value is None:
                continue
            values = value if isinstance(value, (list, tuple)) else [value]
            if any(term in str(v).lower() for v in values):
                return True
        return False

    return [r for r in records if _hit(r)]


def split_tags(text: str) -> List[str]:
    """'a, b,,c ' -> ['a', 'b', 'c']"""
    return [part.strip() for part in (text or "").split(",") if part.strip()]


def _matches(value, wanted) -> bool:
    return wanted in (None, "", ALL) or value == wanted


def days_remaining(target_date: str, today: Optional[date] = None) -> Optional[int]:
    """Days from `today` to an ISO `target_date`; negative when overdue."""
    if not target_date:
        return None
    today = today or date.today()
    try:
        target = datetime.strptime(str(target_date)[:10], "%Y-%m-%d").date()
    except ValueError:
        return None
    return (target - today).days


def goal_summary(goals: Iterable[Dict]) -> Dict:
    goals = list(goals)
    total = len(goals)
    return {
        "total": total,
        "active": sum(1 for g in goals if g.get("status") == "ACTIVE"),
        "completed": sum(1 for g in goals if g.get("status") == "COMPLETED"),
        "on_hold": sum(1 for g in goals if g.get("status") == "ON_HOLD"),
        "pending_approval": sum(1 for g in goals if not g.get("manager_approved")),
        "overall_progress": round(sum(g.get("progress", 0) for g in goals) / total) if total else 0,
    }


def filter_goals(
    goals: Iterable[Dict],
    term: str = "",
    status: str = ALL,
    category: str = ALL,
    priority: str = ALL,
) -> List[Dict]:
    hits = search_records(goals, term, ("title", "description", "tags", "owner", "kra_name"))
    return [
        g for g in hits
        if _matches(g.get("status"), status)
        and _matches(g.get("category"), category)
        and _matches(g.get("priority"), priority)
    ]


def master_summary(records: Iterable[Dict], count_field: str = "employee_count") -> Dict:
    """Totals shown above each master table."""
    records = list(records)
    active = [r for r in records if r.get("is_active", True)]
    return {
        "total": len(records),
        "active": len(active),
        "inactive": len(records) - len(active),
        "people": sum(int(r.get(count_field) or 0) for r in active),
    }


def evidence_summary(evidence: Iterable[Dict]) -> Dict:
    evidence = list(evidence)
    counts = Counter(e.get("status") for e in evidence)
    rated = [e["rating"] for e in evidence if e.get("rating") is not None]
    return {
        "total": len(evidence),
        "approved": counts.get("APPROVED", 0),
        "pending": counts.get("PENDING", 0),
        "needs_revision": counts.get("NEEDS_REVISION", 0),
        "rejected": counts.get("REJECTED", 0),
        "avg_rating": round(sum(rated) / len(rated), 1) if rated else None,
    }


def filter_evidence(
    evidence: Iterable[Dict],
    term: str = "",
    status: str = ALL,
    evidence_type: str = ALL,
    goal_id: str = ALL,
) -> List[Dict]:
    hits = search_records(evidence, term, ("title", "description", "goal_title", "tags"))
    return [
        e for e in hits
        if _matches(e.get("status"), status)
        and _matches(e.get("type"), evidence_type)
        and _matches(e.get("goal_id"), goal_id)
    ]


def template_summary(templates: Iterable[Dict]) -> Dict:
    templates = list(templates)
    ratings = [t.get("rating", 0) for t in templates]
    return {
        "total": len(templates),
        "approved": sum(1 for t in templates if t.get("is_approved")),
        "public": sum(1 for t in templates if t.get("is_public")),
        "total_usage": sum(t.get("usage_count", 0) for t in templates),
        "avg_rating": round(sum(ratings) / len(ratings), 1) if ratings else 0,
    }


def filter_templates(
    templates: Iterable[Dict],
    term: str = "",
    category: str = ALL,
    difficulty: str = ALL,
    approved_only: bool = False,
) -> List[Dict]:
    hits = search_records(templates, term, ("title", "description", "tags", "required_skills"))
    return [
        t for t in hits
        if _matches(t.get("category"), category)
        and _matches(t.get("difficulty"), difficulty)
        and (t.get("is_approved") or not approved_only)
    ]


def review_summary(reviews: Iterable[Dict]) -> Dict:
    reviews = list(reviews)
    counts = Counter(r.get("status") for r in reviews)
    scored = [r["overall_score"] for r in reviews if r.get("overall_score") is not None]
    return {
        "total": len(reviews),
        "completed": counts.get("Completed", 0),
        "in_progress": counts.get("In Progress", 0),
        "submitted": counts.get("Submitted", 0),
        "not_started": counts.get("Not Started", 0),
        "overdue": counts.get("Overdue", 0),
        "avg_score": round(sum(scored) / len(scored), 2) if scored else None,
    }


def team_summary(members: Iterable[Dict]) -> Dict:
    members = list(members)
    size = len(members)
    return {
        "size": size,
        "avg_score": round(sum(m.get("performance_score", 0) for m in members) / size, 2) if size else 0,
        "avg_goal_progress": round(sum(m.get("goal_progress", 0) for m in members) / size) if size else 0,
        "reviews_done": sum(1 for m in members if m.get("review_status") == "Completed"),
        "at_risk": sum(1 for m in members if m.get("zone") == "RED"),
    }


def zone_distribution(departments: Iterable[Dict]) -> Dict[str, int]:
    """Sum the GREEN / YELLOW / RED head counts across departments."""
    totals = {zone: 0 for zone in ZONES}
    for dept in departments:
        for zone, count in (dept.get("zones") or {}).items():
            totals[zone] = totals.get(zone, 0) + count
    return totals


def departments_needing_attention(
    departments: Iterable[Dict],
    min_score: float = 4.0,
    min_goal_rate: float = 75,
) -> List[Dict]:
    """Departments below the score or goal-completion threshold, worst score first."""
    flagged = [
        d for d in departments
        if d.get("avg_performance_score", 0) < min_score or d.get("goal_completion_rate", 0) < min_goal_rate
    ]
    return sorted(flagged, key=lambda d: d.get("avg_performance_score", 0))


def reviewer_coverage(employees: Iterable[Dict]) -> Dict:
    employees = list(employees)
    with_r1 = sum(1 for e in employees if e.get("r1_reviewer"))
    with_r2 = sum(1 for e in employees if e.get("r2_reviewer"))
    unmapped = [e for e in employees if not e.get("r1_reviewer")]
    return {
        "total": len(employees),
        "with_r1": with_r1,
        "with_r2": with_r2,
        "unmapped": len(unmapped),
        "coverage_pct": completion_rate(with_r1, len(employees)),
    }


def completion_rate(done: float, total: float) -> int:
    """Whole-number percentage; 0 when there is nothing to complete."""
    if not total:
        return 0
    return round(100 * done / total)


def category_breakdown(records: Iterable[Dict], field: str = "category") -> Dict[str, int]:
    """Count of records per value of `field`, most common first."""
    counts = Counter(r.get(field) or "Uncategorised" for r in records)
    return dict(counts.most_common())


# --- KRA management ---

def filter_kras(kras: Iterable[Dict], term: str = "", category: str = ALL, status: str = ALL) -> List[Dict]:
    hits = search_records(kras, term, ("title", "description", "tags"))
    return [k for k in hits if _matches(k.get("category"), category) and _matches(k.get("status"), status)]


def kra_summary(kras: Iterable[Dict]) -> Dict:
    kras = list(kras)
    counts = Counter(k.get("status") for k in kras)
    rated = [k["rating"] for k in kras if k.get("rating")]
    return {
        "total": len(kras),
        "active": counts.get("ACTIVE", 0),
        "approved": counts.get("APPROVED", 0),
        "draft": counts.get("DRAFT", 0),
        "archived": counts.get("ARCHIVED", 0),
        "total_usage": sum(k.get("usage_count", 0) for k in kras),
        "avg_rating": round(sum(rated) / len(rated), 1) if rated else 0,
    }


def filter_mappings(
    mappings: Iterable[Dict],
    term: str = "",
    mapping_type: str = ALL,
    kra_id: str = ALL,
    active_only: bool = False,
) -> List[Dict]:
    hits = search_records(mappings, term, ("kra_title", "target_name"))
    return [
        m for m in hits
        if _matches(m.get("mapping_type"), mapping_type)
        and _matches(m.get("kra_id"), kra_id)
        and (m.get("is_active") or not active_only)
    ]


def mapping_conflicts(mappings: Iterable[Dict], limit: float = 100) -> List[Dict]:
    """
    Problems among the active mappings: a KRA mapped twice to the same
    target, or a target whose mapped weightage goes over `limit`.
    """
    by_target: Dict[str, List[Dict]] = {}
    for m in mappings:
        if m.get("is_active"):
            by_target.setdefault(m.get("target_name"), []).append(m)

    conflicts = []
    for target, rows in by_target.items():
        repeated = [kra for kra, n in Counter(r.get("kra_id") for r in rows).items() if n > 1]
        for kra_id in repeated:
            conflicts.append({"target": target, "kra_id": kra_id, "issue": "KRA mapped more than once"})
        total = sum(r.get("weightage", 0) for r in rows)
        if total > limit:
            conflicts.append({"target": target, "kra_id": None,
                              "issue": f"Mapped weightage is {total:g}%, above {limit:g}%"})
    return conflicts


def weightage_issues(items: Iterable[Dict], field: str = "weightage", expected: float = 100) -> List[str]:
    """Each weight must be 1-100 and together they must add up to `expected`."""
    items = list(items)
    if not items:
        return ["Add at least one entry"]
    issues = []
    for i, item in enumerate(items, start=1):
        value = item.get(field) or 0
        if not 1 <= value <= 100:
            name = item.get("title") or item.get("name") or f"Entry {i}"
            issues.append(f"{name}: weight {value:g} is outside 1-100")
    total = sum(item.get(field) or 0 for item in items)
    if total != expected:
        issues.append(f"Weights add up to {total:g}%, not {expected:g}%")
    return issues


def kra_overview(kras: Iterable[Dict], mappings: Iterable[Dict], templates: Iterable[Dict],
                 operations: Iterable[Dict]) -> Dict:
    """Headline numbers for the KRA management overview."""
    kras, mappings, templates, operations = list(kras), list(mappings), list(templates), list(operations)
    summary = kra_summary(kras)
    departments = Counter(k.get("department") for k in kras)
    mapped = Counter(
        k.get("department") for m in mappings for k in kras if k.get("id") == m.get("kra_id")
    )
    return {
        "kras": summary,
        "mappings": len(mappings),
        "active_mappings": sum(1 for m in mappings if m.get("is_active")),
        "templates": len(templates),
        "published_templates": sum(1 for t in templates if t.get("is_published")),
        "operations": len(operations),
        "running_operations": sum(1 for op in operations if op.get("status") == "running"),
        "by_category": category_breakdown(kras),
        "departments": [
            {"department": name, "kras": count, "mappings": mapped.get(name, 0)}
            for name, count in departments.most_common()
        ],
    }


def filter_categories(categories: Iterable[Dict], term: str = "", status: str = ALL) -> List[Dict]:
    """`status` is ALL, "ACTIVE" or "INACTIVE"."""
    hits = search_records(categories, term, ("name", "description"))
    if status == "ACTIVE":
        return [c for c in hits if c.get("is_active")]
    if status == "INACTIVE":
        return [c for c in hits if not c.get("is_active")]
    return hits


# --- Cross-cycle analysis ---

def score_trajectory(scores: Sequence[float], threshold: float = 0.1) -> str:
    """
    "Improving", "Declining" or "Stable", from the change between the
    first and last score. Changes within `threshold` count as stable.
    """
    scores = [s for s in scores if s is not None]
    if len(scores) < 2:
        return "Stable"
    change = round(scores[-1] - scores[0], 2)
    if change > threshold:
        return "Improving"
    if change < -threshold:
        return "Declining"
    return "Stable"


def employee_trends(history: Iterable[Dict]) -> List[Dict]:
    """One row per employee: first and latest overall score, change and trajectory."""
    rows = []
    for person in history:
        scores = [c["overall_score"] for c in person.get("cycles", [])]
        if not scores:
            continue
        rows.append({
            "employee": person["employee"],
            "department": person.get("department"),
            "cycles": len(scores),
            "first_score": scores[0],
            "latest_score": scores[-1],
            "change": round(scores[-1] - scores[0], 2),
            "trajectory": score_trajectory(scores),
        })
    return sorted(rows, key=lambda r: r["change"], reverse=True)


def department_changes(rows: Iterable[Dict]) -> List[Dict]:
    """Score change per department from its first cycle to its last, rows in cycle order."""
    by_dept: Dict[str, List[Dict]] = {}
    for row in rows:
        by_dept.setdefault(row["department"], []).append(row)
    out = []
    for name, cycles in by_dept.items():
        scores = [c["avg_score"] for c in cycles]
        out.append({
            "department": name,
            "latest_score": scores[-1],
            "change": round(scores[-1] - scores[0], 2),
            "latest_completion": cycles[-1].get("completion_rate", 0),
            "trajectory": score_trajectory(scores),
        })
    return sorted(out, key=lambda r: r["change"], reverse=True)


def achievement_rates(rows: Iterable[Dict]) -> List[Dict]:
    """Adds `rate` (whole-number %) to each category / cycle row."""
    return [dict(r, rate=completion_rate(r.get("achieved", 0), r.get("total", 0))) for r in rows]


def kra_alignment(goals: Iterable[Dict]) -> Dict:
    """How many goals are linked to a KRA, and the goal count per KRA."""
    goals = list(goals)
    linked = [g for g in goals if g.get("kra_id")]
    return {
        "total": len(goals),
        "linked": len(linked),
        "unlinked": len(goals) - len(linked),
        "alignment_pct": completion_rate(len(linked), len(goals)),
        "by_kra": dict(Counter(g.get("kra_name") or g["kra_id"] for g in linked).most_common()),
    }
