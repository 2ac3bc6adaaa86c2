# common/bulk_jobs.py

"""
Simulated bulk operations (imports, updates, notifications).

Nothing is really processed. An operation is a plain dict whose progress
is pushed forward by `advance_operation` on every timer tick of the bulk
operations page until it reaches 100%.
"""

import logging
import random
import re
from datetime import datetime
from typing import Dict, Iterable, List, Optional

import pandas as pd

from config import ROLES

logger = logging.getLogger(__name__)

BULK_OPERATION_TYPES = {
    "import": "📥 Import",
    "export": "📤 Export",
    "update": "✏️ Update",
    "delete": "🗑️ Delete",
    "notify": "📧 Notify",
    "sync": "🔄 Sync",
}

OPERATION_STATUSES = ["pending", "running", "paused", "completed", "failed"]

IMPORT_COLUMNS = ["name", "email", "role", "department", "domain", "project"]
REQUIRED_IMPORT_FIELDS = ["name", "email", "role", "department"]

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _now() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M")


def new_operation(
    op_id: str,
    op_type: str,
    name: str,
    description: str,
    total_records: int,
    success_ratio: float = 1.0,
    status: str = "running",
) -> Dict:
    """
    Build a fresh operation record.

    `success_ratio` is the share of records that end up counted as
    successful once the operation completes; the rest are errors.
    """
    if op_type not in BULK_OPERATION_TYPES:
        raise ValueError(f"Unknown bulk operation type: {op_type}")
    if not 0.0 <= success_ratio <= 1.0:
        raise ValueError("success_ratio must be between 0 and 1")

    return {
        "id": op_id,
        "type": op_type,
        "name": name,
        "description": description,
        "status": status,
        "progress": 0.0,
        "total_records": int(total_records),
        "processed_records": 0,
        "success_count": 0,
        "error_count": 0,
        "success_ratio": success_ratio,
        "created_at": _now(),
        "completed_at": None,
        "errors": [],
    }


def advance_operation(op: Dict, rng: Optional[random.Random] = None, max_step: float = 20.0) -> Dict:
    """
    Move a running operation forward by a random step of up to `max_step`
    percent. Operations that are not running are left untouched.
    """
    if op.get("status") != "running":
        return op

    rng = rng or random.Random()
    total = op["total_records"]
    progress = op["progress"] + rng.random() * max_step

    if progress >= 100:
        success = int(round(total * op.get("success_ratio", 1.0)))
        op.update(
            status="completed",
            progress=100.0,
            processed_records=total,
            success_count=success,
            error_count=total - success,
            completed_at=_now(),
        )
        logger.info(f"Bulk operation {op['id']} ({op['type']}) completed: {success}/{total} succeeded")
    else:
        op["progress"] = progress
        op["processed_records"] = int((progress / 100) * total)
    return op


def pause_operation(op: Dict) -> Dict:
    if op.get("status") == "running":
        op["status"] = "paused"
    return op


def resume_operation(op: Dict) -> Dict:
    if op.get("status") in ("paused", "pending"):
        op["status"] = "running"
    return op


def has_running(operations: Iterable[Dict]) -> bool:
    return any(op.get("status") == "running" for op in operations)


def operation_summary(operations: Iterable[Dict]) -> Dict[str, int]:
    """Counts per status plus total processed and error records."""
    operations = list(operations)
    summary = {status: 0 for status in OPERATION_STATUSES}
    for op in operations:
        summary[op.get("status", "pending")] = summary.get(op.get("status", "pending"), 0) + 1
    summary["total"] = len(operations)
    summary["records_processed"] = sum(op.get("processed_records", 0) for op in operations)
    summary["errors"] = sum(op.get("error_count", 0) for op in operations)
    return summary


def validate_import_record(record: Dict, existing_emails: Iterable[str] = ()) -> List[str]:
    """
    Check one import row and return its error messages (empty when valid).
    """
    errors = []
    existing = {e.strip().lower() for e in existing_emails if e}

    missing = [f for f in REQUIRED_IMPORT_FIELDS if not str(record.get(f) or "").strip()]
    if missing:
        errors.append(f"Missing required field(s): {', '.join(missing)}")

    email = str(record.get("email") or "").strip()
    if email and not EMAIL_RE.match(email):
        errors.append("Invalid email format")

    role = str(record.get("role") or "").strip().upper()
    if role and role not in ROLES:
        errors.append("Invalid role specified")

    if email and email.lower() in existing:
        errors.append("Employee with this email already exists")

    return errors


def validate_import_frame(df: pd.DataFrame, existing_emails: Iterable[str] = ()) -> pd.DataFrame:
    """
    Validate an uploaded import sheet row by row.

    Returns a copy of `df` with the expected columns, plus `status`
    ("valid" / "error") and `errors` (messages joined with "; ").
    Duplicate emails inside the sheet itself count as existing from the
    second occurrence on.
    """
    out = df.copy()
    out.columns = [str(c).strip().lower() for c in out.columns]
    for col in IMPORT_COLUMNS:
        if col not in out.columns:
            out[col] = None

    seen = {e.strip().lower() for e in existing_emails if e}
    statuses, messages = [], []
    for record in out[IMPORT_COLUMNS].to_dict("records"):
        record = {k: (None if pd.isna(v) else v) for k, v in record.items()}
        errors = validate_import_record(record, seen)
        statuses.append("error" if errors else "valid")
        messages.append("; ".join(errors))
        if record.get("email"):
            seen.add(str(record["email"]).strip().lower())

    out["status"] = statuses
    out["errors"] = messages
    logger.info(f"Validated import sheet: {statuses.count('valid')} valid, {statuses.count('error')} with errors")
    return out


def import_template_frame() -> pd.DataFrame:
    """The CSV layout offered as a download on the import tab."""
    return pd.DataFrame(
        [
            {"name": "Jane Doe", "email": "jane.doe@company.com", "role": "EMPLOYEE",
             "department": "Engineering", "domain": "Development", "project": "Web Platform"},
        ],
        columns=IMPORT_COLUMNS,
    )
