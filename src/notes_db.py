# notes_db.py
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.database import Database

NOTES_COLLECTION = "notes"

_TRUE_WORDS = {"true", "1", "yes", "on"}
_FALSE_WORDS = {"false", "0", "no", "off", ""}


# ----------------------------
# Field coercion
# ----------------------------
def to_bool(x: Any) -> bool:
    if isinstance(x, bool):
        return x
    if x is None:
        return False
    if isinstance(x, (int, float)):
        return bool(x)
    s = str(x).strip().lower()
    if s in _TRUE_WORDS:
        return True
    if s in _FALSE_WORDS:
        return False
    raise ValueError(f"Cannot read {x!r} as a boolean")


def to_datetime(x: Any) -> datetime:
    """Accept datetime or ISO-8601 text; naive values are taken as UTC."""
    if isinstance(x, datetime):
        dt = x
    else:
        s = str(x).strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        dt = datetime.fromisoformat(s)  # raises ValueError on junk
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def make_note(
    content: Any,
    date: Optional[Any] = None,
    important: Any = False,
) -> Dict[str, Any]:
    return {
        "content": str(content),
        "date": to_datetime(date) if date is not None else datetime.now(timezone.utc),
        "important": to_bool(important),
    }


# ----------------------------
# Queries
# ----------------------------
def list_notes(db: Database) -> List[Dict[str, Any]]:
    return list(db[NOTES_COLLECTION].find({}))


def add_note(
    db: Database,
    content: Any,
    important: Any = False,
    date: Optional[Any] = None,
) -> ObjectId:
    doc = make_note(content, date=date, important=important)
    res = db[NOTES_COLLECTION].insert_one(doc)
    return res.inserted_id


# ----------------------------
# Printing
# ----------------------------
def _fmt_value(v: Any) -> str:
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, str):
        s = v.replace("\\", "\\\\").replace("'", "\\'")
        s = s.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
        return "'" + s + "'"
    if isinstance(v, datetime):
        if v.tzinfo is None:
            # pymongo hands back naive UTC datetimes unless tz_aware=True
            v = v.replace(tzinfo=timezone.utc)
        v = v.astimezone(timezone.utc)
        return v.strftime("%Y-%m-%dT%H:%M:%S.") + f"{v.microsecond // 1000:03d}Z"
    if v is None:
        return "null"
    return str(v)


def format_note(doc: Dict[str, Any]) -> str:
    """
    One line per note, e.g.
    { _id: 64f..., content: 'HTML is easy', date: 2023-01-01T00:00:00.000Z, important: true }
    Known fields come first; anything else stored on the document follows in order.
    """
    known = ["_id", "content", "date", "important"]
    keys = [k for k in known if k in doc] + [k for k in doc if k not in known]
    if not keys:
        return "{}"
    parts = [f"{k}: {_fmt_value(doc[k])}" for k in keys]
    return "{ " + ", ".join(parts) + " }"
