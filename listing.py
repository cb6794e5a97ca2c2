# listing.py
# Filter / sort / tabulate saved assessments for the Patients view
from datetime import datetime, timezone
from typing import List, Optional, Sequence

import pandas as pd

from calculations import RISK_ORDER, Diagnosis, RiskZone
from config import RISK_COLORS
from models import AssessmentRecord

ALL = "All"
SORT_OPTIONS = ["date", "risk"]

COLUMNS = ["Patient", "Age", "Gender", "BMI", "TyG", "TG/HDL", "Diagnosis", "Risk", "Date"]


def filter_records(
    records: Sequence[AssessmentRecord],
    risk: Optional[str] = None,
    diagnosis: Optional[str] = None,
    query: str = "",
) -> List[AssessmentRecord]:
    """risk / diagnosis of None or "All" match everything; query is a name substring."""
    risk_zone = RiskZone(risk) if risk not in (None, ALL) else None
    dx = Diagnosis(diagnosis) if diagnosis not in (None, ALL) else None
    search = (query or "").strip().lower()

    return [
        r for r in records
        if (risk_zone is None or r.risk_zone == risk_zone)
        and (dx is None or r.diabetes_diagnosis == dx)
        and (not search or search in r.full_name.lower())
    ]


def sort_records(records: Sequence[AssessmentRecord], sort_by: str = "date") -> List[AssessmentRecord]:
    # sorted() is stable: ties keep their stored (newest-first) order
    if sort_by == "risk":
        return sorted(records, key=lambda r: RISK_ORDER[r.risk_zone], reverse=True)
    if sort_by == "date":
        return sorted(records, key=lambda r: _as_utc(r.created_at), reverse=True)
    raise ValueError(f"Unknown sort option: {sort_by!r}")


def _as_utc(ts: datetime) -> datetime:
    return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)


def query_records(
    records: Sequence[AssessmentRecord],
    risk: Optional[str] = None,
    diagnosis: Optional[str] = None,
    query: str = "",
    sort_by: str = "date",
) -> List[AssessmentRecord]:
    return sort_records(filter_records(records, risk, diagnosis, query), sort_by)


def records_frame(records: Sequence[AssessmentRecord]) -> pd.DataFrame:
    rows = [
        {
            "Patient": r.full_name,
            "Age": r.age,
            "Gender": r.gender.value,
            "BMI": round(r.bmi, 1),
            "TyG": round(r.tyg, 2),
            "TG/HDL": round(r.tg_hdl_ratio, 2),
            "Diagnosis": r.diabetes_diagnosis.value,
            "Risk": r.risk_zone.value,
            "Date": r.created_at.astimezone().strftime("%Y-%m-%d %H:%M"),
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def risk_cell_style(value: str) -> str:
    colors = RISK_COLORS.get(value)
    if colors is None:
        return ""
    background, text = colors
    return f"background-color: {background}; color: {text}; font-weight: 600"


def styled_frame(df: pd.DataFrame):
    """Risk column colored like a badge; numbers keep the table's rounding."""
    return df.style.map(risk_cell_style, subset=["Risk"]).format({"BMI": "{:.1f}", "TyG": "{:.2f}", "TG/HDL": "{:.2f}"})
