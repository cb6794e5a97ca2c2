"""
Pydantic schemas for assessments.

AssessmentInput is the form boundary: anything that reaches the calculator
has already passed these constraints. AssessmentRecord is what gets
persisted; its derived fields are computed once in build_record and the
record is frozen afterwards.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from advice import Advice, generate_advice
from calculations import (
    Diagnosis,
    Gender,
    RiskZone,
    compute_bmi,
    compute_tg_hdl,
    compute_tyg,
    get_risk_zone,
)


class AssessmentInput(BaseModel):
    """Patient measurements as entered on the form."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    full_name: str = Field(min_length=1)
    age: int = Field(ge=0, le=120)
    gender: Gender
    weight_kg: float = Field(gt=0)
    height_m: float = Field(gt=0)
    fasting_glucose: float = Field(gt=0)
    triglycerides: float = Field(gt=0)
    hdl: float = Field(gt=0)
    hba1c: float = Field(gt=0)
    diabetes_diagnosis: Diagnosis

    @field_validator("full_name", mode="before")
    @classmethod
    def _strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value


class AssessmentRecord(AssessmentInput):
    """A saved assessment: inputs + derived metrics, summary and advice."""
    id: str
    created_at: datetime
    bmi: float
    tyg: float
    tg_hdl_ratio: float
    risk_zone: RiskZone
    summary: str
    advice: Advice


def build_summary(age: int, gender: Gender, diagnosis: Diagnosis, tyg: float, risk: RiskZone) -> str:
    return (
        f"{age}-year-old {Gender(gender).value.lower()} with {Diagnosis(diagnosis).value.lower()} status; "
        f"TyG {tyg:.2f} indicates {RiskZone(risk).value.lower()}."
    )


def build_record(data: AssessmentInput, created_at: Optional[datetime] = None) -> AssessmentRecord:
    bmi = compute_bmi(data.weight_kg, data.height_m)
    tyg = compute_tyg(data.fasting_glucose, data.triglycerides)
    tg_hdl_ratio = compute_tg_hdl(data.triglycerides, data.hdl)
    risk_zone = get_risk_zone(tyg)

    return AssessmentRecord(
        **data.model_dump(),
        id=str(uuid.uuid4()),
        created_at=created_at or datetime.now(timezone.utc),
        bmi=bmi,
        tyg=tyg,
        tg_hdl_ratio=tg_hdl_ratio,
        risk_zone=risk_zone,
        summary=build_summary(data.age, data.gender, data.diabetes_diagnosis, tyg, risk_zone),
        advice=generate_advice(bmi, data.diabetes_diagnosis, risk_zone),
    )
