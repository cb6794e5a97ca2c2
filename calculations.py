# calculations.py
import math
from enum import Enum

from config import THRESHOLDS


class RiskZone(str, Enum):
    LOW = "Low Risk"
    MODERATE = "Moderate Risk"
    HIGH = "High Risk"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class Diagnosis(str, Enum):
    NO = "No"
    PREDIABETES = "Prediabetes"
    DIABETES = "Diabetes"


# Sort key only (High > Moderate > Low)
RISK_ORDER = {
    RiskZone.HIGH: 2,
    RiskZone.MODERATE: 1,
    RiskZone.LOW: 0,
}


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def compute_bmi(weight_kg: float, height_m: float) -> float:
    try:
        return _finite_or_zero(weight_kg / (height_m * height_m))
    except (ZeroDivisionError, OverflowError):
        return 0.0


def compute_tyg(fasting_glucose: float, triglycerides: float) -> float:
    """ln((glucose mg/dL × triglycerides mg/dL) / 2), or 0.0 outside the log domain."""
    try:
        return _finite_or_zero(math.log((fasting_glucose * triglycerides) / 2))
    except (ValueError, OverflowError):
        return 0.0


def compute_tg_hdl(triglycerides: float, hdl: float) -> float:
    try:
        return _finite_or_zero(triglycerides / hdl)
    except (ZeroDivisionError, OverflowError):
        return 0.0


def get_risk_zone(tyg: float) -> RiskZone:
    if tyg < THRESHOLDS["tyg_moderate"]:
        return RiskZone.LOW
    if tyg <= THRESHOLDS["tyg_high"]:
        return RiskZone.MODERATE
    return RiskZone.HIGH


def classify_bmi(bmi: float) -> str:
    """Reference category for the BMI panel (not used for risk)."""
    if bmi < THRESHOLDS["bmi_underweight"]:
        return "Underweight"
    if bmi < THRESHOLDS["bmi_overweight"]:
        return "Normal"
    if bmi < THRESHOLDS["bmi_obese"]:
        return "Overweight"
    return "Obese"


def classify_tg_hdl(ratio: float) -> str:
    if ratio < THRESHOLDS["tg_hdl_moderate"]:
        return "Ideal"
    if ratio <= THRESHOLDS["tg_hdl_high"]:
        return "Moderate risk"
    return "High risk"
