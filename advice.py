# advice.py
# Rules-based recommendations (no external API needed)
from pydantic import BaseModel

from calculations import Diagnosis, RiskZone
from config import THRESHOLDS

TEXT = {
    "base": {
        "diet": "Emphasize whole foods, vegetables, lean proteins, and reduce added sugars.",
        "exercise": "Aim for at least 150 minutes/week of moderate activity.",
        "monitoring": "Annual check-up with fasting glucose and lipids.",
    },
    "overweight": {
        "diet": "Increase fiber (25–30g/day), replace refined carbs with whole grains, avoid sugary drinks.",
        "exercise": "30–45 min brisk walking 5 days/week; add 2 resistance sessions.",
    },
    "obese": {
        "diet": "Structured calorie deficit with high-fiber, high-protein meals; limit ultra-processed foods.",
        "exercise": "Start with 30 min/day, progress to 45–60; prioritize low-impact cardio + strength training.",
    },
    "monitoring": {
        Diagnosis.PREDIABETES: "Recheck HbA1c in 3–6 months; screen BP and waist circumference.",
        Diagnosis.DIABETES: "HbA1c every 3 months until stable; annual eye and kidney screening; foot checks.",
    },
    "high_risk": {
        "diet": " Consider dietitian referral.",
        "exercise": " Gradually increase intensity under supervision if needed.",
    },
}


class Advice(BaseModel):
    diet: str
    exercise: str
    monitoring: str


def generate_advice(bmi: float, diagnosis: Diagnosis, risk: RiskZone) -> Advice:
    """
    Rule order matters:
      base text -> overweight OR obese (replace) -> diagnosis monitoring (replace)
      -> High Risk (append to diet + exercise)
    """
    diagnosis = Diagnosis(diagnosis)
    risk = RiskZone(risk)

    text = dict(TEXT["base"])

    if THRESHOLDS["bmi_overweight"] <= bmi < THRESHOLDS["bmi_obese"]:
        text.update(TEXT["overweight"])
    elif bmi >= THRESHOLDS["bmi_obese"]:
        text.update(TEXT["obese"])

    if diagnosis in TEXT["monitoring"]:
        text["monitoring"] = TEXT["monitoring"][diagnosis]

    if risk is RiskZone.HIGH:
        text["diet"] += TEXT["high_risk"]["diet"]
        text["exercise"] += TEXT["high_risk"]["exercise"]

    return Advice(**text)
