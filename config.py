# config.py
# Thresholds + settings (clinical teammates can tweak these easily)
import os

THRESHOLDS = {
    # TyG index risk zones: Low < 8.0, Moderate 8.0–8.5 (both ends), High > 8.5
    "tyg_moderate": 8.0,
    "tyg_high": 8.5,

    # BMI (kg/m²)
    "bmi_underweight": 18.5,
    "bmi_overweight": 25.0,
    "bmi_obese": 30.0,

    # TG/HDL ratio
    "tg_hdl_moderate": 3.0,
    "tg_hdl_high": 4.5,
}

# Gauge presets: display range + colored bands
GAUGES = {
    "bmi": {
        "label": "BMI",
        "min": 10.0,
        "max": 45.0,
        "bands": [
            (18.5, 24.9, "#2e7d32"),  # Normal
            (25.0, 29.9, "#f9a825"),  # Overweight
            (30.0, 45.0, "#c62828"),  # Obese
        ],
    },
    "tyg": {
        "label": "TyG index",
        "min": 6.0,
        "max": 10.0,
        "bands": [
            (6.0, 8.0, "#2e7d32"),
            (8.0, 8.5, "#f9a825"),
            (8.5, 10.0, "#c62828"),
        ],
    },
    "tgratio": {
        "label": "TG/HDL-C",
        "min": 0.0,
        "max": 8.0,
        "bands": [
            (0.0, 3.0, "#2e7d32"),  # Ideal
            (3.0, 4.5, "#f9a825"),
            (4.5, 8.0, "#c62828"),
        ],
    },
}

REFERENCES = {
    "BMI": ["Underweight: < 18.5", "Normal: 18.5–24.9", "Overweight: 25–29.9", "Obese: ≥30"],
    "TyG Index": ["Low: < 8.0", "Moderate: 8.0–8.5", "High: > 8.5"],
    "TG/HDL Ratio": ["Ideal: < 3.0", "Moderate risk: 3.0–4.5", "High risk: > 4.5"],
    "notes": [
        "TyG index = ln[(fasting glucose × triglycerides) / 2].",
        "High BMI increases risk for cardiovascular diseases, diabetes, and metabolic syndrome.",
        "Elevated TyG Index is linked with insulin resistance and higher risk of type 2 diabetes.",
        "High TG/HDL ratio is associated with atherosclerosis and heart disease.",
    ],
}

STORAGE = {
    "key": "metabolic_assessments",
    "default_db_url": "sqlite:///data.db",
}

LOGGING = {
    "level": os.getenv("LOG_LEVEL", "INFO").upper(),
    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
}

DEMO_PATIENT = {
    "full_name": "John Doe",
    "age": 48,
    "gender": "Male",
    "weight_kg": 82.0,
    "height_m": 1.75,
    "fasting_glucose": 110.0,
    "triglycerides": 180.0,
    "hdl": 42.0,
    "hba1c": 6.1,
    "diabetes_diagnosis": "Prediabetes",
}

APP = {
    "title": "Metabolic Risk Calculator",
    "description": "Enter patient data to compute BMI, TyG index and TG/HDL-C ratio, then save results.",
    "disclaimer": (
        "These tools aid clinical judgment and do not replace professional "
        "diagnosis or individualized care."
    )
}

# Risk column badge (background, text)
RISK_COLORS = {
    "Low Risk": ("#e8f5e9", "#2e7d32"),
    "Moderate Risk": ("#fff8e1", "#f57f17"),
    "High Risk": ("#ffebee", "#c62828"),
}
