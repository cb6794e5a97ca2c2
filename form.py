# form.py
# Assessment form state: works on st.session_state or any plain dict
import logging
from typing import List, MutableMapping, Optional, Tuple

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from calculations import Diagnosis, Gender
from models import AssessmentInput, AssessmentRecord
from storage import AssessmentLog, StorageError

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "full_name": "Full Name",
    "age": "Age",
    "gender": "Gender",
    "weight_kg": "Weight (kg)",
    "height_m": "Height (m)",
    "fasting_glucose": "Fasting Glucose (mg/dL)",
    "triglycerides": "Triglycerides (mg/dL)",
    "hdl": "HDL (mg/dL)",
    "hba1c": "HbA1c (%)",
    "diabetes_diagnosis": "Diabetes diagnosis",
}

# Empty form: numbers blank, selects on their first option
FORM_DEFAULTS = {
    "full_name": "",
    "age": None,
    "gender": Gender.MALE.value,
    "weight_kg": None,
    "height_m": None,
    "fasting_glucose": None,
    "triglycerides": None,
    "hdl": None,
    "hba1c": None,
    "diabetes_diagnosis": Diagnosis.NO.value,
}


def init_form(state: MutableMapping) -> None:
    for k, v in FORM_DEFAULTS.items():
        state.setdefault(k, v)


def reset_form(state: MutableMapping) -> None:
    for k, v in FORM_DEFAULTS.items():
        state[k] = v


def validate_form(values: MutableMapping) -> Tuple[Optional[AssessmentInput], List[str]]:
    try:
        return AssessmentInput(**{k: values.get(k) for k in FIELD_LABELS}), []
    except ValidationError as exc:
        logger.info("Assessment form rejected: %d error(s)", exc.error_count())
        errors = []
        for err in exc.errors():
            field = err["loc"][0] if err["loc"] else ""
            errors.append(f"{FIELD_LABELS.get(field, field)}: {err['msg']}")
        return None, errors


def submit_form(state: MutableMapping, log: AssessmentLog) -> Optional[AssessmentRecord]:
    """
    Validate, save and clear the form.

    Outcome lands in state: "form_errors" (list of messages) and, on
    success, "last_result". Entered values are kept whenever nothing was saved.
    """
    data, errors = validate_form(state)
    state["form_errors"] = errors
    if data is None:
        return None

    try:
        record = log.submit(data)
    except (StorageError, SQLAlchemyError) as exc:
        logger.exception("Assessment for %r not saved", data.full_name)
        state["form_errors"] = [f"Could not save assessment: {exc}"]
        return None

    state["last_result"] = record
    reset_form(state)
    return record
