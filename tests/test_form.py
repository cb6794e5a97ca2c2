import pytest

from config import DEMO_PATIENT
from form import FORM_DEFAULTS, init_form, reset_form, submit_form, validate_form
from storage import AssessmentLog, MemoryBackend


@pytest.fixture
def log():
    return AssessmentLog(MemoryBackend())


@pytest.fixture
def state():
    return dict(DEMO_PATIENT)


def test_init_form_keeps_entered_values():
    state = {"full_name": "Jane"}
    init_form(state)
    assert state["full_name"] == "Jane"
    assert state["hdl"] is None
    assert state["gender"] == "Male"
    assert state["diabetes_diagnosis"] == "No"


def test_reset_form():
    state = dict(DEMO_PATIENT, last_result="kept")
    reset_form(state)
    assert {k: state[k] for k in FORM_DEFAULTS} == FORM_DEFAULTS
    assert state["last_result"] == "kept"


def test_submit_saves_and_clears_form(state, log):
    record = submit_form(state, log)

    assert record is not None
    assert log.records() == [record]
    assert state["last_result"] == record
    assert state["form_errors"] == []
    assert {k: state[k] for k in FORM_DEFAULTS} == FORM_DEFAULTS


def test_invalid_submit_keeps_values_and_saves_nothing(state, log):
    state["hdl"] = None
    state["age"] = 130

    assert submit_form(state, log) is None
    assert log.records() == []
    assert "last_result" not in state
    assert state["full_name"] == "John Doe"
    assert state["age"] == 130
    assert len(state["form_errors"]) == 2
    assert any(msg.startswith("HDL (mg/dL):") for msg in state["form_errors"])
    assert any(msg.startswith("Age:") for msg in state["form_errors"])


def test_errors_clear_after_successful_submit(state, log):
    state["hdl"] = 0
    submit_form(state, log)
    assert state["form_errors"]

    state["hdl"] = 42.0
    assert submit_form(state, log) is not None
    assert state["form_errors"] == []


def test_storage_failure_reports_and_keeps_values(state):
    backend = MemoryBackend(raw="{oops")
    assert submit_form(state, AssessmentLog(backend)) is None

    assert backend.raw == "{oops"
    assert state["form_errors"][0].startswith("Could not save assessment")
    assert state["full_name"] == "John Doe"


def test_validate_form_ignores_extra_keys(state):
    data, errors = validate_form(dict(state, form_errors=["old"], last_result=None))
    assert errors == []
    assert data.full_name == "John Doe"
