import logging

import streamlit as st
import matplotlib.pyplot as plt

from config import APP, DEMO_PATIENT, LOGGING, REFERENCES
from calculations import (
    Diagnosis,
    Gender,
    RiskZone,
    classify_bmi,
    classify_tg_hdl,
    compute_bmi,
    compute_tg_hdl,
    compute_tyg,
    get_risk_zone,
)
from charts import range_gauge
from form import FIELD_LABELS, init_form, submit_form
from listing import ALL, SORT_OPTIONS, query_records, records_frame, styled_frame
from storage import AssessmentLog

logging.basicConfig(level=LOGGING["level"], format=LOGGING["format"])

st.set_page_config(page_title=APP["title"], layout="wide")


@st.cache_resource
def get_log() -> AssessmentLog:
    return AssessmentLog()


RISK_STYLE = {
    RiskZone.LOW: st.success,
    RiskZone.MODERATE: st.warning,
    RiskZone.HIGH: st.error,
}


def _fill_demo() -> None:
    for k, v in DEMO_PATIENT.items():
        st.session_state[k] = v


def _submit() -> None:
    submit_form(st.session_state, get_log())


def _show_gauge(preset: str, value: float) -> None:
    fig = range_gauge(preset, value)
    st.pyplot(fig)
    plt.close(fig)


def _show_references() -> None:
    with st.expander("Reference Values", expanded=False):
        cols = st.columns(3)
        for col, name in zip(cols, ["BMI", "TyG Index", "TG/HDL Ratio"]):
            with col:
                st.markdown(f"**{name}**")
                for line in REFERENCES[name]:
                    st.write("•", line)
        st.markdown("**Clinical Importance**")
        for line in REFERENCES["notes"]:
            st.write("•", line)


init_form(st.session_state)

# -------------------------
# Header
# -------------------------
st.title(APP["title"])
st.caption(APP["description"])
st.info(APP["disclaimer"])

tabs = st.tabs(["1) New assessment", "2) Patients"])

# -------------------------
# 1) New assessment
# -------------------------
with tabs[0]:
    col_form, col_result = st.columns(2)

    with col_form:
        st.subheader("Patient Information")

        # values come from st.session_state (see form.FORM_DEFAULTS)
        c1, c2 = st.columns(2)
        with c1:
            st.text_input(FIELD_LABELS["full_name"], key="full_name", placeholder="Jane Smith")
            st.selectbox(FIELD_LABELS["gender"], [g.value for g in Gender], key="gender")
        with c2:
            st.number_input(FIELD_LABELS["age"], min_value=0, max_value=120, step=1, key="age")
            st.selectbox(FIELD_LABELS["diabetes_diagnosis"], [d.value for d in Diagnosis], key="diabetes_diagnosis")

        st.divider()

        c3, c4 = st.columns(2)
        with c3:
            st.number_input(FIELD_LABELS["weight_kg"], min_value=0.0, step=0.1, key="weight_kg")
            st.number_input(FIELD_LABELS["fasting_glucose"], min_value=0.0, step=1.0, key="fasting_glucose")
            st.number_input(FIELD_LABELS["hdl"], min_value=0.0, step=1.0, key="hdl")
        with c4:
            st.number_input(FIELD_LABELS["height_m"], min_value=0.0, step=0.01, key="height_m")
            st.number_input(FIELD_LABELS["triglycerides"], min_value=0.0, step=1.0, key="triglycerides")
            st.number_input(FIELD_LABELS["hba1c"], min_value=0.0, step=0.1, key="hba1c")

        b1, b2 = st.columns(2)
        with b1:
            st.button("Compute & Save", type="primary", on_click=_submit)
        with b2:
            st.button("Fill demo", on_click=_fill_demo)

        for message in st.session_state.get("form_errors", []):
            st.error(message)

    with col_result:
        st.subheader("Results")

        s = st.session_state
        live_ready = all(s.get(k) for k in ["height_m", "weight_kg", "fasting_glucose", "triglycerides", "hdl"])
        if not live_ready:
            st.info("Enter values to preview results.")
        else:
            bmi = compute_bmi(s["weight_kg"], s["height_m"])
            tyg = compute_tyg(s["fasting_glucose"], s["triglycerides"])
            ratio = compute_tg_hdl(s["triglycerides"], s["hdl"])
            risk = get_risk_zone(tyg)

            m1, m2, m3, m4 = st.columns(4)
            m1.metric("BMI", f"{bmi:.1f}", classify_bmi(bmi), delta_color="off")
            m2.metric("TyG index", f"{tyg:.2f}")
            m3.metric("TG/HDL-C", f"{ratio:.2f}", classify_tg_hdl(ratio), delta_color="off")
            m4.metric("Risk", risk.value)
            st.caption("TyG risk thresholds: Low < 8.0 • Moderate 8.0–8.5 • High > 8.5")

            _show_gauge("bmi", bmi)
            _show_gauge("tyg", tyg)
            _show_gauge("tgratio", ratio)

        result = st.session_state.get("last_result")
        if result:
            st.divider()
            RISK_STYLE[result.risk_zone](f"Saved ✅ {result.full_name}: {result.risk_zone.value}")
            st.markdown("### Summary")
            st.write(result.summary)
            st.markdown("### Personalized Advice")
            st.write(f"- **Diet:** {result.advice.diet}")
            st.write(f"- **Exercise:** {result.advice.exercise}")
            st.write(f"- **Monitoring:** {result.advice.monitoring}")

    _show_references()

# -------------------------
# 2) Patients
# -------------------------
with tabs[1]:
    st.subheader("Patients")
    st.caption("Saved assessments with risk categories.")

    f1, f2, f3, f4 = st.columns(4)
    with f1:
        query = st.text_input("Search name", placeholder="e.g., Jane")
    with f2:
        risk_filter = st.selectbox("Risk", [ALL] + [r.value for r in RiskZone])
    with f3:
        dx_filter = st.selectbox("Diagnosis", [ALL] + [d.value for d in Diagnosis])
    with f4:
        sort_by = st.selectbox("Sort by", SORT_OPTIONS, format_func=str.title)

    rows = query_records(get_log().records(), risk=risk_filter, diagnosis=dx_filter, query=query, sort_by=sort_by)
    if not rows:
        st.info("No records yet.")
    else:
        st.dataframe(styled_frame(records_frame(rows)), width="stretch", hide_index=True)
