import math

import pytest

from calculations import (
    RISK_ORDER,
    RiskZone,
    classify_bmi,
    classify_tg_hdl,
    compute_bmi,
    compute_tg_hdl,
    compute_tyg,
    get_risk_zone,
)


def test_bmi():
    assert compute_bmi(70, 1.75) == pytest.approx(22.857, abs=1e-3)


@pytest.mark.parametrize("weight", [0, 70, 150.5])
def test_bmi_zero_height_is_zero(weight):
    assert compute_bmi(weight, 0) == 0


def test_bmi_non_finite_input_is_zero():
    assert compute_bmi(float("inf"), 1.75) == 0
    assert compute_bmi(float("nan"), 1.75) == 0


def test_tyg():
    tyg = compute_tyg(100, 150)
    assert tyg == pytest.approx(math.log(7500))
    assert tyg == pytest.approx(8.9227, abs=1e-4)
    assert get_risk_zone(tyg) is RiskZone.HIGH


@pytest.mark.parametrize("glucose,tg", [(0, 150), (100, 0), (-100, 150), (100, -1)])
def test_tyg_outside_log_domain_is_zero(glucose, tg):
    result = compute_tyg(glucose, tg)
    assert result == 0
    assert not math.isnan(result)


def test_tyg_negative_product_pair_uses_positive_product():
    # (-100 * -150) / 2 is positive, so the log is defined
    assert compute_tyg(-100, -150) == pytest.approx(math.log(7500))


def test_tg_hdl():
    assert compute_tg_hdl(180, 42) == pytest.approx(4.2857, abs=1e-4)


def test_tg_hdl_zero_hdl_is_zero():
    assert compute_tg_hdl(180, 0) == 0


@pytest.mark.parametrize(
    "tyg,zone",
    [
        (7.99, RiskZone.LOW),
        (8.0, RiskZone.MODERATE),
        (8.25, RiskZone.MODERATE),
        (8.5, RiskZone.MODERATE),
        (8.51, RiskZone.HIGH),
        (0.0, RiskZone.LOW),
    ],
)
def test_risk_zone_boundaries(tyg, zone):
    assert get_risk_zone(tyg) is zone


def test_risk_zone_values_are_display_strings():
    assert RiskZone.LOW == "Low Risk"
    assert RiskZone("High Risk") is RiskZone.HIGH


def test_risk_order():
    ordered = sorted(RiskZone, key=RISK_ORDER.get, reverse=True)
    assert ordered == [RiskZone.HIGH, RiskZone.MODERATE, RiskZone.LOW]


@pytest.mark.parametrize(
    "bmi,label",
    [(17.0, "Underweight"), (18.5, "Normal"), (24.9, "Normal"), (25.0, "Overweight"), (29.9, "Overweight"), (30.0, "Obese")],
)
def test_classify_bmi(bmi, label):
    assert classify_bmi(bmi) == label


@pytest.mark.parametrize("ratio,label", [(2.9, "Ideal"), (3.0, "Moderate risk"), (4.5, "Moderate risk"), (4.6, "High risk")])
def test_classify_tg_hdl(ratio, label):
    assert classify_tg_hdl(ratio) == label
