from __future__ import annotations
from typing import Any, Dict, Sequence

from chainroi.inputs.assumptions import InputSet, validate_inputs
from chainroi.valuation.kpi import PAYBACK_NOT_REACHED


def _close(a: float, b: float, eps: float) -> bool:
    return abs(a - b) <= eps * max(1.0, abs(a), abs(b))


def _payback_consistent(flows: Sequence[float], payback: Any) -> bool:
    running = 0.0
    cum = []
    for cf in flows:
        running += cf
        cum.append(running)
    if payback == PAYBACK_NOT_REACHED:
        return all(c < 0 for c in cum)
    if not isinstance(payback, int) or not 1 <= payback <= len(cum):
        return False
    return cum[payback - 1] >= 0 and all(c < 0 for c in cum[: payback - 1])


def run_checks(inputs: InputSet, result: Any, eps: float = 1e-6) -> Dict[str, bool]:
    """Re-derive the result's identities from its own parts.

    `result` is an EvaluationResult. Returns {check_name: passed}; a failing
    check never raises so the report can list every problem at once.
    """
    try:
        validate_inputs(inputs)
        in_range = True
    except ValueError:
        in_range = False

    b = result.breakdown
    parts = sum(v for _, v in b.drivers())
    additive = _close(parts - b.subscription_fee, b.net_annual_value_per_store, eps)

    shares = (inputs.adoption_year1, inputs.adoption_year2, inputs.adoption_year3)
    flows_ok = len(result.cash_flows) == 3 and all(
        _close(cf, b.net_annual_value_per_store * inputs.store_count * s, eps)
        for cf, s in zip(result.cash_flows, shares)
    )

    npv_ok = _close(sum(result.discounted_cash_flows), result.npv, eps)

    if result.cost_npv > 0:
        roi_ok = _close(result.roi, result.npv / result.cost_npv, eps)
    else:
        roi_ok = result.roi == 0

    return {
        "inputs_in_range": in_range,
        "breakdown_additive": additive,
        "cash_flows_match_adoption": flows_ok,
        "npv_equals_sum_of_pv": npv_ok,
        "roi_zero_cost_guard": roi_ok,
        "payback_matches_cumulative": _payback_consistent(result.cash_flows, result.payback_years),
    }
