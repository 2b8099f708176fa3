from __future__ import annotations
from typing import Sequence, Union

from chainroi.valuation.discount import present_value

PAYBACK_NOT_REACHED = "not_reached"

Payback = Union[int, str]


def safe_div(a: float, b: float) -> float:
    # ROI policy: no cost means no return ratio, reported as 0 rather than inf/NaN
    return float(a) / float(b) if b > 0 else 0.0


def npv(cash_flows: Sequence[float], rate: float) -> float:
    return present_value(cash_flows, rate)


def cost_npv(cost_flows: Sequence[float], rate: float) -> float:
    return present_value(cost_flows, rate)


def roi(npv_value: float, cost_npv_value: float) -> float:
    """NPV per unit of discounted subscription cost; 0 when there is no cost."""
    return safe_div(npv_value, cost_npv_value)


def payback_years(cash_flows: Sequence[float]) -> Payback:
    """First year whose undiscounted cumulative flow is >= 0.

    Returns PAYBACK_NOT_REACHED when the horizon ends still below zero.
    """
    total = 0.0
    for year, cf in enumerate(cash_flows, start=1):
        total += cf
        if total >= 0:
            return year
    return PAYBACK_NOT_REACHED
