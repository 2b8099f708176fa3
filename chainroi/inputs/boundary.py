from __future__ import annotations
from dataclasses import asdict
from typing import Any, Dict, Mapping
import math

from chainroi.inputs.assumptions import (
    BOUNDS,
    DEFAULT_INPUTS,
    FIELD_NAMES,
    RATE_FIELDS,
    InputSet,
    validate_inputs,
)

UNITS = ("percent", "fraction")

# Presentation-layer spellings -> canonical field names
ALIASES = {
    "storeCount": "store_count",
    "stores": "store_count",
    "revenuePerStore": "revenue_per_store",
    "subscriptionFeePerStore": "subscription_fee_per_store",
    "discountRate": "discount_rate",
    "wacc": "discount_rate",
    "baselineGrossMargin": "baseline_gross_margin",
    "salesUpliftRate": "sales_uplift_rate",
    "marginImprovementPP": "margin_improvement_pp",
    "wasteReductionRate": "waste_reduction_rate",
    "laborEfficiencyRate": "labor_efficiency_rate",
    "complianceSavingPerStore": "compliance_saving_per_store",
    "adoptionYear1": "adoption_year1",
    "adoptionYear2": "adoption_year2",
    "adoptionYear3": "adoption_year3",
}


def clamp(v: float, lo: float | None, hi: float | None) -> float:
    if lo is not None:
        v = max(lo, v)
    if hi is not None:
        v = min(hi, v)
    return v


def _number(name: str, v: Any) -> float:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError(f"{name} must be a number")
    try:
        f = float(v)
    except OverflowError:
        raise ValueError(f"{name} must be a finite number") from None
    if not math.isfinite(f):
        raise ValueError(f"{name} must be a finite number")
    return f


def normalize_keys(raw: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for k, v in raw.items():
        name = ALIASES.get(k, k)
        if name not in FIELD_NAMES:
            raise ValueError(f"unknown input field: {k}")
        out[name] = v
    return out


def parse_inputs(raw: Mapping[str, Any], units: str = "percent") -> InputSet:
    """Build a clamped InputSet from already-parsed numbers.

    - Keys may be snake_case or the camelCase names used by the form layer
    - units="percent": rate fields arrive as percents (32 -> 0.32);
      units="fraction": rate fields arrive as shares (0.32)
    - Missing fields fall back to DEFAULT_INPUTS
    - store_count is floored, every field is clamped to its bounds
    Raises ValueError for unknown keys/units or non-finite values.
    The result always passes validate_inputs.
    """
    if units not in UNITS:
        raise ValueError(f"units must be one of {', '.join(UNITS)}")
    given = normalize_keys(raw)

    values: Dict[str, Any] = {}
    for name in FIELD_NAMES:
        if name not in given:
            values[name] = getattr(DEFAULT_INPUTS, name)
            continue
        v = _number(name, given[name])
        if name in RATE_FIELDS and units == "percent":
            v = v / 100.0
        lo, hi = BOUNDS[name]
        v = clamp(v, lo, hi)
        values[name] = int(math.floor(v)) if name == "store_count" else v
    inputs = InputSet(**values)
    validate_inputs(inputs)
    return inputs


def to_percent_units(i: InputSet) -> Dict[str, float]:
    """Inverse of parse_inputs(units="percent") for echoing values back to a form."""
    out = asdict(i)
    for name in RATE_FIELDS:
        out[name] = out[name] * 100.0
    return out
