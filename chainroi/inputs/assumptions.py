from __future__ import annotations
from dataclasses import dataclass, fields
from typing import NewType
import math

# Share of a base amount (0.015 == 1.5 % of revenue).
Fraction = NewType("Fraction", float)
# Additive change to a margin (0.005 == +0.5 pp), never a percent-of-percent.
PercentagePoints = NewType("PercentagePoints", float)
# Annual amount in the scenario currency.
Money = NewType("Money", float)

MAX_STORES = 1_000_000


@dataclass(frozen=True)
class InputSet:
    # Chain and store economics
    store_count: int
    revenue_per_store: Money
    subscription_fee_per_store: Money  # cost, per adopted store
    discount_rate: Fraction  # WACC, 0..1

    # Value drivers
    baseline_gross_margin: Fraction  # 0..1
    sales_uplift_rate: Fraction  # -1..1, negative for a decline scenario
    margin_improvement_pp: PercentagePoints  # -1..1
    waste_reduction_rate: Fraction  # -1..1
    labor_efficiency_rate: Fraction  # -1..1
    compliance_saving_per_store: Money

    # Adoption ramp, share of stores live per year
    adoption_year1: Fraction
    adoption_year2: Fraction
    adoption_year3: Fraction


# (lower, upper) per field; None means unbounded on that side.
BOUNDS = {
    "store_count": (0, MAX_STORES),
    "revenue_per_store": (0.0, None),
    "subscription_fee_per_store": (0.0, None),
    "discount_rate": (0.0, 1.0),
    "baseline_gross_margin": (0.0, 1.0),
    "sales_uplift_rate": (-1.0, 1.0),
    "margin_improvement_pp": (-1.0, 1.0),
    "waste_reduction_rate": (-1.0, 1.0),
    "labor_efficiency_rate": (-1.0, 1.0),
    "compliance_saving_per_store": (0.0, None),
    "adoption_year1": (0.0, 1.0),
    "adoption_year2": (0.0, 1.0),
    "adoption_year3": (0.0, 1.0),
}

# Fields expressed as shares; the form layer enters these as percents.
RATE_FIELDS = (
    "discount_rate",
    "baseline_gross_margin",
    "sales_uplift_rate",
    "margin_improvement_pp",
    "waste_reduction_rate",
    "labor_efficiency_rate",
    "adoption_year1",
    "adoption_year2",
    "adoption_year3",
)

DEFAULT_INPUTS = InputSet(
    store_count=100,
    revenue_per_store=Money(1_200_000.0),
    subscription_fee_per_store=Money(600_000.0),
    discount_rate=Fraction(0.10),
    baseline_gross_margin=Fraction(0.32),
    sales_uplift_rate=Fraction(0.015),
    margin_improvement_pp=PercentagePoints(0.005),
    waste_reduction_rate=Fraction(0.005),
    labor_efficiency_rate=Fraction(0.02),
    compliance_saving_per_store=Money(10_000.0),
    adoption_year1=Fraction(0.20),
    adoption_year2=Fraction(0.70),
    adoption_year3=Fraction(1.00),
)

FIELD_NAMES = tuple(f.name for f in fields(InputSet))


def validate_inputs(i: InputSet) -> None:
    for name in FIELD_NAMES:
        v = getattr(i, name)
        if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v):
            raise ValueError(f"{name} must be a finite number")
        lo, hi = BOUNDS[name]
        if lo is not None and v < lo:
            raise ValueError(f"{name} must be >= {lo}")
        if hi is not None and v > hi:
            raise ValueError(f"{name} must be <= {hi}")
    if not isinstance(i.store_count, int):
        raise ValueError("store_count must be an integer")
