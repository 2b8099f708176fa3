from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from chainroi.inputs.assumptions import InputSet

DRIVER_LABELS = {
    "sales_uplift_value": "Sales uplift (contribution)",
    "margin_improvement_value": "Gross margin improvement",
    "waste_reduction_value": "Waste reduction",
    "labor_efficiency_value": "Labour efficiency",
    "compliance_value": "Compliance saving",
}


@dataclass(frozen=True)
class PerStoreValueBreakdown:
    sales_uplift_value: float
    margin_improvement_value: float
    waste_reduction_value: float
    labor_efficiency_value: float
    compliance_value: float
    subscription_fee: float
    net_annual_value_per_store: float

    @property
    def gross_annual_value_per_store(self) -> float:
        return self.net_annual_value_per_store + self.subscription_fee

    def drivers(self) -> List[Tuple[str, float]]:
        """The five value drivers in display order, as (name, amount)."""
        return [(name, getattr(self, name)) for name in DRIVER_LABELS]


def per_store_value(i: InputSet) -> PerStoreValueBreakdown:
    """Annual value per adopted store, itemized by driver.

    Sales uplift converts extra revenue into contribution at the improved
    margin (baseline + pp). The other drivers are shares of revenue, except
    compliance which is a flat amount. Negative drivers are kept as-is.
    """
    rev = i.revenue_per_store
    sales = rev * (i.baseline_gross_margin + i.margin_improvement_pp) * i.sales_uplift_rate
    margin = rev * i.margin_improvement_pp
    waste = rev * i.waste_reduction_rate
    labor = rev * i.labor_efficiency_rate
    compliance = i.compliance_saving_per_store

    gross = sales + margin + waste + labor + compliance
    return PerStoreValueBreakdown(
        sales_uplift_value=sales,
        margin_improvement_value=margin,
        waste_reduction_value=waste,
        labor_efficiency_value=labor,
        compliance_value=compliance,
        subscription_fee=i.subscription_fee_per_store,
        net_annual_value_per_store=gross - i.subscription_fee_per_store,
    )
