from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Tuple

from chainroi.inputs.assumptions import InputSet, RATE_FIELDS
from chainroi.forecasting.adoption import AdoptionSchedule
from chainroi.forecasting.cashflows import chain_cash_flows, chain_cost_flows, cumulative
from chainroi.valuation.per_store import DRIVER_LABELS, PerStoreValueBreakdown, per_store_value
from chainroi.valuation.discount import discount_factors, present_values
from chainroi.valuation.kpi import Payback, cost_npv, npv, payback_years, roi
from chainroi.valuation.checks import run_checks
from chainroi.exports.writers import write_breakdown, write_cash_flows
from chainroi.exports.reports import assumptions_md, fmt_pct, summary_md, validation_report_md

ARTIFACT_NAMES = ("cash_flows.csv", "breakdown.csv", "assumptions.md", "summary.md", "validation_report.md")


@dataclass(frozen=True)
class EvaluationResult:
    breakdown: PerStoreValueBreakdown
    cash_flows: Tuple[float, ...]
    npv: float
    cost_npv: float
    roi: float
    payback_years: Payback
    discount_factors: Tuple[float, ...]
    discounted_cash_flows: Tuple[float, ...]
    cost_flows: Tuple[float, ...]
    cumulative_cash_flows: Tuple[float, ...]

    def to_dict(self) -> Dict[str, Any]:
        b = self.breakdown
        return {
            "breakdown": {
                "salesUpliftValue": b.sales_uplift_value,
                "marginImprovementValue": b.margin_improvement_value,
                "wasteReductionValue": b.waste_reduction_value,
                "laborEfficiencyValue": b.labor_efficiency_value,
                "complianceValue": b.compliance_value,
                "netAnnualValuePerStore": b.net_annual_value_per_store,
            },
            "cashFlows": list(self.cash_flows),
            "npv": self.npv,
            "costNpv": self.cost_npv,
            "roi": self.roi,
            "paybackYears": self.payback_years,
            "discountFactors": list(self.discount_factors),
            "discountedCashFlows": list(self.discounted_cash_flows),
            "costFlows": list(self.cost_flows),
            "cumulativeCashFlows": list(self.cumulative_cash_flows),
        }


def evaluate(inputs: InputSet) -> EvaluationResult:
    """Run the full valuation for one input snapshot.

    Pure and stateless: nothing is cached, the same InputSet always yields an
    equal result. Inputs are expected to be clamped already (see
    chainroi.inputs.boundary.parse_inputs).
    """
    breakdown = per_store_value(inputs)
    schedule = AdoptionSchedule.from_inputs(inputs)
    rate = inputs.discount_rate

    flows = chain_cash_flows(breakdown.net_annual_value_per_store, inputs.store_count, schedule)
    costs = chain_cost_flows(inputs.subscription_fee_per_store, inputs.store_count, schedule)

    net_pv = npv(flows, rate)
    cost_pv = cost_npv(costs, rate)

    return EvaluationResult(
        breakdown=breakdown,
        cash_flows=tuple(flows),
        npv=net_pv,
        cost_npv=cost_pv,
        roi=roi(net_pv, cost_pv),
        payback_years=payback_years(flows),
        discount_factors=tuple(discount_factors(rate, len(flows))),
        discounted_cash_flows=tuple(present_values(flows, rate)),
        cost_flows=tuple(costs),
        cumulative_cash_flows=tuple(cumulative(flows)),
    )


def _assumption_lines(inputs: InputSet) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for k, v in asdict(inputs).items():
        out[k] = fmt_pct(v) if k in RATE_FIELDS else v
    return out


def build_artifacts(inputs: InputSet, result: EvaluationResult, currency: str) -> Dict[str, str]:
    """Render every export for one evaluation as {filename: text}."""
    schedule = AdoptionSchedule.from_inputs(inputs)
    pv_costs = present_values(result.cost_flows, inputs.discount_rate)
    cf_rows: List[Dict[str, Any]] = []
    for idx, cf in enumerate(result.cash_flows):
        cf_rows.append({
            "year": idx + 1,
            "adoption": schedule.fraction(idx + 1),
            "chain_cash_flow": cf,
            "cumulative_cash_flow": result.cumulative_cash_flows[idx],
            "discount_factor": result.discount_factors[idx],
            "pv_cash_flow": result.discounted_cash_flows[idx],
            "cost_flow": result.cost_flows[idx],
            "pv_cost_flow": pv_costs[idx],
        })
    b = result.breakdown
    bd_rows = [
        {"driver": name, "label": DRIVER_LABELS[name], "amount_per_store": amount}
        for name, amount in b.drivers()
    ]
    bd_rows.append({"driver": "subscription_fee", "label": "Subscription fee", "amount_per_store": -b.subscription_fee})
    bd_rows.append({"driver": "net_annual_value_per_store", "label": "Net after subscription", "amount_per_store": b.net_annual_value_per_store})

    warnings: List[str] = []
    if b.net_annual_value_per_store < 0:
        warnings.append("subscription fee exceeds per-store value")
    if result.cost_npv == 0:
        warnings.append("no subscription cost: ROI reported as 0")
    shares = schedule.fractions()
    if any(later < earlier for earlier, later in zip(shares, shares[1:])):
        warnings.append("adoption ramp decreases in a later year")

    kpis = {
        "roi": result.roi,
        "npv": result.npv,
        "payback_years": result.payback_years,
        "discount_rate": inputs.discount_rate,
    }
    labelled = [(DRIVER_LABELS[name], amount) for name, amount in b.drivers()]
    return {
        "cash_flows.csv": write_cash_flows(cf_rows),
        "breakdown.csv": write_breakdown(bd_rows),
        "assumptions.md": assumptions_md({"currency": currency, **_assumption_lines(inputs)}, warnings=warnings),
        "summary.md": summary_md(kpis, result.cash_flows, labelled, b.net_annual_value_per_store, currency),
        "validation_report.md": validation_report_md(
            run_checks(inputs, result),
            details={"cost_npv": round(result.cost_npv, 2), "horizon_years": len(result.cash_flows)},
        ),
    }
