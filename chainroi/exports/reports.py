from __future__ import annotations
from typing import Dict, Any, List, Sequence, Tuple


def fmt_money(v: float, currency: str) -> str:
    # Whole units, no conversion; locale formatting is the presentation layer's job.
    return f"{round(v):,} {currency}"


def fmt_pct(v: float) -> str:
    return f"{v * 100:.1f}%"


def assumptions_md(assumptions: Dict[str, Any], warnings: List[str] | None = None) -> str:
    lines = ["# Assumptions", ""]
    for k, v in assumptions.items():
        lines.append(f"- {k}: {v}")
    if warnings:
        lines.append("\n## Warnings")
        for w in warnings:
            lines.append(f"- {w}")
    return "\n".join(lines) + "\n"


def summary_md(
    kpis: Dict[str, Any],
    cash_flows: Sequence[float],
    drivers: Sequence[Tuple[str, float]],
    net_per_store: float,
    currency: str,
) -> str:
    """KPI cards, yearly chain flows and the itemized per-store value."""
    payback = kpis["payback_years"]
    lines = [
        "# Chain ROI (3 years)",
        "",
        f"- ROI (NPV-based): {fmt_pct(kpis['roi'])}",
        f"- Payback (years): {payback if isinstance(payback, int) else '—'}",
        f"- NPV (chain): {fmt_money(kpis['npv'], currency)}",
        f"- Discount rate (WACC): {fmt_pct(kpis['discount_rate'])}",
        "",
        "## Chain cash flow",
    ]
    for year, cf in enumerate(cash_flows, start=1):
        lines.append(f"- Year {year}: {fmt_money(cf, currency)}")
    lines.append("\n## Value per store (annual)")
    for label, amount in drivers:
        lines.append(f"- {label}: {fmt_money(amount, currency)}")
    lines.append(f"- Net after subscription: {fmt_money(net_per_store, currency)}")
    return "\n".join(lines) + "\n"


def validation_report_md(checks: Dict[str, bool], details: Dict[str, Any] | None = None) -> str:
    lines = ["# Validation Report", ""]
    for k, ok in checks.items():
        lines.append(f"- {k}: {'PASS' if ok else 'FAIL'}")
    if details:
        lines.append("\n## Details")
        for k, v in details.items():
            lines.append(f"- {k}: {v}")
    return "\n".join(lines) + "\n"
