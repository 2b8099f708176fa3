"""Chain ROI: three-year return projection for a retail chain adopting a platform.

- inputs/: InputSet and the clamping boundary
- valuation/: per-store value drivers, discounting, KPIs, consistency checks
- forecasting/: adoption ramp and chain-level cash flows
- exports/: CSV writers and Markdown reports
- api/: evaluate() and the Flask surface
"""
