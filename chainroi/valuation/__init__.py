"""Valuation: per-store value drivers, discounting, KPIs and consistency checks."""
