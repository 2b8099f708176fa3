"""Exports & reporting: CSV writers and Markdown reports.

- writers.py: CSV emitters with fixed column schemas
- reports.py: assumptions.md, summary.md and validation_report.md generators
"""
