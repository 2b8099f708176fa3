"""Scenario inputs: the InputSet record and the clamping boundary.

- assumptions.py: InputSet, bounds, defaults, validate_inputs
- boundary.py: parse_inputs from form/JSON numbers (percent or fraction units)
"""
