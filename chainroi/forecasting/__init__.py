"""Three-year adoption ramp and chain-level cash flow series."""
