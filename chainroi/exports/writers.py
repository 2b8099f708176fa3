from __future__ import annotations
from typing import List, Dict, Any, Iterable
import csv
import io

SCHEMAS = {
    "cash_flows": [
        "year","adoption","chain_cash_flow","cumulative_cash_flow","discount_factor","pv_cash_flow","cost_flow","pv_cost_flow"
    ],
    "breakdown": [
        "driver","label","amount_per_store"
    ],
}


def write_csv(rows: Iterable[Dict[str, Any]], columns: List[str]) -> str:
    buf = io.StringIO()
    w = csv.DictWriter(buf, fieldnames=columns, extrasaction="ignore")
    w.writeheader()
    for r in rows:
        w.writerow({k: r.get(k) for k in columns})
    return buf.getvalue()


def write_cash_flows(rows: Iterable[Dict[str, Any]]) -> str:
    return write_csv(rows, SCHEMAS["cash_flows"])


def write_breakdown(rows: Iterable[Dict[str, Any]]) -> str:
    return write_csv(rows, SCHEMAS["breakdown"])
