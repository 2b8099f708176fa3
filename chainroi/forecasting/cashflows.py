from __future__ import annotations
from typing import Iterable, List

from chainroi.forecasting.adoption import AdoptionSchedule


def _scale(per_store: float, store_count: int, schedule: AdoptionSchedule) -> List[float]:
    # Each year stands alone; the ramp may go down as well as up.
    # + 0.0 turns -0.0 (negative value x zero stores) into 0.0
    return [per_store * store_count * share + 0.0 for share in schedule]


def chain_cash_flows(net_per_store: float, store_count: int, schedule: AdoptionSchedule) -> List[float]:
    """Chain net flow per year: net value per store x stores x share live that year."""
    return _scale(net_per_store, store_count, schedule)


def chain_cost_flows(fee_per_store: float, store_count: int, schedule: AdoptionSchedule) -> List[float]:
    """Subscription cost per year, paid only for adopted stores."""
    return _scale(fee_per_store, store_count, schedule)


def cumulative(flows: Iterable[float]) -> List[float]:
    out: List[float] = []
    total = 0.0
    for cf in flows:
        total += cf
        out.append(total)
    return out
