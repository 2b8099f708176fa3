from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple

from chainroi.inputs.assumptions import InputSet

HORIZON_YEARS = 3


@dataclass(frozen=True)
class AdoptionSchedule:
    year1: float
    year2: float
    year3: float

    @staticmethod
    def from_inputs(i: InputSet) -> "AdoptionSchedule":
        return AdoptionSchedule(i.adoption_year1, i.adoption_year2, i.adoption_year3)

    def fractions(self) -> Tuple[float, float, float]:
        return (self.year1, self.year2, self.year3)

    def fraction(self, year: int) -> float:
        if not 1 <= year <= HORIZON_YEARS:
            raise ValueError(f"year must be between 1 and {HORIZON_YEARS}")
        return self.fractions()[year - 1]

    def __iter__(self) -> Iterator[float]:
        return iter(self.fractions())
