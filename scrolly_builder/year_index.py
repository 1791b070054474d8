from collections import defaultdict
from typing import Dict, Iterable, List, NamedTuple, Optional


class MeasurementRecord(NamedTuple):
    year: int
    region: str
    value: float


class YearIndex:
    """Measurement records grouped by year.

    Grouping is stable: records keep their input order inside each year.
    `years` is sorted numerically.
    """

    def __init__(self, records: Iterable[MeasurementRecord]):
        g = defaultdict(list)
        for r in records:
            g[int(r.year)].append(r)
        self._by_year: Dict[int, List[MeasurementRecord]] = dict(g)
        self.years: List[int] = sorted(self._by_year)

    def __contains__(self, year) -> bool:
        return year in self._by_year

    def __len__(self) -> int:
        return len(self.years)

    def get(self, year) -> Optional[List[MeasurementRecord]]:
        recs = self._by_year.get(year)
        return list(recs) if recs is not None else None

    @property
    def record_count(self) -> int:
        return sum(len(v) for v in self._by_year.values())

    def values_by_region(self, year) -> Dict[str, float]:
        # Later records overwrite earlier ones for a repeated region name
        out: Dict[str, float] = {}
        for r in self._by_year.get(year, []):
            out[r.region] = r.value
        return out
