from typing import Optional

from .year_index import YearIndex


class TextSlot:
    """A fixed piece of page text that gets overwritten in place."""

    def __init__(self, text: str = ""):
        self.text = text

    def set(self, text: str):
        self.text = text


def year_mean(index: YearIndex, year) -> Optional[float]:
    recs = index.get(year)
    if not recs:
        return None
    return sum(r.value for r in recs) / len(recs)


class SummaryStats:
    def __init__(self, index: YearIndex, label: str, slot: Optional[TextSlot] = None):
        self.index = index
        self.label = label
        self.slot = slot if slot is not None else TextSlot()

    def sentence(self, year) -> Optional[str]:
        mean = year_mean(self.index, year)
        if mean is None:
            return None
        owner = f"{self.label}'" if self.label.endswith("s") else f"{self.label}'s"
        return f"In {year}, {owner} average Wet-Bulb Temperature is {mean:.1f}°C."

    def update(self, year):
        text = self.sentence(year)
        if text is not None:
            self.slot.set(text)
