"""Year-indexed choropleth rendering.

`render_year` is the pure part: for one year it joins each region's value onto
the boundary universe and returns a frame dict of colors plus tooltip html.
`ChoroplethRenderer` applies a frame to the features and to a drawing surface,
and handles hover.
"""
from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import params
import utils
from .year_index import YearIndex


@dataclass
class RegionFeature:
    name: str
    # annotation, overwritten on every render
    value: Optional[float] = None
    bin: Optional[int] = None
    year: Optional[int] = None


def tooltip_html(name: str, year: int, value: Optional[float], baseline_year: int,
                 baseline_value: Optional[float]) -> str:
    return (
        f"<strong>{escape(name)}</strong><br/>"
        f"Year: {year}<br/>"
        f"Wet-Bulb Temp: {utils.temp_str(value)}°C<br/>"
        f"{baseline_year} Temp: {utils.temp_str(baseline_value)}°C<br/>"
        f"Difference: {utils.diff_str(value, baseline_value)}°C"
    )


def render_year(index: YearIndex, region_names: Iterable[str], year: int, baseline_year: int,
                thresholds: Sequence[float] = params.BINS,
                colors: Sequence[str] = params.BIN_COLORS,
                no_data_color: str = params.NO_DATA_COLOR) -> Optional[Dict]:
    """Frame for every region in `region_names` at `year`, or None if the year is not indexed.

    The frame is {"year": ..., "regions": [{"region", "value", "bin", "color", "tooltip"}, ...]}
    in `region_names` order.
    """
    if year not in index:
        return None
    values = index.values_by_region(year)
    baseline = index.values_by_region(baseline_year)

    regions: List[Dict] = []
    for name in region_names:
        value = values.get(name)
        b = utils.classify(value, thresholds)
        regions.append({
            "region": name,
            "value": value,
            "bin": b,
            "color": utils.bin_color(b, colors, no_data_color),
            "tooltip": tooltip_html(name, year, value, baseline_year, baseline.get(name)),
        })
    return {"year": year, "regions": regions}


def frame_fills(frame: Dict) -> Dict[str, str]:
    return {r["region"]: r["color"] for r in frame["regions"]}


class ShapeLayer:
    """In-memory drawing surface: one shape per region, joined by region name."""

    def __init__(self):
        self.shapes: Dict[str, str] = {}

    def join(self, fills: Dict[str, str]) -> Tuple[List[str], List[str], List[str]]:
        """Apply enter/update/exit for a region -> color mapping; returns (entered, updated, exited)."""
        exited = [k for k in self.shapes if k not in fills]
        for k in exited:
            del self.shapes[k]
        entered, updated = [], []
        for k, color in fills.items():
            (updated if k in self.shapes else entered).append(k)
            self.shapes[k] = color
        return entered, updated, exited

class Tooltip:
    def __init__(self, offset: int = params.TOOLTIP_OFFSET_PX):
        self.offset = offset
        self.visible = False
        self.html = ""
        self.left = 0
        self.top = 0

    def show(self, html: str):
        self.html = html
        self.visible = True

    def move(self, x: float, y: float):
        self.left = x + self.offset
        self.top = y + self.offset

    def hide(self):
        self.visible = False


class ChoroplethRenderer:
    def __init__(self, features: List[RegionFeature], index: YearIndex, baseline_year: int,
                 surface: Optional[ShapeLayer] = None, tooltip: Optional[Tooltip] = None,
                 thresholds: Sequence[float] = params.BINS,
                 colors: Sequence[str] = params.BIN_COLORS):
        self.features = features
        self.index = index
        self.baseline_year = baseline_year
        self.surface = surface if surface is not None else ShapeLayer()
        self.tooltip = tooltip if tooltip is not None else Tooltip()
        self.thresholds = thresholds
        self.colors = colors
        self.last_frame: Optional[Dict] = None
        self._tooltips: Dict[str, str] = {}

    @classmethod
    def from_geojson(cls, geo: Dict, name_field: str, index: YearIndex,
                     baseline_year: int, **kwargs) -> "ChoroplethRenderer":
        features = [RegionFeature(f["properties"][name_field]) for f in geo["features"]]
        return cls(features, index, baseline_year, **kwargs)

    @property
    def current_year(self) -> Optional[int]:
        return self.last_frame["year"] if self.last_frame else None

    def render(self, year) -> Optional[Dict]:
        """Recolor every feature for `year`. Unknown years leave the current view untouched."""
        frame = render_year(self.index, [f.name for f in self.features], year,
                            self.baseline_year, self.thresholds, self.colors)
        if frame is None:
            return None
        for f, r in zip(self.features, frame["regions"]):
            f.value = r["value"]
            f.bin = r["bin"]
            f.year = frame["year"]
        self.surface.join(frame_fills(frame))
        self._tooltips = {r["region"]: r["tooltip"] for r in frame["regions"]}
        self.last_frame = frame
        return frame

    # hover handlers

    def pointer_enter(self, region: str):
        html = self._tooltips.get(region)
        if html is None:
            return
        self.tooltip.show(html)

    def pointer_move(self, x: float, y: float):
        self.tooltip.move(x, y)

    def pointer_leave(self):
        self.tooltip.hide()
