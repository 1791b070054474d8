"""Wire one loaded region into a scroll story and replay it into frames.

Every step is replayed through the controller at build time; each distinct
year's fills, tooltips, stats line and title are captured so the page script
only has to apply them.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import params
import utils
from .choropleth import ChoroplethRenderer, ShapeLayer, Tooltip, frame_fills
from .loader import RegionContext
from .scroll import ScrollStep, ScrollStepController, build_steps
from .stats import SummaryStats, TextSlot
from .year_index import YearIndex


class RegionStory:
    def __init__(self, ctx: RegionContext):
        cfg = ctx.config
        self.config = cfg
        self.index = YearIndex(ctx.records)
        self.surface = ShapeLayer()
        self.tooltip = Tooltip()
        self.renderer = ChoroplethRenderer.from_geojson(
            ctx.boundaries, cfg.feature_name_field, self.index, cfg.baseline_year,
            surface=self.surface, tooltip=self.tooltip,
        )
        self.stats = SummaryStats(self.index, cfg.label, TextSlot())
        self.title = TextSlot(f"{cfg.title_prefix} ")
        self.steps = build_steps(self.index.years, cfg.captions, cfg.skip_step_years, cfg.leading_spacer)
        self.controller = ScrollStepController(self.steps).on_step_enter(self._on_step)
        self.frames: Dict[int, Dict[str, Any]] = {}
        self.initial_frame: Optional[Dict[str, Any]] = None

    @property
    def initial_year(self) -> Optional[int]:
        return self.index.years[0] if self.index.years else None

    def _on_step(self, step: ScrollStep, _index: int):
        if step.year is None:
            return
        self.renderer.render(step.year)
        self.stats.update(step.year)
        self.title.set(f"{self.config.title_prefix} {step.year}")

    def _capture(self) -> Optional[Dict[str, Any]]:
        frame = self.renderer.last_frame
        if frame is None:
            return None
        return {
            "year": frame["year"],
            "fills": frame_fills(frame),
            "tooltips": {r["region"]: r["tooltip"] for r in frame["regions"]},
            "stats": self.stats.slot.text,
            "title": self.title.text,
        }

    def replay(self) -> Dict[int, Dict[str, Any]]:
        """Render the initial year, then scroll the trigger line across every step top."""
        if self.initial_year is not None:
            self.renderer.render(self.initial_year)
            self.stats.update(self.initial_year)
            self.initial_frame = self._capture()
        for top in self.controller.tops:
            step = self.controller.scroll_to(top - self.controller.trigger_offset)
            if step is not None and step.year is not None and self.renderer.current_year == step.year:
                self.frames[step.year] = self._capture()
        return self.frames

    def payload(self) -> Dict[str, Any]:
        if self.initial_frame is None and not self.frames:
            self.replay()
        cfg = self.config
        return {
            "key": cfg.key,
            "label": cfg.label,
            "boundaryUrl": cfg.boundary_url,
            "nameField": cfg.feature_name_field,
            "projection": cfg.projection,
            "ids": cfg.dom_ids,
            "initialFrame": self.initial_frame,
            "noDataColor": params.NO_DATA_COLOR,
            "legend": utils.legend_items(),
            "scroll": self.controller.to_dict(),
            "frames": {str(y): f for y, f in self.frames.items()},
        }
