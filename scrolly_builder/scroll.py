from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

import params


@dataclass(frozen=True)
class ScrollStep:
    year: Optional[int]
    caption: str = ""
    spacer: bool = False

    def html(self) -> str:
        if self.spacer:
            return ""
        return f"<strong>Year {self.year}</strong><br/>{self.caption}"

    def to_dict(self) -> Dict:
        return {"year": self.year, "spacer": self.spacer, "html": self.html()}


def build_steps(years: Sequence[int], captions: Dict[int, str], skip_years=frozenset(),
                leading_spacer: bool = False) -> List[ScrollStep]:
    """One step per year (minus skip_years), captioned from `captions`; missing captions stay blank."""
    steps: List[ScrollStep] = []
    if leading_spacer:
        steps.append(ScrollStep(year=None, spacer=True))
    for y in years:
        if y in skip_years:
            continue
        steps.append(ScrollStep(year=y, caption=captions.get(y, "")))
    return steps


StepHandler = Callable[[ScrollStep, int], None]


class ScrollStepController:
    """Tracks which narrative step sits under the trigger line.

    Steps are laid out top to bottom. The trigger line sits `offset` of the
    viewport height below the scroll position; the active step is the last one
    whose top has crossed it. Handlers run, in registration order, whenever the
    active step changes.
    """

    def __init__(self, steps: Sequence[ScrollStep], offset: float = params.SCROLL_OFFSET,
                 viewport_height: float = params.DEFAULT_VIEWPORT_HEIGHT,
                 spacing: float = params.STEP_SPACING_PX):
        if not 0 <= offset <= 1:
            raise ValueError(f"offset must be within [0, 1], got {offset}")
        self.steps = list(steps)
        self.offset = offset
        self.spacing = spacing
        self.viewport_height = viewport_height
        self.active_index: Optional[int] = None
        self.tops: List[float] = []
        self._handlers: List[StepHandler] = []
        self.layout()

    def on_step_enter(self, handler: StepHandler) -> "ScrollStepController":
        self._handlers.append(handler)
        return self

    @property
    def active_step(self) -> Optional[ScrollStep]:
        return self.steps[self.active_index] if self.active_index is not None else None

    @property
    def trigger_offset(self) -> float:
        return self.offset * self.viewport_height

    def layout(self, step_heights: Sequence[float] | None = None, start: float = 0.0):
        """Compute step tops from their heights plus the spacing between steps."""
        if step_heights is None:
            step_heights = [params.SPACER_HEIGHT_PX if s.spacer else params.STEP_HEIGHT_PX
                            for s in self.steps]
        if len(step_heights) != len(self.steps):
            raise ValueError("need one height per step")
        self.tops = []
        y = start
        for h in step_heights:
            self.tops.append(y)
            y += h + self.spacing

    def resize(self, viewport_height: float, step_heights: Sequence[float] | None = None):
        """Recompute step boundaries for a new viewport; the active step is kept as is."""
        self.viewport_height = viewport_height
        self.layout(step_heights)

    def step_at(self, scroll_y: float) -> Optional[int]:
        line = scroll_y + self.trigger_offset
        idx = None
        for i, top in enumerate(self.tops):
            if top <= line:
                idx = i
            else:
                break
        return idx

    def scroll_to(self, scroll_y: float) -> Optional[ScrollStep]:
        idx = self.step_at(scroll_y)
        if idx is not None and idx != self.active_index:
            self.enter(idx)
        return self.active_step

    def enter(self, index: int) -> ScrollStep:
        step = self.steps[index]
        self.active_index = index
        for handler in self._handlers:
            handler(step, index)
        return step

    def to_dict(self) -> Dict:
        # scrollama setup on the client
        return {"offset": self.offset, "steps": [s.to_dict() for s in self.steps]}
