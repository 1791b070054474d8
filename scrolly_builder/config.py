from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet
import datetime

import params

# Paths
DATA_DIR = Path("data")
OUT_DIR = Path("docs")
OUT_DATA_DIR = OUT_DIR / "data"
PLOTS_SRC = Path("plots")
# Globe bundle (globe.js + runtime.js) is copied verbatim when present
ASSETS_SRC = Path("assets")
GLOBE_FILES = ("globe.js", "runtime.js")

# Seconds before a remote dataset fetch is abandoned
REQUEST_TIMEOUT = 30

# timestamp used in footers (UTC at build time)
LAST_UPDATED = datetime.datetime.now(datetime.UTC).strftime("%Y-%m-%d %H:%M UTC")

SITE_TITLE = "Rising Wet-Bulb Temperatures"

FOOTER_TEXT = (
    "Wet-bulb projections by county and state, built as static HTML from JSON.<br />\n"
    "D3 and Scrollama are loaded from CDNs."
)


@dataclass(frozen=True)
class RegionConfig:
    """Everything the build needs to know about one map story."""
    key: str
    label: str
    boundary_source: str
    measurement_source: str
    region_field: str
    feature_name_field: str
    baseline_year: int
    projection: str
    captions: Dict[int, str]
    skip_step_years: FrozenSet[int] = frozenset()
    leading_spacer: bool = False
    value_field: str = params.MEASUREMENT_FIELD
    map_width: int = 975
    map_height: int = 610

    @property
    def title_prefix(self) -> str:
        return f"{self.label} Wet Bulb Temperature In:"

    @property
    def boundary_url(self) -> str:
        return f"data/{self.key}-boundaries.geojson"

    # DOM ids used by the page template and the client script
    @property
    def dom_ids(self) -> Dict[str, str]:
        k = self.key
        return {
            "section": f"scrolly-{k}",
            "mapColumn": f"map-{k}-column",
            "svg": f"map-{k}",
            "text": f"text-{k}",
            "title": f"{k}-year-title",
            "stats": f"{k}-stats",
            "legend": f"{k}-legend",
            "tooltip": f"tooltip-{k}",
        }


CA = RegionConfig(
    key="ca",
    label="California",
    boundary_source=str(DATA_DIR / "california-counties.geojson"),
    measurement_source=str(DATA_DIR / "wetbulb_max_ca.json"),
    region_field="county",
    feature_name_field="name",
    baseline_year=2020,
    projection="mercator",
    captions=params.CA_YEAR_TEXT,
    skip_step_years=frozenset({2016}),
    leading_spacer=True,
    map_width=600,
    map_height=700,
)

US = RegionConfig(
    key="us",
    label="United States",
    boundary_source=str(DATA_DIR / "us-states.json"),
    measurement_source=str(DATA_DIR / "wetbulb_max_us.json"),
    region_field="state",
    feature_name_field="NAME",
    baseline_year=2016,
    projection="albersUsa",
    captions=params.US_YEAR_TEXT,
)

REGIONS = [CA, US]
