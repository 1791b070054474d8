import json
from html import escape
from pathlib import Path
from typing import Dict, List, Optional

import params
import utils
from .cards import render_panels
from .config import OUT_DIR, SITE_TITLE, RegionConfig
from .header import make_header, make_footer_note
from .io_utils import write_text
from .scroll import ScrollStep
from .story import RegionStory
from .templates import (INDEX_HTML, REGION_SECTION_HTML, GLOBE_SECTION_HTML, GLOBE_SCRIPT,
                        WRITEUP_HTML, STORY_JS, BASE_CSS)

INTRO_HTML = (
    "<p>Wet-bulb temperature combines heat and humidity into a single number: the lowest temperature "
    "air can reach by evaporating water into it. Above roughly 30 °C the human body struggles to cool "
    "itself by sweating, and above 35 °C prolonged exposure is deadly.</p>"
    "<p class='legend'>Scroll through the projections below. Each step redraws the map for a new year; "
    "hover over a county or state to compare it with the first year of the story.</p>"
)

WRITEUP_BODY = (
    "<h3>Data</h3>"
    "<p>Annual maximum wet-bulb temperature projections in °C, aggregated per California county and per "
    "U.S. state. Boundaries come from public county and state GeoJSON collections.</p>"
    "<h3>Color scale</h3>"
    "<p>Values are split at %BINS% °C. A value that sits exactly on a boundary is colored with the bucket "
    "above it. Regions with no value for a year are drawn in grey rather than in the coolest color.</p>"
    "<h3>Comparisons</h3>"
    "<p>Tooltips compare each region with its value in the story's baseline year: %BASELINES%.</p>"
)


def render_legend(items: List[dict]) -> str:
    return "".join(
        f'<div class="legend-item"><div class="legend-color" style="background-color:{it["color"]}"></div>'
        f'<span class="legend-label">{escape(it["label"])}</span></div>'
        for it in items
    )


def render_steps(steps: List[ScrollStep]) -> str:
    out = []
    for s in steps:
        if s.spacer:
            out.append('    <div class="step spacer"></div>')
        else:
            out.append(f'    <div class="step" data-year="{s.year}">{s.html()}</div>')
    return "\n".join(out)


def make_region_section(cfg: RegionConfig, story: Optional[RegionStory], error: Optional[str] = None,
                        hidden: bool = False) -> str:
    ids = cfg.dom_ids
    if story is None:
        msg = escape(error or "Dataset unavailable.")
        return (
            f'<section id="{ids["section"]}" class="card load-error" style="margin:32px 0">'
            f'<h2 style="margin-top:0">{escape(cfg.label)} map unavailable</h2>'
            f'<p>The {escape(cfg.label)} data could not be loaded, so this part of the story is skipped.</p>'
            f'<p class="legend">{msg}</p>'
            f'</section>'
        )
    initial = story.initial_frame or {}
    html = REGION_SECTION_HTML
    replacements = {
        "%SECTION_ID%": ids["section"],
        "%MAP_COLUMN_ID%": ids["mapColumn"],
        "%MAP_CLASS%": " sticky-hidden" if hidden else "",
        "%TITLE_ID%": ids["title"],
        "%YEAR_TITLE%": escape(initial.get("title", f"{cfg.title_prefix} "), quote=False),
        "%STATS_ID%": ids["stats"],
        "%STATS%": escape(initial.get("stats", ""), quote=False),
        "%SVG_ID%": ids["svg"],
        "%WIDTH%": str(cfg.map_width),
        "%HEIGHT%": str(cfg.map_height),
        "%LABEL%": escape(cfg.label),
        "%LEGEND_ID%": ids["legend"],
        "%LEGEND%": render_legend(utils.legend_items()),
        "%TEXT_ID%": ids["text"],
        "%STEPS%": render_steps(story.steps),
        "%TOOLTIP_ID%": ids["tooltip"],
    }
    for k, v in replacements.items():
        html = html.replace(k, v)
    return html


def make_plots_section(plot_files: List[Path]) -> str:
    if not plot_files:
        return ""
    imgs = "\n".join(
        f'<img class="plot" src="plots/{p.name}" alt="{escape(p.stem.replace("_", " "))}" />'
        for p in plot_files
    )
    return f'<div class="card" style="margin-top:24px"><h2 style="margin-top:0">Trends</h2>{imgs}</div>'


def make_css() -> str:
    css = BASE_CSS
    css = css.replace("%STEP_HEIGHT%", str(params.STEP_HEIGHT_PX))
    css = css.replace("%STEP_SPACING%", str(params.STEP_SPACING_PX))
    css = css.replace("%SPACER_HEIGHT%", str(params.SPACER_HEIGHT_PX))
    return css


def make_story_js() -> str:
    js = STORY_JS
    js = js.replace("%TOOLTIP_OFFSET%", str(params.TOOLTIP_OFFSET_PX))
    js = js.replace("%CA_HIDE%", str(params.CA_HIDE_FRACTION))
    js = js.replace("%US_SHOW%", str(params.US_SHOW_FRACTION))
    return js


def make_writeup(regions: List[RegionConfig]) -> str:
    bins = ", ".join(f"{b:g}" for b in params.BINS)
    baselines = "; ".join(f"{escape(r.label)} {r.baseline_year}" for r in regions)
    body = WRITEUP_BODY.replace("%BINS%", bins).replace("%BASELINES%", baselines)
    return WRITEUP_HTML.replace("%WRITEUP_BODY%", body)


def make_index(regions: List[RegionConfig], stories: Dict[str, RegionStory], errors: Dict[str, str],
               out_dir: Path = OUT_DIR, plot_files: Optional[List[Path]] = None,
               globe_available: bool = False) -> Path:
    """Write index.html and story.js for the loaded stories; failed regions get an error card."""
    sections: Dict[str, str] = {}
    payload_regions = []
    for i, cfg in enumerate(regions):
        story = stories.get(cfg.key)
        sections[cfg.key] = make_region_section(cfg, story, errors.get(cfg.key), hidden=i > 0)
        if story is not None:
            payload_regions.append(story.payload())

    links = [(f'#{r.dom_ids["section"]}', escape(r.label)) for r in regions]
    links.append(("#action-section", "Take Action"))
    header_html = make_header(SITE_TITLE, links)

    globe_note = "" if globe_available else '<p class="legend">Globe visualization not bundled with this build.</p>'

    html = INDEX_HTML
    html = html.replace("%HEADER%", header_html)
    html = html.replace("%TITLE%", escape(SITE_TITLE))
    html = html.replace("%INTRO%", INTRO_HTML)
    html = html.replace("%GLOBE_SECTION%", GLOBE_SECTION_HTML.replace("%GLOBE_NOTE%", globe_note))
    html = html.replace("%CA_SECTION%", sections.get("ca", ""))
    html = html.replace("%US_SECTION%", sections.get("us", ""))
    html = html.replace("%PANELS%", render_panels())
    html = html.replace("%PLOTS_SECTION%", make_plots_section(plot_files or []))
    html = html.replace("%WRITEUP%", make_writeup(regions))
    html = html.replace("%FOOTER_TEXT%", make_footer_note())
    html = html.replace("%GLOBE_SCRIPT%", GLOBE_SCRIPT if globe_available else "")
    # JSON goes in last so none of the placeholders above can match inside it
    html = html.replace("%STORY_DATA%", json.dumps({"regions": payload_regions}, separators=(",", ":"),
                                                    ensure_ascii=False).replace("</", "<\\/"))

    write_text(out_dir / "story.js", make_story_js())
    index_path = out_dir / "index.html"
    write_text(index_path, html)
    return index_path
