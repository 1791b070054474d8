# CSS/HTML/JS templates for the story page
BASE_CSS = r"""
:root{--bg:#0b0b0b;--fg:#f5f5f5;--muted:#a5a5a5;--accent:#f5ca98;--card:#141414;--border:#2a2a2a}
*{box-sizing:border-box}
html,body{margin:0;padding:0;background:var(--bg);color:var(--fg);font:16px/1.5 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial}
a{color:var(--accent);text-decoration:none} a:hover{text-decoration:underline}
.container{max-width:1200px;margin:0 auto;padding:16px}
.header{display:flex;flex-wrap:wrap;align-items:center;gap:12px;margin-bottom:16px}
.header h1{font-size:1.5rem;margin:0}
.card{background:var(--card);border:1px solid var(--border);border-radius:12px;padding:16px}
.small-links{display:flex;flex-wrap:wrap;gap:8px}
.small-links .btn{display:inline-flex;align-items:center;justify-content:center;min-width:56px;padding:8px 10px;background:#1e1e1e;border:1px solid var(--border);border-radius:10px;text-align:center}
.btn{display:inline-block;padding:10px 14px;background:#1e1e1e;border:1px solid var(--border);border-radius:10px;color:var(--fg);cursor:pointer}
.btn:focus{outline:2px solid var(--accent);outline-offset:2px}
footer{margin-top:24px;color:var(--muted);font-size:.9rem}
img.plot{width:100%;max-width:900px;display:block;margin:0 auto 16px;border:1px solid var(--border);border-radius:10px;background:#000}
hr{border:none;border-top:1px solid var(--border);margin:16px 0}
.legend{color:var(--muted);font-size:.95rem}
.center{text-align:center}
.site-header{position:sticky;top:0;z-index:1100;background:linear-gradient(180deg, rgba(11,11,11,0.98), rgba(11,11,11,0.95));backdrop-filter:blur(4px);margin-bottom:12px;border-radius:10px}
.card.site-header{padding:8px}

/* Scrolly layout: sticky map beside scrolling step cards */
.scrolly{display:grid;grid-template-columns:3fr 2fr;gap:24px;margin:32px 0}
@media (max-width:900px){.scrolly{grid-template-columns:1fr}}
.map-column{position:sticky;top:72px;align-self:start;transition:opacity .5s ease}
.map-column svg{width:100%;height:auto;display:block}
.map-column.sticky-hidden{opacity:0;pointer-events:none}
.year-title{margin:0 0 8px 0;font-size:1.2rem}
.stats-line{color:var(--muted);margin:4px 0 12px 0}
.text-column{padding-bottom:50vh}
.step{background:var(--card);border:1px solid var(--border);border-radius:12px;padding:16px;min-height:%STEP_HEIGHT%px;margin-bottom:%STEP_SPACING%px;opacity:.85;box-sizing:border-box}
.step.spacer{background:transparent;border:none;min-height:0;height:%SPACER_HEIGHT%px}
.map-legend{display:flex;flex-wrap:wrap;gap:8px;margin-top:8px}
.legend-item{display:flex;align-items:center;gap:6px;font-size:.85rem;color:var(--muted)}
.legend-color{width:18px;height:14px;border:1px solid var(--border);border-radius:3px}
.tooltip{position:absolute;pointer-events:none;opacity:0;background:rgba(20,20,20,0.95);border:1px solid var(--border);border-radius:8px;padding:8px 10px;font-size:.9rem;z-index:2000;transition:opacity .15s}
.load-error{border-color:#BF3B23;color:#F5CA98}
.transition-section{min-height:60vh;display:flex;align-items:center;justify-content:center;text-align:center}

/* Globe */
#globe-container{display:flex;justify-content:center;min-height:320px}

/* Card panels */
.action-panel{margin:32px 0;padding:24px;border-radius:14px;border:1px solid var(--border)}
.action-panel-causes{background:#15110d}
.action-panel-impacts{background:#1a0f0b}
.action-panel-solutions{background:#0d1510}
.action-heading{margin-top:0}
.action-card-list{display:grid;grid-template-columns:repeat(auto-fit,minmax(240px,1fr));gap:16px}
.action-card{display:flex;gap:12px;background:var(--card);border:1px solid var(--border);border-radius:12px;padding:14px}
.action-card-icon{font-size:1.8rem;line-height:1}
.action-card-body h3{margin:0 0 6px 0;font-size:1.05rem}
.action-card-body p{margin:0 0 6px 0;color:var(--muted);font-size:.95rem}
.action-card-stat{color:var(--accent) !important;font-weight:700}

/* Write-up dropdown */
#write-up-content{display:none;margin-top:12px}
#write-up-content.open{display:block}
"""

INDEX_HTML = r"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>%TITLE%</title>
<link rel="stylesheet" href="styles.css" />
<link rel="icon" href="favicon.svg" />
</head>
<body>
<div class="container">
  %HEADER%
  <div class="header"><h1>%TITLE%</h1></div>
  <div class="card">%INTRO%</div>
  %GLOBE_SECTION%
  %CA_SECTION%
  <section class="transition-section"><div class="card"><h2 style="margin-top:0">Zooming out</h2>
    <p class="legend">California is not alone. Keep scrolling to watch the same temperatures climb across the United States.</p></div></section>
  %US_SECTION%
  <div id="action-section">
  %PANELS%
  </div>
  %PLOTS_SECTION%
  %WRITEUP%
  <footer>%FOOTER_TEXT%</footer>
</div>

<script src="https://cdn.jsdelivr.net/npm/d3@7"></script>
<script src="https://cdn.jsdelivr.net/npm/scrollama@3.2.0"></script>
<script>
window.STORY_DATA = %STORY_DATA%;
</script>
<script src="story.js"></script>
%GLOBE_SCRIPT%
</body>
</html>
"""

REGION_SECTION_HTML = r"""
<section id="%SECTION_ID%" class="scrolly">
  <div id="%MAP_COLUMN_ID%" class="map-column%MAP_CLASS%">
    <h2 id="%TITLE_ID%" class="year-title">%YEAR_TITLE%</h2>
    <p id="%STATS_ID%" class="stats-line">%STATS%</p>
    <svg id="%SVG_ID%" viewBox="0 0 %WIDTH% %HEIGHT%" aria-label="%LABEL% wet-bulb temperature map"></svg>
    <div id="%LEGEND_ID%" class="map-legend">%LEGEND%</div>
  </div>
  <div id="%TEXT_ID%" class="text-column">
%STEPS%
  </div>
  <div id="%TOOLTIP_ID%" class="tooltip"></div>
</section>
"""

GLOBE_SECTION_HTML = r"""
<section class="card" style="margin-top:16px">
  <h2 style="margin-top:0">A warming planet</h2>
  <div id="globe-container">%GLOBE_NOTE%</div>
</section>
"""

GLOBE_SCRIPT = r"""<script type="module">
import define from "./globe.js";
import {Runtime, Inspector} from "./runtime.js";
const runtime = new Runtime();
runtime.module(define, name =>
  name === "map" ? new Inspector(document.querySelector("#globe-container")) : null
);
</script>"""

WRITEUP_HTML = r"""
<div class="card" style="margin-top:24px">
  <button id="write-up-toggle" class="btn" type="button">Show Project Writeup Portion ▾</button>
  <div id="write-up-content">%WRITEUP_BODY%</div>
</div>
"""

# Client-side adapter: applies pre-rendered frames. Placeholders are substituted at build time.
STORY_JS = r"""
(function(){
  const DATA = window.STORY_DATA || { regions: [] };
  const TIP = %TOOLTIP_OFFSET%;
  const CA_HIDE = %CA_HIDE%;
  const US_SHOW = %US_SHOW%;

  function initRegion(region){
    const ids = region.ids;
    const svg = d3.select('#' + ids.svg);
    if (svg.empty()) return;
    const tooltip = d3.select('#' + ids.tooltip);
    const title = d3.select('#' + ids.title);
    const stats = d3.select('#' + ids.stats);
    const vb = (svg.attr('viewBox') || '0 0 975 610').split(/\s+/).map(Number);
    const width = vb[2], height = vb[3];
    let frame = region.initialFrame;

    d3.json(region.boundaryUrl).then(geo => {
      const projection = (region.projection === 'albersUsa' ? d3.geoAlbersUsa() : d3.geoMercator())
        .fitSize([width, height], geo);
      const path = d3.geoPath().projection(projection);
      const nameOf = d => d.properties[region.nameField];

      function apply(f){
        // unknown year: keep whatever is drawn
        if (!f) return;
        frame = f;
        svg.selectAll('path.region')
          .data(geo.features, nameOf)
          .join('path')
          .attr('class', 'region')
          .attr('d', path)
          .attr('stroke', '#999')
          .attr('fill', d => f.fills[nameOf(d)] || region.noDataColor)
          .on('mouseover', (event, d) => {
            tooltip.style('opacity', 1).html(frame.tooltips[nameOf(d)] || '');
          })
          .on('mousemove', (event) => {
            tooltip
              .style('left', (event.pageX + TIP) + 'px')
              .style('top', (event.pageY + TIP) + 'px');
          })
          .on('mouseout', () => tooltip.style('opacity', 0));
        if (f.stats) stats.text(f.stats);
        if (f.title) title.text(f.title);
      }

      apply(frame);

      const scroller = scrollama();
      scroller
        .setup({
          container: '#' + ids.section,
          step: '#' + ids.text + ' .step',
          offset: region.scroll.offset,
        })
        .onStepEnter((response) => {
          const year = response.element.getAttribute('data-year');
          if (!year) return;
          apply(region.frames[year]);
        });
      window.addEventListener('resize', scroller.resize);
    }).catch(err => {
      stats.text(`Couldn't load the ${region.label} map: ${err && err.message ? err.message : err}`);
    });
  }

  (DATA.regions || []).forEach(initRegion);

  // Fade the California map out and the US map in around the transition section
  document.addEventListener('scroll', () => {
    const ca = document.querySelector('#scrolly-ca');
    const transition = document.querySelector('.transition-section');
    const caMap = document.querySelector('#map-ca-column');
    const usMap = document.querySelector('#map-us-column');
    const vh = window.innerHeight;
    if (ca && caMap) {
      caMap.classList.toggle('sticky-hidden', ca.getBoundingClientRect().bottom < vh * CA_HIDE);
    }
    if (transition && usMap) {
      usMap.classList.toggle('sticky-hidden', !(transition.getBoundingClientRect().top < vh * US_SHOW));
    }
  });

  const content = document.getElementById('write-up-content');
  const toggle = document.getElementById('write-up-toggle');
  if (content && toggle) {
    content.classList.remove('open');
    toggle.addEventListener('click', () => {
      const isOpen = content.classList.contains('open');
      content.classList.toggle('open', !isOpen);
      toggle.textContent = isOpen ? 'Show Project Writeup Portion ▾' : 'Hide Project Writeup Portion ▴';
    });
  }
})();
"""

FAVICON_SVG = r'''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 64 64">
<rect width="64" height="64" rx="12" fill="#0b0b0b"/>
<rect x="28" y="10" width="8" height="34" rx="4" fill="#F5CA98"/>
<circle cx="32" cy="46" r="10" fill="#BF3B23"/>
</svg>'''
