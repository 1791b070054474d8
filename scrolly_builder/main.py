from pathlib import Path
from typing import Dict, List, Optional

from .config import OUT_DIR, PLOTS_SRC, ASSETS_SRC, GLOBE_FILES, REGIONS, RegionConfig
from .io_utils import ensure_dirs, write_text, write_json, copy_files
from .loader import DatasetLoadError, load_region
from .pages import make_css, make_index
from .story import RegionStory
from .templates import FAVICON_SVG


def load_stories(regions: List[RegionConfig]):
    """Load and replay every region; failures are collected instead of raised."""
    stories: Dict[str, RegionStory] = {}
    contexts = {}
    errors: Dict[str, str] = {}
    for cfg in regions:
        try:
            ctx = load_region(cfg)
        except DatasetLoadError as e:
            print(f"Warning: couldn't load {cfg.label} data: {e}")
            errors[cfg.key] = str(e)
            continue
        story = RegionStory(ctx)
        story.replay()
        if story.initial_frame is None:
            print(f"Warning: {cfg.label} has no measurement records; the map stays blank")
        stories[cfg.key] = story
        contexts[cfg.key] = ctx
    return stories, contexts, errors


def build_site(regions: Optional[List[RegionConfig]] = None, out_dir: Path = OUT_DIR,
               plots_src: Path = PLOTS_SRC, assets_src: Path = ASSETS_SRC) -> Path:
    regions = regions if regions is not None else REGIONS
    ensure_dirs(out_dir)
    write_text(out_dir / "styles.css", make_css())
    write_text(out_dir / "favicon.svg", FAVICON_SVG)

    stories, contexts, errors = load_stories(regions)

    # Boundary geometry is fetched by the page script, next to index.html
    for ctx in contexts.values():
        write_json(out_dir / ctx.config.boundary_url, ctx.boundaries)

    plot_files: List[Path] = []
    try:
        plot_files = [p for p in copy_files(plots_src, out_dir / "plots") if p.suffix == ".png"]
    except Exception as e:
        print(f"Warning: couldn't copy plots: {e}")

    globe_available = False
    try:
        copied = copy_files(assets_src, out_dir, names=list(GLOBE_FILES))
        globe_available = len(copied) == len(GLOBE_FILES)
    except Exception as e:
        print(f"Warning: couldn't copy globe assets: {e}")

    index_path = make_index(regions, stories, errors, out_dir=out_dir,
                            plot_files=plot_files, globe_available=globe_available)

    built = ", ".join(r.label for r in regions if r.key in stories) or "no maps"
    print(f"Done. Built {index_path} ({built}).")
    return index_path
