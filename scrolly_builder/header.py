from typing import List, Optional, Tuple
from .config import LAST_UPDATED, FOOTER_TEXT


def make_header(title: str, links: Optional[List[Tuple[str, str]]] = None) -> str:
    """Return the sticky header HTML snippet.

    - title: short heading text displayed in the header legend
    - links: (href, label) pairs for in-page navigation buttons
    """
    links_html = "".join(f'<a class="btn" href="{href}">{label}</a>' for href, label in (links or []))
    return (
        f'<div class="card site-header" style="display:flex;justify-content:space-between;align-items:center;padding:8px">'
        f'<div class="small-links">{links_html}</div>'
        f'<div class="legend">{title}</div>'
        f'</div>'
    )


def make_footer_note(extra: Optional[str] = None) -> str:
    """Return a footer text line with standard site note and timestamp.

    extra: optional extra note to append before the timestamp
    """
    extra_note = (extra + " ") if extra else ""
    return f"{FOOTER_TEXT} {extra_note}Last updated: {LAST_UPDATED}"
