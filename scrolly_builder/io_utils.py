import json
import shutil
from pathlib import Path
from typing import Any, List, Optional

import requests

from .config import OUT_DIR, OUT_DATA_DIR, REQUEST_TIMEOUT


def ensure_dirs(out_dir: Path = OUT_DIR):
    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / OUT_DATA_DIR.name).mkdir(parents=True, exist_ok=True)


def write_text(path: Path, text: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def write_json(path: Path, obj: Any):
    write_text(path, json.dumps(obj, separators=(",", ":")))


def is_url(source: str) -> bool:
    return str(source).startswith(("http://", "https://"))


def read_resource(source: str) -> str:
    """Return the text of a local file or an http(s) URL."""
    if is_url(source):
        resp = requests.get(source, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
        return resp.text
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")
    return path.read_text(encoding="utf-8-sig")


def read_json(source: str) -> Any:
    return json.loads(read_resource(source))


def copy_files(src_dir: Path, dst_dir: Path, names: Optional[List[str]] = None) -> List[Path]:
    """Copy files (all, or only `names`) from src_dir into dst_dir. Missing sources are skipped."""
    copied: List[Path] = []
    if not (src_dir.exists() and src_dir.is_dir()):
        return copied
    dst_dir.mkdir(parents=True, exist_ok=True)
    for item in sorted(src_dir.iterdir()):
        if not item.is_file():
            continue
        if names is not None and item.name not in names:
            continue
        shutil.copy2(item, dst_dir / item.name)
        copied.append(dst_dir / item.name)
    return copied
