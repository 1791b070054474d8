"""Paired dataset loading: boundary geometry + measurement table per region.

Both resources are fetched concurrently and joined; the region context is
only built once both have arrived.
"""
from __future__ import annotations

import io
import json
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List

import pandas as pd

from .config import RegionConfig
from .io_utils import read_json, read_resource
from .year_index import MeasurementRecord


class DatasetLoadError(Exception):
    """A region's boundary or measurement resource could not be fetched or parsed."""


@dataclass(frozen=True)
class RegionContext:
    config: RegionConfig
    boundaries: Dict[str, Any]
    records: List[MeasurementRecord]

    @property
    def region_names(self) -> List[str]:
        field = self.config.feature_name_field
        return [f["properties"][field] for f in self.boundaries["features"]]


def fetch_boundaries(source: str, name_field: str) -> Dict[str, Any]:
    geo = read_json(source)
    if not isinstance(geo, dict) or not isinstance(geo.get("features"), list):
        raise DatasetLoadError(f"{source}: expected a feature collection with a 'features' list")
    for i, f in enumerate(geo["features"]):
        props = f.get("properties") if isinstance(f, dict) else None
        if not props or props.get(name_field) in (None, ""):
            raise DatasetLoadError(f"{source}: feature {i} has no '{name_field}' property")
    return geo


def _read_table(source: str) -> pd.DataFrame:
    text = read_resource(source)
    if str(source).lower().endswith(".csv"):
        return pd.read_csv(io.StringIO(text))
    return pd.DataFrame(json.loads(text))


def fetch_measurements(source: str, region_field: str, value_field: str) -> List[MeasurementRecord]:
    df = _read_table(source)
    if df.empty and len(df.columns) == 0:
        # an empty record list is a loaded dataset with nothing in it
        return []
    required = ["year", region_field, value_field]
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise DatasetLoadError(f"{source}: missing column(s) {', '.join(missing)}")

    df = df[required].copy()
    df["year"] = pd.to_numeric(df["year"], errors="coerce")
    df[value_field] = pd.to_numeric(df[value_field], errors="coerce")
    before = len(df)
    df = df.dropna(subset=required)
    if len(df) < before:
        print(f"Warning: {source}: dropped {before - len(df)} row(s) without year, {region_field} or {value_field}")

    dupes = df.duplicated(subset=["year", region_field], keep="last")
    if dupes.any():
        print(f"Warning: {source}: {int(dupes.sum())} duplicate (year, {region_field}) row(s); the last row wins")

    return [
        MeasurementRecord(int(y), str(r), float(v))
        for y, r, v in df.itertuples(index=False, name=None)
    ]


def load_region(config: RegionConfig) -> RegionContext:
    """Fetch both resources for a region in parallel and join them."""
    with ThreadPoolExecutor(max_workers=2) as pool:
        geo_future = pool.submit(fetch_boundaries, config.boundary_source, config.feature_name_field)
        data_future = pool.submit(fetch_measurements, config.measurement_source,
                                  config.region_field, config.value_field)
        try:
            boundaries = geo_future.result()
            records = data_future.result()
        except DatasetLoadError:
            raise
        except Exception as e:
            raise DatasetLoadError(f"{config.label}: {e}") from e
    return RegionContext(config=config, boundaries=boundaries, records=records)
