import json
from dataclasses import replace

import pytest

from scrolly_builder.config import CA, US
from scrolly_builder.year_index import MeasurementRecord


def _square(x, y):
    return {"type": "Polygon", "coordinates": [[[x, y], [x + 1, y], [x + 1, y + 1], [x, y + 1], [x, y]]]}


def feature_collection(names, field="name"):
    return {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "properties": {field: n}, "geometry": _square(-120 + i, 36)}
            for i, n in enumerate(names)
        ],
    }


CA_COUNTIES = ["Mono", "Riverside", "Inyo"]

CA_ROWS = [
    {"year": 2016, "county": "Mono", "wetbulb_C": 12.1},
    {"year": 2016, "county": "Riverside", "wetbulb_C": 17.9},
    {"year": 2016, "county": "Inyo", "wetbulb_C": 15.0},
    {"year": 2020, "county": "Mono", "wetbulb_C": 12.83},
    {"year": 2020, "county": "Riverside", "wetbulb_C": 18.74},
    {"year": 2028, "county": "Mono", "wetbulb_C": 14.24},
    {"year": 2028, "county": "Riverside", "wetbulb_C": 21.45},
    {"year": 2028, "county": "Inyo", "wetbulb_C": 16.2},
    {"year": 2036, "county": "Mono", "wetbulb_C": 14.9},
    {"year": 2036, "county": "Riverside", "wetbulb_C": 22.11},
    {"year": 2036, "county": "Inyo", "wetbulb_C": 17.3},
]

US_STATES = ["Alaska", "Texas", "Florida"]

US_ROWS = [
    {"year": 2016, "state": "Alaska", "wetbulb_C": 11.97},
    {"year": 2016, "state": "Texas", "wetbulb_C": 25.49},
    {"year": 2016, "state": "Florida", "wetbulb_C": 26.48},
    {"year": 2028, "state": "Alaska", "wetbulb_C": 13.56},
    {"year": 2028, "state": "Texas", "wetbulb_C": 26.1},
    {"year": 2028, "state": "Florida", "wetbulb_C": 27.2},
    {"year": 2040, "state": "Alaska", "wetbulb_C": 13.9},
    {"year": 2040, "state": "Texas", "wetbulb_C": 27.0},
    {"year": 2040, "state": "Florida", "wetbulb_C": 28.3},
    {"year": 2100, "state": "Alaska", "wetbulb_C": 15.1},
    {"year": 2100, "state": "Texas", "wetbulb_C": 29.4},
    {"year": 2100, "state": "Florida", "wetbulb_C": 30.2},
]


@pytest.fixture
def ca_records():
    return [MeasurementRecord(r["year"], r["county"], r["wetbulb_C"]) for r in CA_ROWS]


@pytest.fixture
def data_dir(tmp_path):
    d = tmp_path / "data"
    d.mkdir()
    (d / "ca.geojson").write_text(json.dumps(feature_collection(CA_COUNTIES, "name")), encoding="utf-8")
    (d / "ca.json").write_text(json.dumps(CA_ROWS), encoding="utf-8")
    (d / "us.json").write_text(json.dumps(feature_collection(US_STATES, "NAME")), encoding="utf-8")
    (d / "us_data.json").write_text(json.dumps(US_ROWS), encoding="utf-8")
    return d


@pytest.fixture
def ca_config(data_dir):
    return replace(CA, boundary_source=str(data_dir / "ca.geojson"),
                   measurement_source=str(data_dir / "ca.json"))


@pytest.fixture
def us_config(data_dir):
    return replace(US, boundary_source=str(data_dir / "us.json"),
                   measurement_source=str(data_dir / "us_data.json"))
