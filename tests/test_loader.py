import json
from dataclasses import replace

import pytest
import requests

from scrolly_builder import io_utils
from scrolly_builder.loader import DatasetLoadError, fetch_boundaries, fetch_measurements, load_region

from conftest import CA_COUNTIES, CA_ROWS


def test_load_region_joins_both_resources(ca_config):
    ctx = load_region(ca_config)
    assert ctx.config is ca_config
    assert ctx.region_names == CA_COUNTIES
    assert len(ctx.records) == len(CA_ROWS)
    first = ctx.records[0]
    assert (first.year, first.region, first.value) == (2016, "Mono", 12.1)
    assert isinstance(first.year, int)


def test_missing_measurement_file_is_a_load_error(ca_config, tmp_path):
    cfg = replace(ca_config, measurement_source=str(tmp_path / "nope.json"))
    with pytest.raises(DatasetLoadError):
        load_region(cfg)


def test_malformed_boundaries_are_a_load_error(ca_config, tmp_path):
    bad = tmp_path / "bad.geojson"
    bad.write_text(json.dumps({"type": "FeatureCollection"}), encoding="utf-8")
    with pytest.raises(DatasetLoadError):
        load_region(replace(ca_config, boundary_source=str(bad)))


def test_feature_without_name_field(tmp_path):
    p = tmp_path / "geo.json"
    p.write_text(json.dumps({"features": [{"properties": {"NAME": "Texas"}, "geometry": None}]}),
                 encoding="utf-8")
    with pytest.raises(DatasetLoadError):
        fetch_boundaries(str(p), "name")
    assert fetch_boundaries(str(p), "NAME")["features"][0]["properties"]["NAME"] == "Texas"


def test_missing_columns(tmp_path):
    p = tmp_path / "data.json"
    p.write_text(json.dumps([{"year": 2020, "state": "Texas"}]), encoding="utf-8")
    with pytest.raises(DatasetLoadError, match="wetbulb_C"):
        fetch_measurements(str(p), "state", "wetbulb_C")


def test_incomplete_rows_are_dropped(tmp_path, capsys):
    p = tmp_path / "data.json"
    p.write_text(json.dumps([
        {"year": 2020, "county": "Mono", "wetbulb_C": 12.8},
        {"year": None, "county": "Inyo", "wetbulb_C": 15.0},
        {"year": 2020, "county": "Inyo", "wetbulb_C": None},
    ]), encoding="utf-8")
    recs = fetch_measurements(str(p), "county", "wetbulb_C")
    assert [r.region for r in recs] == ["Mono"]
    assert "dropped 2 row(s)" in capsys.readouterr().out


def test_duplicates_are_reported(tmp_path, capsys):
    p = tmp_path / "data.json"
    p.write_text(json.dumps([
        {"year": 2020, "county": "Mono", "wetbulb_C": 12.8},
        {"year": 2020, "county": "Mono", "wetbulb_C": 13.1},
    ]), encoding="utf-8")
    recs = fetch_measurements(str(p), "county", "wetbulb_C")
    assert len(recs) == 2
    assert "1 duplicate (year, county) row(s)" in capsys.readouterr().out


def test_csv_table(tmp_path):
    p = tmp_path / "data.csv"
    p.write_text("year,state,wetbulb_C\n2016,Texas,25.49\n2016,Alaska,11.97\n", encoding="utf-8")
    recs = fetch_measurements(str(p), "state", "wetbulb_C")
    assert [(r.year, r.region, r.value) for r in recs] == [(2016, "Texas", 25.49), (2016, "Alaska", 11.97)]


class _FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_remote_sources_use_requests(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _FakeResponse(json.dumps(CA_ROWS))

    monkeypatch.setattr(io_utils.requests, "get", fake_get)
    recs = fetch_measurements("https://example.org/wetbulb_max_ca.json", "county", "wetbulb_C")
    assert len(recs) == len(CA_ROWS)
    assert calls == [("https://example.org/wetbulb_max_ca.json", io_utils.REQUEST_TIMEOUT)]


def test_remote_http_error_is_a_load_error(ca_config, monkeypatch):
    monkeypatch.setattr(io_utils.requests, "get", lambda url, timeout: _FakeResponse("", status=404))
    cfg = replace(ca_config, measurement_source="https://example.org/missing.json")
    with pytest.raises(DatasetLoadError, match="404"):
        load_region(cfg)


def test_empty_record_list_loads_as_no_records(tmp_path):
    p = tmp_path / "data.json"
    p.write_text("[]", encoding="utf-8")
    assert fetch_measurements(str(p), "county", "wetbulb_C") == []


def test_header_only_csv_loads_as_no_records(tmp_path):
    p = tmp_path / "data.csv"
    p.write_text("year,state,wetbulb_C\n", encoding="utf-8")
    assert fetch_measurements(str(p), "state", "wetbulb_C") == []
