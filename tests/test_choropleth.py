import params
from scrolly_builder.choropleth import (ChoroplethRenderer, RegionFeature, ShapeLayer, frame_fills,
                                        render_year, tooltip_html)
from scrolly_builder.year_index import MeasurementRecord, YearIndex

from conftest import CA_COUNTIES, feature_collection


def make_renderer(records, names=CA_COUNTIES, baseline=2020):
    index = YearIndex(records)
    return ChoroplethRenderer.from_geojson(feature_collection(names), "name", index, baseline)


def test_render_year_unknown_year_is_none(ca_records):
    assert render_year(YearIndex(ca_records), CA_COUNTIES, 1999, 2020) is None


def test_render_annotates_every_feature(ca_records):
    r = make_renderer(ca_records)
    frame = r.render(2020)
    assert frame["year"] == 2020
    assert [x["region"] for x in frame["regions"]] == CA_COUNTIES
    by_name = {f.name: f for f in r.features}
    assert by_name["Mono"].value == 12.83
    assert by_name["Mono"].bin == 1
    assert by_name["Riverside"].bin == 3
    assert all(f.year == 2020 for f in r.features)


def test_region_without_record_is_no_data(ca_records):
    r = make_renderer(ca_records)
    r.render(2020)  # Inyo has no 2020 record
    inyo = next(f for f in r.features if f.name == "Inyo")
    assert inyo.value is None
    assert inyo.bin == len(params.BINS) + 1
    assert r.surface.shapes["Inyo"] == params.NO_DATA_COLOR


def test_features_are_the_region_universe():
    recs = [MeasurementRecord(2020, "Mono", 12.0), MeasurementRecord(2020, "Atlantis", 40.0)]
    r = make_renderer(recs)
    r.render(2020)
    assert set(r.surface.shapes) == set(CA_COUNTIES)


def test_render_is_idempotent(ca_records):
    once = make_renderer(ca_records)
    once.render(2028)
    twice = make_renderer(ca_records)
    twice.render(2028)
    twice.render(2028)
    assert [f.bin for f in once.features] == [f.bin for f in twice.features]
    assert len(twice.surface.shapes) == len(once.surface.shapes) == len(CA_COUNTIES)
    assert once.last_frame == twice.last_frame


def test_unknown_year_keeps_previous_view(ca_records):
    r = make_renderer(ca_records)
    r.render(2028)
    before = (dict(r.surface.shapes), [(f.value, f.bin, f.year) for f in r.features])
    assert r.render(1999) is None
    assert r.current_year == 2028
    assert (dict(r.surface.shapes), [(f.value, f.bin, f.year) for f in r.features]) == before


def test_duplicate_records_last_wins():
    recs = [MeasurementRecord(2020, "Mono", 9.0), MeasurementRecord(2020, "Mono", 19.0)]
    r = make_renderer(recs)
    r.render(2020)
    assert r.last_frame["regions"][0]["bin"] == 3
    assert r.surface.shapes["Mono"] == params.BIN_COLORS[3]


def test_shape_layer_join():
    layer = ShapeLayer()
    r = make_renderer([MeasurementRecord(2020, "Mono", 12.0)])
    fills = frame_fills(r.render(2020))
    # the renderer already entered every region into its own layer
    entered, updated, exited = layer.join(fills)
    assert sorted(entered) == sorted(CA_COUNTIES)
    assert updated == [] and exited == []

    kept = dict(list(fills.items())[:2])
    entered, updated, exited = layer.join(kept)
    assert entered == []
    assert len(updated) == 2
    assert exited == [CA_COUNTIES[2]]
    assert len(layer.shapes) == 2


def test_hover_tooltip(ca_records):
    r = make_renderer(ca_records)
    r.render(2028)
    r.pointer_enter("Riverside")
    assert r.tooltip.visible
    assert "<strong>Riverside</strong>" in r.tooltip.html
    assert "Year: 2028" in r.tooltip.html
    assert "2020 Temp: 18.74°C" in r.tooltip.html
    assert "Difference: 2.71°C" in r.tooltip.html

    r.pointer_move(100, 40)
    assert (r.tooltip.left, r.tooltip.top) == (115, 55)

    r.pointer_leave()
    assert not r.tooltip.visible


def test_tooltip_without_baseline_value_shows_na(ca_records):
    r = make_renderer(ca_records)
    r.render(2028)
    r.pointer_enter("Inyo")  # no 2020 record for Inyo
    assert "2020 Temp: N/A°C" in r.tooltip.html
    assert "Difference: N/A°C" in r.tooltip.html


def test_tooltip_html_difference():
    assert "Difference: 1.41°C" in tooltip_html("Mono", 2028, 14.24, 2020, 12.83)
    assert "Difference: N/A°C" in tooltip_html("Mono", 2028, None, 2020, 12.83)
    assert "<strong>A &amp; B</strong>" in tooltip_html("A & B", 2028, 1.0, 2020, 1.0)


def test_region_feature_defaults():
    f = RegionFeature("Mono")
    assert (f.value, f.bin, f.year) == (None, None, None)
