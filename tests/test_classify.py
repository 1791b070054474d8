import math

import pytest

import params
import utils

THRESHOLDS = [10, 14, 18, 22, 26, 30, 32]


@pytest.mark.parametrize("value,expected", [
    (18, 3),
    (9.9, 0),
    (32, 7),
    (-40, 0),
    (31.99, 6),
    (100, 7),
])
def test_classify_examples(value, expected):
    assert utils.classify(value, THRESHOLDS) == expected


def test_boundary_values_round_up():
    for i, b in enumerate(THRESHOLDS):
        assert utils.classify(b, THRESHOLDS) == i + 1


def test_classify_is_monotonic():
    values = [x / 4 for x in range(0, 160)]
    bins = [utils.classify(v, THRESHOLDS) for v in values]
    assert bins == sorted(bins)


def test_missing_values_get_no_data_bin():
    assert utils.classify(None, THRESHOLDS) == 8
    assert utils.classify(math.nan, THRESHOLDS) == 8
    assert utils.no_data_bin(THRESHOLDS) == len(THRESHOLDS) + 1


def test_palette_matches_buckets():
    assert len(params.BIN_COLORS) == len(params.BINS) + 1
    assert utils.bin_color(utils.classify(None)) == params.NO_DATA_COLOR
    assert params.NO_DATA_COLOR not in params.BIN_COLORS


def test_legend_labels():
    labels = utils.legend_labels(THRESHOLDS)
    assert labels[0] == "< 10"
    assert labels[1] == "10 – 14"
    assert labels[-1] == "≥ 32"
    assert len(labels) == len(THRESHOLDS) + 1

    items = utils.legend_items()
    assert items[-1] == {"label": params.NO_DATA_LABEL, "color": params.NO_DATA_COLOR}


def test_temperature_formatting():
    assert utils.temp_str(18.744) == "18.74"
    assert utils.temp_str(None) == "N/A"
    assert utils.diff_str(21.45, 18.74) == "2.71"
    assert utils.diff_str(None, 18.74) == "N/A"
    assert utils.diff_str(18.74, None) == "N/A"
