import argparse
import os
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from statsmodels.nonparametric.smoothers_lowess import lowess
from scipy.interpolate import UnivariateSpline

import params
import utils
from scrolly_builder.config import REGIONS, PLOTS_SRC, RegionConfig
from scrolly_builder.loader import DatasetLoadError, fetch_measurements
from scrolly_builder.year_index import YearIndex


def yearly_means(index: YearIndex) -> pd.Series:
    """Mean value per year, indexed by year (ascending)."""
    rows = [(r.year, r.value) for y in index.years for r in index.get(y)]
    df = pd.DataFrame(rows, columns=["year", "value"])
    return df.groupby("year")["value"].mean().sort_index()


def _style_axis(ax, ticks: np.ndarray, years: np.ndarray, title: str, y_label: str):
    ax.set_title(title)
    ax.set_xlabel("Year")
    ax.set_ylabel(y_label)
    ax.grid(True, alpha=0.3)
    ax.set_xticks(ticks)
    ax.set_xticklabels(years, rotation=45)


def plot_region(cfg: RegionConfig, means: pd.Series, output_dir: str,
                use_loess: bool = True, use_spline: bool = True) -> str:
    years = means.index.values
    values = means.values
    point_colors = [utils.bin_color(utils.classify(v)) for v in values]

    fig, (ax_line, ax_bar) = plt.subplots(1, 2, figsize=(16, 6))

    ax_line.plot(years, values, marker="o", linestyle="-", color="gray", label="Average")
    ax_line.scatter(years, values, c=point_colors, edgecolors="white", s=60, zorder=3)
    for b in params.BINS:
        if values.min() - 2 <= b <= values.max() + 2:
            ax_line.axhline(b, color="white", linestyle=":", linewidth=0.6, alpha=0.4)

    if len(years) >= params.TREND_MIN_POINTS:
        x_dense = np.linspace(years.min(), years.max(), 500)
        if use_loess:
            try:
                frac = 0.6 if len(years) >= 8 else max(0.25, 3 / max(4, len(years)))
                res = lowess(values, years, frac=frac, return_sorted=True)
                ax_line.plot(x_dense, np.interp(x_dense, res[:, 0], res[:, 1]),
                             linestyle="--", color="cyan", label="LOESS")
            except Exception as e:
                print(f"Could not compute LOESS for {cfg.label}: {e}")
        if use_spline:
            try:
                spline = UnivariateSpline(years, values, s=max(1e-3, 0.5 * len(years)))
                ax_line.plot(x_dense, spline(x_dense), linestyle="-.", color="magenta", label="Spline")
            except Exception as e:
                print(f"Could not compute Spline for {cfg.label}: {e}")
    else:
        print(f"Skipping smoothing for {cfg.label}: not enough points "
              f"(need {params.TREND_MIN_POINTS}, have {len(years)})")

    ax_line.legend()
    _style_axis(ax_line, years, years, f"{cfg.label} Average Wet-Bulb Temperature", "°C")

    # Change versus the baseline year (or the first year when the baseline is absent)
    base_year = cfg.baseline_year if cfg.baseline_year in means.index else years[0]
    deltas = values - means.loc[base_year]
    x_idx = np.arange(len(deltas))
    bars = ax_bar.bar(x_idx, deltas, width=0.4, color=["#BF3B23" if d > 0 else "#66b3ff" for d in deltas])
    ax_bar.bar_label(bars, labels=[f"{d:+.2f}" for d in deltas], padding=3, fontsize=8, color="white")
    ax_bar.axhline(0, color="red", linestyle="--", linewidth=1)
    _style_axis(ax_bar, x_idx, years, f"{cfg.label} Change Since {base_year}", "Δ °C")

    plt.tight_layout()
    path = os.path.join(output_dir, f"{cfg.key}_trend.png")
    fig.savefig(path)
    plt.close(fig)
    print(f"Wrote {cfg.label} plot to {path}")
    return path


def main(regions: Optional[List[RegionConfig]] = None, output_dir: str = str(PLOTS_SRC),
         use_loess: bool = True, use_spline: bool = True, clear_old_files: bool = False) -> List[str]:
    regions = regions if regions is not None else REGIONS
    os.makedirs(output_dir, exist_ok=True)

    if clear_old_files:
        for file in os.listdir(output_dir):
            path = os.path.join(output_dir, file)
            if os.path.isfile(path) and file.endswith(".png"):
                os.remove(path)

    plt.style.use("dark_background")
    written: List[str] = []
    for cfg in regions:
        try:
            records = fetch_measurements(cfg.measurement_source, cfg.region_field, cfg.value_field)
        except (DatasetLoadError, OSError, ValueError) as e:
            print(f"Skipping {cfg.label}: {e}")
            continue
        if not records:
            print(f"Skipping {cfg.label}: no data")
            continue
        means = yearly_means(YearIndex(records))
        written.append(plot_region(cfg, means, output_dir, use_loess=use_loess, use_spline=use_spline))
    return written


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Plot yearly average wet-bulb temperature per region")
    parser.add_argument("--out", default=str(PLOTS_SRC), help="Output directory for the PNG files")
    parser.add_argument("--no-loess", dest="use_loess", action="store_false", help="Disable LOESS smoothing")
    parser.add_argument("--no-spline", dest="use_spline", action="store_false", help="Disable spline smoothing")
    parser.add_argument("--clear", action="store_true", help="Clear output directory images before writing")
    args = parser.parse_args()

    main(output_dir=args.out, use_loess=args.use_loess, use_spline=args.use_spline, clear_old_files=args.clear)
