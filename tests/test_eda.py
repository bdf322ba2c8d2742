"""Unit tests for summary statistics and figures."""

from __future__ import annotations

import geopandas as gpd
import pandas as pd
from shapely.geometry import box

from county_acs.analysis.eda import generate_summary, plot_choropleth, plot_distributions


def _derived() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "GEOID": ["51059", "51013", "51510", "48301"],
            "state_name": ["Virginia", "Virginia", "Virginia", "Texas"],
            "county_name": ["Fairfax County", "Arlington County", "Alexandria city", "Loving County"],
            "totalpop": [1150309, 234000, 155000, 57],
            "pct_born_foreign": [31.2, 22.8, 27.4, None],
            "pct_ed_college_all": [62.1, 75.9, 65.3, 12.5],
        }
    )


def test_generate_summary_writes_describe_table(tmp_path) -> None:
    """Summary lists the numeric columns only."""
    path = tmp_path / "summary.csv"

    summary = generate_summary(_derived(), str(path))

    assert path.exists()
    assert "totalpop" in summary.columns
    assert "state_name" not in summary.columns


def test_plot_distributions_saves_one_figure_per_pct_column(tmp_path) -> None:
    """Only percentage columns present in the table are plotted."""
    paths = plot_distributions(_derived(), str(tmp_path))

    assert [p.rsplit("/", 1)[-1] for p in paths] == [
        "hist_pct_born_foreign.png",
        "hist_pct_ed_college_all.png",
    ]


def test_plot_choropleth_skips_without_geometry(tmp_path) -> None:
    """Plain tables have nothing to map."""
    assert plot_choropleth(_derived(), "pct_ed_college_all", str(tmp_path)) is None


def test_plot_choropleth_saves_map(tmp_path) -> None:
    """Tables with boundaries produce a map image."""
    gdf = gpd.GeoDataFrame(
        _derived(),
        geometry=[box(i, 0, i + 1, 1) for i in range(4)],
        crs="EPSG:4269",
    )

    path = plot_choropleth(gdf, "pct_born_foreign", str(tmp_path))

    assert (tmp_path / "map_pct_born_foreign.png").exists()
    assert path.endswith("map_pct_born_foreign.png")
