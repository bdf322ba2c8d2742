import os
import geopandas as gpd
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from county_acs.etl.metrics import PCT_COLUMNS
def generate_summary(df, path):
    print("\nStatistical Summary")
    summary = pd.DataFrame(df.drop(columns="geometry", errors="ignore")).describe()
    print(summary)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    summary.to_csv(path)
    print(f"Saved summary to {path}")
    return summary
def plot_distributions(df, out_dir):
    print("\nGenerating Distributions")
    os.makedirs(out_dir, exist_ok=True)
    paths = []
    for var in [c for c in PCT_COLUMNS if c in df.columns]:
        plt.figure(figsize=(8, 6))
        sns.histplot(df[var].dropna(), kde=True, bins=30)
        plt.title(f"Distribution of {var}")
        plt.xlabel(var)
        plt.ylabel("Counties")
        plt.tight_layout()
        path = os.path.join(out_dir, f"hist_{var}.png")
        plt.savefig(path)
        plt.close()
        print(f"Saved {path}")
        paths.append(path)
    return paths
def plot_choropleth(gdf, column, out_dir):
    if not isinstance(gdf, gpd.GeoDataFrame):
        print(f"No geometry attached, skipping {column} map")
        return None
    print(f"\nGenerating {column} map")
    os.makedirs(out_dir, exist_ok=True)
    fig, ax = plt.subplots(figsize=(12, 8))
    gdf.plot(
        column=column,
        cmap="viridis",
        legend=True,
        ax=ax,
        missing_kwds={"color": "lightgrey"},
    )
    ax.set_title(column)
    ax.set_axis_off()
    plt.tight_layout()
    path = os.path.join(out_dir, f"map_{column}.png")
    fig.savefig(path)
    plt.close(fig)
    print(f"Saved {path}")
    return path
