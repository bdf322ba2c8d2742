import os
from pathlib import Path
import geopandas as gpd
import pandas as pd
from openpyxl.utils.exceptions import IllegalCharacterError
from county_acs.etl.errors import WriteError
def spreadsheet_frame(df: pd.DataFrame) -> pd.DataFrame:
    if "geometry" not in df.columns:
        return pd.DataFrame(df)
    flat = pd.DataFrame(df.drop(columns="geometry"))
    flat["geometry"] = gpd.GeoSeries(df["geometry"]).to_wkt().values
    return flat
def write_outputs(df: pd.DataFrame, base_path):
    """Write ``<base>.pkl`` and ``<base>.xlsx``, replacing existing files.

    Both artifacts are staged next to their targets and only moved into place
    once both have been written, so a failed write leaves earlier outputs alone.
    """
    base = Path(base_path)
    pickle_path = base.parent / f"{base.name}.pkl"
    excel_path = base.parent / f"{base.name}.xlsx"
    staged_pickle = base.parent / f".{base.name}.tmp.pkl"
    staged_excel = base.parent / f".{base.name}.tmp.xlsx"
    try:
        base.parent.mkdir(parents=True, exist_ok=True)
        sheet = spreadsheet_frame(df)
        df.to_pickle(staged_pickle)
        sheet.to_excel(staged_excel, index=False, engine="openpyxl")
        os.replace(staged_pickle, pickle_path)
        os.replace(staged_excel, excel_path)
    except (OSError, ValueError, IllegalCharacterError) as error:
        for staged in (staged_pickle, staged_excel):
            if staged.exists():
                staged.unlink()
        raise WriteError(f"could not write outputs under {base.parent}: {error}") from error
    print(f"Wrote {len(df)} rows to {pickle_path} and {excel_path}")
    return pickle_path, excel_path
