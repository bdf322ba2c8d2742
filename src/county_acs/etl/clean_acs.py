import pandas as pd
from county_acs.etl.variables import ESTIMATE_SUFFIX, MOE_SUFFIX
KEY_COLUMNS = ["GEOID", "NAME", "geometry"]
LEAD_COLUMNS = ["GEOID", "state_name", "county_name"]
def split_name(name: str):
    """Split "Fairfax County, Virginia" into ("Fairfax County", "Virginia")."""
    county, sep, state = name.partition(",")
    if not sep:
        return name, ""
    return county, state.strip()
def normalize_columns(raw: pd.DataFrame) -> pd.DataFrame:
    if raw["GEOID"].duplicated().any():
        dupes = raw.loc[raw["GEOID"].duplicated(), "GEOID"].tolist()
        raise ValueError(f"duplicate GEOID values: {dupes}")
    variable_cols = [c for c in raw.columns if c not in KEY_COLUMNS]
    moe_cols = [c for c in variable_cols if c.endswith(MOE_SUFFIX)]
    df = raw.drop(columns=moe_cols)
    names = df["NAME"].fillna("").astype(str).map(split_name)
    df["county_name"] = [county for county, _ in names]
    df["state_name"] = [state for _, state in names]
    # NAME ends with the estimate suffix too, so only variable columns are renamed
    estimates = {
        c: c[: -len(ESTIMATE_SUFFIX)]
        for c in variable_cols
        if c not in moe_cols and c.endswith(ESTIMATE_SUFFIX)
    }
    df = df.rename(columns=estimates)
    value_cols = [estimates.get(c, c) for c in variable_cols if c not in moe_cols]
    order = LEAD_COLUMNS + value_cols
    if "geometry" in df.columns:
        order.append("geometry")
    print(f"Normalized {len(df)} rows, dropped {len(moe_cols)} margin-of-error columns")
    return df[order].copy()
