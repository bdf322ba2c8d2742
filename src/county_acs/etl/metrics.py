import math
import warnings
from decimal import ROUND_HALF_UP, Decimal
import numpy as np
import pandas as pd
from county_acs.etl.errors import DivisionUndefined
# pct column -> (numerator columns, denominator column)
RATIOS = {
    "pct_born_foreign": (["natborn_foreign"], "natborn_total"),
    "pct_mil_veteran": (["military_veteran"], "military_total"),
    "pct_race_white": (["originrace_whitealone"], "originrace_total_all"),
    "pct_ed_college_all": (
        ["education_bachelors", "education_gradprofess"],
        "education_total",
    ),
}
PCT_COLUMNS = [
    "pct_born_foreign",
    "pct_mil_veteran",
    "pct_race_white",
    "pct_race_nonwhite",
    "pct_ed_college_all",
]
RAW_COUNT_COLUMNS = [
    "natborn_total",
    "natborn_foreign",
    "military_total",
    "military_veteran",
    "originrace_total_all",
    "originrace_whitealone",
    "education_total",
    "education_bachelors",
    "education_gradprofess",
]
def round_half_up(value, digits: int = 2):
    """Round away from zero at the .5 boundary, so 2.345 -> 2.35."""
    if value is None or pd.isna(value):
        return np.nan
    value = float(value)
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
def percentage(numerator: pd.Series, denominator: pd.Series, digits: int = 2) -> pd.Series:
    denominator = denominator.where(denominator != 0)
    ratio = numerator / denominator * 100
    return ratio.map(lambda x: round_half_up(x, digits)).astype(float)
def add_derived_metrics(df: pd.DataFrame) -> pd.DataFrame:
    missing = [c for c in RAW_COUNT_COLUMNS if c not in df.columns]
    if missing:
        raise KeyError(f"missing raw count columns: {', '.join(missing)}")
    out = df.copy()
    undefined = {}
    for column, (numerators, denominator) in RATIOS.items():
        numerator = out[numerators].sum(axis=1, min_count=len(numerators))
        zero = out[denominator] == 0
        if zero.any():
            undefined[column] = out.loc[zero, "GEOID"].tolist()
        out[column] = percentage(numerator, out[denominator])
    out["pct_race_nonwhite"] = (100 - out["pct_race_white"]).map(round_half_up)
    for column, geoids in undefined.items():
        warnings.warn(
            f"{column} undefined (zero denominator) for GEOID {', '.join(map(str, geoids))}",
            DivisionUndefined,
            stacklevel=2,
        )
    out = out.drop(columns=RAW_COUNT_COLUMNS)
    rest = [c for c in out.columns if c not in PCT_COLUMNS and c != "geometry"]
    order = rest + PCT_COLUMNS
    if "geometry" in out.columns:
        order.append("geometry")
    return out[order]
