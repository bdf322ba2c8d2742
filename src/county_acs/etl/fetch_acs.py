import numpy as np
import pandas as pd
import requests
from county_acs.etl.errors import (
    AuthenticationError,
    InvalidVariableCode,
    UpstreamUnavailable,
)
from county_acs.etl.variables import (
    ESTIMATE_SUFFIX,
    MOE_SUFFIX,
    VARIABLES,
    api_codes,
    as_catalog,
    rename_map,
)
class Config:
    YEAR = "2022"
    DATASET = "acs/acs5"
    BASE_URL = "https://api.census.gov/data"
    TIMEOUT = 60
    GEOGRAPHIES = ("county", "state")
    OUTPUTS = ("wide", "long")
# Census annotation values that stand in for a missing estimate or MOE.
SENTINELS = [
    -999999999,
    -888888888,
    -666666666,
    -555555555,
    -333333333,
    -222222222,
]
def check_query(geography: str, output: str):
    if geography not in Config.GEOGRAPHIES:
        raise ValueError(f"unsupported geography: {geography}")
    if output not in Config.OUTPUTS:
        raise ValueError(f"unsupported output shape: {output}")
def geo_params(geography: str, state=None) -> dict:
    if geography == "state":
        return {"for": f"state:{state or '*'}"}
    params = {"for": "county:*"}
    if state:
        params["in"] = f"state:{state}"
    return params
def to_raw_record(df: pd.DataFrame, geoid: pd.Series, catalog: dict) -> pd.DataFrame:
    """Shape an API frame into GEOID, NAME and <name>E/<name>M numeric columns."""
    df = df.rename(columns=rename_map(catalog))
    value_cols = []
    for name in catalog:
        value_cols.extend([name + ESTIMATE_SUFFIX, name + MOE_SUFFIX])
    out = df[["NAME"] + value_cols].copy()
    for c in value_cols:
        out[c] = pd.to_numeric(out[c], errors="coerce")
    out[value_cols] = out[value_cols].replace(SENTINELS, np.nan)
    out.insert(0, "GEOID", geoid.astype(str).values)
    if "geometry" in df.columns:
        out["geometry"] = df["geometry"].values
    return out.reset_index(drop=True)
def to_long(raw: pd.DataFrame, catalog: dict) -> pd.DataFrame:
    rows = []
    for name in catalog:
        part = raw[["GEOID", "NAME"]].copy()
        part["variable"] = name
        part["estimate"] = raw[name + ESTIMATE_SUFFIX].values
        part["moe"] = raw[name + MOE_SUFFIX].values
        rows.append(part)
    long = pd.concat(rows, ignore_index=True)
    return long.sort_values(["GEOID", "variable"], kind="stable").reset_index(drop=True)
def check_response(resp):
    text = resp.text or ""
    if resp.status_code in (401, 403) or "Invalid Key" in text:
        raise AuthenticationError("census api rejected the api key")
    if resp.status_code == 400 and "unknown variable" in text.lower():
        raise InvalidVariableCode(text.strip())
    if resp.status_code != 200:
        raise UpstreamUnavailable(
            f"census api returned {resp.status_code}: {text[:200].strip()}"
        )
def fetch_acs(
    api_key: str,
    catalog=VARIABLES,
    geography: str = "county",
    state=None,
    output: str = "wide",
    geometry: bool = False,
    year=Config.YEAR,
    dataset: str = Config.DATASET,
):
    check_query(geography, output)
    if geometry:
        raise ValueError("geometry is only available through the censusdis fetcher")
    if not api_key:
        raise AuthenticationError("CENSUS_API_KEY is not set")
    catalog = as_catalog(catalog)
    params = {"get": ",".join(["NAME"] + api_codes(catalog)), "key": api_key}
    params.update(geo_params(geography, state))
    url = f"{Config.BASE_URL}/{year}/{dataset}"
    print(f"Fetching {len(catalog)} ACS variables for {params['for']} from {url}")
    try:
        resp = requests.get(url, params=params, timeout=Config.TIMEOUT)
    except requests.exceptions.RequestException as error:
        raise UpstreamUnavailable(f"could not reach {url}: {error}") from error
    check_response(resp)
    try:
        data = resp.json()
    except ValueError as error:
        raise UpstreamUnavailable(f"census api returned non-json body from {url}") from error
    if not isinstance(data, list) or not data:
        raise UpstreamUnavailable(f"census api returned no header row from {url}")
    header = data[0]
    rows = data[1:]
    df = pd.DataFrame(rows, columns=header)
    if geography == "county":
        geoid = df["state"] + df["county"]
    else:
        geoid = df["state"]
    raw = to_raw_record(df, geoid, catalog)
    print(f"Fetched {len(raw)} rows")
    if output == "long":
        return to_long(raw, catalog)
    return raw
if __name__ == "__main__":
    import os
    from dotenv import load_dotenv
    load_dotenv()
    print(fetch_acs(os.getenv("CENSUS_API_KEY"), state="51").head())
