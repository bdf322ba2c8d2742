import censusdis.data as ced
import geopandas as gpd
import requests
from censusdis.impl.exceptions import CensusApiException
from county_acs.etl.errors import (
    AuthenticationError,
    InvalidVariableCode,
    UpstreamUnavailable,
)
from county_acs.etl.fetch_acs import Config, check_query, to_long, to_raw_record
from county_acs.etl.variables import VARIABLES, api_codes, as_catalog
def geo_kwargs(geography: str, state=None) -> dict:
    if geography == "state":
        return {"state": state or "*"}
    return {"state": state or "*", "county": "*"}
def translate_error(error: CensusApiException):
    message = str(error)
    lowered = message.lower()
    if "invalid key" in lowered or "status 401" in lowered or "status 403" in lowered:
        return AuthenticationError("census api rejected the api key")
    if "unknown variable" in lowered:
        return InvalidVariableCode(message)
    if "status 404" in lowered and "/variables" in lowered:
        return InvalidVariableCode(message)
    return UpstreamUnavailable(message)
def fetch_acs_censusdis(
    api_key: str,
    catalog=VARIABLES,
    geography: str = "county",
    state=None,
    output: str = "wide",
    geometry: bool = True,
    year=Config.YEAR,
    dataset: str = Config.DATASET,
):
    """Fetch ACS estimates through censusdis, optionally with boundary polygons.

    Returns the same Raw Record layout as ``fetch_acs``; with ``geometry`` the
    result is a GeoDataFrame carrying a ``geometry`` column.
    """
    check_query(geography, output)
    if geometry and output == "long":
        raise ValueError("geometry can only be attached to wide output")
    if not api_key:
        raise AuthenticationError("CENSUS_API_KEY is not set")
    catalog = as_catalog(catalog)
    kwargs = geo_kwargs(geography, state)
    print(f"Downloading {dataset} {year} for {kwargs} (geometry={geometry})")
    try:
        df = ced.download(
            dataset,
            int(year),
            ["NAME"] + api_codes(catalog),
            api_key=api_key,
            with_geometry=geometry,
            **kwargs,
        )
    except CensusApiException as error:
        raise translate_error(error) from error
    except requests.exceptions.RequestException as error:
        raise UpstreamUnavailable(f"could not reach the census api: {error}") from error
    if geography == "county":
        geoid = df["STATE"] + df["COUNTY"]
    else:
        geoid = df["STATE"]
    raw = to_raw_record(df, geoid, catalog)
    if geometry:
        raw = gpd.GeoDataFrame(raw, geometry="geometry", crs=df.crs)
    print(f"Downloaded {len(raw)} rows")
    if output == "long":
        return to_long(raw, catalog)
    return raw
