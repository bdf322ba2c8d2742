import requests
from county_acs.etl.errors import InvalidVariableCode, UpstreamUnavailable
ESTIMATE_SUFFIX = "E"
MOE_SUFFIX = "M"
VARIABLES = {
    "totalpop": "B01003_001",
    "medincome": "B19013_001",
    "medage": "B01002_001",
    "natborn_total": "B05002_001",
    "natborn_foreign": "B05002_013",
    "military_total": "B21001_001",
    "military_veteran": "B21001_002",
    "originrace_total_all": "B03002_001",
    "originrace_whitealone": "B03002_003",
    "education_total": "B06009_001",
    "education_bachelors": "B06009_005",
    "education_gradprofess": "B06009_006",
}
def as_catalog(entries) -> dict:
    """Build a {semantic_name: source_code} catalog from a mapping or (name, code) pairs."""
    pairs = entries.items() if isinstance(entries, dict) else entries
    catalog = {}
    for name, code in pairs:
        if name in catalog:
            raise ValueError(f"duplicate variable name in catalog: {name}")
        catalog[name] = code
    if not catalog:
        raise ValueError("variable catalog is empty")
    return catalog
def api_codes(catalog: dict) -> list:
    codes = []
    for code in catalog.values():
        codes.append(code + ESTIMATE_SUFFIX)
        codes.append(code + MOE_SUFFIX)
    return codes
def rename_map(catalog: dict) -> dict:
    """Map API column names (B01003_001E) to suffixed semantic names (totalpopE)."""
    mapping = {}
    for name, code in catalog.items():
        mapping[code + ESTIMATE_SUFFIX] = name + ESTIMATE_SUFFIX
        mapping[code + MOE_SUFFIX] = name + MOE_SUFFIX
    return mapping
def load_variables(year, dataset: str, timeout: int = 60) -> set:
    url = f"https://api.census.gov/data/{year}/{dataset}/variables.json"
    print(f"Loading variable list from {url}")
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.exceptions.RequestException as error:
        raise UpstreamUnavailable(f"could not reach {url}: {error}") from error
    if resp.status_code == 404:
        raise InvalidVariableCode(f"no variable list for {dataset} {year}")
    if resp.status_code != 200:
        raise UpstreamUnavailable(
            f"variable list request failed with status {resp.status_code}"
        )
    try:
        return set(resp.json()["variables"])
    except (ValueError, KeyError) as error:
        raise UpstreamUnavailable(f"malformed variable list from {url}") from error
def validate_catalog(catalog: dict, available: set):
    missing = [
        f"{name}={code}"
        for name, code in catalog.items()
        if code + ESTIMATE_SUFFIX not in available
    ]
    if missing:
        raise InvalidVariableCode(f"unknown variable codes: {', '.join(missing)}")
