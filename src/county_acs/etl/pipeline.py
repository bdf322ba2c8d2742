import os
from dotenv import load_dotenv
from county_acs.analysis.eda import generate_summary, plot_choropleth, plot_distributions
from county_acs.etl.clean_acs import normalize_columns
from county_acs.etl.fetch_acs import fetch_acs
from county_acs.etl.fetch_censusdis import fetch_acs_censusdis
from county_acs.etl.metrics import add_derived_metrics
from county_acs.etl.persist import write_outputs
from county_acs.etl.variables import VARIABLES, load_variables, validate_catalog
class Config:
    YEAR = "2022"
    DATASET = "acs/acs5"
    GEOGRAPHY = "county"
    PREVIEW_STATE = "51"
    STATE = None
    WITH_GEOMETRY = True
    OUTPUT_DIR = "data/processed"
    OUTPUT_BASE = os.path.join(OUTPUT_DIR, f"county_acs_{YEAR}")
    REPORTS_DIR = "reports"
    FIGURES_DIR = os.path.join(REPORTS_DIR, "figures")
FETCHERS = {
    "requests": fetch_acs,
    "censusdis": fetch_acs_censusdis,
}
def fetch(
    api_key: str,
    client: str = "censusdis",
    catalog=VARIABLES,
    geography: str = Config.GEOGRAPHY,
    state=None,
    geometry: bool = False,
    year=Config.YEAR,
    dataset: str = Config.DATASET,
):
    if client not in FETCHERS:
        raise ValueError(f"unknown fetch client: {client}")
    return FETCHERS[client](
        api_key,
        catalog=catalog,
        geography=geography,
        state=state,
        output="wide",
        geometry=geometry,
        year=year,
        dataset=dataset,
    )
def build_table(api_key: str, client: str = "censusdis", **kwargs):
    raw = fetch(api_key, client=client, **kwargs)
    clean = normalize_columns(raw)
    return add_derived_metrics(clean)
def run():
    load_dotenv()
    api_key = os.getenv("CENSUS_API_KEY")
    validate_catalog(VARIABLES, load_variables(Config.YEAR, Config.DATASET))
    print(f"\nRaw HTTP pull for state {Config.PREVIEW_STATE}")
    preview = build_table(api_key, client="requests", state=Config.PREVIEW_STATE)
    print(preview.head())
    print("\nNationwide pull with county boundaries")
    table = build_table(
        api_key,
        client="censusdis",
        state=Config.STATE,
        geometry=Config.WITH_GEOMETRY,
    )
    write_outputs(table, Config.OUTPUT_BASE)
    generate_summary(table, os.path.join(Config.REPORTS_DIR, "county_acs_summary.csv"))
    plot_distributions(table, Config.FIGURES_DIR)
    plot_choropleth(table, "pct_ed_college_all", Config.FIGURES_DIR)
    print("\nPipeline complete")
if __name__ == "__main__":
    run()
