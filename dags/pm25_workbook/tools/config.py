"""Simple configuration constants for the PM2.5 workbook pipeline."""

from pathlib import Path

# Relative to the working directory the pipeline is run from
DATA_DIR = Path("data")

WORKBOOK_NAME = "canada_pm25_data.xlsx"
OUTPUT_PATH = DATA_DIR / WORKBOOK_NAME

# kt of PM2.5 per million hectares burned (UNDRR / ECCC, 2023)
WILDFIRE_EMISSION_FACTOR = 713

SHEET_DESCRIPTIONS = {
    "national_emissions": "APEI source categories (1990-2023)",
    "electric_utilities": "Coal phase-out story (selected years)",
    "wildfire_estimates": "Estimated wildfire PM2.5 vs anthropogenic",
    "area_burned": "CNFDB annual area burned (1990-2023)",
    "city_pm25": "8 cities, NAPS/IQAir (2014-2023)",
    "fire_impact": "National avg concentration vs fires (2009-2023)",
}
