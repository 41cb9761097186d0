"""Schema constants for the PM2.5 workbook pipeline."""

SHEET_ORDER = [
    "national_emissions",
    "electric_utilities",
    "wildfire_estimates",
    "area_burned",
    "city_pm25",
    "fire_impact",
]

EMISSION_SOURCES = ["roads", "crops", "constr", "other", "firewood"]

SCHEMAS = {
    "national_emissions": {
        "year": "int64",
        "roads": "float64",
        "crops": "float64",
        "constr": "float64",
        "other": "float64",
        "firewood": "float64",
        "total": "float64",
    },
    "electric_utilities": {
        "year": "int64",
        "pm25": "float64",
    },
    "wildfire_estimates": {
        "year": "int64",
        "area_burned_mha": "float64",
        "wildfire_pm25": "float64",
        "anthropogenic_pm25": "float64",
    },
    "area_burned": {
        "year": "int64",
        "burned_mha": "float64",
    },
    "city_pm25": {
        "year": "int64",
        "city": "object",
        "region": "object",
        "pm25": "float64",
    },
    "fire_impact": {
        "year": "int64",
        "nat_avg_pm25": "float64",
        "area_burned_mha": "float64",
    },
}

REGIONS = ("Western", "Central", "Atlantic")

# Columns that must never be negative
NON_NEGATIVE_COLUMNS = {
    name: [col for col, dtype in schema.items() if dtype == "float64"]
    for name, schema in SCHEMAS.items()
}


def column_order(entity: str) -> list[str]:
    """Return the sheet's column names in output order."""
    return list(SCHEMAS[entity])
