"""Literal values transcribed from the published reports.

Every vector here is an authoritative input. Values described as
interpolated or as selected years are reproduced as published and never
recomputed.
"""

# Air Pollutant Emissions Inventory (APEI) 2025, ECCC, Table 2-3.
# Anthropogenic sources only, kt per year. "other" groups manufacturing,
# commercial/residential excluding firewood, transportation, incineration
# and miscellaneous categories. Wildfires are not part of the APEI totals.
NATIONAL_EMISSIONS = {
    "year": list(range(1990, 2024)),
    "roads": [
        251, 244, 261, 267, 282, 287, 294, 307, 312, 312, 308, 325, 324, 331, 327, 323, 329,
        347, 349, 364, 361, 360, 376, 390, 380, 395, 399, 414, 438, 443, 378, 425, 432, 457,
    ],
    "crops": [
        673, 666, 651, 637, 622, 608, 594, 580, 567, 553, 540, 526, 507, 487, 467, 447, 428,
        414, 401, 387, 374, 361, 364, 367, 370, 373, 376, 372, 368, 363, 359, 355, 351, 346,
    ],
    "constr": [
        226, 218, 194, 195, 215, 221, 227, 255, 262, 265, 276, 291, 276, 276, 290, 323, 306,
        318, 356, 323, 374, 400, 429, 447, 466, 411, 355, 358, 378, 396, 363, 356, 372, 407,
    ],
    "other": [
        357, 335, 312, 322, 317, 318, 298, 281, 272, 272, 266, 243, 216, 227, 204, 203, 178,
        170, 166, 152, 150, 146, 144, 135, 140, 133, 126, 127, 123, 122, 118, 124, 119, 109,
    ],
    "firewood": [
        102, 102, 108, 109, 106, 103, 106, 104, 83, 80, 81, 70, 67, 63, 66, 68, 66,
        78, 77, 78, 69, 73, 69, 75, 76, 73, 69, 69, 71, 68, 58, 52, 55, 51,
    ],
}

# APEI 2025, "Electric Power Generation (Utilities)" subsector, kt.
# Ontario closed its last coal stations in 2014; intermediate years come
# from the APEI trend charts.
ELECTRIC_UTILITIES = {
    "year": [1990, 1995, 2000, 2005, 2008, 2010, 2012, 2014, 2016, 2018, 2019, 2020, 2021, 2022, 2023],
    "pm25": [49, 35, 23, 9.1, 6, 4.5, 3.5, 3.2, 2.8, 3.2, 2.8, 2.4, 2.0, 2.1, 1.8],
}

# Area burned from the Canadian National Fire Database (NRCan), million ha.
# anthropogenic_pm25 is the APEI total for the same year as published
# alongside the wildfire estimate, kt.
WILDFIRE_ESTIMATES = {
    "year": [
        1990, 1995, 2000, 2002, 2004, 2006, 2008, 2010, 2012, 2014,
        2015, 2016, 2017, 2018, 2019, 2020, 2021, 2022, 2023,
    ],
    "area_burned_mha": [
        1.1, 6.6, 0.6, 2.8, 3.3, 2.0, 1.7, 3.0, 2.1, 3.5,
        3.9, 1.4, 3.4, 2.3, 1.8, 0.6, 4.0, 1.5, 15.0,
    ],
    "anthropogenic_pm25": [
        1609, 1537, 1471, 1390, 1354, 1339, 1349, 1282, 1382, 1399,
        1385, 1349, 1383, 1378, 1392, 1276, 1317, 1329, 1370,
    ],
}

# CNFDB annual totals for all of Canada, million ha. 2023 is the worst
# season on record; the previous worst was 1995.
AREA_BURNED = {
    "year": list(range(1990, 2024)),
    "burned_mha": [
        1.1, 0.9, 0.7, 1.7, 6.3, 6.6, 1.8, 0.6, 4.7, 1.6, 0.6, 0.6, 2.8, 1.7, 3.3, 1.7, 2.0,
        1.5, 1.7, 0.8, 3.0, 2.6, 1.9, 4.2, 3.5, 3.9, 1.4, 3.4, 2.3, 1.8, 0.6, 4.0, 1.5, 15.0,
    ],
}

# Annual average ambient concentration, µg/m³. NAPS station data, with
# IQAir 2023 for the last year and provincial reports for validation.
CITY_YEARS = list(range(2014, 2024))

CITY_PM25 = [
    # (city, region, pm25 for each year in CITY_YEARS)
    ("Vancouver", "Western", [5.8, 5.5, 5.2, 6.0, 6.8, 6.1, 5.0, 5.4, 5.6, 8.4]),
    ("Calgary", "Western", [7.5, 7.0, 6.8, 7.4, 7.8, 7.2, 5.8, 6.6, 7.0, 12.8]),
    ("Edmonton", "Western", [8.2, 7.8, 7.2, 8.0, 8.5, 7.4, 6.0, 7.2, 7.6, 16.6]),
    ("Winnipeg", "Western", [6.5, 6.2, 5.9, 6.6, 6.4, 6.3, 5.4, 5.8, 6.0, 9.8]),
    ("Toronto", "Central", [7.8, 7.3, 7.0, 7.6, 8.0, 7.4, 6.2, 6.8, 7.2, 10.1]),
    ("Ottawa", "Central", [6.5, 6.0, 5.8, 6.4, 6.6, 6.2, 5.2, 5.8, 6.2, 9.7]),
    ("Montreal", "Central", [7.6, 7.2, 6.8, 7.2, 7.5, 7.0, 5.8, 6.5, 6.8, 10.5]),
    ("Halifax", "Atlantic", [6.2, 5.8, 5.5, 5.7, 6.0, 5.8, 4.8, 5.2, 5.4, 7.6]),
]

# NAPS national annual average (µg/m³) with CNFDB area burned (million ha).
# 2023 is the first year above the CAAQS annual standard.
FIRE_IMPACT = {
    "year": list(range(2009, 2024)),
    "nat_avg_pm25": [5.9, 6.0, 5.8, 5.6, 5.8, 5.7, 5.5, 5.6, 6.5, 6.8, 5.8, 5.4, 5.6, 6.0, 9.5],
    "area_burned_mha": [0.8, 3.0, 2.6, 1.9, 4.2, 3.5, 3.9, 1.4, 3.4, 2.3, 1.8, 0.6, 4.0, 1.5, 14.0],
}
