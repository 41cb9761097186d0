import pandas as pd
import pytest

from pm25_workbook.tools import sources
from pm25_workbook.tools.schemas import REGIONS, SHEET_ORDER, column_order
from pm25_workbook.tools.utils import (
    ConfigurationError,
    DataQualityError,
    build_area_burned,
    build_city_pm25,
    build_datasets,
    build_frame,
    build_national_emissions,
    build_wildfire_estimates,
    compare_anthropogenic_totals,
    run_quality_checks,
)


@pytest.fixture
def datasets():
    return build_datasets()


def test_build_datasets_returns_six_sheets_in_order(datasets):
    assert list(datasets) == SHEET_ORDER
    for name, dataframe in datasets.items():
        assert list(dataframe.columns) == column_order(name)


def test_build_datasets_row_counts(datasets):
    assert {name: len(df) for name, df in datasets.items()} == {
        "national_emissions": 34,
        "electric_utilities": 15,
        "wildfire_estimates": 19,
        "area_burned": 34,
        "city_pm25": 80,
        "fire_impact": 15,
    }


def test_build_frame_rejects_mismatched_lengths():
    with pytest.raises(ConfigurationError, match="electric_utilities"):
        build_frame("electric_utilities", {"year": [2020, 2021], "pm25": [2.4]})


def test_national_emissions_total_is_row_sum():
    df = build_national_emissions()
    expected = df["roads"] + df["crops"] + df["constr"] + df["other"] + df["firewood"]
    assert (df["total"] == expected).all()

    row_2023 = df.loc[df["year"] == 2023].iloc[0]
    assert row_2023[["roads", "crops", "constr", "other", "firewood"]].tolist() == [457, 346, 407, 109, 51]
    assert row_2023["total"] == 1370


def test_national_emissions_mismatch_names_entity():
    vectors = dict(sources.NATIONAL_EMISSIONS)
    vectors["firewood"] = vectors["firewood"][:-1]
    with pytest.raises(ConfigurationError, match="national_emissions"):
        build_national_emissions(vectors)


def test_wildfire_estimate_uses_fixed_factor():
    df = build_wildfire_estimates()
    for row in df.itertuples():
        assert row.wildfire_pm25 == round(row.area_burned_mha * 713)

    row_2023 = df.loc[df["year"] == 2023].iloc[0]
    assert row_2023["area_burned_mha"] == 15.0
    assert row_2023["wildfire_pm25"] == 10695


def test_wildfire_estimate_rounds_half_to_even():
    df = build_wildfire_estimates(
        {"year": [2014, 2022], "area_burned_mha": [3.5, 1.5], "anthropogenic_pm25": [1399, 1329]}
    )
    # 3.5 * 713 = 2495.5 and 1.5 * 713 = 1069.5
    assert df["wildfire_pm25"].tolist() == [2496.0, 1070.0]

    # 0.5 * 713 = 356.5 rounds down to the even neighbour
    df = build_wildfire_estimates({"year": [2000], "area_burned_mha": [0.5], "anthropogenic_pm25": [1471]})
    assert df["wildfire_pm25"].tolist() == [356.0]

    df = build_wildfire_estimates(
        {"year": [2000, 2001], "area_burned_mha": [2.5, 3.5], "anthropogenic_pm25": [1471, 1400]},
        emission_factor=1,
    )
    assert df["wildfire_pm25"].tolist() == [2.0, 4.0]


def test_empty_vectors_are_not_replaced_by_literals():
    with pytest.raises(ConfigurationError, match="area_burned"):
        build_area_burned({})


def test_city_pm25_blocks_share_year_axis():
    df = build_city_pm25()
    assert df["city"].nunique() == 8
    assert set(df["region"]) == set(REGIONS)
    for city, block in df.groupby("city", sort=False):
        assert block["year"].tolist() == list(range(2014, 2024))
        assert block["region"].nunique() == 1

    edmonton_2023 = df.loc[(df["city"] == "Edmonton") & (df["year"] == 2023), "pm25"].iloc[0]
    assert edmonton_2023 == 16.6


def test_city_pm25_short_block_raises():
    blocks = [("Halifax", "Atlantic", [6.2, 5.8])]
    with pytest.raises(ConfigurationError, match="city_pm25"):
        build_city_pm25(blocks, years=[2014, 2015, 2016])


def test_quality_checks_pass_on_literal_data(datasets):
    run_quality_checks(datasets)


def test_quality_checks_flag_broken_total(datasets):
    broken = dict(datasets)
    broken["national_emissions"] = datasets["national_emissions"].copy()
    broken["national_emissions"].loc[0, "total"] = 0.0
    with pytest.raises(DataQualityError, match="total"):
        run_quality_checks(broken)


def test_quality_checks_flag_negative_and_unknown_region(datasets):
    broken = dict(datasets)
    city = datasets["city_pm25"].copy()
    city.loc[0, "pm25"] = -1.0
    city.loc[1, "region"] = "Northern"
    broken["city_pm25"] = city
    with pytest.raises(DataQualityError) as excinfo:
        run_quality_checks(broken)
    message = str(excinfo.value)
    assert "non_negative.city_pm25" in message
    assert "Northern" in message
    assert "region_per_city" in message


def test_quality_checks_flag_unordered_years(datasets):
    broken = dict(datasets)
    broken["area_burned"] = datasets["area_burned"].iloc[::-1].reset_index(drop=True)
    with pytest.raises(DataQualityError, match="years.area_burned"):
        run_quality_checks(broken)


def test_quality_checks_flag_city_year_order(datasets):
    broken = dict(datasets)
    city = datasets["city_pm25"].copy()
    city.loc[[0, 1], "year"] = [2015, 2014]
    broken["city_pm25"] = city
    with pytest.raises(DataQualityError) as excinfo:
        run_quality_checks(broken)
    message = str(excinfo.value)
    assert "years.city_pm25" in message
    assert "Vancouver" in message
    assert "Calgary" not in message


def test_quality_checks_flag_broken_wildfire_estimate(datasets):
    broken = dict(datasets)
    wildfire = datasets["wildfire_estimates"].copy()
    wildfire.loc[wildfire["year"] == 2023, "wildfire_pm25"] = 10696.0
    broken["wildfire_estimates"] = wildfire
    with pytest.raises(DataQualityError, match=r"'wildfire_pm25': \[\(2023,\)\]"):
        run_quality_checks(broken)


def test_quality_checks_require_every_sheet(datasets):
    partial = {name: df for name, df in datasets.items() if name != "fire_impact"}
    with pytest.raises(ConfigurationError, match="fire_impact"):
        run_quality_checks(partial)


def test_compare_anthropogenic_totals_reports_edition_differences(datasets):
    mismatches = compare_anthropogenic_totals(datasets)
    assert list(mismatches.columns) == ["year", "anthropogenic_pm25", "total", "difference"]
    assert 2023 not in mismatches["year"].tolist()
    row_2010 = mismatches.loc[mismatches["year"] == 2010].iloc[0]
    assert row_2010["anthropogenic_pm25"] == 1282
    assert row_2010["total"] == 1328
    assert row_2010["difference"] == -46


def test_builders_do_not_share_state():
    first = build_datasets()
    first["national_emissions"].loc[0, "roads"] = 0.0
    second = build_datasets()
    assert second["national_emissions"].loc[0, "roads"] == 251
    pd.testing.assert_frame_equal(second["fire_impact"], first["fire_impact"])
