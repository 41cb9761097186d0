import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

import duckdb
import pandas as pd

from pm25_workbook.tools import sources
from pm25_workbook.tools.config import OUTPUT_PATH, SHEET_DESCRIPTIONS, WILDFIRE_EMISSION_FACTOR
from pm25_workbook.tools.schemas import (
    EMISSION_SOURCES,
    NON_NEGATIVE_COLUMNS,
    REGIONS,
    SCHEMAS,
    SHEET_ORDER,
    column_order,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s", force=True)
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class ConfigurationError(ValueError):
    """Raised when the literal vectors for a sheet cannot form a table."""


class DataQualityError(ValueError):
    """Raised when a built sheet breaks one of its invariants."""


def build_frame(entity: str, columns: Mapping[str, Sequence[Any]]) -> pd.DataFrame:
    """Zip equal-length literal vectors into a dataframe, one row per position."""
    lengths = {name: len(values) for name, values in columns.items()}
    if len(set(lengths.values())) > 1:
        raise ConfigurationError(f"Mismatched vector lengths for {entity}: {lengths}")
    return pd.DataFrame({name: list(values) for name, values in columns.items()})


def conform(entity: str, dataframe: pd.DataFrame) -> pd.DataFrame:
    """Order and cast the columns to the declared schema of the sheet."""
    schema = SCHEMAS[entity]
    missing = [col for col in schema if col not in dataframe.columns]
    if missing:
        raise ConfigurationError(f"Missing columns for {entity}: {missing}")
    return dataframe[column_order(entity)].astype(schema).reset_index(drop=True)


def build_national_emissions(vectors: Mapping[str, Sequence[Any]] | None = None) -> pd.DataFrame:
    """APEI emissions by source category with the row total."""
    if vectors is None:
        vectors = sources.NATIONAL_EMISSIONS
    dataframe = build_frame("national_emissions", vectors)
    dataframe[EMISSION_SOURCES] = dataframe[EMISSION_SOURCES].astype("float64")
    dataframe["total"] = dataframe[EMISSION_SOURCES].sum(axis=1)
    return conform("national_emissions", dataframe)


def build_electric_utilities(vectors: Mapping[str, Sequence[Any]] | None = None) -> pd.DataFrame:
    if vectors is None:
        vectors = sources.ELECTRIC_UTILITIES
    return conform("electric_utilities", build_frame("electric_utilities", vectors))


def build_wildfire_estimates(
    vectors: Mapping[str, Sequence[Any]] | None = None,
    *,
    emission_factor: float = WILDFIRE_EMISSION_FACTOR,
) -> pd.DataFrame:
    """Order-of-magnitude wildfire PM2.5 next to the anthropogenic total.

    ``wildfire_pm25`` is ``area_burned_mha * emission_factor`` rounded half
    to even, the same rule as Python's ``round``.
    """
    if vectors is None:
        vectors = sources.WILDFIRE_ESTIMATES
    dataframe = build_frame("wildfire_estimates", vectors)
    area = dataframe["area_burned_mha"].astype("float64")
    dataframe["wildfire_pm25"] = (area * emission_factor).round()
    return conform("wildfire_estimates", dataframe)


def build_area_burned(vectors: Mapping[str, Sequence[Any]] | None = None) -> pd.DataFrame:
    if vectors is None:
        vectors = sources.AREA_BURNED
    return conform("area_burned", build_frame("area_burned", vectors))


def build_city_pm25(
    blocks: Iterable[tuple[str, str, Sequence[float]]] | None = None,
    years: Sequence[int] | None = None,
) -> pd.DataFrame:
    """Stack one block of yearly values per city into a long table."""
    blocks = list(blocks if blocks is not None else sources.CITY_PM25)
    years = list(years if years is not None else sources.CITY_YEARS)
    frames = []
    for city, region, values in blocks:
        if len(values) != len(years):
            raise ConfigurationError(
                f"Mismatched vector lengths for city_pm25: city={city} values={len(values)} years={len(years)}"
            )
        frames.append(
            build_frame(
                "city_pm25",
                {
                    "year": years,
                    "city": [city] * len(years),
                    "region": [region] * len(years),
                    "pm25": values,
                },
            )
        )
    if not frames:
        raise ConfigurationError("No city blocks for city_pm25")
    return conform("city_pm25", pd.concat(frames, ignore_index=True))


def build_fire_impact(vectors: Mapping[str, Sequence[Any]] | None = None) -> pd.DataFrame:
    if vectors is None:
        vectors = sources.FIRE_IMPACT
    return conform("fire_impact", build_frame("fire_impact", vectors))


def build_datasets() -> dict[str, pd.DataFrame]:
    """Build every sheet from the literal vectors, in workbook order."""
    datasets = {
        "national_emissions": build_national_emissions(),
        "electric_utilities": build_electric_utilities(),
        "wildfire_estimates": build_wildfire_estimates(),
        "area_burned": build_area_burned(),
        "city_pm25": build_city_pm25(),
        "fire_impact": build_fire_impact(),
    }
    for name, dataframe in datasets.items():
        logger.info("Built sheet=%s rows=%s columns=%s", name, len(dataframe), list(dataframe.columns))
    return datasets


def _check_years(name: str, dataframe: pd.DataFrame) -> list[Any]:
    """Return the groups whose years are not unique and increasing."""
    if name == "city_pm25":
        groups = dataframe.groupby("city", sort=False)["year"]
        return [city for city, years in groups if not (years.is_unique and years.is_monotonic_increasing)]
    years = dataframe["year"]
    return [] if years.is_unique and years.is_monotonic_increasing else [name]


def run_quality_checks(
    datasets: Mapping[str, pd.DataFrame],
    *,
    emission_factor: float = WILDFIRE_EMISSION_FACTOR,
) -> None:
    """Validate the built sheets in a single in-memory connection."""
    missing = [name for name in SHEET_ORDER if name not in datasets]
    if missing:
        raise ConfigurationError(f"Missing sheets: {missing}")

    total_expr = " + ".join(EMISSION_SOURCES)
    region_list = ", ".join(f"'{region}'" for region in REGIONS)
    queries = {
        "total": f"SELECT year FROM national_emissions WHERE total != {total_expr}",
        "wildfire_pm25": (
            "SELECT year FROM wildfire_estimates "
            f"WHERE wildfire_pm25 != round_even(area_burned_mha * {float(emission_factor)}, 0)"
        ),
        "region": f"SELECT DISTINCT city, region FROM city_pm25 WHERE region NOT IN ({region_list})",
        "region_per_city": "SELECT city FROM city_pm25 GROUP BY city HAVING COUNT(DISTINCT region) > 1",
    }
    for name in SHEET_ORDER:
        conditions = " OR ".join(f"{col} < 0" for col in NON_NEGATIVE_COLUMNS[name])
        queries[f"non_negative.{name}"] = f"SELECT year FROM {name} WHERE {conditions}"

    with duckdb.connect(database=":memory:") as con:
        for name in SHEET_ORDER:
            # copies give duckdb contiguous column buffers
            con.register(name, datasets[name].copy())
        results = {check: con.sql(query).fetchall() for check, query in queries.items()}

    for name in SHEET_ORDER:
        results[f"years.{name}"] = _check_years(name, datasets[name])

    failures = {check: rows for check, rows in results.items() if rows}
    if failures:
        raise DataQualityError(f"Data quality failures: {failures}")
    logger.info("Data quality checks passed checks=%s", len(results))


def compare_anthropogenic_totals(datasets: Mapping[str, pd.DataFrame]) -> pd.DataFrame:
    """Return the years where the wildfire sheet's anthropogenic figure differs from the APEI total."""
    query = """
    SELECT w.year, w.anthropogenic_pm25, n.total, w.anthropogenic_pm25 - n.total AS difference
    FROM wildfire_estimates AS w
    JOIN national_emissions AS n ON w.year = n.year
    WHERE w.anthropogenic_pm25 != n.total
    ORDER BY w.year
    """
    with duckdb.connect(database=":memory:") as con:
        con.register("wildfire_estimates", datasets["wildfire_estimates"].copy())
        con.register("national_emissions", datasets["national_emissions"].copy())
        mismatches = con.sql(query).df()
    if not mismatches.empty:
        logger.warning(
            "Anthropogenic PM2.5 differs from APEI total years=%s", mismatches["year"].tolist()
        )
    return mismatches


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def write_workbook(datasets: Mapping[str, pd.DataFrame], output_path: Path) -> Path:
    """Write one sheet per dataset, replacing the output file atomically."""
    missing = [name for name in SHEET_ORDER if name not in datasets]
    if missing:
        raise ConfigurationError(f"Missing sheets: {missing}")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{output_path.stem}-", suffix=".xlsx", dir=output_path.parent)
    os.close(fd)
    tmp_path = Path(tmp_name)
    try:
        with pd.ExcelWriter(tmp_path, engine="openpyxl") as writer:
            for name in SHEET_ORDER:
                datasets[name].to_excel(writer, sheet_name=name, index=False)
        os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, output_path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise

    logger.info("Wrote workbook path=%s sheets=%s", output_path, SHEET_ORDER)
    return output_path


def read_workbook(path: Path) -> dict[str, pd.DataFrame]:
    """Reload every sheet of a previously written workbook."""
    logger.info("Loading workbook from %s", path)
    return pd.read_excel(path, sheet_name=None, engine="openpyxl")


def run_pipeline(output_path: Path = OUTPUT_PATH) -> Path:
    """Build, validate and persist the workbook."""
    datasets = build_datasets()
    run_quality_checks(datasets)
    compare_anthropogenic_totals(datasets)
    return write_workbook(datasets, Path(output_path))


def format_summary(output_path: Path) -> str:
    lines = [f"Wrote {output_path} with {len(SHEET_ORDER)} sheets:"]
    for index, name in enumerate(SHEET_ORDER, start=1):
        lines.append(f"  {index}. {name:<20}- {SHEET_DESCRIPTIONS[name]}")
    return "\n".join(lines)
