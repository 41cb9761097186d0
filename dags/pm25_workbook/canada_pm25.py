from __future__ import annotations
from datetime import datetime

from airflow.sdk import dag, task
from airflow.decorators import task_group

from pm25_workbook.tools.config import OUTPUT_PATH
from pm25_workbook.tools.utils import (
    build_datasets,
    compare_anthropogenic_totals,
    format_summary,
    run_quality_checks,
    write_workbook,
)


@dag(
    dag_id="pm25_workbook",
    start_date=datetime(2025, 3, 1),
    schedule=None,
    catchup=False,
    tags=["pm25", "excel"],
)
def pm25_workbook():
    @task
    def check_invariants() -> None:
        """Derived columns, non-negative values, regions and year order."""
        run_quality_checks(build_datasets())

    @task
    def check_anthropogenic_totals() -> list[int]:
        """Years where the wildfire sheet disagrees with the APEI total (warning only)."""
        return compare_anthropogenic_totals(build_datasets())["year"].astype(int).tolist()

    @task
    def write() -> str:
        path = write_workbook(build_datasets(), OUTPUT_PATH)
        print(format_summary(path))
        return str(path)

    @task_group(group_id="data_quality")
    def data_quality_checks():
        invariants = check_invariants()
        totals = check_anthropogenic_totals()
        invariants >> totals

    dq = data_quality_checks()
    written = write()
    dq >> written


dag = pm25_workbook()
