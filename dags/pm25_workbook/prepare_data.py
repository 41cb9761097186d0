"""Build data/canada_pm25_data.xlsx, one sheet per dataset.

Run once before rendering the dashboard, which reads the workbook:

    python -m pm25_workbook.prepare_data
"""

import sys

from pm25_workbook.tools.config import OUTPUT_PATH
from pm25_workbook.tools.utils import (
    ConfigurationError,
    DataQualityError,
    format_summary,
    logger,
    run_pipeline,
)


def main() -> int:
    try:
        path = run_pipeline(OUTPUT_PATH)
    except (ConfigurationError, DataQualityError, OSError):
        logger.exception("Failed to write workbook path=%s", OUTPUT_PATH)
        return 1
    print(format_summary(path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
