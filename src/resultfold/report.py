"""
Tabular reports over outcome lists.

One row per outcome, in input order:

    index  status  value  error
    0      ok      1
    1      err            ValueError: invalid literal for int() with base 10: 'a'
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Sequence

import pandas as pd

from resultfold.core.result import Result, Ok, Err
from resultfold.core.fold import fold_bisect

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["index", "status", "value", "error"]


def outcome_table(results: Sequence[Result[Any, Any]]) -> pd.DataFrame:
    """Build a DataFrame with one row per outcome."""
    rows = []
    for index, result in enumerate(results):
        match result:
            case Ok(value):
                rows.append({"index": index, "status": "ok", "value": value, "error": None})
            case Err(error):
                rows.append({"index": index, "status": "err", "value": None, "error": error})
            case _:
                raise TypeError(
                    f"Element {index} is not an outcome: got {type(result).__name__}"
                )
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def summarize(results: Iterable[Result[Any, Any]]) -> Dict[str, Optional[int]]:
    """
    Count outcomes and locate the first failure.

    Returns:
        Dict with total, ok_count, err_count and first_error_index
        (None when every outcome succeeded)
    """
    results = list(results)
    oks, errs = fold_bisect(results)
    first_error_index = next(
        (i for i, r in enumerate(results) if isinstance(r, Err)),
        None,
    )
    return {
        "total": len(oks) + len(errs),
        "ok_count": len(oks),
        "err_count": len(errs),
        "first_error_index": first_error_index,
    }


def write_report(results: Sequence[Result[Any, Any]], output_path: Path) -> Result[Path, str]:
    """
    Write the outcome table as TSV.

    Args:
        results: Outcomes to report
        output_path: Destination file; parent directories are created

    Returns:
        Ok(output_path) or Err with the write failure
    """
    table = outcome_table(results)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(output_path, sep="\t", index=False)
    except OSError as e:
        return Err(f"Failed to write report: {e}")

    logger.info(f"Wrote {len(table)} rows to {output_path}")
    return Ok(output_path)
