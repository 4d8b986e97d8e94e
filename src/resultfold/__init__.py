"""
resultfold: collapse a batch of fallible outcomes.

Given a list of Ok/Err outcomes, this package offers two reductions:
- fold_fail_fast: every success value, or the first failure
- fold_bisect: successes and failures partitioned, nothing dropped
"""

__version__ = "0.1.0"

from resultfold.core.result import Result, Ok, Err, try_except
from resultfold.core.fold import fold_fail_fast, fold_bisect
from resultfold.core.parse import parse_delimited

__all__ = [
    "__version__",
    "Result",
    "Ok",
    "Err",
    "try_except",
    "fold_fail_fast",
    "fold_bisect",
    "parse_delimited",
]
