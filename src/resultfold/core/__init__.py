"""
Core module for resultfold.

Contains the outcome type, the two folds and the delimited-text parser.
"""

from resultfold.core.result import Result, Ok, Err, try_except
from resultfold.core.fold import fold_fail_fast, fold_bisect
from resultfold.core.parse import parse_delimited

__all__ = [
    "Result",
    "Ok",
    "Err",
    "try_except",
    "fold_fail_fast",
    "fold_bisect",
    "parse_delimited",
]
