"""
Delimited text to outcome list.

Each field is converted on its own, so one bad field produces one Err
without affecting its neighbours.
"""

import logging
from typing import Callable, List

from resultfold.core.result import Result, T, try_except

logger = logging.getLogger(__name__)


def parse_delimited(
    text: str,
    delimiter: str = ",",
    converter: Callable[[str], T] = int,
    strip: bool = True,
) -> List[Result[T, str]]:
    """
    Split text on a delimiter and convert every field.

    Args:
        text: Input such as "1,2,3"
        delimiter: Field separator (must be non-empty)
        converter: Called with each field; exceptions become Err
        strip: Strip surrounding whitespace from fields before converting

    Returns:
        One outcome per field, in field order
    """
    if not delimiter:
        raise ValueError("Delimiter must be a non-empty string")

    fields = text.split(delimiter)
    if strip:
        fields = [f.strip() for f in fields]

    outcomes = [try_except(converter, f) for f in fields]
    logger.debug(f"Parsed {len(fields)} fields using delimiter {delimiter!r}")
    return outcomes
