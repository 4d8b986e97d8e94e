"""
Reductions over a sequence of outcomes.

Two policies are offered for a batch of independent outcomes:

- fold_fail_fast: all success values, or the first failure
- fold_bisect: every success value and every failure value, side by side

Neither fold copies or mutates anything. The values in the returned
containers are the same objects held by the input outcomes.
"""

import logging
from typing import Iterable, List, Tuple

from resultfold.core.result import Result, Ok, Err, T, E

logger = logging.getLogger(__name__)


def _reject(item: object, index: int) -> TypeError:
    return TypeError(
        f"Element {index} is not an outcome: expected Ok or Err, got {type(item).__name__}"
    )


def fold_fail_fast(results: Iterable[Result[T, E]]) -> Result[List[T], E]:
    """
    Collapse outcomes into Ok(list of values), stopping at the first Err.

    The scan runs left to right. When an Err is met it is returned as is
    and the iterable is not advanced any further, so lazily produced
    outcomes after it are never evaluated.

    Args:
        results: Ordered outcomes, possibly empty

    Returns:
        Ok with the success values in input order, or the leftmost Err
    """
    values: List[T] = []
    for index, result in enumerate(results):
        match result:
            case Ok(value):
                values.append(value)
            case Err():
                logger.debug(f"Fail-fast fold stopped at element {index}")
                return result
            case _:
                raise _reject(result, index)

    logger.debug(f"Fail-fast fold collected {len(values)} values")
    return Ok(values)


def fold_bisect(results: Iterable[Result[T, E]]) -> Tuple[List[T], List[E]]:
    """
    Partition outcomes into (success values, failure values).

    Every element is visited exactly once and lands in exactly one of the
    two lists. Relative order is kept within each list.
    """
    oks: List[T] = []
    errs: List[E] = []
    for index, result in enumerate(results):
        match result:
            case Ok(value):
                oks.append(value)
            case Err(error):
                errs.append(error)
            case _:
                raise _reject(result, index)

    logger.debug(f"Bisect fold: {len(oks)} ok, {len(errs)} err")
    return oks, errs
