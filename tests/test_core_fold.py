"""
Tests for resultfold.core.fold module.
"""

import pytest
from resultfold.core.result import Ok, Err
from resultfold.core.fold import fold_fail_fast, fold_bisect
from resultfold.core.parse import parse_delimited


class CountingOutcomes:
    """Iterable that records how many outcomes were pulled."""

    def __init__(self, outcomes):
        self.outcomes = outcomes
        self.pulled = 0

    def __iter__(self):
        for outcome in self.outcomes:
            self.pulled += 1
            yield outcome


class TestFoldFailFast:
    """Tests for fold_fail_fast."""

    def test_all_ok(self):
        """Test that all successes are collected in order."""
        assert fold_fail_fast([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_one_err(self):
        """Test that a failure is returned instead of the values."""
        assert fold_fail_fast([Ok(1), Err("oops"), Ok(3)]) == Err("oops")

    def test_leftmost_err_wins(self):
        """Test that the first failure by index is returned."""
        first = Err("first")
        result = fold_fail_fast([Ok(1), first, Err("second"), Ok(4)])
        assert result is first

    def test_empty_list(self):
        """Test that no input is a vacuous success."""
        assert fold_fail_fast([]) == Ok([])

    def test_stops_at_first_err(self):
        """Test that nothing past the first failure is pulled."""
        outcomes = CountingOutcomes([Ok(1), Err("stop"), Ok(3), Err("late")])
        assert fold_fail_fast(outcomes) == Err("stop")
        assert outcomes.pulled == 2

    def test_lazy_tail_never_evaluated(self):
        """Test that a generator's side effects after the failure never run."""
        evaluated = []

        def produce():
            for text in ["1", "x", "3"]:
                evaluated.append(text)
                yield Ok(int(text)) if text.isdigit() else Err(text)

        assert fold_fail_fast(produce()) == Err("x")
        assert evaluated == ["1", "x"]

    def test_values_are_not_copied(self):
        """Test that the returned values are the input's own objects."""
        payload = {"id": 1}
        result = fold_fail_fast([Ok(payload)])
        assert result.unwrap()[0] is payload

    def test_input_not_mutated(self):
        """Test that folding leaves the input untouched and is repeatable."""
        outcomes = [Ok(1), Err("oops"), Ok(3)]
        snapshot = list(outcomes)
        assert fold_fail_fast(outcomes) == fold_fail_fast(outcomes)
        assert outcomes == snapshot

    def test_rejects_non_outcome(self):
        """Test that a bare value is reported as a TypeError."""
        with pytest.raises(TypeError, match="Element 1"):
            fold_fail_fast([Ok(1), 2])


class TestFoldBisect:
    """Tests for fold_bisect."""

    def test_all_ok(self):
        """Test all successes with an empty failure list."""
        assert fold_bisect([Ok(1), Ok(2), Ok(3)]) == ([1, 2, 3], [])

    def test_mixed(self):
        """Test successes and failures are split in order."""
        assert fold_bisect([Ok(1), Err("oops"), Ok(3)]) == ([1, 3], ["oops"])

    def test_all_err(self):
        """Test all failures with an empty success list."""
        assert fold_bisect([Err("a"), Err("b")]) == ([], ["a", "b"])

    def test_empty_list(self):
        """Test empty input gives two empty lists."""
        assert fold_bisect([]) == ([], [])

    def test_visits_every_element(self):
        """Test that no element is skipped even after failures."""
        outcomes = CountingOutcomes([Err("a"), Ok(1), Err("b"), Ok(2)])
        oks, errs = fold_bisect(outcomes)
        assert outcomes.pulled == 4
        assert oks == [1, 2]
        assert errs == ["a", "b"]

    def test_partition_matches_tags(self):
        """Test each element lands on the side matching its tag."""
        outcomes = [Ok(0), Err("e1"), Err("e2"), Ok(3), Ok(4), Err("e5")]
        oks, errs = fold_bisect(outcomes)

        assert oks == [r.value for r in outcomes if r.is_ok()]
        assert errs == [r.error for r in outcomes if r.is_err()]
        assert len(oks) + len(errs) == len(outcomes)

    def test_values_are_not_copied(self):
        """Test that both sides hold the input's own objects."""
        value, error = [1], ValueError("bad")
        oks, errs = fold_bisect([Ok(value), Err(error)])
        assert oks[0] is value
        assert errs[0] is error

    def test_repeatable(self):
        """Test that folding twice gives equal results."""
        outcomes = [Ok(1), Err("oops"), Ok(3)]
        assert fold_bisect(outcomes) == fold_bisect(outcomes)

    def test_rejects_non_outcome(self):
        """Test that a bare value is reported as a TypeError."""
        with pytest.raises(TypeError):
            fold_bisect([None])


class TestFoldParsedInput:
    """Folding outcomes produced by parsing delimited integers."""

    def test_valid_input(self):
        """Test that '1,2,3' folds to all values."""
        outcomes = parse_delimited("1,2,3")
        assert fold_fail_fast(outcomes) == Ok([1, 2, 3])
        assert fold_bisect(outcomes) == ([1, 2, 3], [])

    def test_invalid_input(self):
        """Test that '1,2,a' fails fast and bisects into two values and one failure."""
        outcomes = parse_delimited("1,2,a")
        assert fold_fail_fast(outcomes).is_err()

        oks, errs = fold_bisect(outcomes)
        assert oks == [1, 2]
        assert len(errs) == 1
