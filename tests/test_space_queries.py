"""
End-to-end query tests on a fair coin and a fair die.
"""

from __future__ import annotations

import pytest

from probspace import ConditionOnZero, ProbabilitySpace, UnknownOutcome

TOL = 1e-9


def _coin() -> ProbabilitySpace:
    return ProbabilitySpace({"heads": 0.5, "tails": 0.5})


def _die() -> ProbabilitySpace:
    return ProbabilitySpace({k: 1.0 / 6.0 for k in range(1, 7)})


class TestFairCoin:
    def test_probability(self) -> None:
        ps = _coin()
        assert abs(ps.probability({"heads"}) - 0.5) < TOL
        assert ps.probability(set()) == 0.0
        assert abs(ps.probability({"heads", "tails"}) - 1.0) < TOL

    def test_complement(self) -> None:
        ps = _coin()
        assert abs(ps.complement(set()) - 1.0) < TOL
        assert abs(ps.complement({"heads"}) - 0.5) < TOL
        assert abs(ps.complement({"heads", "tails"})) < TOL

    def test_union(self) -> None:
        ps = _coin()
        assert abs(ps.union({"heads"}, {"tails"}) - 1.0) < TOL
        assert abs(ps.union(set(), {"tails"}) - 0.5) < TOL

    def test_intersection(self) -> None:
        ps = _coin()
        assert ps.intersection({"heads"}, {"tails"}) == 0.0
        assert abs(ps.intersection({"tails"}, {"heads", "tails"}) - 0.5) < TOL
        assert ps.intersection({"heads", "tails"}, set()) == 0.0

    def test_strict_mode_rejects_unknown_outcomes(self) -> None:
        ps = _coin()
        wrong = {"heads", "moose"}
        with pytest.raises(UnknownOutcome) as exc:
            ps.probability(wrong)
        assert exc.value.outcomes == ("moose",)
        with pytest.raises(UnknownOutcome):
            ps.complement(wrong)
        with pytest.raises(UnknownOutcome):
            ps.union(set(), wrong)
        with pytest.raises(UnknownOutcome):
            ps.intersection({"heads", "tails"}, wrong)
        with pytest.raises(UnknownOutcome):
            ps.conditional({"heads"}, wrong)
        with pytest.raises(UnknownOutcome):
            ps.mass("moose")

    def test_permissive_mode_ignores_unknown_outcomes(self) -> None:
        ps = _coin()
        ps.set_mode(True)
        assert abs(ps.complement({"heads", "moose"}) - 0.5) < TOL
        assert abs(ps.union(set(), {"heads", "moose"}) - 0.5) < TOL
        assert abs(ps.intersection({"heads", "tails"}, {"heads", "moose"}) - 0.5) < TOL
        assert ps.intersection({"heads", "tails"}, {"moose"}) == 0.0
        assert ps.mass("moose") == 0.0

    def test_events_accept_any_iterable(self) -> None:
        ps = _coin()
        assert abs(ps.probability(["heads", "heads"]) - 0.5) < TOL
        assert abs(ps.probability(("tails",)) - 0.5) < TOL
        assert abs(ps.probability(frozenset({"heads", "tails"})) - 1.0) < TOL

    def test_string_is_not_an_event(self) -> None:
        ps = _coin()
        with pytest.raises(TypeError):
            ps.probability("heads")


class TestFairDie:
    def test_probability(self) -> None:
        ps = _die()
        assert abs(ps.probability({1, 2}) - 1.0 / 3.0) < TOL

    def test_conditional(self) -> None:
        ps = _die()
        omega = set(range(1, 7))
        assert abs(ps.conditional({1, 2}, omega) - 1.0 / 3.0) < TOL
        assert abs(ps.conditional({4, 5}, {4, 5, 6}) - 2.0 / 3.0) < TOL
        assert ps.conditional(set(), {3}) == 0.0
        assert ps.conditional({3}, {4, 5, 6}) == 0.0

    def test_conditional_on_unknown_outcome(self) -> None:
        ps = _die()
        with pytest.raises(UnknownOutcome):
            ps.conditional({7}, {3})
        with pytest.raises(UnknownOutcome):
            ps.conditional({4, 5}, {4, 5, 6, 7})

        ps.set_mode(True)
        assert ps.conditional({7}, {3}) == 0.0
        assert abs(ps.conditional({4, 5}, {4, 5, 6, 7}) - 2.0 / 3.0) < TOL

    def test_conditional_on_empty_event(self) -> None:
        ps = _die()
        with pytest.raises(ConditionOnZero) as exc:
            ps.conditional({3}, set())
        assert exc.value.condition == ()

        ps.set_mode(True)
        with pytest.raises(ConditionOnZero):
            ps.conditional({3}, set())

    def test_conditional_on_only_foreign_outcomes(self) -> None:
        ps = _die()
        ps.set_mode(True)
        with pytest.raises(ConditionOnZero):
            ps.conditional({3}, {7, 8})

    def test_conditional_on_zero_mass_outcome(self) -> None:
        ps = ProbabilitySpace({"a": 1.0, "b": 0.0})
        with pytest.raises(ConditionOnZero):
            ps.conditional({"a"}, {"b"})

    def test_conditional_on_tiny_but_nonzero_event(self) -> None:
        # The denominator is tested exactly against zero.
        ps = ProbabilitySpace({"a": 1.0 - 1e-15, "b": 1e-15})
        assert abs(ps.conditional({"b"}, {"b"}) - 1.0) < TOL
        assert ps.conditional({"a"}, {"b"}) == 0.0

    def test_inclusion_exclusion(self) -> None:
        ps = _die()
        a = {1, 2, 3}
        b = {2, 3, 4}
        assert abs(ps.union(a, b) - 4.0 / 6.0) < TOL
        assert abs(ps.intersection(a, b) - 2.0 / 6.0) < TOL
        assert abs(ps.probability(a) + ps.probability(b) - ps.intersection(a, b) - 4.0 / 6.0) < TOL


class TestModeToggle:
    def test_toggle_is_deterministic(self) -> None:
        ps = _die()
        assert ps.get_mode() is False
        with pytest.raises(UnknownOutcome):
            ps.conditional({4, 5}, {4, 5, 6, 7})

        ps.set_mode(True)
        assert ps.get_mode() is True
        first = ps.conditional({4, 5}, {4, 5, 6, 7})

        ps.set_mode(False)
        with pytest.raises(UnknownOutcome):
            ps.conditional({4, 5}, {4, 5, 6, 7})

        ps.set_mode(True)
        assert ps.conditional({4, 5}, {4, 5, 6, 7}) == first

    def test_toggle_leaves_masses_unchanged(self) -> None:
        ps = _die()
        before = ps.to_dict()
        ps.set_mode(True)
        ps.set_mode(False)
        assert ps.to_dict() == before
        assert abs(ps.probability({1, 2}) - 1.0 / 3.0) < TOL
        assert abs(ps.probability(set(range(1, 7))) - 1.0) < TOL

    def test_property_mirrors_mode(self) -> None:
        ps = _coin()
        ps.ignore_unknown = True
        assert ps.get_mode() is True
        ps.ignore_unknown = False
        assert ps.get_mode() is False

    def test_non_bool_mode_is_rejected(self) -> None:
        ps = _coin()
        for value in ("false", "true", 0, 1, None):
            with pytest.raises(TypeError):
                ps.set_mode(value)  # type: ignore[arg-type]
            assert ps.get_mode() is False
        with pytest.raises(TypeError):
            ps.ignore_unknown = "false"  # type: ignore[assignment]
        with pytest.raises(UnknownOutcome):
            ps.probability({"moose"})
