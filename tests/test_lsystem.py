import pytest

from fractal_errors import DefinitionError, IterationLimitExceeded, OutOfRange
from lsystem import (
    FractalDefinition,
    ViewScaling,
    check_definition,
    expand,
    expansion_length,
)

SCALING = ViewScaling(initial_heading=0.0, length_factor=0.1, origin_x=0.5, origin_y=0.5)


def make_definition(variables, axiom, rules, angle=90.0, max_iterations=5):
    return FractalDefinition(
        name="test",
        variables=variables,
        axiom=axiom,
        rules=rules,
        angle=angle,
        max_iterations=max_iterations,
        scaling=SCALING,
    )


class TestExpansion:
    def test_algae(self) -> None:
        algae = make_definition("AB", "A", {"A": "AB", "B": "A"})
        assert expand(algae, 0) == "A"
        assert expand(algae, 1) == "AB"
        assert expand(algae, 2) == "ABA"
        assert expand(algae, 3) == "ABAAB"

    def test_empty_rule_deletes_symbol(self) -> None:
        d = make_definition("AB", "A", {"A": "AB", "B": ""})
        assert expand(d, 1) == "AB"
        assert expand(d, 2) == "AB"
        assert expand(d, 5) == "AB"

    def test_constants_pass_through(self) -> None:
        d = make_definition("F", "F+F", {"F": "F-F"})
        assert expand(d, 1) == "F-F+F-F"

    def test_rule_ignored_for_non_variable(self) -> None:
        # Y has a rule but is not a variable, so it is copied unchanged
        d = make_definition("X", "XY", {"X": "XX", "Y": "Q"})
        assert expand(d, 2) == "XXXXY"

    def test_method_matches_function(self) -> None:
        d = make_definition("F", "F", {"F": "F[+F]F"})
        assert d.expand(3) == expand(d, 3)

    def test_too_many_iterations(self) -> None:
        d = make_definition("F", "F", {"F": "FF"}, max_iterations=3)
        assert expand(d, 3) == "F" * 8
        with pytest.raises(IterationLimitExceeded) as excinfo:
            expand(d, 4)
        assert excinfo.value.requested == 4
        assert excinfo.value.maximum == 3

    def test_negative_iterations(self) -> None:
        d = make_definition("F", "F", {"F": "FF"})
        with pytest.raises(OutOfRange):
            expand(d, -1)

    def test_variable_without_rule(self) -> None:
        d = make_definition("FX", "FX", {"F": "FF"})
        assert expand(d, 0) == "FX"
        with pytest.raises(DefinitionError):
            expand(d, 1)


class TestExpansionLength:
    def test_matches_expand(self) -> None:
        d = make_definition("XF", "X", {"X": "F-[[X]+X]+F[+FX]-X", "F": "FF"})
        for n in range(6):
            assert expansion_length(d, n) == len(expand(d, n))

    def test_empty_rule(self) -> None:
        d = make_definition("AB", "A", {"A": "AB", "B": ""})
        assert expansion_length(d, 4) == 2

    def test_limit_checked(self) -> None:
        d = make_definition("F", "F", {"F": "FF"}, max_iterations=2)
        with pytest.raises(IterationLimitExceeded):
            expansion_length(d, 3)


class TestDefinition:
    def test_rules_are_read_only(self) -> None:
        d = make_definition("F", "F", {"F": "FF"})
        with pytest.raises(TypeError):
            d.rules["F"] = "F"  # type: ignore[index]

    def test_rules_copied_from_input(self) -> None:
        rules = {"F": "FF"}
        d = make_definition("F", "F", rules)
        rules["F"] = "F+F"
        assert d.rule_for("F") == "FF"

    def test_is_variable(self) -> None:
        d = make_definition("XY", "X", {"X": "Y", "Y": "X"})
        assert d.is_variable("X")
        assert not d.is_variable("+")

    def test_check_definition(self) -> None:
        check_definition(make_definition("F", "F", {"F": "FF"}))
        with pytest.raises(DefinitionError):
            check_definition(make_definition("FX", "F", {"F": "FF"}))
        with pytest.raises(DefinitionError):
            check_definition(make_definition("F", "", {"F": "FF"}))
        with pytest.raises(DefinitionError):
            check_definition(make_definition("F", "F", {"F": "FF"}, max_iterations=0))
