"""Multiply-by-zero folding and the fixpoint driver."""

import pytest

from ast_nodes import Add, Bool, Multiply, Number, Or
from shunting_yard import parse
from simplifier import Simplifier, simplify, simplify_fix

ONE = Number(1)
ZERO = Number(0)


class TestSimplify:
    @pytest.mark.parametrize("leaf", [ZERO, ONE, Number(7), Bool(True), Bool(False)])
    def test_leaves_unchanged(self, leaf) -> None:
        assert simplify(leaf) == leaf

    def test_zero_on_the_left(self) -> None:
        assert simplify(Multiply(ZERO, Add(ONE, ONE))) == ZERO

    def test_zero_on_the_right(self) -> None:
        assert simplify(Multiply(Add(ONE, ONE), ZERO)) == ZERO

    def test_ill_typed_operand_is_dropped(self) -> None:
        assert simplify(Multiply(ZERO, Bool(False))) == ZERO
        assert simplify(Multiply(ZERO, Multiply(ONE, Bool(False)))) == ZERO

    def test_false_is_not_zero(self) -> None:
        ast = Multiply(Bool(False), ONE)
        assert simplify(ast) == ast

    def test_rewrites_inside_add_and_or(self) -> None:
        assert simplify(Add(ONE, Multiply(ONE, ZERO))) == Add(ONE, ZERO)
        assert simplify(Or(Multiply(ZERO, ONE), Bool(True))) == Or(ZERO, Bool(True))

    def test_single_pass_only(self) -> None:
        ast = Multiply(Multiply(ONE, ZERO), ONE)
        assert simplify(ast) == Multiply(ZERO, ONE)

    def test_input_is_not_mutated(self) -> None:
        ast = Add(Multiply(ZERO, ONE), ONE)
        simplify(ast)
        assert ast == Add(Multiply(ZERO, ONE), ONE)

    def test_unknown_node(self) -> None:
        with pytest.raises(TypeError):
            simplify("1")


class TestSimplifyFix:
    def test_multiply_by_zero(self) -> None:
        assert simplify_fix(Multiply(ZERO, Add(ONE, ONE))) == ZERO

    def test_nothing_to_rewrite(self) -> None:
        ast = Multiply(ONE, Add(ONE, ONE))
        assert simplify_fix(ast) == ast

    def test_nested_zero_propagates_outward(self) -> None:
        ast = Multiply(Multiply(Multiply(ONE, ZERO), ONE), Add(ONE, ONE))
        assert simplify_fix(ast) == ZERO

    def test_pass_count(self) -> None:
        simplifier = Simplifier()
        simplifier.simplify_fix(Multiply(Multiply(ONE, ZERO), ONE))
        # two rewriting passes plus the one that confirms the fixpoint
        assert simplifier.passes == 3
        simplifier.simplify_fix(ONE)
        assert simplifier.passes == 1

    @pytest.mark.parametrize(
        "source",
        [
            "1",
            "0 * (1 + 1)",
            "((1+1)*0+1*(1+0))",
            "1 * 1 * 1 * 0",
            "(0 * 1) + true * false || true",
            "(1 * (1 * (1 * 0))) + 1",
            "true || 0 * false",
        ],
    )
    def test_idempotent(self, source: str) -> None:
        once = simplify_fix(parse(source))
        assert simplify_fix(once) == once
        assert simplify(once) == once


class TestDeepTrees:
    def test_long_flat_sum_is_a_fixpoint(self) -> None:
        ast = parse(" + ".join(["1"] * 2000))
        assert simplify_fix(ast) == ast

    def test_long_product_ending_in_zero(self) -> None:
        assert simplify_fix(parse(" * ".join(["1"] * 1999 + ["0"]))) == ZERO

    def test_zero_buried_under_a_long_sum(self) -> None:
        ast = parse(" + ".join(["1"] * 2000) + " + 0 * true")
        assert simplify_fix(ast) == parse(" + ".join(["1"] * 2000) + " + 0")
