from __future__ import annotations

import itertools

import pytest

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.evaluator.stepwise_evaluator import StepwiseEvaluator
from adapters.parser.precedence_parser import PrecedenceClimbingParser
from adapters.tokenizer.gated_tokenizer import GatedTokenizer
from contracts import ArithError, NumberNode
from ports.evaluator import Evaluator, StepEvaluator


def _ast(text: str):
    return PrecedenceClimbingParser().parse(GatedTokenizer().tokenize(text))


def test_adapters_satisfy_ports():
    assert isinstance(StepwiseEvaluator(), StepEvaluator)
    assert isinstance(ASTEvaluator(), Evaluator)


def test_steps_are_post_order():
    steps = list(StepwiseEvaluator().steps(_ast("6 + 5 * 2")))

    assert steps == [6, 5, 2, 10, 16]


def test_unary_results_are_steps_too():
    steps = list(StepwiseEvaluator().steps(_ast("-(1 - 2)")))

    assert steps == [1, 2, -1, 1]


def test_single_literal_yields_once():
    assert list(StepwiseEvaluator().steps(NumberNode(value=42))) == [42]


@pytest.mark.parametrize(
    "text",
    [
        "6 + 5 - 4 * +3 / -2",
        "6 - 2 - 1",
        "7 / 3 * 3",
        "-7 / 3",
        "-----1",
        "6 + 5 - 4 * (  (  -3 / -2  ) + -1  )",
        "-+(+-+2)",
        "9007199254740991 - 1 + 1",
        "-9007199254740991 + 1 - 1",
    ],
)
def test_stepwise_last_value_matches_direct_evaluation(text):
    ast = _ast(text)

    steps = list(StepwiseEvaluator().steps(ast))

    assert steps[-1] == ASTEvaluator().evaluate(ast)
    assert StepwiseEvaluator().evaluate(ast) == steps[-1]


def test_steps_are_lazy_and_can_stop_early():
    # The division by zero is never reached when only two values are pulled.
    ast = _ast("1 / 0 + 5")

    first_two = list(itertools.islice(StepwiseEvaluator().steps(ast), 2))

    assert first_two == [1, 0]


def test_creating_the_sequence_computes_nothing():
    StepwiseEvaluator().steps(_ast("1 / 0"))


def test_division_by_zero_fires_after_both_operands():
    it = StepwiseEvaluator().steps(_ast("1 + 2 / 0"))

    assert [next(it), next(it), next(it)] == [1, 2, 0]
    with pytest.raises(ArithError):
        next(it)


def test_overflow_fires_at_the_offending_node():
    it = StepwiseEvaluator().steps(_ast("9007199254740991 + 1 - 1"))

    assert [next(it), next(it)] == [9007199254740991, 1]
    with pytest.raises(ArithError):
        next(it)


def test_sequence_is_not_restartable():
    it = StepwiseEvaluator().steps(_ast("1 + 2"))

    assert list(it) == [1, 2, 3]
    assert list(it) == []


def test_unknown_node_is_arith_error():
    with pytest.raises(ArithError):
        list(StepwiseEvaluator().steps(object()))  # type: ignore[arg-type]


def test_long_flat_chain_walks_without_recursion():
    ast = _ast(" + ".join(["1"] * 3000))

    steps = list(StepwiseEvaluator().steps(ast))

    assert len(steps) == 5999
    assert steps[-1] == 3000
    assert StepwiseEvaluator().evaluate(ast) == 3000
    assert ASTEvaluator().evaluate(ast) == 3000


def test_long_chain_stays_lazy():
    # The zero divisor sits at the far end of the chain.
    ast = _ast(" + ".join(["1"] * 3000) + " / 0")

    assert list(itertools.islice(StepwiseEvaluator().steps(ast), 4)) == [1, 1, 2, 1]
    with pytest.raises(ArithError):
        ASTEvaluator().evaluate(ast)


def test_deep_unary_stack_yields_every_sign():
    ast = _ast("-" * 300 + "5")

    steps = list(StepwiseEvaluator().steps(ast))

    assert len(steps) == 301
    assert steps[0] == 5
    assert steps[-1] == 5
    assert ASTEvaluator().evaluate(ast) == 5
