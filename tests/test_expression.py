import pytest

from hintlayout.solver import (
    BuilderState,
    ConstraintBuilder,
    ConstraintChainError,
    ConstraintExpr,
    Operator,
    Strength,
)
from hintlayout.solver.expression import format_terms


class _Named:
    def __init__(self, name):
        self.name = name


def _builder():
    committed = []
    return ConstraintBuilder(committed.append), committed


def test_chain_commits_one_expression_and_resets():
    builder, committed = _builder()
    a, b = _Named('a'), _Named('b')

    assert builder.state is BuilderState.EMPTY
    builder.expr([1, a])
    assert builder.state is BuilderState.HAS_LHS
    builder.eq([1, b], [20, 1])
    assert builder.state is BuilderState.HAS_LHS_OP_RHS
    builder.strong()

    assert builder.state is BuilderState.EMPTY
    assert builder.committed == 1
    assert committed == [
        ConstraintExpr(lhs=((1.0, a),), op=Operator.EQ, rhs=((1.0, b), (20.0, 1)), strength=Strength.STRONG)
    ]


def test_builder_is_reusable_for_next_constraint():
    builder, committed = _builder()
    a = _Named('a')

    builder.ct([1, a]).ge0().required()
    builder.ct([1, a]).le([100, 1]).weak()

    assert [expr.op for expr in committed] == [Operator.GE, Operator.LE]
    assert [expr.strength for expr in committed] == [Strength.REQUIRED, Strength.WEAK]


@pytest.mark.parametrize(
    'method, operator',
    [('eq0', Operator.EQ), ('ge0', Operator.GE), ('le0', Operator.LE)],
)
def test_zero_shorthand_uses_constant_zero(method, operator):
    builder, committed = _builder()
    getattr(builder.ct([1, _Named('w')]), method)().medium()

    expr = committed[0]
    assert expr.op is operator
    assert format_terms(expr.rhs) == '0'


def test_strength_given_by_name():
    builder, committed = _builder()
    builder.ct([1, _Named('a')]).eq([5, 1]).at('medium')

    assert committed[0].strength is Strength.MEDIUM


def test_commit_without_rhs_fails_fast():
    builder, committed = _builder()
    builder.ct([1, _Named('a')])

    with pytest.raises(ConstraintChainError) as exc:
        builder.strong()

    assert 'incomplete constraint chain' in str(exc.value)
    assert committed == []


def test_commit_without_lhs_fails_fast():
    builder, _ = _builder()

    with pytest.raises(ConstraintChainError):
        builder.required()


def test_rhs_before_lhs_fails():
    builder, _ = _builder()

    with pytest.raises(ConstraintChainError) as exc:
        builder.eq([1, _Named('a')])

    assert 'call expr(...) before defining rhs' in str(exc.value)


def test_operator_cannot_be_set_twice():
    builder, _ = _builder()
    builder.ct([1, _Named('a')]).eq([1, 1])

    with pytest.raises(ConstraintChainError) as exc:
        builder.ge([2, 1])

    assert "operator already set to '=='" in str(exc.value)


def test_empty_rhs_is_rejected():
    builder, _ = _builder()
    builder.ct([1, _Named('a')])

    with pytest.raises(ConstraintChainError):
        builder.eq()


def test_new_chain_while_pending_is_rejected():
    builder, _ = _builder()
    builder.ct([1, _Named('a')]).eq([1, 1])

    with pytest.raises(ConstraintChainError) as exc:
        builder.ct([1, _Named('b')])

    assert 'was not committed' in str(exc.value)


def test_finish_reports_dangling_chain():
    builder, _ = _builder()
    builder.finish()
    builder.ct([1, _Named('a')])

    with pytest.raises(ConstraintChainError):
        builder.finish()


def test_malformed_term_is_rejected():
    builder, _ = _builder()

    with pytest.raises(ConstraintChainError) as exc:
        builder.ct(_Named('a'))

    assert 'coefficient, operand' in str(exc.value)


def test_commit_ready_expression():
    builder, committed = _builder()
    expr = ConstraintExpr(lhs=((1.0, _Named('a')),), op=Operator.GE, rhs=((3.0, 1),))

    builder.commit(expr)

    assert committed == [expr]
    assert expr.describe() == 'a >= 3 [required]'


def test_format_terms_scales_literals_and_coefficients():
    a = _Named('a.width')

    assert format_terms(((0.5, a), (2.0, 10))) == '0.5*a.width + 20'
    assert format_terms(()) == '0'
