import math

import pytest

from hintlayout import LayoutContext


def _figure_symbols(ctx):
    a = ctx.rectangle(width=100, height=50)
    b = ctx.rectangle(width=100, height=50)
    c = ctx.rectangle(width=60, height=30)
    return a, b, c


def test_rows_are_arranged_and_stacked():
    ctx = LayoutContext()
    a, b, c = _figure_symbols(ctx)

    ctx.figure([[a, b], [c]]).gap(30).column_gap(10).layout()
    solution = ctx.solve()

    assert math.isclose(solution[b].x, solution[a].x + 100 + 10, abs_tol=1e-6)
    assert math.isclose(solution[c].y, solution[a].y + 50 + 30, abs_tol=1e-6)
    content = solution.content(ctx.diagram)
    for symbol in (a, b, c):
        assert solution[symbol].x >= content.x - 1e-6
        assert solution[symbol].right <= content.right + 1e-6
        assert solution[symbol].bottom <= content.bottom + 1e-6


def test_default_gaps_come_from_config():
    ctx = LayoutContext()
    a, b, c = _figure_symbols(ctx)

    ctx.figure([[a, b], [c]]).layout()
    solution = ctx.solve()

    assert math.isclose(solution[b].x - solution[a].right, ctx.config.horizontal_gap, abs_tol=1e-6)
    assert math.isclose(solution[c].y - solution[a].bottom, ctx.config.vertical_gap, abs_tol=1e-6)


@pytest.mark.parametrize(
    'align, read',
    [('center', lambda v: v.center_x), ('right', lambda v: v.right), ('left', lambda v: v.x)],
)
def test_single_child_rows_align_with_first_child(align, read):
    ctx = LayoutContext()
    a, b, c = _figure_symbols(ctx)

    ctx.figure([[a], [b], [c]]).align(align).layout()
    solution = ctx.solve()

    assert math.isclose(read(solution[b]), read(solution[a]), abs_tol=1e-6)
    assert math.isclose(read(solution[c]), read(solution[a]), abs_tol=1e-6)


@pytest.mark.parametrize('align, scope', [('left', 'alignLeft'), ('center', 'alignCenterX'), ('right', 'alignRight')])
def test_alignment_covers_every_child(align, scope):
    ctx = LayoutContext()
    a, b, c = _figure_symbols(ctx)
    d = ctx.rectangle(width=40, height=30)

    ctx.figure([[a], [b], [c, d]]).align(align).layout()

    records = [record for record in ctx.hints.list() if record.id.startswith(f'constraints/{scope}/')]
    assert len(records) == 1
    assert len(records[0]) == 3
    constrained = {
        term.variable().name()
        for raw in records[0].raw_constraints
        for term in raw.expression().terms()
    }
    assert d.bounds.x.name in constrained
    assert a.bounds.x.name in constrained


def test_unknown_alignment():
    ctx = LayoutContext()

    with pytest.raises(ValueError):
        ctx.figure([[ctx.rectangle()]]).align('justify')


def test_empty_rows_are_skipped():
    ctx = LayoutContext()
    a, b, _ = _figure_symbols(ctx)

    figure = ctx.figure([[], [a], [], [b]]).gap(5).layout()
    solution = ctx.solve()

    assert len(figure.rows) == 2
    assert math.isclose(solution[b].y, solution[a].bottom + 5, abs_tol=1e-6)


def test_figure_in_container_nests_children():
    ctx = LayoutContext()
    box = ctx.container()
    a, b, c = _figure_symbols(ctx)

    ctx.figure([[a], [b, c]]).in_(box)
    ctx.enclose(box).layout()
    solution = ctx.solve()

    inner = solution.content(box)
    for symbol in (a, b, c):
        assert solution[symbol].z >= inner.z + 1 - 1e-6
        assert solution[symbol].x >= inner.x - 1e-6
    assert solution[box].z >= solution.content(ctx.diagram).z + 1 - 1e-6


def test_figure_is_laid_out_once():
    ctx = LayoutContext()
    figure = ctx.figure([[ctx.rectangle()]]).layout()

    with pytest.raises(RuntimeError):
        figure.layout()
