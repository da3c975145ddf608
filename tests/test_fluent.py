import math

from hintlayout import LayoutContext
from hintlayout.fluent import AlignBuilder, ArrangeBuilder, ArrangeReady, EncloseBuilder, EncloseReady


def test_arrange_margin_then_axis():
    ctx = LayoutContext()
    a = ctx.rectangle(width=100, height=50)
    b = ctx.rectangle(width=100, height=50)
    ctx.hints.pin(a, x=0, y=0)

    builder = ctx.arrange(a, b)
    ready = builder.margin(25)
    ready.vertical()
    solution = ctx.solve()

    assert isinstance(builder, ArrangeBuilder)
    assert type(ready) is ArrangeReady
    assert not hasattr(ready, 'margin')
    assert math.isclose(solution[b].y, 75, abs_tol=1e-6)


def test_arrange_without_margin_uses_default_gap():
    ctx = LayoutContext()
    a = ctx.rectangle(width=100, height=50)
    b = ctx.rectangle(width=100, height=50)
    ctx.hints.pin(a, x=0, y=0)

    ctx.arrange(a, b).horizontal()
    solution = ctx.solve()

    assert math.isclose(solution[b].x, 100 + ctx.config.horizontal_gap, abs_tol=1e-6)


def test_align_builder_terminals():
    ctx = LayoutContext()
    a = ctx.rectangle(width=120, height=40)
    b = ctx.rectangle(width=30, height=20)
    ctx.hints.pin(a, x=5, y=5)

    builder = ctx.align(a, b)
    builder.bottom()
    builder.center_x()
    solution = ctx.solve()

    assert isinstance(builder, AlignBuilder)
    assert math.isclose(solution[b].bottom, 45, abs_tol=1e-6)
    assert math.isclose(solution[b].center_x, 65, abs_tol=1e-6)


def test_align_by_symbol_id():
    ctx = LayoutContext()
    a = ctx.rectangle(width=50, height=50)
    b = ctx.rectangle(width=50, height=50)
    ctx.hints.pin(a, x=12, y=0)

    ctx.align(a.id, b.id).left()
    solution = ctx.solve()

    assert math.isclose(solution[b].x, 12, abs_tol=1e-6)


def test_enclose_through_overlays():
    ctx = LayoutContext()
    box = ctx.container(padding_x=0, padding_y=0)
    child = ctx.rectangle(width=50, height=50)
    label = ctx.rectangle(width=200, height=20)

    builder = ctx.enclose(child)
    ready = builder.through(label)
    record = ready.in_(box)
    solution = ctx.solve()

    assert isinstance(builder, EncloseBuilder)
    assert type(ready) is EncloseReady
    assert len(record) == 10
    assert solution[box].width >= 200 - 1e-6


def test_enclose_layout_uses_diagram_root():
    ctx = LayoutContext()
    child = ctx.rectangle(width=500, height=400)

    ctx.enclose(child).layout()
    solution = ctx.solve()

    content = solution.content(ctx.diagram)
    assert content.width >= 500 - 1e-6
    assert content.height >= 400 - 1e-6
    assert math.isclose(solution[ctx.diagram].x, 0, abs_tol=1e-6)
