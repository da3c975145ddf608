import math

import pytest

from hintlayout import AxisMismatchError, GuideFollowError, LayoutContext


def test_x_guide_aligns_left_edges_and_arranges_a_column():
    ctx = LayoutContext()
    a = ctx.rectangle(width=100, height=50)
    b = ctx.rectangle(width=60, height=40)
    ctx.hints.pin(a, y=0)

    guide = ctx.guide_x(value=100)
    guide.align_left(a, b).arrange(gap=10)
    solution = ctx.solve()

    assert math.isclose(guide.x.value(), 100, abs_tol=1e-6)
    assert math.isclose(solution[a].x, 100, abs_tol=1e-6)
    assert math.isclose(solution[b].x, 100, abs_tol=1e-6)
    assert math.isclose(solution[b].y, solution[a].y + 50 + 10, abs_tol=1e-6)


def test_y_guide_arranges_its_members_horizontally():
    ctx = LayoutContext()
    a = ctx.rectangle(width=100, height=50)
    b = ctx.rectangle(width=100, height=80)
    ctx.hints.pin(a, x=0)

    guide = ctx.guide_y(value=40)
    guide.align_bottom(a, b).arrange(gap=15)
    solution = ctx.solve()

    assert math.isclose(solution[a].bottom, 40, abs_tol=1e-6)
    assert math.isclose(solution[b].bottom, 40, abs_tol=1e-6)
    assert math.isclose(solution[b].x, 115, abs_tol=1e-6)


def test_guide_follows_a_symbol_edge():
    ctx = LayoutContext()
    leader = ctx.rectangle(width=80, height=30)
    follower = ctx.rectangle()
    ctx.hints.pin(leader, x=30, y=0)

    ctx.guide_x().follow_right(leader).align_right(follower)
    solution = ctx.solve()

    assert math.isclose(solution[follower].right, 110, abs_tol=1e-6)


def test_align_center_works_on_both_axes():
    ctx = LayoutContext()
    a = ctx.rectangle(width=100, height=50)
    b = ctx.rectangle(width=40, height=10)

    ctx.guide_x(value=200).align_center(a, b)
    ctx.guide_y(value=300).align_center(a, b)
    solution = ctx.solve()

    for symbol in (a, b):
        assert math.isclose(solution[symbol].center_x, 200, abs_tol=1e-6)
        assert math.isclose(solution[symbol].center_y, 300, abs_tol=1e-6)


def test_second_follow_raises_before_registering_anything():
    ctx = LayoutContext()
    a = ctx.rectangle()
    b = ctx.rectangle()
    guide = ctx.guide_y()
    guide.follow_top(a)
    records = len(ctx.hints.list())
    constraints = ctx.solver.constraint_count

    with pytest.raises(GuideFollowError) as exc:
        guide.follow_center(b)

    assert 'GuideY.follow_center()' in str(exc.value)
    assert 'already follows another symbol' in str(exc.value)
    assert len(ctx.hints.list()) == records
    assert ctx.solver.constraint_count == constraints


@pytest.mark.parametrize('method', ['align_left', 'align_right', 'follow_left', 'follow_right'])
def test_x_methods_on_y_guide_raise(method):
    ctx = LayoutContext()
    a = ctx.rectangle()
    guide = ctx.guide_y()

    with pytest.raises(AxisMismatchError) as exc:
        getattr(guide, method)(a)

    assert f'GuideY.{method}()' in str(exc.value)
    assert 'only available for GuideX' in str(exc.value)


@pytest.mark.parametrize('method', ['align_top', 'align_bottom', 'follow_top', 'follow_bottom'])
def test_y_methods_on_x_guide_raise(method):
    ctx = LayoutContext()
    guide = ctx.guide_x()

    with pytest.raises(AxisMismatchError):
        getattr(guide, method)(ctx.rectangle())


def test_axis_accessors():
    ctx = LayoutContext()
    guide = ctx.guide_x(name='spine')

    assert guide.x.name == 'hint:guide_x_spine'
    with pytest.raises(AxisMismatchError):
        guide.y


def test_arrange_without_aligned_targets_is_a_noop():
    ctx = LayoutContext()
    guide = ctx.guide_x()
    before = len(ctx.hints.list())

    assert guide.arrange() is guide
    assert len(ctx.hints.list()) == before


def test_aligned_targets_are_collected_once():
    ctx = LayoutContext()
    a = ctx.rectangle()
    guide = ctx.guide_x()

    guide.align_left(a).align_center(a)

    assert [target.bound_id for target in guide.aligned] == [a.id]
