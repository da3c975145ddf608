import logging

import numpy as np

from hintlayout import BoundsFactory, HintTarget, KiwiSolver
from hintlayout.logging_utils import _safe_repr, apply_debug_logging, debug_log_call


def test_layout_objects_are_summarised():
    solver = KiwiSolver()
    box = BoundsFactory(solver).create_bounds('box')

    assert _safe_repr(box.x) == 'var(box#layout.x)'
    assert _safe_repr(box) == 'bounds(box#layout:layout)'
    assert _safe_repr(HintTarget('sym', box)) == 'target(sym)'
    assert _safe_repr([box, box.width]) == '[bounds(box#layout:layout), var(box#layout.width)]'


def test_ndarray_summary():
    assert _safe_repr(np.arange(3.0)) == 'ndarray(shape=(3,), dtype=float64), size=3, values=[0.0, 1.0, 2.0]'
    assert 'min=0, max=9' in _safe_repr(np.arange(10))


def test_long_sequences_are_truncated():
    assert _safe_repr(list(range(10))) == '[0, 1, 2, 3, 4, ...]'


def test_debug_log_call_logs_entry_and_exit(caplog):
    logger = logging.getLogger('hintlayout.tests.logging')

    @debug_log_call(logger)
    def double(value):
        return value * 2

    with caplog.at_level(logging.DEBUG, logger='hintlayout.tests.logging'):
        assert double(21) == 42

    assert 'Entering test_debug_log_call_logs_entry_and_exit.<locals>.double (args=[21])' in caplog.text
    assert '-> 42' in caplog.text


def test_apply_debug_logging_skips_private_and_listed_names():
    class Sample:
        def public(self):
            return 1

        def _private(self):
            return 2

    Sample.__module__ = 'sample_module'
    Sample.public.__module__ = Sample._private.__module__ = 'sample_module'

    def helper():
        return 3

    def skipped():
        return 4

    helper.__module__ = skipped.__module__ = 'sample_module'
    namespace = {'__name__': 'sample_module', 'Sample': Sample, 'helper': helper, 'skipped': skipped}

    apply_debug_logging(namespace, skip={'skipped'})

    assert getattr(namespace['helper'], '_debug_logging_wrapped', False)
    assert not getattr(namespace['skipped'], '_debug_logging_wrapped', False)
    assert getattr(Sample.public, '_debug_logging_wrapped', False)
    assert not getattr(Sample._private, '_debug_logging_wrapped', False)


def test_hint_entry_points_are_traced(caplog):
    solver = KiwiSolver()
    factory = BoundsFactory(solver)
    from hintlayout.hints import Hints

    hints = Hints(solver)
    a, b = factory.create_bounds('a'), factory.create_bounds('b')

    with caplog.at_level(logging.DEBUG, logger='hintlayout.hints'):
        hints.align_left([a, b])

    assert 'Entering Hints.align_left' in caplog.text
    assert 'bounds(a#layout:layout)' in caplog.text


def test_keyword_arguments_and_tuples_are_summarised(caplog):
    solver = KiwiSolver()
    box = BoundsFactory(solver).create_bounds('box')
    from hintlayout.hints import Hints

    hints = Hints(solver)

    with caplog.at_level(logging.DEBUG, logger='hintlayout.hints'):
        hints.pin(box, x=5)

    assert 'x=5' in caplog.text
    assert _safe_repr((1, box.y)) == '(1, var(box#layout.y))'
