from hintlayout import IdGenerator, LayoutConfig, Strength, get_layout_config, set_layout_config


def test_id_generator_counters_are_per_key():
    ids = IdGenerator('ns')

    assert [ids.symbol_id('actor'), ids.symbol_id('actor'), ids.symbol_id('usecase')] == [
        'ns:actor-0',
        'ns:actor-1',
        'ns:usecase-0',
    ]
    assert [ids.constraint_id(), ids.constraint_id('enclose'), ids.constraint_id()] == [
        'constraints/0',
        'constraints/enclose/0',
        'constraints/1',
    ]
    assert ids.scope_id('grid') == 'grid-0'


def test_hint_variable_names():
    ids = IdGenerator()

    assert ids.hint_variable_name() == 'hint:var_0'
    assert ids.hint_variable_name('gap') == 'hint:gap_0'
    assert ids.hint_variable_name('gap', 'outer') == 'hint:gap_outer'


def test_layout_config_defaults_are_copied():
    config = get_layout_config()
    config.horizontal_gap = 1.0

    assert get_layout_config().horizontal_gap == 80.0
    assert get_layout_config().derived_strength is Strength.STRONG


def test_set_layout_config_changes_defaults():
    original = get_layout_config()
    try:
        set_layout_config(LayoutConfig(vertical_gap=12.0))
        assert get_layout_config().vertical_gap == 12.0
    finally:
        set_layout_config(original)
