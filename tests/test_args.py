import pytest

from relaycc import WindowArgs, window_args, PagerSettings, PARAMETER_SLOTS
from relaycc import exc


def test_window_args():
    """ Test: WindowArgs: builders, slots, params """
    args = WindowArgs()
    assert args.slots() == (None, None, None, None)
    assert args.params() == {'first': None, 'after': None, 'last': None, 'before': None}

    # Builders return a new object
    forward = args.first(10).after(123)
    assert forward is not args
    assert args.slots() == (None, None, None, None)
    assert forward.slots() == (10, 123, None, None)

    backward = args.last(5).before(456)
    assert backward.slots() == (None, None, 5, 456)

    bounded = forward.last(5)
    assert bounded.slots() == (10, 123, 5, None)

    # Extra params
    args = window_args(first=10, country='fr').with_extra(min_score=3)
    assert args.params() == {'first': 10, 'after': None, 'last': None, 'before': None, 'country': 'fr', 'min_score': 3}

    # Slot order
    assert PARAMETER_SLOTS == ('first', 'after', 'last', 'before')
    assert tuple(window_args(first=1, after=2, last=3, before=4).params()) == PARAMETER_SLOTS


def test_window_args_immutable():
    args = window_args(first=10, country='fr')

    # Can't change attributes
    with pytest.raises(AttributeError):
        args.forward_count = 20  # type: ignore[misc]

    # Can't change extras
    with pytest.raises(TypeError):
        args.extra['country'] = 'de'  # type: ignore[index]

    # Hashable & comparable
    assert args == window_args(first=10, country='fr')
    assert hash(args) == hash(window_args(first=10, country='fr'))
    assert args != window_args(first=10, country='de')


@pytest.mark.parametrize(('kwargs', 'expected_error'), [
    (dict(first=-1), '"first" must not be negative'),
    (dict(last=-1), '"last" must not be negative'),
    (dict(first='10'), '"first" must be an integer'),
    (dict(last=1.5), '"last" must be an integer'),
    (dict(first=True), '"first" must be an integer'),
    # Extras must not overwrite slots
    (dict(extra=dict(first=1)), 'conflict with pagination parameters'),
])
def test_window_args_errors(kwargs: dict, expected_error: str):
    extra = kwargs.pop('extra', {})

    with pytest.raises(exc.ArgumentError) as e:
        WindowArgs(
            forward_count=kwargs.get('first'),
            backward_count=kwargs.get('last'),
            extra=extra,
        )

    assert expected_error in str(e.value)
    assert str(e.value).startswith('Pagination argument error: ')


def test_window_args_zero():
    """ Test: zero is a valid count """
    args = window_args(first=0, last=0)
    assert args.slots() == (0, None, 0, None)


@pytest.mark.parametrize(('settings', 'args', 'expected_slots'), [
    # No settings: nothing changes
    (PagerSettings(), window_args(), (None, None, None, None)),
    (PagerSettings(), window_args(first=1000), (1000, None, None, None)),
    # Default limit: only when neither count is given
    (PagerSettings(default_limit=10), window_args(), (10, None, None, None)),
    (PagerSettings(default_limit=10), window_args(after=5), (10, 5, None, None)),
    (PagerSettings(default_limit=10), window_args(first=3), (3, None, None, None)),
    (PagerSettings(default_limit=10), window_args(last=3), (None, None, 3, None)),
    (PagerSettings(default_limit=10), window_args(first=0), (0, None, None, None)),
    # Max limit: caps both counts
    (PagerSettings(max_limit=50), window_args(first=100), (50, None, None, None)),
    (PagerSettings(max_limit=50), window_args(last=100, before=7), (None, None, 50, 7)),
    (PagerSettings(max_limit=50), window_args(first=100, last=70), (50, None, 50, None)),
    (PagerSettings(max_limit=50), window_args(first=20), (20, None, None, None)),
    # Both
    (PagerSettings(default_limit=100, max_limit=50), window_args(), (50, None, None, None)),
])
def test_pager_settings(settings: PagerSettings, args: WindowArgs, expected_slots: tuple):
    assert settings.get_final_args(args).slots() == expected_slots
