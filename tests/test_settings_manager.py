"""Tests for SettingsManager."""
import pytest

from core.constants.timing import MAX_REPAINT_INTERVAL_MS, MIN_REPAINT_INTERVAL_MS
from core.settings import DEFAULT_SETTINGS


def test_defaults_present(settings_manager):
    for key in DEFAULT_SETTINGS:
        assert settings_manager.contains(key)


def test_typed_getters(settings_manager):
    assert settings_manager.get_float('showcase.out_duration') == pytest.approx(0.4)
    assert settings_manager.get_bool('showcase.in_copy_from_out') is True
    assert settings_manager.get_int('display.window_width') > 0


def test_bool_from_strings(settings_manager):
    settings_manager.set('showcase.in_copy_from_out', 'false')
    assert settings_manager.get_bool('showcase.in_copy_from_out') is False
    assert settings_manager.to_bool('on') is True
    assert settings_manager.to_bool('maybe', default=True) is True


def test_float_falls_back_on_garbage(settings_manager):
    settings_manager.set('showcase.in_duration', 'slow')
    assert settings_manager.get_float('showcase.in_duration', 0.4) == pytest.approx(0.4)


def test_repaint_interval_clamped(settings_manager):
    settings_manager.set('display.repaint_interval_ms', 0)
    assert settings_manager.get_repaint_interval_ms() == MIN_REPAINT_INTERVAL_MS
    settings_manager.set('display.repaint_interval_ms', 10_000)
    assert settings_manager.get_repaint_interval_ms() == MAX_REPAINT_INTERVAL_MS


def test_change_handler_and_signal(settings_manager):
    handled = []
    signalled = []
    settings_manager.on_changed('app.demo', lambda new, old: handled.append((new, old)))
    settings_manager.settings_changed.connect(lambda key, value: signalled.append((key, value)))

    settings_manager.set('app.demo', 'menu')

    assert handled == [('menu', 'showcase')]
    assert ('app.demo', 'menu') in signalled


def test_handler_errors_are_logged_not_raised(settings_manager):
    def broken(new, old):
        raise RuntimeError("boom")

    settings_manager.on_changed('app.demo', broken)
    settings_manager.set('app.demo', 'variable')
    assert settings_manager.get('app.demo') == 'variable'


def test_reset_to_defaults(settings_manager):
    settings_manager.set('showcase.out_effect', 'fade')
    settings_manager.reset_to_defaults()
    assert settings_manager.get('showcase.out_effect') == DEFAULT_SETTINGS['showcase.out_effect']


def test_remove(settings_manager):
    settings_manager.set('custom.key', 1)
    settings_manager.remove('custom.key')
    assert not settings_manager.contains('custom.key')


def test_all_keys_include_defaults(settings_manager):
    keys = settings_manager.get_all_keys()
    assert 'app.demo' in keys
    assert 'display.repaint_interval_ms' in keys
