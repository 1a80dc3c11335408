"""Tests for the demo applications, driven frame by frame."""
import pytest
from PySide6.QtGui import QImage, QPainter

from core.context import Rect, UiContext
from demos import DEMOS, create_demo
from demos.menu import BACK, FORWARD, MenuApp, MenuState, OptionState
from demos.showcase import ShowcaseApp, _step_duration
from demos.variable import DECREMENT, INCREMENT, VariableApp
from rendering.frame_input import FrameInput
from rendering.painter_ui import PainterUi
from transitions.presets import EffectType


class Script:
    """Replaces button clicks with scripted presses and records output."""

    def __init__(self):
        self.press = set()
        self.buttons = []
        self.labels = []

    def reset(self, press=()):
        self.press = set(press)
        self.buttons = []
        self.labels = []

    def enabled(self, text):
        return [enabled for label, enabled in self.buttons if label == text]


@pytest.fixture
def script(monkeypatch):
    script = Script()

    def fake_button(self, text, enabled=True):
        enabled = enabled and self.enabled
        script.buttons.append((text, enabled))
        return enabled and text in script.press

    def fake_label(self, text, size=12):
        script.labels.append(str(text))
        return Rect(0.0, 0.0, 0.0, 0.0)

    monkeypatch.setattr(PainterUi, "button", fake_button)
    monkeypatch.setattr(PainterUi, "label", fake_label)
    return script


@pytest.fixture
def driver(qt_app, script):
    image = QImage(400, 300, QImage.Format.Format_ARGB32)
    ctx = UiContext(screen_rect=Rect(0.0, 0.0, 400.0, 300.0))

    def run_frame(app, time, press=()):
        script.reset(press)
        ctx.begin_frame(time)
        painter = QPainter(image)
        ui = PainterUi(ctx, painter, FrameInput())
        try:
            app.update(ui)
        finally:
            ui.invalidate()
            painter.end()
        return script

    return run_frame


class TestRegistry:

    def test_all_demos_registered(self):
        assert set(DEMOS) == {"showcase", "menu", "variable"}

    def test_create_demo(self, settings_manager):
        assert isinstance(create_demo("Menu"), MenuApp)
        assert isinstance(create_demo("showcase", settings_manager), ShowcaseApp)

    def test_unknown_demo(self):
        with pytest.raises(KeyError):
            create_demo("slideshow")


class TestShowcase:

    def test_increment_animates_old_then_new(self, driver):
        app = ShowcaseApp()
        driver(app, 0.0, press={"Increment"})
        assert app.value_state == 1

        assert "Int: 0" in driver(app, 0.1).labels
        assert "Int: 1" in driver(app, 0.7).labels
        assert "Int: 1" in driver(app, 1.5).labels

    def test_decrement_clamps_at_zero(self, driver):
        app = ShowcaseApp()
        driver(app, 0.0, press={"Decrement"})
        assert app.value_state == 0

    def test_copy_from_out_disables_in_controls(self, driver):
        app = ShowcaseApp()
        script = driver(app, 0.0, press={"+"})
        assert app.out_duration == pytest.approx(0.5)
        assert app.in_duration == pytest.approx(0.5)
        assert script.enabled("+") == [True, False]

    def test_uncopied_in_controls_are_independent(self, driver):
        app = ShowcaseApp()
        driver(app, 0.0, press={"[x] Copy from 'out' configuration"})
        assert app.in_copy_from_out is False

        driver(app, 0.1, press={"Slide fade ease right"})
        assert app.out_type is EffectType.CLIP_WIDTH
        assert app.in_type is EffectType.CLIP_WIDTH
        driver(app, 0.2, press={"Clip width"})
        assert app.out_type is EffectType.CLIP_HEIGHT
        assert app.in_type is EffectType.CLIP_HEIGHT

    def test_animation_reflects_configuration(self):
        app = ShowcaseApp()
        app.out_type = EffectType.FADE
        app.out_duration = 0.2
        app.in_type = EffectType.FADE_RED
        app.in_duration = 1.0
        anim = app.animation()
        assert anim.out_seg.duration == 0.2
        assert anim.in_seg.duration == 1.0
        assert anim.in_seg.effect is EffectType.FADE_RED.in_fn

    def test_configuration_persisted(self, driver, settings_manager):
        app = ShowcaseApp(settings_manager)
        driver(app, 0.0, press={"Slide fade ease right"})

        assert settings_manager.get('showcase.out_effect') == 'clip_width'
        reloaded = ShowcaseApp(settings_manager)
        assert reloaded.out_type is EffectType.CLIP_WIDTH
        assert reloaded.in_type is EffectType.CLIP_WIDTH

    def test_unknown_saved_effect_falls_back(self, settings_manager):
        settings_manager.set('showcase.out_effect', 'sparkle')
        app = ShowcaseApp(settings_manager)
        assert app.out_type is EffectType.SLIDE_FADE_EASE_RIGHT

    def test_step_duration_clamped(self):
        assert _step_duration(1.95, 0.1) == 2.0
        assert _step_duration(0.05, -0.1) == 0.0
        assert _step_duration(0.4, 0.1) == pytest.approx(0.5)


class TestVariable:

    def test_minus_disabled_at_zero(self, driver):
        script = driver(VariableApp(), 0.0)
        assert script.enabled("-") == [False]
        assert script.enabled("+") == [True]

    def test_increment_then_buttons_disabled_during_in(self, driver):
        app = VariableApp()
        driver(app, 0.0)
        driver(app, 0.1, press={"+"})
        assert app.state == 1
        assert app.anim is INCREMENT

        out_frame = driver(app, 0.3)
        assert out_frame.enabled("+") == [True]
        assert "0" in out_frame.labels

        in_frame = driver(app, 0.6)
        assert in_frame.enabled("-") == [False]
        assert in_frame.enabled("+") == [False]
        assert "1" in in_frame.labels

        done = driver(app, 1.0)
        assert done.enabled("-") == [True]

    def test_decrement_selects_decrement_animation(self, driver):
        app = VariableApp()
        app.state = 5
        driver(app, 0.0, press={"-"})
        assert app.state == 4
        assert app.anim is DECREMENT


class TestMenu:

    def test_forward_navigation_animates(self, driver):
        app = MenuApp()
        driver(app, 0.0, press={"Options"})
        assert app.menu_state is MenuState.OPTIONS
        assert app.anim is FORWARD

        out_frame = driver(app, 0.1)
        assert "New Game" in [text for text, _ in out_frame.buttons]

        settled = driver(app, 1.0)
        assert "Option 1" in settled.labels
        assert "Red" in [text for text, _ in settled.buttons]

    def test_option_buttons_cycle(self, driver):
        app = MenuApp()
        app.menu_state = MenuState.OPTIONS
        driver(app, 0.0, press={"Red"})
        assert app.opt1_state is OptionState.GREEN
        assert app.opt2_state is OptionState.GREEN

    def test_back_goes_to_confirm(self, driver):
        app = MenuApp()
        app.menu_state = MenuState.OPTIONS
        driver(app, 0.0, press={"Back"})
        assert app.menu_state is MenuState.CONFIRM
        assert app.anim is BACK

    def test_confirm_returns_to_main_menu(self, driver):
        app = MenuApp()
        app.menu_state = MenuState.CONFIRM
        script = driver(app, 0.0, press={"Yes"})
        assert app.menu_state is MenuState.MAIN_MENU
        assert "(This does nothing)" in script.labels

    def test_quit_is_disabled(self, driver):
        script = driver(MenuApp(), 0.0)
        assert script.enabled("Quit") == [False]
