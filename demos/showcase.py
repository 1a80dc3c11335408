"""
Showcase demo: an animated counter whose out and in segments are configured
at runtime. The configuration is persisted through ``SettingsManager`` when
one is supplied.
"""
from typing import Optional

from core.animation import Animation, animate
from core.constants.sizes import VALUE_FONT_SIZE
from core.constants.timing import (
    DEFAULT_SEGMENT_DURATION_S,
    MAX_SEGMENT_DURATION_S,
    MIN_SEGMENT_DURATION_S,
    SEGMENT_DURATION_STEP_S,
)
from core.logging.logger import get_logger
from core.settings.settings_manager import SettingsManager
from rendering.painter_ui import PainterUi
from transitions.presets import EffectType, build_animation

logger = get_logger(__name__)

MAX_VALUE = 255


def _step_duration(duration: float, delta: float) -> float:
    stepped = round(duration + delta, 3)
    return max(MIN_SEGMENT_DURATION_S, min(MAX_SEGMENT_DURATION_S, stepped))


class ShowcaseApp:
    """Counter animated by a user-configured out/in pair."""

    def __init__(self, settings: Optional[SettingsManager] = None) -> None:
        self._settings = settings
        self.value_state = 0
        self.out_type = EffectType.SLIDE_FADE_EASE_RIGHT
        self.out_duration = DEFAULT_SEGMENT_DURATION_S
        self.in_type = EffectType.SLIDE_FADE_EASE_RIGHT
        self.in_duration = DEFAULT_SEGMENT_DURATION_S
        self.in_copy_from_out = True
        if settings is not None:
            self._load(settings)

    def _load(self, settings: SettingsManager) -> None:
        self.out_type = EffectType.from_name(settings.get('showcase.out_effect'))
        self.in_type = EffectType.from_name(settings.get('showcase.in_effect'))
        self.out_duration = _step_duration(
            settings.get_float('showcase.out_duration', DEFAULT_SEGMENT_DURATION_S), 0.0
        )
        self.in_duration = _step_duration(
            settings.get_float('showcase.in_duration', DEFAULT_SEGMENT_DURATION_S), 0.0
        )
        self.in_copy_from_out = settings.get_bool('showcase.in_copy_from_out', True)
        logger.debug(
            "Showcase configuration loaded: out=%s/%.1fs in=%s/%.1fs copy=%s",
            self.out_type.value, self.out_duration,
            self.in_type.value, self.in_duration, self.in_copy_from_out,
        )

    def save(self) -> None:
        """Persist the current configuration, if backed by settings."""
        if self._settings is None:
            return
        self._settings.set('showcase.out_effect', self.out_type.value)
        self._settings.set('showcase.out_duration', self.out_duration)
        self._settings.set('showcase.in_effect', self.in_type.value)
        self._settings.set('showcase.in_duration', self.in_duration)
        self._settings.set('showcase.in_copy_from_out', self.in_copy_from_out)
        self._settings.save()

    def animation(self) -> Animation:
        """Build the animation for the current configuration."""
        return build_animation(self.out_type, self.out_duration, self.in_type, self.in_duration)

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def update(self, ui: PainterUi) -> None:
        ui.heading("Showcase Example")
        ui.label("This example demonstrates:")
        ui.label("• Animating an entire ui scope")
        ui.label("• Dynamically changing in/out animation segments")
        ui.label("• Various example animations")
        ui.separator()

        changed = self._out_controls(ui)
        changed = self._in_controls(ui) or changed
        if changed:
            self.save()
        ui.separator()

        animate(ui, "int_anim", self.value_state, self.animation(), self._contents)

    def _out_controls(self, ui: PainterUi) -> bool:
        changed = False
        with ui.scope() as group:
            group.label("Animation for the prior value before transition")
            with group.horizontal():
                group.label(f"Duration: {self.out_duration:.1f}s")
                if group.button("-"):
                    self.out_duration = _step_duration(self.out_duration, -SEGMENT_DURATION_STEP_S)
                    changed = True
                if group.button("+"):
                    self.out_duration = _step_duration(self.out_duration, SEGMENT_DURATION_STEP_S)
                    changed = True
            with group.horizontal():
                group.label("Out animation type")
                if group.button(self.out_type.label):
                    self.out_type = self.out_type.next()
                    changed = True
        return changed

    def _in_controls(self, ui: PainterUi) -> bool:
        changed = False
        with ui.scope() as group:
            group.label("Animation for the next value after transition")
            mark = "x" if self.in_copy_from_out else " "
            if group.button(f"[{mark}] Copy from 'out' configuration"):
                self.in_copy_from_out = not self.in_copy_from_out
                changed = True

            if self.in_copy_from_out:
                if (self.in_duration, self.in_type) != (self.out_duration, self.out_type):
                    changed = True
                self.in_duration = self.out_duration
                self.in_type = self.out_type
                group.disable()

            with group.horizontal():
                group.label(f"Duration: {self.in_duration:.1f}s")
                if group.button("-"):
                    self.in_duration = _step_duration(self.in_duration, -SEGMENT_DURATION_STEP_S)
                    changed = True
                if group.button("+"):
                    self.in_duration = _step_duration(self.in_duration, SEGMENT_DURATION_STEP_S)
                    changed = True
            with group.horizontal():
                group.label("In animation type")
                if group.button(self.in_type.label):
                    self.in_type = self.in_type.next()
                    changed = True
        return changed

    def _contents(self, ui: PainterUi, value: int) -> None:
        ui.label(f"Int: {value}", VALUE_FONT_SIZE)
        ui.label(f"Animation: {self.out_type.label} / {self.in_type.label}")
        ui.label(f"Total duration: {self.out_duration + self.in_duration:.1f}")
        with ui.horizontal():
            if ui.button("Decrement"):
                self.value_state = max(0, value - 1)
            if ui.button("Increment"):
                self.value_state = min(MAX_VALUE, value + 1)
