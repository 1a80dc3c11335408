"""
Variable demo: a single animated number whose animation depends on the
direction of the change, with buttons disabled during the in segment.
"""
from core.animation import Animation, EasingCurve, animate, ease, run_state
from core.constants.sizes import SLIDE_DISTANCE, VALUE_FONT_SIZE
from core.constants.timing import VARIABLE_SEGMENT_DURATION_S
from core.context.geometry import Transform
from rendering.painter_ui import PainterUi

MAX_VALUE = 255


def _highlight_out(channel: int, direction: float):
    """Out effect that saturates one colour channel, fades and slides vertically."""

    def _out(ui, normal: float) -> None:
        normal = ease(normal, EasingCurve.QUAD_IN)
        color = list(ui.text_color)
        color[channel] = 255
        ui.override_text_color(tuple(color))
        ui.set_opacity(1.0 - normal)
        ui.set_layer_transform(Transform.from_translation(0.0, direction * normal * SLIDE_DISTANCE))

    return _out


def _settle_in(direction: float):
    """In effect that fades in while sliding back from the opposite side."""

    def _in(ui, normal: float) -> None:
        normal = ease(normal, EasingCurve.QUAD_OUT)
        ui.set_opacity(normal)
        ui.set_layer_transform(
            Transform.from_translation(0.0, -direction * (1.0 - normal) * SLIDE_DISTANCE)
        )

    return _in


# Increments rise (negative y) in green, decrements sink in red.
INCREMENT = Animation.new(VARIABLE_SEGMENT_DURATION_S, _highlight_out(1, -1.0), _settle_in(-1.0))
DECREMENT = Animation.new(VARIABLE_SEGMENT_DURATION_S, _highlight_out(0, 1.0), _settle_in(1.0))


class VariableApp:
    def __init__(self) -> None:
        self.anim = INCREMENT
        self.state = 0

    def _increment(self) -> None:
        self.state += 1
        self.anim = INCREMENT

    def _decrement(self) -> None:
        self.state -= 1
        self.anim = DECREMENT

    def update(self, ui: PainterUi) -> None:
        ui.heading("Variable Example")
        ui.label("This example demonstrates:")
        ui.label("• Animating a single ui element")
        ui.label("• Contextually setting increment/decrement animations")
        ui.label("• Using the 'RunState' to disable buttons during the 'in' animation")
        ui.separator()

        with ui.horizontal():
            if run_state(ui, "int_anim", self.anim).is_in():
                ui.button("-", enabled=False)
                ui.button("+", enabled=False)
            else:
                if ui.button("-", enabled=self.state > 0):
                    self._decrement()
                if ui.button("+", enabled=self.state < MAX_VALUE):
                    self._increment()

        animate(ui, "int_anim", self.state, self.anim,
                lambda child, value: child.label(str(value), VALUE_FONT_SIZE))
