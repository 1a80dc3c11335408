"""
Menu demo: whole-page transitions between menu screens, with nested
per-option animations on the options page.
"""
from enum import Enum

from core.animation import Animation, animate
from core.constants.timing import MENU_SEGMENT_DURATION_S
from rendering.painter_ui import PainterUi
from transitions.effects import SlideDirection, slide_fade_ease


class MenuState(Enum):
    MAIN_MENU = "main_menu"
    NEW_GAME = "new_game"
    OPTIONS = "options"
    CONFIRM = "confirm"


class OptionState(Enum):
    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"

    def next(self) -> "OptionState":
        members = list(OptionState)
        return members[(members.index(self) + 1) % len(members)]


FORWARD = Animation.new(MENU_SEGMENT_DURATION_S, *slide_fade_ease(SlideDirection.LEFT))
BACK = Animation.new(MENU_SEGMENT_DURATION_S, *slide_fade_ease(SlideDirection.RIGHT))


class MenuApp:
    """Navigates between menu screens, sliding forward or back."""

    def __init__(self) -> None:
        self.menu_state = MenuState.MAIN_MENU
        self.anim = FORWARD
        self.opt1_state = OptionState.RED
        self.opt2_state = OptionState.RED

    def _go(self, state: MenuState, anim: Animation) -> None:
        self.menu_state = state
        self.anim = anim

    def update(self, ui: PainterUi) -> None:
        ui.heading("Menu Example")
        ui.label("This example demonstrates:")
        ui.label("• Animating an entire menu page")
        ui.label("• Nested animations inside an animated scope")
        ui.label("• Switching the animation with the navigation direction")
        ui.separator()

        animate(ui, "menu_anim", self.menu_state, self.anim, self._menu_page)

    def _menu_page(self, ui: PainterUi, state: MenuState) -> None:
        if state is MenuState.MAIN_MENU:
            if ui.button("New Game"):
                self._go(MenuState.NEW_GAME, FORWARD)
            if ui.button("Options"):
                self._go(MenuState.OPTIONS, FORWARD)
            ui.button("Quit", enabled=False)

        elif state is MenuState.NEW_GAME:
            ui.button("Start Game", enabled=False)
            if ui.button("Back"):
                self._go(MenuState.MAIN_MENU, BACK)

        elif state is MenuState.OPTIONS:
            with ui.horizontal():
                ui.label("Option 1")
                animate(ui, "opt1_anim", self.opt1_state, FORWARD, self._option1)
            with ui.horizontal():
                ui.label("Option 2")
                animate(ui, "opt2_anim", self.opt2_state, FORWARD, self._option2)
            if ui.button("Back"):
                self._go(MenuState.CONFIRM, BACK)

        elif state is MenuState.CONFIRM:
            ui.label("Save changes?")
            with ui.scope() as note:
                note.disable()
                note.label("(This does nothing)")
            with ui.horizontal():
                if ui.button("Yes"):
                    self._go(MenuState.MAIN_MENU, BACK)
                if ui.button("No"):
                    self._go(MenuState.MAIN_MENU, BACK)

    def _option1(self, ui: PainterUi, value: OptionState) -> None:
        if ui.button(value.value):
            self.opt1_state = value.next()

    def _option2(self, ui: PainterUi, value: OptionState) -> None:
        if ui.button(value.value):
            self.opt2_state = value.next()
