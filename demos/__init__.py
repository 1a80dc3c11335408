"""
Demo applications for the animation engine.

Each demo exposes ``update(ui)``, which ``ImmediateCanvas`` calls once per
frame with the root ``PainterUi`` scope.
"""
from typing import Callable, Dict, Optional

from core.logging.logger import get_logger
from core.settings.settings_manager import SettingsManager
from demos.menu import MenuApp
from demos.showcase import ShowcaseApp
from demos.variable import VariableApp

logger = get_logger(__name__)

DEMOS: Dict[str, Callable[[Optional[SettingsManager]], object]] = {
    "showcase": ShowcaseApp,
    "menu": lambda settings=None: MenuApp(),
    "variable": lambda settings=None: VariableApp(),
}

DEMO_TITLES: Dict[str, str] = {
    "showcase": "Showcase Example",
    "menu": "Menu Example",
    "variable": "Variable Example",
}


def create_demo(name: str, settings: Optional[SettingsManager] = None):
    """Instantiate the demo registered under ``name``.

    Raises:
        KeyError: If no demo has that name.
    """
    key = str(name).strip().lower()
    if key not in DEMOS:
        raise KeyError(f"Unknown demo {name!r}; choose from {', '.join(sorted(DEMOS))}")
    logger.info("Starting %s demo", key)
    return DEMOS[key](settings)


__all__ = ["DEMOS", "DEMO_TITLES", "MenuApp", "ShowcaseApp", "VariableApp", "create_demo"]
