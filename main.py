"""
Segue - Main Entry Point

Opens a window running one of the animation demos.
"""
import sys
from typing import List, Optional, Tuple

from PySide6.QtWidgets import QApplication

from core.logging.logger import setup_logging, get_logger
from core.settings.settings_manager import SettingsManager
from demos import DEMOS, DEMO_TITLES, create_demo
from rendering.immediate_canvas import ImmediateCanvas
from versioning import APP_NAME, APP_ORGANIZATION, APP_VERSION

logger = get_logger(__name__)

USAGE = "usage: main.py [--demo showcase|menu|variable] [--debug] [--verbose]"


def parse_args(argv: List[str]) -> Tuple[Optional[str], bool, bool]:
    """
    Parse command-line arguments.

    Flags:
    - --demo NAME / --demo=NAME - demo to run (defaults to the saved setting)
    - --debug, -d - Enable debug logging with console output
    - --verbose, -v - Enable per-frame animation traces

    Returns:
        tuple: (demo name or None, debug, verbose)

    Raises:
        ValueError: On unknown flags, a missing demo name or an unknown demo.
    """
    demo: Optional[str] = None
    debug = False
    verbose = False

    args = list(argv[1:])
    while args:
        arg = args.pop(0)
        if arg in ('--debug', '-d'):
            debug = True
        elif arg in ('--verbose', '-v'):
            verbose = True
        elif arg == '--demo':
            if not args:
                raise ValueError("--demo requires a name")
            demo = args.pop(0)
        elif arg.startswith('--demo='):
            demo = arg.split('=', 1)[1]
        else:
            raise ValueError(f"Unknown argument: {arg}")

    if demo is not None:
        demo = demo.strip().lower()
        if demo not in DEMOS:
            raise ValueError(f"Unknown demo {demo!r}; choose from {', '.join(sorted(DEMOS))}")
    return demo, debug, verbose


def run_demo(app: QApplication, settings: SettingsManager, demo_name: str) -> int:
    """Create the demo window and run the event loop."""
    demo = create_demo(demo_name, settings)

    canvas = ImmediateCanvas(demo.update, repaint_interval_ms=settings.get_repaint_interval_ms())
    settings.on_changed(
        'display.repaint_interval_ms',
        lambda _new, _old: canvas.set_repaint_interval(settings.get_repaint_interval_ms()),
    )
    canvas.setWindowTitle(f"{APP_NAME} - {DEMO_TITLES[demo_name]}")
    canvas.resize(
        settings.get_int('display.window_width'),
        settings.get_int('display.window_height'),
    )
    canvas.show()
    logger.info("Demo window shown (%dx%d)", canvas.width(), canvas.height())

    exit_code = app.exec()
    settings.save()
    return exit_code


def main():
    """Main entry point for the demo application."""
    try:
        demo_name, debug_mode, verbose_mode = parse_args(sys.argv)
    except ValueError as e:
        print(f"{e}\n{USAGE}", file=sys.stderr)
        return 2

    # Setup logging first
    setup_logging(debug=debug_mode, verbose=verbose_mode)

    logger.info("=" * 60)
    logger.info("%s %s Starting", APP_NAME, APP_VERSION)
    logger.info("=" * 60)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_ORGANIZATION)
    app.setApplicationVersion(APP_VERSION)

    settings = SettingsManager()
    if demo_name is None:
        saved = str(settings.get('app.demo', 'showcase')).strip().lower()
        if saved not in DEMOS:
            logger.warning("[FALLBACK] Saved demo %r unknown, using showcase", saved)
            saved = 'showcase'
        demo_name = saved
    else:
        settings.set('app.demo', demo_name)

    exit_code = 0
    try:
        exit_code = run_demo(app, settings, demo_name)
    except Exception as e:
        logger.exception(f"Fatal error in main: {e}")
        exit_code = 1

    logger.info("=" * 60)
    logger.info(f"{APP_NAME} Exiting (code={exit_code})")
    logger.info("=" * 60)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
