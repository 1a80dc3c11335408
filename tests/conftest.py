"""
Shared pytest fixtures for Segue tests.
"""
import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope='session')
def qt_app():
    """Create QApplication instance for tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
    # Don't quit - causes issues with pytest


@pytest.fixture
def settings_manager(qt_app):
    """Create SettingsManager instance for testing."""
    from core.settings import SettingsManager
    manager = SettingsManager(organization="Test", application="SegueTest")
    yield manager
    # Clear test settings
    manager.clear()


@pytest.fixture
def ui_context(qt_app):
    """Fresh UiContext with its clock at t=0."""
    from core.context import UiContext
    ctx = UiContext()
    ctx.begin_frame(0.0)
    return ctx


@pytest.fixture
def ui(ui_context):
    """Headless root scope for the current frame of ``ui_context``."""
    root = ui_context.root_ui()
    yield root
    root.invalidate()
