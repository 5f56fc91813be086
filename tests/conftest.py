# conftest.py
# Shared Qt fixtures; windows are rendered on the offscreen platform

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from tyche.auth_window import AuthWindow
from tyche.form_controller import FormController


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    win = AuthWindow()
    yield win
    win.close()
    win.deleteLater()


@pytest.fixture
def controller(window):
    ctrl = FormController(window)
    window.show()
    return ctrl
