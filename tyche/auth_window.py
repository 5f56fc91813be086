# auth_window.py
# Builds the signup / login window
# The widgets are created here and handed to FormController for wiring

from PyQt6.QtWidgets import (
    QWidget, QFrame, QLabel, QLineEdit,
    QPushButton, QVBoxLayout, QHBoxLayout, QStackedWidget
)
from PyQt6.QtCore import Qt

WINDOW_TITLE = "Tyche App"
WINDOW_SIZE = (420, 460)


class AuthWindow(QWidget):
    def __init__(self):
        super().__init__()

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(24, 24, 24, 24)

        card = QFrame()
        card.setObjectName("authCard")
        layout = QVBoxLayout(card)
        layout.setContentsMargins(20, 20, 20, 20)
        outer.addWidget(card)

        # Title
        title = QLabel("Tyche")
        title.setObjectName("title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        layout.addSpacing(10)

        # ================= Toggle bar =================
        toggle_bar = QHBoxLayout()
        toggle_bar.setSpacing(0)

        self.signup_toggle = self.make_toggle("Sign Up")
        self.login_toggle = self.make_toggle("Log In")

        toggle_bar.addWidget(self.signup_toggle)
        toggle_bar.addWidget(self.login_toggle)
        layout.addLayout(toggle_bar)

        layout.addSpacing(10)

        # ================= Forms =================
        self.forms = QStackedWidget()

        self.signup_form = QFrame()
        signup_layout = QVBoxLayout(self.signup_form)
        self.signup_full_name = self.make_input(signup_layout, "Full Name")
        self.signup_email = self.make_input(signup_layout, "Email")
        self.signup_password = self.make_input(signup_layout, "Password", password=True)
        signup_layout.addSpacing(10)
        self.signup_button = self.make_submit(signup_layout, "Sign Up")
        signup_layout.addStretch()

        self.login_form = QFrame()
        login_layout = QVBoxLayout(self.login_form)
        self.login_email = self.make_input(login_layout, "Email")
        self.login_password = self.make_input(login_layout, "Password", password=True)
        login_layout.addSpacing(10)
        self.login_button = self.make_submit(login_layout, "Log In")
        login_layout.addStretch()

        self.forms.addWidget(self.signup_form)
        self.forms.addWidget(self.login_form)
        layout.addWidget(self.forms)

    # ---------------- Widget helpers ----------------
    def make_toggle(self, text):
        btn = QPushButton(text)
        btn.setObjectName("toggleButton")
        btn.setCheckable(True)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        return btn

    def make_input(self, layout, placeholder, password=False):
        field = QLineEdit()
        field.setObjectName("input")
        field.setPlaceholderText(placeholder)
        if password:
            field.setEchoMode(QLineEdit.EchoMode.Password)
        layout.addWidget(field)
        return field

    def make_submit(self, layout, text):
        btn = QPushButton(text)
        btn.setObjectName("primaryButton")
        layout.addWidget(btn)
        return btn
