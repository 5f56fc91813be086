# form_controller.py
# Wires the AuthWindow widgets to form switching and submit handling

import logging
from dataclasses import dataclass
from enum import Enum

from tyche import audit

log = logging.getLogger(__name__)


class FormMode(Enum):
    SIGNUP = "signup"
    LOGIN = "login"


@dataclass(frozen=True)
class SignupInput:
    full_name: str
    email: str
    password: str


@dataclass(frozen=True)
class LoginInput:
    email: str
    password: str


class FormController:
    """
    Owns the single FormMode value for a window.

    Both toggle buttons and both form containers are derived from the mode
    in set_mode(), so exactly one form is shown and exactly one toggle is
    checked at any time. Submitting never changes the mode and never clears
    the fields.
    """

    def __init__(self, view, sink=audit.emit):
        self.view = view
        self.sink = sink
        self._mode = None

        view.signup_toggle.clicked.connect(self.show_signup)
        view.login_toggle.clicked.connect(self.show_login)

        view.signup_button.clicked.connect(self.submit_signup)
        view.login_button.clicked.connect(self.submit_login)

        # Return in any field submits that field's form
        for field in (view.signup_full_name, view.signup_email, view.signup_password):
            field.returnPressed.connect(self.submit_signup)
        for field in (view.login_email, view.login_password):
            field.returnPressed.connect(self.submit_login)

        self.set_mode(FormMode.SIGNUP)

    @property
    def mode(self):
        return self._mode

    # ---------------- Form switching ----------------
    def set_mode(self, mode):
        if not isinstance(mode, FormMode):
            raise TypeError(f"expected FormMode, got {type(mode).__name__}")
        showing_signup = mode is FormMode.SIGNUP

        self.view.signup_toggle.setChecked(showing_signup)
        self.view.login_toggle.setChecked(not showing_signup)
        self.view.forms.setCurrentWidget(
            self.view.signup_form if showing_signup else self.view.login_form
        )

        if mode is not self._mode:
            log.debug("Form mode: %s", mode.value)
        self._mode = mode

    def show_signup(self):
        self.set_mode(FormMode.SIGNUP)

    def show_login(self):
        self.set_mode(FormMode.LOGIN)

    # ---------------- Submit handlers ----------------
    def submit_signup(self):
        values = SignupInput(
            full_name=self.view.signup_full_name.text(),
            email=self.view.signup_email.text(),
            password=self.view.signup_password.text(),
        )
        self.sink(audit.format_signup(values))
        return values

    def submit_login(self):
        values = LoginInput(
            email=self.view.login_email.text(),
            password=self.view.login_password.text(),
        )
        self.sink(audit.format_login(values))
        return values
