import logging

from tyche import audit
from tyche.form_controller import LoginInput, SignupInput


def test_format_signup():
    values = SignupInput("Alice", "alice@example.com", "pw123")

    assert audit.format_signup(values) == "Signup: Alice, alice@example.com, pw123"


def test_format_login():
    values = LoginInput("bob@example.com", "hunter2")

    assert audit.format_login(values) == "Login: bob@example.com, hunter2"


def test_format_empty_values():
    assert audit.format_signup(SignupInput("", "", "")) == "Signup: , , "
    assert audit.format_login(LoginInput("", "")) == "Login: , "


def test_emit_prints_line(capsys):
    audit.emit("Login: bob@example.com, hunter2")

    assert capsys.readouterr().out == "Login: bob@example.com, hunter2\n"


def test_emit_keeps_values_out_of_log(capsys, caplog):
    caplog.set_level(logging.DEBUG, logger="tyche.audit")

    audit.emit("Login: bob@example.com, hunter2")

    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["Emitted Login line"]
    assert not any("hunter2" in m or "bob@example.com" in m for m in messages)
