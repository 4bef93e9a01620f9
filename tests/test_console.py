from __future__ import annotations

import io

import pytest
from rich.console import Console

from university_records.console import ConsoleApp
from university_records.main import create_app


@pytest.fixture(autouse=True)
def testing_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")


def make_app(script: str) -> tuple[ConsoleApp, io.StringIO]:
    out = io.StringIO()
    console = Console(file=out, width=120, force_terminal=False, color_system=None)
    return create_app(console=console, input_stream=io.StringIO(script)), out


def test_menu_lists_all_commands():
    app, out = make_app("")

    app.render_menu()

    text = out.getvalue()
    assert "=== TEST UNIVERSITY MANAGEMENT SYSTEM ===" in text
    assert [c.key for c in app.commands] == [str(i) for i in range(1, 16)]
    assert "0. Exit" in text


def test_register_student_with_default_email():
    app, out = make_app("Jane Doe\n\n")

    assert app.dispatch("1") is True

    assert "Registered: [Student] ID=1001, Name=Jane Doe, Email=jane.doe@student.univ.edu" in out.getvalue()


def test_update_unknown_student():
    app, out = make_app("4242\nX\n\n")

    app.dispatch("3")

    assert "Student not found." in out.getvalue()


def test_domain_errors_are_printed_and_loop_continues():
    script = "\n".join([
        "1", "Jane Doe", "",              # register student 1001
        "5", "Math", "2024-05-03", "100",  # add exam
        "7", "1001", "Math", "101",        # out of range
        "7", "1001", "Chem", "5",          # unknown subject
        "11", "1001", "0",                 # bad amount
        "0",
    ]) + "\n"
    app, out = make_app(script)

    app.run()

    text = out.getvalue()
    assert "Error: Marks must be between 0 and 100" in text
    assert "Error: No such subject in exam schedule: Chem" in text
    assert "Error: Amount must be positive" in text
    assert "Exiting..." in text


def test_teacher_id_is_not_accepted_for_marks():
    app, out = make_app("A. Smith\na@x.edu\nPhysics\n1001\n")

    app.dispatch("2")
    app.dispatch("7")

    assert "Student not found." in out.getvalue()


def test_attendance_with_explicit_date():
    app, out = make_app("Jane Doe\n\n1001\n2024-04-01\ny\n1001\n")

    app.dispatch("1")
    app.dispatch("9")
    app.dispatch("10")

    text = out.getvalue()
    assert "Attendance marked." in text
    assert "2024-04-01" in text


def test_bad_date_is_reported():
    app, out = make_app("Jane Doe\n\n1001\n01/04/2024\n")

    app.dispatch("1")
    app.dispatch("9")

    assert "Error: Invalid date '01/04/2024', expected YYYY-MM-DD" in out.getvalue()


def test_invalid_choice():
    app, out = make_app("")

    app.dispatch("99")

    assert "Invalid choice!" in out.getvalue()


def test_run_stops_at_end_of_input():
    app, out = make_app("1\nJane Doe\n\n")

    app.run()

    assert "Registered:" in out.getvalue()


def test_duplicate_menu_key_rejected():
    app = ConsoleApp("x", console=Console(file=io.StringIO()))

    @app.command("1", "First")
    def first():
        pass

    with pytest.raises(ValueError):
        app.command("1", "Again")(first)
