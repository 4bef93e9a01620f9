from __future__ import annotations

from ..common.datetime_utils import parse_iso_date
from ..console import ConsoleApp
from ..container import Container


def register(app: ConsoleApp, container: Container) -> None:
    university = container.university

    @app.command("9", "Mark Attendance")
    def mark_attendance():
        person = university.find_person(app.ask_int("Enter ID"))
        if not person:
            app.say("Person not found.")
            return

        raw_date = app.ask("Enter date (yyyy-mm-dd or blank for today)")
        on = parse_iso_date(raw_date) if raw_date else None
        present = app.confirm("Present?")

        university.mark_attendance(person, present, on=on)
        app.say("Attendance marked.")

    @app.command("10", "View Attendance")
    def view_attendance():
        person = university.find_person(app.ask_int("Enter ID"))
        if not person:
            app.say("Person not found.")
            return

        entries = university.view_attendance(person)
        app.table(
            f"Attendance of {person.name}",
            ["Date", "Present"],
            [(d.isoformat(), "yes" if present else "no") for d, present in entries.items()],
        )
