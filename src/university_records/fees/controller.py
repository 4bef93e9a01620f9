from __future__ import annotations

from ..console import ConsoleApp
from ..container import Container


def register(app: ConsoleApp, container: Container) -> None:
    university = container.university

    @app.command("11", "Register Fee Payment")
    def register_payment():
        student = university.find_student(app.ask_int("Enter student ID"))
        if not student:
            app.say("Student not found.")
            return

        amount = app.ask_float("Enter amount")
        university.register_payment(student, amount)
        app.say("Payment registered.")

    @app.command("12", "View Payments")
    def view_payments():
        student = university.find_student(app.ask_int("Enter student ID"))
        if not student:
            app.say("Student not found.")
            return

        payments = university.view_payments(student)
        app.table(
            f"Payments of {student.name}",
            ["Date", "Amount"],
            [(p.date.isoformat(), f"{p.amount:.2f}") for p in payments],
        )
        app.say(f"Total paid: {university.total_paid(student):.2f}")
