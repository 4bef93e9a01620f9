from __future__ import annotations

from ..common.datetime_utils import parse_iso_date
from ..console import ConsoleApp
from ..container import Container


def register(app: ConsoleApp, container: Container) -> None:
    university = container.university

    @app.command("5", "Add Exam")
    def add_exam():
        subject = app.ask("Enter subject")
        exam_date = parse_iso_date(app.ask("Enter exam date (yyyy-mm-dd)"))
        max_marks = app.ask_int("Enter max marks")
        university.add_exam(subject, exam_date, max_marks)
        app.say("Exam added.")

    @app.command("6", "View Exams")
    def view_exams():
        exams = university.view_exam_schedule()
        app.table(
            "Exam Schedule",
            ["Subject", "Date", "Max"],
            [(e.subject, e.date.isoformat(), e.max_marks) for e in exams],
        )

    @app.command("7", "Enter Marks")
    def enter_marks():
        student = university.find_student(app.ask_int("Enter student ID"))
        if not student:
            app.say("Student not found.")
            return

        subject = app.ask("Enter subject")
        marks = app.ask_int("Enter marks")
        university.enter_marks(student, subject, marks)
        app.say("Marks entered.")

    @app.command("8", "View Student Marks")
    def view_marks():
        student = university.find_student(app.ask_int("Enter student ID"))
        if not student:
            app.say("Student not found.")
            return

        marks = university.view_marks(student)
        app.table(f"Marks of {student.name}", ["Subject", "Marks"], marks.items())
