from __future__ import annotations

from ..console import ConsoleApp
from ..container import Container
from .service import StudentUpdate, TeacherUpdate


def register(app: ConsoleApp, container: Container) -> None:
    university = container.university

    @app.command("1", "Register Student")
    def register_student():
        name = app.ask("Enter student name")
        email = app.ask("Enter student email (or leave blank)")
        student = university.register_student(name, email or None)
        app.say(f"Registered: {student}")

    @app.command("2", "Register Teacher")
    def register_teacher():
        name = app.ask("Enter teacher name")
        email = app.ask("Enter teacher email")
        department = app.ask("Enter department")
        teacher = university.register_teacher(name, email, department)
        app.say(f"Registered: {teacher}")

    @app.command("3", "Update Student")
    def update_student():
        student_id = app.ask_int("Enter student ID")
        name = app.ask("Enter new name")
        email = app.ask("Enter new email (or leave blank)")
        ok = university.update_student(student_id, StudentUpdate(name=name, email=email or None))
        app.say("Updated." if ok else "Student not found.")

    @app.command("4", "Update Teacher")
    def update_teacher():
        teacher_id = app.ask_int("Enter teacher ID")
        name = app.ask("Enter new name")
        email = app.ask("Enter new email (or leave blank)")
        department = app.ask("Enter new department (or leave blank)")
        update = TeacherUpdate(name=name, email=email or None, department=department or None)
        ok = university.update_teacher(teacher_id, update)
        app.say("Updated." if ok else "Teacher not found.")

    @app.command("13", "List Students")
    def list_students():
        students = university.list_students()
        app.table("Students", ["ID", "Name", "Email"], [(s.id, s.name, s.email) for s in students])

    @app.command("14", "List Teachers")
    def list_teachers():
        teachers = university.list_teachers()
        app.table(
            "Teachers",
            ["ID", "Name", "Email", "Department"],
            [(t.id, t.name, t.email, t.department) for t in teachers],
        )

    @app.command("15", "Person Card")
    def person_card():
        person = university.find_person(app.ask_int("Enter ID"))
        if not person:
            app.say("Person not found.")
            return
        app.say(university.person_card(person))
