"""University Records package.

This package is organized by feature modules (people, attendance, exams, fees)
with a thin console controller layer on top of the service layer. All records
live in memory for the lifetime of one run.
"""
