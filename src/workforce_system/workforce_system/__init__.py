"""Workforce System package.

Feature modules (attendance, schedules, holidays, advances, payroll, ...) with a
thin Flask controller layer on top of service/repository layers. The payroll
engine itself is pure and has no I/O.
"""
