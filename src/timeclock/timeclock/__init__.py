"""Timeclock package.

Organized by feature modules (attendance, payroll, ...). The payroll
calculators are pure functions over immutable records; services and
repositories form a thin layer around them.
"""
