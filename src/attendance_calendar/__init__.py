"""Attendance Calendar package.

Organized by feature modules (attendance, calendar_grid) with a thin Flask
controller layer on top of plain service/repository classes.
"""
