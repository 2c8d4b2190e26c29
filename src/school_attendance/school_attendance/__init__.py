"""School Attendance admin package.

This package is organized by feature modules (students, classes, attendance,
reports) with a thin Flask controller layer over service/repository layers.
Repositories talk to the external attendance API over HTTP.
"""
