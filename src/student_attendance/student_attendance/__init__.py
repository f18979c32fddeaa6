"""Student Attendance package.

Organized by feature modules (roster, attendance, metrics) over a single
JSON document store, with a thin Flask controller layer on top of the
service layer.
"""
