"""ScholarHub package.

School administration backend organized by feature modules (students, parents,
grades, attendance, communications, reports) with a thin Flask controller layer
over service/repository layers.
"""
