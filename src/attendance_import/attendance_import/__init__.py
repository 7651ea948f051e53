"""Biometric attendance import package.

This package is organized by feature modules (sheets, parsing, employees,
attendance, imports) with a thin Flask controller layer on top of plain
service/repository layers.
"""
