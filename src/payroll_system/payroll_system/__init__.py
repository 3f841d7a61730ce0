"""Worker Payroll package.

This package is organized by feature modules (workers, attendance, payroll, ...)
with a thin Flask controller layer and service/repository layers.
"""
