"""Shopkeeper payroll package.

Organized by feature modules (employees, attendance, payroll, dashboard,
assistant) with a thin Flask controller layer over service/repository layers
that persist through an injectable key-value store.
"""
