"""Flexwork Payroll package.

Biweekly flexible-work (선택근로제) time and pay engine, organized by feature
modules (attendance, payroll, rules) with a thin Flask controller layer on top
of pure service/calculator layers.
"""
