"""Kas Kelas package.

This package is organized by feature modules (cadence, periods, dues, ledger,
savings, report) with pure computation at the core and thin repository-driven
service layers on top.
"""
