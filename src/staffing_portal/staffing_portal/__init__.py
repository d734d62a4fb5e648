"""Staffing Portal package.

This package is organized by feature modules (users, candidates, requirements, ...)
with a thin Flask controller layer, services on top of a document store wrapper,
and pure report builders for the dashboard views.
"""
