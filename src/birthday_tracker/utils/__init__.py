"""Shared helpers for security, session state and calendar maths."""
