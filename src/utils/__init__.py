"""Shared helpers without business rules."""
