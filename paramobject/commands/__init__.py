"""Refactoring commands."""
