"""Simplifying Method Calls refactoring commands."""
