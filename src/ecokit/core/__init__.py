"""Shared enums, constants and errors."""
