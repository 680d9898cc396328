"""Shared helpers for the application package."""
