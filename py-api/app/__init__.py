"""Recruitment API application package."""
