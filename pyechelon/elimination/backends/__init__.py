"""Elimination backends."""
