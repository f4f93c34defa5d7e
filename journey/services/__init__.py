"""Presentation and client-side services."""
