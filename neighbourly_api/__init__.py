"""Neighbourly backend package."""
