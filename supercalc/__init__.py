"""Superannuation retirement savings projection."""
