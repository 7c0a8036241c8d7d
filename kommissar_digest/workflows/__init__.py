"""Workflows chaining services into end-to-end runs."""
