"""Shared utilities: exceptions and logging."""
