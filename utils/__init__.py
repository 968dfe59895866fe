"""Shared helpers for dimension parsing."""
