"""Shared helpers for hotpatch-check."""
