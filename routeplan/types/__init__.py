"""Shared type aliases and result containers."""
