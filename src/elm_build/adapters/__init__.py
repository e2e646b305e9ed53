"""Adapters for external collaborators (compiler processes)."""
