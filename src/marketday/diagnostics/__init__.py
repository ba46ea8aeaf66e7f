"""Diagnostics entry points (``marketday month-grid`` etc.)."""
