"""Data input/output helpers for log files.

Utility modules here keep disk-level concerns isolated from the storage
manager:
- :mod:`text_writer` writes line sequences or text blocks (truncate/append).
- :mod:`log_loader` reads saved logs back leniently for display.
"""
