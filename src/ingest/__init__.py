"""Row ingestion.

This package reads coordinate rows from files and compiles them
into fibers through the config-driven builder.
"""
