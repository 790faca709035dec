"""Compressed sparse fiber engine.

This package compiles coordinate rows into per-level fiber arrays.
It answers row reconstruction and weighted column-sum queries.
"""
