"""Filtered file system traversal.

This package builds in-memory trees of the entries that survive the ignore rules,
decides per entry whether it is pruned, hidden or shown, and classifies file contents
as text or binary.
"""
