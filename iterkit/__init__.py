"""Lazy iterator adaptors and helpers: grouping, chunking, combinations, merging,
deduplication, result handling and formatting, plus a small iris report command."""

__version__ = "0.1.0"