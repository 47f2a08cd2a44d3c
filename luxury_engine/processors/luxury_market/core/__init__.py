"""
Core utilities for the luxury market pipelines.

Modules:
    cleaning  — Percent / numeric cell parsing
    columns   — Flexible column name resolution
    brands    — Case-insensitive brand matching
"""
