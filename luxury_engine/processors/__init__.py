"""
Processors — One sub-package per data source family.
"""
