"""
luxury_engine — Brand metrics engine behind the luxury-market charts.

Submodules:
    - config: Shared brand/metric constants, paths and settings
    - processors: Source-specific data pipelines (radar, density, chart series)
"""
