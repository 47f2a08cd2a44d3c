"""
Luxury Market — Brand metric pipelines for the luxury revenue / resale charts.

Modules:
    aggregator  — Radar chart: normalized per-brand metric vectors
    density     — Price distribution chart: Epanechnikov KDE curves
    series      — Line / bubble / bar / stacked-bar data reshapes
    loader      — Reads the source CSVs from the data directory
    analyzer    — Runs everything into one Brand Snapshot dict
"""
