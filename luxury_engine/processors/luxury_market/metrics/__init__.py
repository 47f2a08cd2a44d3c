"""
Metrics — Pure-function brand metric modules feeding the radar chart.

Each module returns a {brand: float} dict. No UI, no side effects.

Modules:
    revenue          — Latest-year revenue per brand
    resale           — Average resale price per brand
    search_interest  — Mean regional search share per brand
    categories       — Distinct category count per brand
    normalize        — Per-metric max scaling across brands
"""
