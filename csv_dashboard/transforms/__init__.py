"""
Transforms sub-package for csv-dashboard.

Presentation-side steps between parsed records and a drawn chart:
  - numbers.py: Coerce string cells to floats, dropping failures.
  - shapes.py: Map records onto per-kind chart data (labels, series, points).

Each step is a plain function over records so it can be tested alone.
"""
