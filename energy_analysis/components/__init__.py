"""Reusable components for the energy analysis.

This package contains modular components organized by layer:
- visualization: color palette shared by all charts
- export: standalone HTML chart export
"""
