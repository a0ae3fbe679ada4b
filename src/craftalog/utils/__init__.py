"""
Utility helpers for craftalog.
"""
