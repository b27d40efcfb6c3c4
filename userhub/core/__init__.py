"""
Core package.

Holds process-wide configuration shared by every layer.
"""
