"""Monetary domain package.

This package contains the exact two-digit decimal type `FixedDecimal`, the `Currency` tag
with its registry, and `Money`, which adds currency safety and proportional allocation.
"""
