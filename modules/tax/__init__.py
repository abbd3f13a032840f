"""
Tax Module

Worksheet tax calculation.

Features:
- Fixed linear formula (taxable income -> tax before payments -> tax due)
- Immutable calculation records

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['engine', 'records']
