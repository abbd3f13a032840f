"""
Modules Package

Business logic layer of the T-REX worksheet.

Modules:
- tax: Worksheet formula and calculation records
- report: In-session report store, summary, rendering and session controller

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['tax', 'report']
