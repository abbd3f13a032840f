"""
Report Module

In-session report of worksheet calculations.

Components:
- store: Append-only ordered record store
- summary: Count / total / average aggregates
- renderer: Table and summary view models
- session: Calculate -> append -> render controller

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['store', 'summary', 'renderer', 'session']
