"""
Core Kernel Module

Foundational configuration and data access for the T-REX worksheet.

Components:
- config: Filenames, layout constants and environment overrides
- db: SQLite connection manager for persisted settings

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['config', 'db']
