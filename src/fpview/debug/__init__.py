"""
Debug Module

Provides debugging utilities such as the frame statistics panel.
"""

from .stats_panel import StatsPanel

__all__ = ['StatsPanel']
