"""
Build breaker check failing an analysis on quality gate error alerts.
"""

__version__ = '1.0.0'
