"""
Analysis module - Model request packaging and response validation.
"""

from .client import AnalysisClient, parse_report

__all__ = ["AnalysisClient", "parse_report"]
