"""Resumit ATS Engine: rule-based resume scoring and analysis."""

__version__ = "1.0.0"
