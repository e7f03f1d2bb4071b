"""
Keyword knowledge-base chat widget with a web-search fallback.
"""

__version__ = "1.0.0"
