"""
lazypanes - layout and context engine for multi-panel terminal UIs
"""

__version__ = "0.1.0"
