"""
Space Invaders
"""

__version__ = "0.2.0"
