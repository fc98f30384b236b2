"""
Classic Pong - two-player Pong with pygame
"""

__version__ = "0.1.0"
