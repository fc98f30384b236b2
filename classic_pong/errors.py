"""
Exceptions raised by Classic Pong
"""


class PongError(Exception):
    """Base class for all Classic Pong errors"""


class DisplayInitError(PongError):
    """The window or the font subsystem could not be created"""


class RandomSourceExhausted(PongError, IndexError):
    """A scripted random source ran out of values"""
