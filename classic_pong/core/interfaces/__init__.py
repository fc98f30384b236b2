"""
Protocols for the collaborators of the game core
"""

from classic_pong.core.interfaces.input import InputProtocol
from classic_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["InputProtocol", "RendererProtocol"]
