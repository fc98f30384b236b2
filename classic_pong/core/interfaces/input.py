"""
Input protocol - defines interface for the per-frame key state provider
"""

from typing import Protocol

from classic_pong.core.physics import KeyState


class InputProtocol(Protocol):
    """
    Protocol for anything producing the four logical key states once per frame.

    Decoupling the game loop from the keyboard lets tests drive the game
    with scripted input.
    """

    def poll(self) -> KeyState:
        """
        Read the current key state.

        Returns:
            Mapping from InputAction to pressed state
        """
        ...
