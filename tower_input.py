"""Keyboard → per-frame actions"""
from typing import Dict, Iterable, Set
import pygame
from tower_game import Action, FrameInput

KEY_BINDINGS: Dict[int, Action] = {
    pygame.K_SPACE: Action.DROP,
    pygame.K_p: Action.PAUSE,
    pygame.K_r: Action.RESTART,
    pygame.K_ESCAPE: Action.QUIT,
}


class KeyLatch:
    """Turns one frame's worth of pygame events into a FrameInput.

    Only KEYDOWN counts, so holding a key fires its action once.
    """
    def __init__(self, bindings: Dict[int, Action] = None):
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)

    def collect(self, events: Iterable[pygame.event.Event]) -> FrameInput:
        pressed: Set[Action] = set()
        for e in events:
            if e.type == pygame.QUIT:
                pressed.add(Action.QUIT)
            elif e.type == pygame.KEYDOWN:
                action = self.bindings.get(e.key)
                if action is not None:
                    pressed.add(action)
        return FrameInput(frozenset(pressed))
