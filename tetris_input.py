"""Key bindings: per-game hidden letter keys, revealed on first use"""
import random
import string
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

from tetris_config import CONFIG


class Action(Enum):
    LEFT = "← Move Left"
    RIGHT = "→ Move Right"
    ROTATE = "↻ Rotate"
    SOFT_DROP = "↓ Soft Drop"
    HARD_DROP = "⬇ Hard Drop"


class HiddenControls:
    """
    Each game draws five distinct letters for the five actions. The legend
    shows "?" for an action until the player stumbles on its key.
    """
    def __init__(self, rng: Optional[random.Random] = None, reserved: Optional[str] = None):
        self.rng = rng if rng is not None else random.Random()
        reserved = (CONFIG["RESERVED_KEYS"] if reserved is None else reserved).upper()
        self.available = [k for k in string.ascii_uppercase if k not in reserved]
        if len(self.available) < len(Action):
            raise ValueError(f"need {len(Action)} free letters, only {len(self.available)} left")
        self.bindings: Dict[Action, str] = {}
        self.discovered: Set[Action] = set()
        self.reshuffle()

    def reshuffle(self):
        keys = self.rng.sample(self.available, len(Action))
        self.bindings = dict(zip(Action, keys))
        self.discovered.clear()

    def action_for(self, key_name: str) -> Optional[Action]:
        key = key_name.upper()
        for action, bound in self.bindings.items():
            if bound == key:
                self.discovered.add(action)
                return action
        return None

    def legend(self) -> List[Tuple[str, str]]:
        return [(self.bindings[a] if a in self.discovered else "?", a.value) for a in Action]


class StaticControls:
    """Classic layout: arrows, up to rotate, space to hard drop."""
    KEYS = {
        "left": Action.LEFT,
        "right": Action.RIGHT,
        "up": Action.ROTATE,
        "down": Action.SOFT_DROP,
        "space": Action.HARD_DROP,
    }

    def reshuffle(self):
        pass

    def action_for(self, key_name: str) -> Optional[Action]:
        return self.KEYS.get(key_name.lower())

    def legend(self) -> List[Tuple[str, str]]:
        names = {a: k for k, a in self.KEYS.items()}
        return [(names[a].capitalize(), a.value) for a in Action]


def make_controls(rng: Optional[random.Random] = None):
    return HiddenControls(rng) if CONFIG["HIDDEN_CONTROLS"] else StaticControls()


def apply_action(engine, action: Action) -> bool:
    """Run the engine command for action; return True if a redraw is due."""
    if action is Action.LEFT:
        return engine.move_left()
    if action is Action.RIGHT:
        return engine.move_right()
    if action is Action.SOFT_DROP:
        return engine.soft_drop()
    if action is Action.ROTATE:
        engine.rotate_current()
        return True
    if action is Action.HARD_DROP:
        engine.hard_drop()
        return True
    return False
