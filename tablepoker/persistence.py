"""
Chip persistence between sessions.

Chip counts are stored as a JSON list of {"id": ..., "chips": ...}
records. A missing or unreadable file simply means there is nothing to
resume from.
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, List, Optional, Union
import json
import logging
import os

from tablepoker.core.state import GameState


logger = logging.getLogger(__name__)

CHIPS_FILE_ENV = "TABLEPOKER_CHIPS_FILE"
DEFAULT_CHIPS_FILE = "poker_chips.json"


def default_chips_path() -> Path:
    """Chips file from the environment, or the default file name."""
    return Path(os.environ.get(CHIPS_FILE_ENV, DEFAULT_CHIPS_FILE))


class ChipStore:
    """
    Stores each player's chip count in a JSON file.

    Usage:
        store = ChipStore("chips.json")
        store.save(state)
        saved = store.load()   # {"1": 950, "bot-1": 1050} or None
    """

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path is not None else default_chips_path()

    def load(self) -> Optional[Dict[str, int]]:
        """
        Read the saved id -> chips mapping.

        Returns:
            The mapping, or None if nothing usable is stored
        """
        if not self.path.exists():
            return None

        try:
            records = json.loads(self.path.read_text(encoding="utf-8"))
            return {str(r["id"]): int(r["chips"]) for r in records}
        except (OSError, ValueError, TypeError, KeyError) as e:
            logger.warning(f"Ignoring unreadable chips file {self.path}: {e}")
            return None

    def save(self, state: GameState) -> None:
        """Write every seat's (id, chips) pair."""
        records: List[Dict[str, Union[str, int]]] = [
            {"id": p.player_id, "chips": p.chips} for p in state.players
        ]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(records), encoding="utf-8")
        logger.debug(f"Saved chips for {len(records)} players to {self.path}")
