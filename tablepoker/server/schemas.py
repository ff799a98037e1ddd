"""
Pydantic schemas for API request/response validation.

The table configuration is validated here, before it reaches the engine;
the engine itself never re-validates it.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, model_validator

from tablepoker.core.player import Player, PlayerAction, BotProfile
from tablepoker.core.rules import (
    ActionType, MIN_BOTS, MAX_BOTS, MIN_BUY_IN_BIG_BLINDS,
    DEFAULT_BUY_IN, DEFAULT_BIG_BLIND, DEFAULT_SMALL_BLIND,
)
from tablepoker.core.state import PregameConfig


# ============= Request Schemas =============

class BotDescriptor(BaseModel):
    """A bot seat to add to the table."""
    name: Optional[str] = None
    profile: BotProfile = BotProfile.BASIC


class TableConfigRequest(BaseModel):
    """Request to start a game against bots."""
    players: List[BotDescriptor] = Field(
        default_factory=lambda: [BotDescriptor()],
        min_length=MIN_BOTS,
        max_length=MAX_BOTS,
    )
    buy_in: int = DEFAULT_BUY_IN
    big_blind: int = DEFAULT_BIG_BLIND
    small_blind: int = DEFAULT_SMALL_BLIND

    @model_validator(mode="after")
    def check_stakes(self) -> "TableConfigRequest":
        values = (self.buy_in, self.big_blind, self.small_blind)
        if any(v <= 0 for v in values):
            raise ValueError("All values must be greater than 0.")
        if self.big_blind <= self.small_blind:
            raise ValueError("Big blind must be greater than small blind.")
        if self.big_blind % self.small_blind != 0:
            raise ValueError("Big blind should be a multiple of small blind.")
        if self.buy_in < self.big_blind * MIN_BUY_IN_BIG_BLINDS:
            raise ValueError(
                f"Buy-in is too small (at least {MIN_BUY_IN_BIG_BLINDS}x big blind)."
            )
        return self

    def to_config(self) -> PregameConfig:
        """Convert to the engine's configuration, one bot seat per descriptor."""
        bots = tuple(
            Player.bot(
                player_id=f"bot-{i + 1}",
                name=bot.name or f"Bot {i + 1}",
                profile=bot.profile,
            )
            for i, bot in enumerate(self.players)
        )
        return PregameConfig(
            players=bots,
            buy_in=self.buy_in,
            big_blind=self.big_blind,
            small_blind=self.small_blind,
        )


class ActionRequest(BaseModel):
    """Request to take a game action."""
    action_type: ActionType = Field(..., description="Action type: fold, call, bet, all-in")
    amount: int = Field(default=0, ge=0, description="Chips to add for bet actions")

    def to_action(self) -> PlayerAction:
        return PlayerAction(self.action_type, self.amount)


# ============= Response Schemas =============

class ErrorSchema(BaseModel):
    """Error response."""
    error: str
    detail: Optional[str] = None


# ============= WebSocket Message Schemas =============

class WSActionMessage(BaseModel):
    """WebSocket action message."""
    type: str = "action"
    action: ActionType
    amount: int = Field(default=0, ge=0)


class WSStateMessage(BaseModel):
    """WebSocket state update message."""
    type: str = "state"
    public_info: Dict[str, Any]
    private_info: Dict[str, Any]
