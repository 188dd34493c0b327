import logging
from enum import Enum
from typing import List
from pydantic import BaseModel
from mobfight.game.mobs import Mob

logger = logging.getLogger(__name__)


class CombatResolved(RuntimeError):
    """raised when trying to run a turn of combat that is already over"""


class CombatState(str, Enum):
    FIGHTING = "fighting"
    RESOLVED = "resolved"


class Outcome(str, Enum):
    WIN = "win"
    LOSS = "loss"


class RoundReport(BaseModel):
    """hit points of both sides after a round of combat"""

    round: int
    player_hp: int
    target_hp: int


class Combat(BaseModel):
    """represents an instance of combat between a player and an npc.
    the instance lasts until one side is at or below zero hp."""

    player: Mob
    target: Mob
    rounds: int = 0
    state: CombatState = CombatState.FIGHTING

    def model_post_init(self, __context) -> None:
        # combat only starts if both sides are standing
        if not (self.player.is_alive() and self.target.is_alive()):
            self.state = CombatState.RESOLVED

    @property
    def resolved(self) -> bool:
        return self.state == CombatState.RESOLVED

    @property
    def outcome(self) -> Outcome:
        """only the player's hp is checked, so a double knockout is a loss."""
        if self.player.hp > 0:
            return Outcome.WIN
        return Outcome.LOSS

    def turn(self) -> RoundReport:
        """runs a single turn of combat"""
        if self.resolved:
            raise CombatResolved(f"combat with {self.target.name} is already over")

        # the player strikes first, then the target strikes back.
        # neither hit is reduced by defense.
        self.target.set_hp(self.target.get_hp() - self.player.get_atk())
        self.player.set_hp(self.player.get_hp() - self.target.get_atk())
        self.rounds += 1

        logger.debug(
            f"round {self.rounds}: {self.player.format_status()} vs "
            f"{self.target.format_status()}"
        )

        if not (self.player.is_alive() and self.target.is_alive()):
            self.state = CombatState.RESOLVED

        return RoundReport(
            round=self.rounds,
            player_hp=self.player.hp,
            target_hp=self.target.hp,
        )

    def run(self) -> List[RoundReport]:
        """run turns until the combat is resolved"""
        reports = []
        while not self.resolved:
            reports.append(self.turn())
        return reports
