import logging
from enum import Enum
from typing import Callable

from mobfight.config import Settings, get_settings
from mobfight.game.combat import Combat, Outcome
from mobfight.game.mobs import Mob

logger = logging.getLogger(__name__)


class InvalidHitPoints(ValueError):
    def __init__(self, text: str):
        super().__init__("Please enter a whole number.")
        self.text = text


class Phase(str, Enum):
    """what the session is waiting for on the next line of input"""

    CHOOSING_HP = "hp"
    RESOLVED = "resolved"
    FINISHED = "finished"


def parse_hp(text: str) -> int:
    """read the hit points from the first word of a line of input"""
    words = text.split()
    try:
        return int(words[0])
    except (IndexError, ValueError):
        raise InvalidHitPoints(text)


class Session:
    """a single console game: pick hp, fight bob, then wait for the quit token."""

    def __init__(
        self, send_text: Callable[[str], None], settings: Settings | None = None
    ) -> None:
        self.send_text = send_text
        self.settings = settings or get_settings()
        self.phase = Phase.CHOOSING_HP

        self.player: Mob | None = None
        self.enemy: Mob | None = None
        self.outcome: Outcome | None = None

    def start(self) -> None:
        """greet the player, set up the enemy and ask for hit points"""
        self.send_text(self.settings.greeting)
        self.enemy = self.spawn_enemy()
        self.hp_prompt()

    def spawn_enemy(self) -> Mob:
        enemy = Mob()
        enemy.set_hp(self.settings.enemy_hp)
        enemy.set_atk(self.settings.enemy_atk)
        enemy.set_defense(self.settings.enemy_defense)
        enemy.set_name(self.settings.enemy_name)
        logger.info(f"spawned enemy {enemy.format_status()}")
        return enemy

    def hp_prompt(self) -> None:
        self.send_text("What hp do you want?")

    def handler(self, text: str) -> None:
        """handle a line of input"""
        match self.phase:
            case Phase.CHOOSING_HP:
                try:
                    hp = parse_hp(text)
                except InvalidHitPoints as e:
                    logger.info(f"rejected hp input {e.text!r}")
                    self.send_text(str(e))
                    self.hp_prompt()
                    return
                self.add_player(hp)
                self.fight()

            case Phase.RESOLVED:
                match text.split():
                    case [token] if token == self.settings.quit_token:
                        self.quit()
                    # anything else is ignored
                    case _:
                        return

            case Phase.FINISHED:
                return

    def add_player(self, hp: int) -> None:
        player = Mob()
        player.set_hp(hp)
        player.set_atk(self.settings.player_atk)
        player.set_defense(self.settings.player_defense)
        player.set_name(self.settings.player_name)
        self.player = player

    def fight(self) -> None:
        """run the fight to the end, reporting hp after every round"""
        assert self.player is not None and self.enemy is not None
        combat = Combat(player=self.player, target=self.enemy)

        while not combat.resolved:
            self.send_text("FIGHT!")
            report = combat.turn()
            self.send_text(f"Your HP is {report.player_hp}")
            self.send_text(f"Enemy HP is {report.target_hp}")

        self.outcome = combat.outcome
        logger.info(f"combat over after {combat.rounds} rounds: {self.outcome.value}")

        # the enemy is gone once the fight is over
        self.enemy = None
        logger.info("enemy released")

        if self.outcome == Outcome.WIN:
            self.send_text("You won!! Good job!!")
        else:
            self.send_text("You lost!!!!! HAHAHAHAHAAHAHA!!!!!!")
        self.phase = Phase.RESOLVED

    def quit(self) -> None:
        logger.info("quit requested")
        self.phase = Phase.FINISHED

    @property
    def finished(self) -> bool:
        return self.phase == Phase.FINISHED

    def run(self, read_line: Callable[[], str]) -> None:
        """drive the session from `read_line` until the player quits.
        Running out of input also ends the session."""
        self.start()
        while not self.finished:
            try:
                text = read_line()
            except EOFError:
                logger.warning(f"end of input while in phase {self.phase.value}")
                self.phase = Phase.FINISHED
                return
            self.handler(text)
