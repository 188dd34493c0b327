from typing import ClassVar
from pydantic import BaseModel, PrivateAttr


class Mob(BaseModel):
    """a mob, or npc. The player is a mob too."""

    # total mobs constructed in this process. never decremented.
    _created: ClassVar[int] = 0

    name: str = "John Doe"

    hp: int = 15
    atk: int = 15
    defense: int = 15  # stored, but not used in damage

    # reserved for a future gold pouch; nothing reads or writes it yet
    _gold_pouch: int = PrivateAttr(default=0)

    def model_post_init(self, __context) -> None:
        Mob._created += 1

    @classmethod
    def creation_count(cls) -> int:
        """return how many mobs have ever been created"""
        return Mob._created

    def set_hp(self, hp: int):
        self.hp = hp

    def get_hp(self) -> int:
        return self.hp

    def set_atk(self, atk: int):
        self.atk = atk

    def get_atk(self) -> int:
        return self.atk

    def set_defense(self, defense: int):
        self.defense = defense

    def get_defense(self) -> int:
        return self.defense

    def set_name(self, name: str):
        self.name = name

    def get_name(self) -> str:
        return self.name

    def is_alive(self) -> bool:
        """hp is never clamped, so anything at or below zero counts as down."""
        return self.hp > 0

    def format_status(self):
        """return a short line describing the mob, e.g. 'bob (hp 10, atk 10)'"""
        return f"{self.name} (hp {self.hp}, atk {self.atk})"
