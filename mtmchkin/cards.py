"""Monsters and the cards that players draw."""

from __future__ import annotations

from abc import ABC, abstractmethod

from . import messages
from .players import Player


class Monster:
    """A creature a player can fight, with its loot, damage and combat power."""

    def __init__(self, loot: int, damage: int, combat_power: int) -> None:
        self.loot = loot
        self.damage = damage
        self.combat_power = combat_power

    @property
    def name(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(loot={self.loot}, damage={self.damage}, "
            f"combat_power={self.combat_power})"
        )


class Goblin(Monster):
    """A weak monster."""

    def __init__(self) -> None:
        super().__init__(loot=2, damage=10, combat_power=5)


class Giant(Monster):
    """A medium-strength monster."""

    def __init__(self) -> None:
        super().__init__(loot=5, damage=25, combat_power=12)


class Dragon(Monster):
    """A very strong monster."""

    def __init__(self) -> None:
        super().__init__(loot=100, damage=9001, combat_power=17)


class Gang(Monster):
    """A group of monsters whose stats add up."""

    def __init__(self) -> None:
        super().__init__(loot=0, damage=0, combat_power=0)
        self.members: list[Monster] = []

    @property
    def name(self) -> str:
        return f"Gang of {len(self.members)} members"

    def add_monster(self, monster: Monster) -> None:
        """Add a member and fold its stats into the gang's."""
        self.loot += monster.loot
        self.damage += monster.damage
        self.combat_power += monster.combat_power
        self.members.append(monster)


class Card(ABC):
    """A card in the deck."""

    @abstractmethod
    def description(self) -> str:
        """Return the text describing the card."""

    @abstractmethod
    def apply(self, player: Player) -> str:
        """Apply the card to the player and return the outcome text."""


class Encounter(Card):
    """A fight against a monster."""

    def __init__(self, monster: Monster) -> None:
        self.monster = monster

    def description(self) -> str:
        m = self.monster
        return f"{m.name} (power {m.combat_power}, loot {m.loot}, damage {m.damage})"

    def apply(self, player: Player) -> str:
        m = self.monster
        if player.combat_power() > m.combat_power:
            player.level_up()
            player.add_coins(m.loot)
            return messages.encounter_won_message(player, m.loot)
        player.damage(m.damage)
        return messages.encounter_lost_message(player, m.damage)


class PotionsMerchant(Card):
    """A merchant selling potions according to the player's behaviour."""

    def description(self) -> str:
        return "PotionsMerchant"

    def apply(self, player: Player) -> str:
        amount = player.behavior.apply_potions_merchant(player)
        return messages.potions_purchase_message(player, amount)


class SolarEclipse(Card):
    """An eclipse that affects force according to the player's job."""

    def description(self) -> str:
        return "SolarEclipse"

    def apply(self, player: Player) -> str:
        effect = player.job.apply_solar_eclipse(player)
        return messages.solar_eclipse_message(player, effect)