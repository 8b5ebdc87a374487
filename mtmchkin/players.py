"""Players, their jobs and their behaviours."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

MAX_LEVEL = 10
MAX_HEALTH_POINTS = 100
DEFAULT_FORCE = 5
DEFAULT_LEVEL = 1
DEFAULT_COINS = 10

POTION_COST = 5
POTION_HEALTH_INCREASE = 10


class Job:
    """A player's profession; decides combat power and solar eclipse effects."""

    name: ClassVar[str] = "Job"

    def combat_power(self, player: Player) -> int:
        """Return the player's combat power: force plus level."""
        return player.force + player.level

    def apply_solar_eclipse(self, player: Player) -> int:
        """Weaken the player by one force point and return the change."""
        if player.force == 0:
            return 0
        player.force_down()
        return -1


class Warrior(Job):
    """A job whose force counts twice in combat."""

    name: ClassVar[str] = "Warrior"

    def combat_power(self, player: Player) -> int:
        """Return twice the player's force plus their level."""
        return 2 * player.force + player.level


class Sorcerer(Job):
    """A job that grows stronger during a solar eclipse."""

    name: ClassVar[str] = "Sorcerer"

    def apply_solar_eclipse(self, player: Player) -> int:
        """Strengthen the player by one force point and return the change."""
        player.buff(1)
        return 1


class Behavior(ABC):
    """How a player shops at the potions merchant."""

    name: ClassVar[str] = "Behavior"

    @abstractmethod
    def apply_potions_merchant(self, player: Player) -> int:
        """Buy potions for the player and return how many were bought."""


class Responsible(Behavior):
    """Buys as many potions as are useful and affordable."""

    name: ClassVar[str] = "Responsible"

    def apply_potions_merchant(self, player: Player) -> int:
        affordable = player.coins // POTION_COST
        missing = MAX_HEALTH_POINTS - player.health_points
        count = min(affordable, missing // POTION_HEALTH_INCREASE)
        if count <= 0:
            return 0
        player.heal(count * POTION_HEALTH_INCREASE)
        player.pay(count * POTION_COST)
        return count


class RiskTaking(Behavior):
    """Buys a single potion, and only when health is below half."""

    name: ClassVar[str] = "RiskTaking"

    def apply_potions_merchant(self, player: Player) -> int:
        if player.health_points < MAX_HEALTH_POINTS // 2 and player.coins >= POTION_COST:
            player.heal(POTION_HEALTH_INCREASE)
            player.pay(POTION_COST)
            return 1
        return 0


@dataclass
class Player:
    """A participant in the game with its stats, job and behaviour."""

    MAX_HP: ClassVar[int] = MAX_HEALTH_POINTS

    name: str
    job: Job
    behavior: Behavior
    level: int = DEFAULT_LEVEL
    force: int = DEFAULT_FORCE
    health_points: int = MAX_HEALTH_POINTS
    coins: int = DEFAULT_COINS

    def description(self) -> str:
        """Return a one-line summary of the player."""
        return (
            f"{self.name}, {self.job.name} with {self.behavior.name} behavior "
            f"(level {self.level}, force {self.force})"
        )

    def combat_power(self) -> int:
        """Return the combat power as computed by the player's job."""
        return self.job.combat_power(self)

    def level_up(self) -> None:
        """Raise the level by one, up to the maximum level."""
        if self.level < MAX_LEVEL:
            self.level += 1

    def buff(self, amount: int) -> None:
        """Add force; non-positive amounts are ignored."""
        if amount > 0:
            self.force += amount

    def force_down(self) -> None:
        """Lower force by one, never below zero."""
        if self.force > 0:
            self.force -= 1

    def heal(self, amount: int) -> None:
        """Restore health, capped at the maximum; non-positive amounts are ignored."""
        if amount > 0:
            self.health_points = min(self.health_points + amount, self.MAX_HP)

    def damage(self, amount: int) -> None:
        """Take damage, never below zero; non-positive amounts are ignored."""
        if amount > 0:
            self.health_points = max(self.health_points - amount, 0)

    def is_knocked_out(self) -> bool:
        """Return whether the player has no health left."""
        return self.health_points == 0

    def add_coins(self, amount: int) -> None:
        """Add coins; non-positive amounts are ignored."""
        if amount > 0:
            self.coins += amount

    def pay(self, amount: int) -> bool:
        """Spend coins if affordable and non-negative; return whether it was paid."""
        if amount >= 0 and self.coins >= amount:
            self.coins -= amount
            return True
        return False

    def is_max_hp(self) -> bool:
        """Return whether health is at its maximum."""
        return self.health_points == self.MAX_HP