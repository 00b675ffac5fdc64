"""Warrior models."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from warriorapi.engine.critical import CriticalRoller, RandomSource

LOW_HEALTH_THRESHOLD = 30

# Special ability requires every stat strictly above its threshold
SPECIAL_ABILITY_MIN_STRENGTH = 7
SPECIAL_ABILITY_MIN_AGILITY = 5
SPECIAL_ABILITY_MIN_INTELLECT = 3


class Warrior(BaseModel):
    """One warrior character: stats plus the values derived from them."""

    model_config = ConfigDict(
        frozen=True,  # Immutable model, updates go through merged()
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: int = Field(description="Unique warrior identifier")
    name: str = Field(default="", description="Warrior name")

    # Build stats
    strength: int = Field(default=0, description="Strength stat")
    agility: int = Field(default=0, description="Agility stat")
    intellect: int = Field(default=0, description="Intellect stat")
    luck: int = Field(default=0, description="Luck stat")

    # Combat stats
    health: int = Field(default=0, description="Current health points")
    attack: float = Field(default=0, description="Base damage per hit")
    attack_speed: float = Field(default=0, description="Attacks per turn (carried data only)")
    critical_chance: float = Field(default=0, description="Probability of a critical hit")
    critical_factor: float = Field(default=0, description="Damage multiplier on critical hits")

    money: float = Field(default=0, description="Currency balance")

    def is_low_on_health(self) -> bool:
        """Check if health is below the low health threshold."""
        return self.health < LOW_HEALTH_THRESHOLD

    def can_afford_purchase(self, cost: float) -> bool:
        """Check if the warrior has at least ``cost`` money."""
        return self.money >= cost

    def is_critical_hit(self, rng: Optional[RandomSource] = None) -> bool:
        """
        Roll whether the next hit is critical.

        Args:
            rng: Random source with a ``random()`` method. Defaults to the
                process-wide generator.

        Returns:
            True if the draw is below critical_chance
        """
        roller = rng if isinstance(rng, CriticalRoller) else CriticalRoller(rng)
        return roller.is_critical(self.critical_chance)

    def calculate_total_damage(self, rng: Optional[RandomSource] = None) -> float:
        """
        Calculate damage for one hit.

        Every call rolls its own critical check, so two calls on the same
        warrior may return different values.
        """
        total_damage = self.attack
        if self.is_critical_hit(rng):
            total_damage *= self.critical_factor
        return total_damage

    def is_special_ability_eligible(self) -> bool:
        """Check strength, agility and intellect against the special ability thresholds."""
        return (
            self.strength > SPECIAL_ABILITY_MIN_STRENGTH
            and self.agility > SPECIAL_ABILITY_MIN_AGILITY
            and self.intellect > SPECIAL_ABILITY_MIN_INTELLECT
        )

    def merged(self, changes: dict[str, Any]) -> "Warrior":
        """
        Build a new warrior with ``changes`` overlaid on this one.

        Keys may use either the wire (camelCase) or attribute spelling.
        null values leave the field as is, and the id never changes.
        """
        data = self.model_dump()
        for key, value in changes.items():
            field_name = _FIELD_BY_KEY.get(key)
            if field_name is not None and value is not None:
                data[field_name] = value
        data["id"] = self.id
        return Warrior.model_validate(data)

    def to_payload(self) -> dict[str, Any]:
        """Serialize with wire (camelCase) field names."""
        return self.model_dump(by_alias=True)


_FIELD_BY_KEY: dict[str, str] = {
    **{name: name for name in Warrior.model_fields},
    **{field.alias: name for name, field in Warrior.model_fields.items() if field.alias},
}


class WarriorInfo(BaseModel):
    """Read-only composite of a warrior's derived values."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    cost: float = Field(description="Cost the affordability check was evaluated against")
    is_low_on_health: bool
    can_afford_purchase: bool
    is_critical_hit: bool
    total_damage: float
    is_special_ability_eligible: bool

    @classmethod
    def from_warrior(
        cls, warrior: Warrior, cost: float = 0, rng: Optional[RandomSource] = None
    ) -> "WarriorInfo":
        """Collect every derived value of ``warrior``."""
        return cls(
            id=warrior.id,
            name=warrior.name,
            cost=cost,
            is_low_on_health=warrior.is_low_on_health(),
            can_afford_purchase=warrior.can_afford_purchase(cost),
            is_critical_hit=warrior.is_critical_hit(rng),
            total_damage=warrior.calculate_total_damage(rng),
            is_special_ability_eligible=warrior.is_special_ability_eligible(),
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize with wire (camelCase) field names."""
        return self.model_dump(by_alias=True)
