"""Daily nutrition goal models."""

from dataclasses import dataclass, fields

DEFAULT_DAILY_CALORIES = 2000
DEFAULT_PROTEIN = 150
DEFAULT_CARBS = 250
DEFAULT_FAT = 65
DEFAULT_FIBER = 25
DEFAULT_SODIUM = 2300


@dataclass(frozen=True)
class ResolvedGoals:
    """Daily targets with every field set."""

    daily_calories: int = DEFAULT_DAILY_CALORIES
    protein: int = DEFAULT_PROTEIN
    carbs: int = DEFAULT_CARBS
    fat: int = DEFAULT_FAT
    fiber: int = DEFAULT_FIBER
    sodium: int = DEFAULT_SODIUM


@dataclass(frozen=True)
class NutritionGoals:
    """User daily targets; ``None`` marks a field the user has not set."""

    daily_calories: int | None = None
    protein: int | None = None
    carbs: int | None = None
    fat: int | None = None
    fiber: int | None = None
    sodium: int | None = None

    @classmethod
    def from_stored(cls, values: dict[str, object]) -> "NutritionGoals":
        """Build goals from a stored mapping where ``0`` means unset."""
        parsed: dict[str, int | None] = {}
        for goal in fields(cls):
            raw = values.get(goal.name)
            value = int(raw) if isinstance(raw, int | float) else 0
            parsed[goal.name] = value or None
        return cls(**parsed)

    def to_stored(self) -> dict[str, int]:
        """Return the storage mapping with unset fields written as ``0``."""
        return {goal.name: getattr(self, goal.name) or 0 for goal in fields(self)}

    def resolved(self) -> ResolvedGoals:
        """Fill unset fields from the default goal set."""
        defaults = ResolvedGoals()
        return ResolvedGoals(
            **{
                goal.name: getattr(self, goal.name) or getattr(defaults, goal.name)
                for goal in fields(self)
            }
        )
