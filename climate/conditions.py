# climate/conditions.py
"""
Active game conditions (cold snaps, heat waves, ...) as seen by the climate core.

A ConditionSet is what one map knows about; it may chain to a parent set
(the world's conditions) whose members apply to the map as well.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from climate.temperature import TemperatureModel


@dataclass(frozen=True)
class ActiveCondition:
    """A running condition and the host's own view of its temperature effect."""
    kind: str
    ticks_elapsed: int = 0
    ticks_remaining: int = 0
    default_offset: float = 0.0   # Offset the host would apply on its own
    prevents_rain: bool = False


@dataclass
class ConditionSet:
    conditions: Tuple[ActiveCondition, ...] = ()
    parent: Optional["ConditionSet"] = None

    def __post_init__(self):
        self.conditions = tuple(self.conditions)

    def __iter__(self) -> Iterator[ActiveCondition]:
        """Iterate this set's conditions, then every ancestor's."""
        current: Optional[ConditionSet] = self
        while current is not None:
            yield from current.conditions
            current = current.parent

    @property
    def prevents_rain(self) -> bool:
        return any(condition.prevents_rain for condition in self)


def condition_offset(model: "TemperatureModel", condition: ActiveCondition) -> float:
    """Offset for one condition, deferring to its default without an override."""
    return model.condition_temperature_offset(
        condition.kind,
        condition.ticks_elapsed,
        condition.ticks_remaining,
        condition.default_offset,
    )


def aggregate_temperature_offset(model: "TemperatureModel",
                                 condition_set: Optional[ConditionSet]) -> float:
    """Sum of every active condition's offset, parents included."""
    if condition_set is None:
        return 0.0
    return sum((condition_offset(model, condition) for condition in condition_set), 0.0)
