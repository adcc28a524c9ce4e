from __future__ import annotations

from enum import StrEnum


class WorkType(StrEnum):
    """
    The kind of warehouse operation a location is requested for.
    """

    PICK = "PICK"
    PUT = "PUT"
    MOVE = "MOVE"
    COUNT = "COUNT"
    PACK = "PACK"
    REPLENISH = "REPLENISH"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def requires_inventory_movement(self) -> bool:
        return self in (WorkType.PICK, WorkType.PUT, WorkType.MOVE, WorkType.REPLENISH)

    @property
    def requires_quantity_validation(self) -> bool:
        return self in (WorkType.PICK, WorkType.COUNT, WorkType.PACK)

    @property
    def requires_location_validation(self) -> bool:
        return self in (WorkType.PICK, WorkType.PUT, WorkType.MOVE, WorkType.REPLENISH)


_DESCRIPTIONS = {
    WorkType.PICK: "Pick items from inventory locations",
    WorkType.PUT: "Put items into designated locations",
    WorkType.MOVE: "Move items between locations",
    WorkType.COUNT: "Count inventory for cycle counting",
    WorkType.PACK: "Pack items into containers",
    WorkType.REPLENISH: "Replenish picking locations",
}
