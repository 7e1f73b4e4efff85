from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator

from medstock.domain.inventory.aggregates import Medicine

logger = logging.getLogger(__name__)


class DeleteOutcome(str, Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    HAS_STOCK = "has_stock"


class MedicineRegistry:
    """Insertion-ordered set of medicines, unique by id."""

    def __init__(self) -> None:
        self._medicines: list[Medicine] = []
        self._last_id = 0

    def _find(self, medicine: Medicine) -> Medicine | None:
        return next((m for m in self._medicines if m.same_identity(medicine)), None)

    def _next_id(self) -> int:
        return self.last_id + 1

    def add(self, medicine: Medicine) -> Medicine:
        existing = self._find(medicine)
        if existing is medicine:
            return existing
        if existing is not None:
            # Incoming name/lab are dropped; only the stock is merged.
            moved = existing.absorb_batches(medicine)
            logger.info("merged medicine: id=%s batches_moved=%s", existing.id, moved)
            return existing

        medicine.id = self._next_id()
        self._last_id = medicine.id
        self._medicines.append(medicine)
        logger.info("registered medicine: id=%s name=%s lab=%s", medicine.id, medicine.name, medicine.lab_name)
        return medicine

    def delete_outcome(self, medicine: Medicine) -> DeleteOutcome:
        existing = self._find(medicine)
        if existing is None:
            return DeleteOutcome.NOT_FOUND
        if existing.batches:
            logger.info(
                "delete blocked by stock: id=%s batches=%s qty=%s",
                existing.id,
                len(existing.batches),
                existing.qty_available(),
            )
            return DeleteOutcome.HAS_STOCK
        self._medicines.remove(existing)
        logger.info("deleted medicine: id=%s", existing.id)
        return DeleteOutcome.DELETED

    def delete(self, medicine: Medicine) -> bool:
        return self.delete_outcome(medicine) is DeleteOutcome.DELETED

    def search(self, medicine_id: int) -> Medicine | None:
        return next((m for m in self._medicines if m.id == medicine_id), None)

    @property
    def last_id(self) -> int:
        return max(max((m.id for m in self._medicines), default=0), self._last_id)

    def all(self) -> list[Medicine]:
        return list(self._medicines)

    def report(self) -> str:
        return "".join(medicine.detailed() + "\n" for medicine in self._medicines)

    def __iter__(self) -> Iterator[Medicine]:
        return iter(list(self._medicines))

    def __len__(self) -> int:
        return len(self._medicines)

    def __str__(self) -> str:
        return self.report()
