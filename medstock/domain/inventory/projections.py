from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from medstock.domain.inventory.aggregates import Batch, Medicine
from medstock.domain.inventory.registry import MedicineRegistry


class BatchView(BaseModel):
    id: int
    quantity: int
    expiry_date: date

    @classmethod
    def from_batch(cls, batch: Batch) -> "BatchView":
        return cls(id=batch.id, quantity=batch.quantity, expiry_date=batch.expiry_date)


class MedicineView(BaseModel):
    id: int
    name: str
    lab_name: str
    qty_available: int = Field(description="sum over held batches, expired ones included until pruned")
    batches: list[BatchView] = Field(default_factory=list)

    @classmethod
    def from_medicine(cls, medicine: Medicine) -> "MedicineView":
        return cls(
            id=medicine.id,
            name=medicine.name,
            lab_name=medicine.lab_name,
            qty_available=medicine.qty_available(),
            batches=[BatchView.from_batch(batch) for batch in medicine.batches],
        )


def registry_snapshot(registry: MedicineRegistry) -> list[dict[str, Any]]:
    return [MedicineView.from_medicine(medicine).model_dump(mode="json") for medicine in registry]
