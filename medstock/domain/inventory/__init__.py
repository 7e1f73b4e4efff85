from medstock.domain.inventory.aggregates import Batch, Medicine
from medstock.domain.inventory.registry import DeleteOutcome, MedicineRegistry

__all__ = [
    "Batch",
    "DeleteOutcome",
    "Medicine",
    "MedicineRegistry",
]
