from __future__ import annotations

from datetime import date, timedelta

from medstock.domain.inventory import Batch, Medicine, MedicineRegistry

DEFAULT_SCENARIO_ID = "default_pharmacy_stock_v1"

# (name, lab, [(quantity, days until expiry), ...]) in purchase order
_CATALOG: tuple[tuple[str, str, tuple[tuple[int, int], ...]], ...] = (
    ("Paracetamol 500mg", "Medley", ((40, 180), (60, 365))),
    # The first batch is already past its expiry; it stays counted until a sale prunes it.
    ("Amoxicillin 875mg", "EMS", ((12, -10), (30, 90), (25, 240))),
    ("Loratadine 10mg", "Neo Quimica", ((15, 30),)),
)


def seed_default_scenario(registry: MedicineRegistry, today: date | None = None) -> dict:
    base_day = today or date.today()
    medicine_ids: list[int] = []
    for name, lab_name, batches in _CATALOG:
        medicine = registry.add(Medicine(name=name, lab_name=lab_name))
        for quantity, days in batches:
            medicine.buy_batch(Batch(quantity, base_day + timedelta(days=days)))
        medicine_ids.append(medicine.id)
    return {
        "scenario_id": DEFAULT_SCENARIO_ID,
        "medicine_ids": medicine_ids,
        "qty_available": sum(registry.search(mid).qty_available() for mid in medicine_ids),
    }
