from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import date, datetime, time

logger = logging.getLogger(__name__)

UNASSIGNED_BATCH_ID = -1
UNASSIGNED_MEDICINE_ID = 0


@dataclass
class Batch:
    quantity: int = 0
    expiry_date: date = date.min
    id: int = UNASSIGNED_BATCH_ID

    def is_expired(self, now: datetime) -> bool:
        # Expiry dates mean "from the start of that day", in the clock's own zone.
        return datetime.combine(self.expiry_date, time.min, tzinfo=now.tzinfo) < now

    def __str__(self) -> str:
        return f"Id: {self.id}, Quantity: {self.quantity}, Expiry: {self.expiry_date.isoformat()}"


@dataclass(eq=False)
class Medicine:
    """A medicine and its batches, consumed oldest-purchase first.

    Batches stay in arrival order; expiry dates never reorder them. Expired
    batches are only dropped lazily, as a head prefix, when a sale is made.
    """

    name: str = ""
    lab_name: str = ""
    id: int = UNASSIGNED_MEDICINE_ID
    batches: deque[Batch] = field(default_factory=deque)
    _last_batch_id: int = field(default=0, init=False, repr=False)

    def qty_available(self) -> int:
        return sum(batch.quantity for batch in self.batches)

    def same_identity(self, other: Medicine) -> bool:
        return self.id == other.id

    def _next_batch_id(self) -> int:
        current_max = max((batch.id for batch in self.batches), default=0)
        return max(current_max, self._last_batch_id) + 1

    def buy_batch(self, batch: Batch) -> Batch:
        batch.id = self._next_batch_id()
        self._last_batch_id = batch.id
        self.batches.append(batch)
        return batch

    def absorb_batches(self, other: Medicine) -> int:
        """Move every batch of ``other`` to the tail of this queue, in order.

        Batch ids travel unchanged; the id high-water mark is raised so later
        purchases do not collide with them. Returns the number of batches moved.
        """
        if other is self:
            return 0
        moved = 0
        while other.batches:
            batch = other.batches.popleft()
            self.batches.append(batch)
            self._last_batch_id = max(self._last_batch_id, batch.id)
            moved += 1
        return moved

    def _prune_expired_head(self, now: datetime) -> list[Batch]:
        pruned: list[Batch] = []
        while self.batches and self.batches[0].is_expired(now):
            pruned.append(self.batches.popleft())
        if pruned:
            logger.info(
                "pruned expired batches: medicine_id=%s batch_ids=%s discarded_qty=%s",
                self.id,
                [batch.id for batch in pruned],
                sum(batch.quantity for batch in pruned),
            )
        return pruned

    def sell_medicine(self, qty: int, now: datetime | None = None) -> bool:
        self._prune_expired_head(now or datetime.now())

        available = self.qty_available()
        if qty > available:
            logger.debug("sale refused: medicine_id=%s requested=%s available=%s", self.id, qty, available)
            return False

        remaining = qty
        while remaining > 0 and self.batches:
            head = self.batches[0]
            if head.quantity >= remaining:
                head.quantity -= remaining
                remaining = 0
                if head.quantity == 0:
                    self.batches.popleft()
            else:
                remaining -= head.quantity
                self.batches.popleft()
        return True

    def summary(self) -> str:
        lines = [
            f"=== {self.name} ===",
            f"Id: {self.id}",
            f"Lab: {self.lab_name}",
            f"Available: {self.qty_available()}",
        ]
        return "\n".join(lines) + "\n"

    def detailed(self) -> str:
        lines = [self.summary() + "Batches:"]
        lines.extend(str(batch) for batch in self.batches)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.summary()
