from __future__ import annotations

import logging
from typing import Callable

from medstock.console.prompts import InputFn, OutputFn, Prompter
from medstock.core.config import Settings, get_settings
from medstock.domain.inventory import Batch, DeleteOutcome, Medicine, MedicineRegistry

logger = logging.getLogger(__name__)

MENU_OPTIONS = (
    "0. Exit.",
    "1. Register medicine.",
    "2. Show medicine (summary).",
    "3. Show medicine (detailed).",
    "4. Buy medicine (register batch).",
    "5. Sell medicine.",
    "6. List all medicines.",
    "7. Delete medicine.",
)

NOT_FOUND_MESSAGE = "Medicine not found!\nCheck that it exists in the list."

_DELETE_MESSAGES = {
    DeleteOutcome.DELETED: "Medicine deleted.",
    DeleteOutcome.NOT_FOUND: NOT_FOUND_MESSAGE,
    DeleteOutcome.HAS_STOCK: "Medicine still has batches in stock and cannot be deleted.",
}


class MedicineMenu:
    def __init__(
        self,
        registry: MedicineRegistry,
        settings: Settings | None = None,
        input_fn: InputFn | None = None,
        output_fn: OutputFn | None = None,
    ):
        self.registry = registry
        self.settings = settings or get_settings()
        self._input = input_fn or input
        self._output = output_fn or print
        self.prompter = Prompter(input_fn=self._input, output_fn=self._output)
        self._actions: dict[int, Callable[[], None]] = {
            1: self.register_medicine,
            2: lambda: self.show_medicine(detailed=False),
            3: lambda: self.show_medicine(detailed=True),
            4: self.buy_batch,
            5: self.sell_medicine,
            6: self.list_medicines,
            7: self.delete_medicine,
        }

    def run(self) -> int:
        try:
            while True:
                for line in MENU_OPTIONS:
                    self._output(line)
                choice = self.prompter.read_int("Option number: ", 0, len(MENU_OPTIONS) - 1)
                if choice == 0:
                    return 0
                self._actions[choice]()
                self._pause()
        except EOFError:
            logger.debug("input closed, leaving menu")
            return 0

    def _pause(self) -> None:
        if self.settings.pause_after_action:
            self._input("Press Enter to return to the menu.")

    def _read_id(self) -> int:
        # Ids grow past max_input_int once enough medicines are registered.
        return self.prompter.read_int("Medicine id: ", 0, max(self.settings.max_input_int, self.registry.last_id))

    def _lookup(self) -> Medicine | None:
        medicine = self.registry.search(self._read_id())
        if medicine is None:
            self._output(NOT_FOUND_MESSAGE)
        return medicine

    def register_medicine(self) -> None:
        name = self.prompter.read_text("Medicine name: ")
        lab_name = self.prompter.read_text("Laboratory name: ")
        medicine = self.registry.add(Medicine(name=name, lab_name=lab_name))
        self._output(f"Medicine registered with id {medicine.id}.")

    def show_medicine(self, detailed: bool) -> None:
        medicine = self._lookup()
        if medicine is None:
            return
        self._output(medicine.detailed() if detailed else medicine.summary())

    def buy_batch(self) -> None:
        medicine = self._lookup()
        if medicine is None:
            return
        qty = self.prompter.read_int("Quantity: ", 1, self.settings.max_input_int)
        expiry = self.prompter.read_date(self.settings.min_expiry_year, self.settings.max_expiry_year)
        batch = medicine.buy_batch(Batch(qty, expiry))
        self._output(f"Batch {batch.id} added.")

    def sell_medicine(self) -> None:
        medicine = self._lookup()
        if medicine is None:
            return
        qty = self.prompter.read_int("Quantity wanted: ", 1, self.settings.max_input_int)
        if medicine.sell_medicine(qty):
            self._output("Medicine sold.")
        else:
            self._output("Requested quantity is not available!")

    def list_medicines(self) -> None:
        if not len(self.registry):
            self._output("No medicines registered.")
            return
        self._output(self.registry.report())

    def delete_medicine(self) -> None:
        outcome = self.registry.delete_outcome(Medicine(id=self._read_id()))
        self._output(_DELETE_MESSAGES[outcome])
