from __future__ import annotations

import argparse
import json
import logging

from medstock.console.menu import MedicineMenu
from medstock.core.config import get_settings
from medstock.core.logging import configure_logging
from medstock.demo import seed_default_scenario
from medstock.domain.inventory import MedicineRegistry
from medstock.domain.inventory.projections import registry_snapshot

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="In-memory medicine stock with FIFO batches")
    parser.add_argument("--log-level", default=None, help="Override MEDSTOCK_LOG_LEVEL")
    top = parser.add_subparsers(dest="command", required=True)

    top.add_parser("menu", help="Run the interactive console menu")

    demo = top.add_parser("demo", help="Seed the sample stock and print the report")
    demo.add_argument("--json", action="store_true", help="Print a JSON snapshot instead of the text report")
    demo.add_argument(
        "--sell",
        nargs=2,
        type=int,
        metavar=("MEDICINE_ID", "QTY"),
        default=None,
        help="Sell QTY units of MEDICINE_ID before reporting",
    )

    return parser


def _run_menu(args: argparse.Namespace) -> int:
    settings = get_settings()
    print(f"{settings.app_name} ({settings.env})")
    return MedicineMenu(MedicineRegistry(), settings=settings).run()


def _run_demo(args: argparse.Namespace) -> int:
    registry = MedicineRegistry()
    result = seed_default_scenario(registry)
    logger.info("demo scenario ready: scenario_id=%s medicines=%s", result["scenario_id"], result["medicine_ids"])

    exit_code = 0
    if args.sell is not None:
        medicine_id, qty = args.sell
        medicine = registry.search(medicine_id)
        if medicine is None:
            logger.error("medicine not found: id=%s", medicine_id)
            exit_code = 1
        elif not medicine.sell_medicine(qty):
            logger.error("insufficient stock: id=%s requested=%s", medicine_id, qty)
            exit_code = 1

    if args.json:
        print(json.dumps(registry_snapshot(registry), ensure_ascii=False, indent=2))
    else:
        print(registry.report(), end="")
    return exit_code


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "menu":
        return _run_menu(args)
    if args.command == "demo":
        return _run_demo(args)

    parser.error("unsupported command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
