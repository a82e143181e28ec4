"""Compare payoff strategies for debts stored in a JSON file.

Usage:
    python scripts/compare_strategies.py debts.json --budget 12000
    python scripts/compare_strategies.py debts.json --budget 12000 --strategy avalanche

The JSON file holds a list of objects with id, balance, annual_interest_rate
and optionally name and is_paid.
"""

import argparse
import json
import logging
import os
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Add project root to python path so the package imports without installing
sys.path.insert(0, os.getcwd())

from debtplan.api.routes.strategies import compare_strategies, simulate_strategy
from debtplan.api.schemas import CompareRequest, SimulateRequest

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("compare_strategies")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Compare snowball and avalanche payoff plans.")
    parser.add_argument("debts_file", help="Path to a JSON list of debts")
    parser.add_argument("--budget", type=Decimal, default=None, help="Monthly budget for all debts")
    parser.add_argument(
        "--strategy",
        choices=["snowball", "avalanche"],
        default=None,
        help="Simulate a single strategy instead of comparing both",
    )
    parser.add_argument("--start-date", type=date.fromisoformat, default=None)
    args = parser.parse_args(argv)

    path = Path(args.debts_file)
    if not path.exists():
        logger.error(f"Debts file not found: {path}")
        return 1

    with path.open("r", encoding="utf-8") as handle:
        debts = json.load(handle)
    logger.info(f"Loaded {len(debts)} debts from {path}")

    if args.strategy:
        if args.budget is None:
            parser.error("--budget is required with --strategy")
        response = simulate_strategy(
            SimulateRequest(
                debts=debts,
                monthly_budget=args.budget,
                strategy=args.strategy,
                start_date=args.start_date,
            )
        )
    else:
        response = compare_strategies(
            CompareRequest(debts=debts, monthly_budget=args.budget, start_date=args.start_date)
        )

    print(response.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
