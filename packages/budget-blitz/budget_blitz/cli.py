"""budget-blitz command line: play a headless run with a scripted policy.

Run:
    budget-blitz [OPTIONS]

Options:
    --income        Starting income (overrides saved settings)
    --difficulty    easy | normal | hard
    --query         URL-style overrides, e.g. "income=40000&difficulty=hard"
    --policy        idle | approve-all | decline-all | essentials
    --seed          RNG seed (default: random)
    --reaction-ms   Delay before the policy decides on a shown card
    --settings      Settings file (default: $BUDGET_BLITZ_SETTINGS or ~/.budget_blitz.json)
    --save-settings Persist the resolved income/difficulty
    --log-level     DEBUG | INFO | WARNING ...
"""
from __future__ import annotations

import argparse
from dataclasses import replace

from budget_blitz.autoplay import POLICIES, simulate
from budget_blitz.config import DIFFICULTIES
from budget_blitz.logging_setup import configure_logging
from budget_blitz.results import recommend, result_lines, share_text
from budget_blitz.settings import (
    load_settings,
    parse_query,
    resolve_config,
    save_settings,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Budget Blitz -- headless run with a scripted player")
    p.add_argument("--income", type=int, default=None, help="Starting income (must be positive)")
    p.add_argument("--difficulty", choices=DIFFICULTIES, default=None)
    p.add_argument("--query", default="", help="URL query string overrides")
    p.add_argument("--policy", choices=sorted(POLICIES), default="essentials",
                   help="Decision policy (default: essentials)")
    p.add_argument("--seed", type=int, default=None, help="RNG seed (default: random)")
    p.add_argument("--reaction-ms", type=int, default=400,
                   help="Milliseconds a card is shown before deciding (default: 400)")
    p.add_argument("--settings", default=None, metavar="FILE", help="Settings JSON file")
    p.add_argument("--save-settings", action="store_true",
                   help="Save the resolved income and difficulty")
    p.add_argument("--log-level", default=None, help="Logging level (default: INFO)")
    args = p.parse_args(argv)
    if args.income is not None and args.income <= 0:
        p.error("--income must be positive")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    settings = load_settings(args.settings)
    params = parse_query(args.query)
    if args.income is not None:
        params["income"] = str(args.income)
    if args.difficulty is not None:
        params["difficulty"] = args.difficulty
    config = resolve_config(params, settings)

    if args.save_settings:
        save_settings(
            replace(settings, income=config.income, difficulty=config.difficulty),
            args.settings,
        )

    print(f"=== Budget Blitz (income=₹{config.income}, {config.difficulty}, policy={args.policy}) ===")
    result = simulate(config, policy=args.policy, seed=args.seed, reaction_ms=args.reaction_ms)
    for line in result_lines(result):
        print(f"  {line}")
    badge = recommend(result)
    print(f"\n{badge.label}")
    if badge.description:
        print(f"  {badge.description}")
    print(f"\n{share_text(result)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
