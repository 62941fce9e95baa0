#!/usr/bin/env python3
"""
Compare the cover heuristics on generated and custom instances.

Usage
-----
    python scripts/run_benchmark.py --sizes 50 150 300 --runs 2
    python scripts/run_benchmark.py --custom graphs/ --csv results.csv
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from vcover.algorithms import list_algorithms
from vcover.config import (
    BenchmarkConfig,
    ExecutionConfig,
    GeneratorConfig,
    InstanceConfig,
    SolverConfig,
)
from vcover.engine.runner import BenchmarkRunner, summarize
from vcover.generators import list_generators
from vcover.utils.instance_loader import load_instances


def main() -> None:
    parser = argparse.ArgumentParser(description="vertex cover heuristic benchmark")
    parser.add_argument("--generators", "-g", nargs="+", default=list_generators(), choices=list_generators(), help="Instance generators to use.")
    parser.add_argument("--sizes", "-s", nargs="+", type=int, default=[50, 150, 300], help="Vertex counts to generate.")
    parser.add_argument("--count", type=int, default=2, help="Instances per generator and size.")
    parser.add_argument("--seed", type=int, default=7, help="Base seed for the generators.")
    parser.add_argument("--algorithms", "-a", nargs="+", default=["heuristic", "matching_only", "greedy_only", "networkx_approx"], choices=list_algorithms(), help="Algorithms to compare.")
    parser.add_argument("--budget", "-b", type=float, default=2.0, help="Time budget per solve, in seconds.")
    parser.add_argument("--runs", "-r", type=int, default=1, help="Runs per (algorithm, instance).")
    parser.add_argument("--custom", "-c", type=str, help="Edge-list file or directory of *.txt edge lists.")
    parser.add_argument("--csv", type=str, help="Write the raw results to this CSV file.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s | %(message)s",
    )

    custom = []
    if args.custom:
        try:
            custom = load_instances(args.custom)
        except (FileNotFoundError, ValueError) as e:
            print(f"❌ Failed to load custom instances: {e}")
            sys.exit(1)

    try:
        config = BenchmarkConfig(
            solver=SolverConfig(time_budget_seconds=args.budget),
            instance_config=InstanceConfig(
                generators=[
                    GeneratorConfig(type=name, sizes=args.sizes, count_per_size=args.count, params={"seed": args.seed})
                    for name in args.generators
                ],
                custom_instances=custom,
            ),
            execution_config=ExecutionConfig(runs_per_config=args.runs),
            algorithms=args.algorithms,
        )
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        sys.exit(1)

    runner = BenchmarkRunner(config)
    df = runner.run()

    if args.csv:
        df.to_csv(args.csv, index=False)
        print(f"✅ Raw results written to {args.csv}")

    print()
    print(summarize(df).to_string(index=False))

    failures = df[~df["feasible"]]
    if not failures.empty:
        print(f"\n⚠️  {len(failures)} runs produced an infeasible or failed cover")


if __name__ == "__main__":
    main()
