"""
kafka-sizing-core CLI Runner

Minimal CLI for sizing a deployment and exporting its cost summary.

Usage:
    python -m kafka_sizing_core.runner
    python -m kafka_sizing_core.runner --scenario scenarios/scenario_default.json
    python -m kafka_sizing_core.runner --scenario my.json --topology per-domain --policy clamp
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from kafka_sizing_core.domain.constants import ENVIRONMENTS
from kafka_sizing_core.domain.errors import SizingError
from kafka_sizing_core.domain.value_objects import ClusterTopology, PricingTier
from kafka_sizing_core.domain_registry import get_domain
from kafka_sizing_core.export import format_money, write_csv
from kafka_sizing_core.scenario import default_inputs, with_topology
from kafka_sizing_core.scenario_loader import load_scenario
from kafka_sizing_core.sizing_config import SizingConfig, ValidationConfig, load_config
from kafka_sizing_core.use_cases.estimate import Estimate, estimate


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="kafka-sizing-core: Estimate Kafka capacity units and monthly cost",
    )
    parser.add_argument(
        "--scenario",
        default=None,
        help="Path to a scenario JSON file (default: built-in defaults)",
    )
    parser.add_argument(
        "--topology",
        choices=[t.value for t in ClusterTopology],
        default=None,
        help="Cluster topology (default: scenario value, then SIZING_DEFAULT_TOPOLOGY)",
    )
    parser.add_argument(
        "--policy",
        choices=["reject", "clamp"],
        default=None,
        help="Validation policy for out-of-range inputs (default: SIZING_VALIDATION_POLICY)",
    )
    parser.add_argument(
        "--output-dir",
        default="results",
        help="Directory for the exported CSV file (default: results)",
    )
    parser.add_argument(
        "--no-export",
        action="store_true",
        help="Print the tables only, do not write the CSV file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def _print_sizing(result: Estimate) -> None:
    print("=== Sizing Results ===\n")
    for env in ENVIRONMENTS:
        results = result.matrix.get(env, {})
        print(f"  {env.upper()} Environment (Scaling: {result.inputs.scaling.get(env)}x)")
        print(f"  {'Domain':<24} {'ECKU':>6} {'Throughput (MB/s)':>18} {'Storage (GB)':>13}")
        print(f"  {'-'*24} {'-'*6} {'-'*18} {'-'*13}")
        if not results:
            print("  (no enabled domains)")
        for key, sizing in results.items():
            print(
                f"  {get_domain(key).display_name:<24} "
                f"{sizing.capacity_units:>6} "
                f"{sizing.throughput_mbps:>18.2f} "
                f"{sizing.storage_gb:>13.0f}"
            )
        print()


def _print_costs(result: Estimate, currency_symbol: str) -> None:
    rollup = result.rollup
    tier_headers = " ".join(f"{tier.label + ' (/mo)':>18}" for tier in PricingTier)

    print(f"=== Cost Summary ({rollup.topology.label}) ===\n")
    for env, env_cost in rollup.environments.items():
        print(f"  {env.upper()} Environment")
        print(f"  {'Cluster':<32} {'ECKU':>6} {tier_headers}")
        print(f"  {'-'*32} {'-'*6} {' '.join(['-'*18] * len(PricingTier))}")
        for cluster in env_cost.clusters:
            costs = " ".join(
                f"{format_money(cluster.monthly_cost[tier], currency_symbol):>18}" for tier in PricingTier
            )
            print(f"  {cluster.cluster_name:<32} {cluster.capacity_units:>6} {costs}")
        totals = ", ".join(
            f"{tier.label}: {format_money(env_cost.totals[tier], currency_symbol)}" for tier in PricingTier
        )
        print(f"  Environment Totals: {totals}")
        print()

    if rollup.connector_total > 0:
        print("=== Connector Costs ===\n")
        for connector in rollup.connectors:
            print(f"  {connector.name:<40} {format_money(connector.monthly_cost, currency_symbol)}/mo")
        print(f"  {'Total Connectors':<40} {format_money(rollup.connector_total, currency_symbol)}/mo")
        print()

    print("=== Grand Totals (All Environments + Connectors) ===\n")
    for tier in PricingTier:
        print(f"  {tier.label:<12} {format_money(rollup.grand_totals[tier], currency_symbol)}/mo")
    print()


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config()
        if args.policy:
            config = SizingConfig(
                validation=ValidationConfig(policy=args.policy),
                export=config.export,
                defaults=config.defaults,
            )
        policy = config.validation.policy

        if args.scenario:
            print(f"\n=== Loading scenario: {args.scenario} ===\n")
            inputs = load_scenario(args.scenario, policy=policy, default_topology=config.defaults.topology)
        else:
            inputs = default_inputs(topology=config.defaults.topology)
        if args.topology:
            inputs = with_topology(inputs, args.topology)

        print(f"  Topology: {inputs.topology.label}")
        print(f"  Policy:   {policy}")
        print(f"  Domains enabled: {[k for k, p in inputs.profiles.items() if p.enabled]}")
        print()

        result = estimate(inputs, config)
    except (SizingError, ValueError, FileNotFoundError, json.JSONDecodeError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    if result.notices:
        print("=== Clamped Inputs (WARNING) ===\n")
        for notice in result.notices:
            print(f"  WARNING: {notice.field}: {notice.original!r} -> {notice.clamped!r}")
        print()

    _print_sizing(result)
    _print_costs(result, config.export.currency_symbol)

    if not args.no_export:
        path = write_csv(
            result.rollup,
            args.output_dir,
            filename=config.export.filename,
            currency_symbol=config.export.currency_symbol,
        )
        print("=== Output ===\n")
        print(f"  CSV: {path}")
        print()


if __name__ == "__main__":
    main()
