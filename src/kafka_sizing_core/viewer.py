"""
kafka-sizing-core Calculator Viewer

Minimal Streamlit front end for the sizing engine.
Collects inputs, then shows sizing results and the cost summary.

Usage:
    pip install -e ".[viewer]"
    streamlit run src/kafka_sizing_core/viewer.py
    streamlit run src/kafka_sizing_core/viewer.py -- --scenario scenarios/scenario_default.json

Requires the package to be installed (e.g. via ``pip install -e .``).
"""

from __future__ import annotations

import argparse

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from kafka_sizing_core.domain.constants import ENVIRONMENTS
from kafka_sizing_core.domain.entities import CONNECTOR_COST_RULE, PROFILE_FIELD_RULES, SCALING_RULE
from kafka_sizing_core.domain.errors import SizingError
from kafka_sizing_core.domain.value_objects import ClusterTopology, FieldRule, PricingTier
from kafka_sizing_core.domain_registry import list_domains
from kafka_sizing_core.export import EXPORT_MIME_TYPE, format_money, to_csv
from kafka_sizing_core.scenario import (
    SizingInputs,
    default_inputs,
    with_connector,
    with_domain_field,
    with_scaling,
    with_topology,
)
from kafka_sizing_core.scenario_loader import load_scenario
from kafka_sizing_core.sizing_config import SizingConfig, ValidationConfig, load_config
from kafka_sizing_core.use_cases.cost_rollup import cost_dataframe
from kafka_sizing_core.use_cases.estimate import Estimate, estimate
from kafka_sizing_core.use_cases.sizing_matrix import sizing_dataframe

# -- Colors --
TIER_COLORS = {
    PricingTier.BASIC: "#34a853",
    PricingTier.STANDARD: "#1a73e8",
    PricingTier.DEDICATED: "#9334e6",
}

RECOMMENDATIONS = [
    ("Environment Sizing", "Start with lower scaling factors for dev/test environments and adjust based on actual usage patterns."),
    ("Retention", "Consider your compliance and analytical requirements when setting retention periods. Longer retention increases storage costs."),
    ("Partitioning", "Plan for future scaling by choosing appropriate partition counts. More partitions enable higher parallelism but increase overhead."),
    ("Replication", "Use replication factor 3 for production environments to ensure high availability and data durability."),
    ("Compression", "Enable compression to reduce storage and network costs. Typical compression ratios range from 0.3-0.8 depending on data type."),
    ("Peak Planning", "Consider seasonal patterns and marketing campaigns when setting peak multipliers."),
    ("Topic Naming", "Follow the convention domain.subdomain.type.version for better organization and governance."),
]

# Smallest step above an exclusive lower bound
EXCLUSIVE_MIN_STEP = 1e-6

PROFILE_LABELS = {
    "messages_per_sec": "Messages/sec",
    "message_size_kb": "Message size (KB)",
    "retention_days": "Retention (days)",
    "replication_factor": "Replication factor",
    "partitions": "Partitions",
    "peak_multiplier": "Peak multiplier",
    "compression_ratio": "Compression ratio",
}


def _rule_input(container, label: str, rule: FieldRule, value, key: str):
    """Number (or select) widget bounded by a field rule"""
    if rule.allowed is not None:
        options = list(rule.allowed)
        return container.selectbox(label, options=options, index=options.index(value), key=key)
    if rule.integer:
        return container.number_input(
            label,
            min_value=None if rule.minimum is None else int(rule.minimum),
            max_value=None if rule.maximum is None else int(rule.maximum),
            value=int(value),
            step=1,
            key=key,
        )
    minimum = rule.minimum
    if minimum is not None:
        minimum = float(minimum) if rule.minimum_inclusive else min(minimum + EXCLUSIVE_MIN_STEP, float(value))
    return container.number_input(
        label,
        min_value=minimum,
        max_value=None if rule.maximum is None else float(rule.maximum),
        value=float(value),
        step=0.1,
        key=key,
    )


def _render_inputs(inputs: SizingInputs, policy: str) -> SizingInputs:
    """Render input widgets and return the snapshot they describe."""
    st.header("Environment Scaling")
    cols = st.columns(len(ENVIRONMENTS))
    for col, env in zip(cols, ENVIRONMENTS):
        factor = _rule_input(col, env.upper(), SCALING_RULE, inputs.scaling[env], key=f"scaling_{env}")
        inputs = with_scaling(inputs, env, factor, policy)

    st.header("Domain Configuration")
    for domain in list_domains():
        profile = inputs.profile(domain.key)
        with st.expander(f"{domain.display_name} ({domain.key})", expanded=False):
            st.caption(", ".join(domain.subdomains))
            enabled = st.checkbox("Enabled", value=profile.enabled, key=f"{domain.key}_enabled")
            cols = st.columns(4)
            values = {"enabled": enabled}
            for i, (field_name, rule) in enumerate(PROFILE_FIELD_RULES.items()):
                values[field_name] = _rule_input(
                    cols[i % len(cols)],
                    PROFILE_LABELS[field_name],
                    rule,
                    getattr(profile, field_name),
                    key=f"{domain.key}_{field_name}",
                )
            for field_name, value in values.items():
                inputs = with_domain_field(inputs, domain.key, field_name, value, policy)

    st.header("Connectors")
    for connector in inputs.connectors:
        c1, c2, c3 = st.columns([1, 4, 2])
        enabled = c1.checkbox("On", value=connector.enabled, key=f"conn_{connector.id}_on")
        name = c2.text_input("Name", value=connector.name, key=f"conn_{connector.id}_name")
        cost = _rule_input(
            c3, "Monthly cost", CONNECTOR_COST_RULE, connector.monthly_cost, key=f"conn_{connector.id}_cost")
        inputs = with_connector(inputs, connector.id, policy, enabled=enabled, name=name, monthly_cost=cost)

    return inputs


def _render_sizing(result: Estimate) -> None:
    """Render per-environment sizing tables."""
    st.header("Sizing Results")
    df = sizing_dataframe(result.matrix)
    for env in ENVIRONMENTS:
        summary = result.summary[env]
        st.subheader(f"{env.upper()} Environment (Scaling: {result.inputs.scaling[env]}x)")
        env_df = df[df["environment"] == env][["domain", "capacity_units", "throughput_mbps", "storage_gb"]]
        if env_df.empty:
            st.info("No enabled domains.")
            continue
        st.dataframe(
            env_df.rename(columns={
                "domain": "Domain",
                "capacity_units": "ECKU Required",
                "throughput_mbps": "Throughput (MB/s)",
                "storage_gb": "Storage (GB)",
            }).round({"Throughput (MB/s)": 2, "Storage (GB)": 0}),
            use_container_width=True,
            hide_index=True,
        )
        st.caption(
            f"Total: {summary.total_capacity_units} ECKU, "
            f"{summary.total_throughput_mbps:.2f} MB/s, {summary.total_storage_gb:.0f} GB"
        )


def _render_cost_chart(result: Estimate) -> None:
    """Render per-environment cost bars per tier."""
    rollup = result.rollup
    fig = go.Figure()
    for tier in PricingTier:
        fig.add_trace(go.Bar(
            x=[env.upper() for env in rollup.environments],
            y=[env_cost.totals[tier] for env_cost in rollup.environments.values()],
            name=tier.label,
            marker=dict(color=TIER_COLORS[tier]),
        ))
    fig.update_layout(
        title="Monthly Cost by Environment",
        xaxis_title="Environment",
        yaxis_title="Monthly cost",
        barmode="group",
        legend_title="Tier",
        template="plotly_white",
        height=400,
    )
    st.plotly_chart(fig, use_container_width=True)


def _render_costs(result: Estimate, currency_symbol: str) -> None:
    """Render the cost summary, connectors and grand totals."""
    rollup = result.rollup
    st.header("Cost Summary")
    st.caption(f"Architecture: {rollup.topology.label}")

    _render_cost_chart(result)

    df = cost_dataframe(rollup)
    for env, env_cost in rollup.environments.items():
        st.subheader(f"{env.upper()} Environment")
        env_df = df[df["environment"] == env]
        if env_df.empty:
            st.info("No enabled domains.")
            continue
        display = pd.DataFrame({
            "Cluster": env_df["cluster"],
            "ECKU": env_df["capacity_units"],
            **{
                f"{tier.label} (/mo)": env_df[f"cost_{tier.value}"].apply(
                    lambda v: format_money(v, currency_symbol))
                for tier in PricingTier
            },
        })
        st.dataframe(display, use_container_width=True, hide_index=True)
        st.markdown(
            "**Environment Totals:** "
            + " | ".join(f"{tier.label}: {format_money(env_cost.totals[tier], currency_symbol)}" for tier in PricingTier)
        )

    if rollup.connector_total > 0:
        st.subheader("Connector Costs")
        for connector in rollup.connectors:
            st.markdown(f"- {connector.name}: {format_money(connector.monthly_cost, currency_symbol)}/mo")
        st.markdown(f"**Total Connectors:** {format_money(rollup.connector_total, currency_symbol)}/mo")

    st.subheader("Grand Totals (All Environments + Connectors)")
    cols = st.columns(len(PricingTier))
    for col, tier in zip(cols, PricingTier):
        col.metric(tier.label, f"{format_money(rollup.grand_totals[tier], currency_symbol)}/mo")

    with st.expander("Best Practices & Recommendations"):
        for title, text in RECOMMENDATIONS:
            st.markdown(f"- **{title}:** {text}")


def main() -> None:
    # Parse --scenario from Streamlit args (after --)
    parser = argparse.ArgumentParser()
    parser.add_argument("--scenario", default=None)
    args, _ = parser.parse_known_args()

    st.set_page_config(page_title="kafka-sizing-core", layout="wide")
    st.title("Kafka Sizing Calculator")

    config = load_config()
    policy = st.sidebar.selectbox(
        "Validation policy",
        options=["reject", "clamp"],
        index=["reject", "clamp"].index(config.validation.policy),
    )
    config = SizingConfig(
        validation=ValidationConfig(policy=policy),
        export=config.export,
        defaults=config.defaults,
    )

    try:
        if args.scenario:
            inputs = load_scenario(args.scenario, policy=policy, default_topology=config.defaults.topology)
        else:
            inputs = default_inputs(topology=config.defaults.topology)
    except (SizingError, FileNotFoundError, ValueError) as e:
        st.error(f"Failed to load scenario: {e}")
        return

    topologies = list(ClusterTopology)
    topology = st.sidebar.radio(
        "Cluster architecture",
        options=topologies,
        index=topologies.index(inputs.topology),
        format_func=lambda t: t.label,
    )
    inputs = with_topology(inputs, topology)

    tab_inputs, tab_sizing, tab_costs = st.tabs(["Inputs", "Sizing Results", "Cost Summary"])

    with tab_inputs:
        try:
            inputs = _render_inputs(inputs, policy)
        except SizingError as e:
            st.error(str(e))
            return

    result = estimate(inputs, config)
    for notice in result.notices:
        st.sidebar.warning(f"{notice.field}: {notice.original!r} -> {notice.clamped!r}")

    currency_symbol = config.export.currency_symbol
    with tab_sizing:
        st.download_button(
            "Export CSV",
            data=to_csv(result.rollup, currency_symbol),
            file_name=config.export.filename,
            mime=EXPORT_MIME_TYPE,
        )
        _render_sizing(result)

    with tab_costs:
        _render_costs(result, currency_symbol)


if __name__ == "__main__":
    main()
