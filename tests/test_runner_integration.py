"""
Integration test for the CLI pipeline.

Verifies the full pipeline works end-to-end:
1. Load scenario
2. Build sizing matrix and cost rollup
3. Print tables
4. Export CSV
"""

import json
from pathlib import Path

import pytest

from kafka_sizing_core.runner import main, parse_args

DEFAULT_SCENARIO = Path(__file__).resolve().parents[1] / "scenarios" / "scenario_default.json"


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for key in [
        "SIZING_VALIDATION_POLICY",
        "SIZING_CURRENCY_SYMBOL",
        "SIZING_EXPORT_FILENAME",
        "SIZING_DEFAULT_TOPOLOGY",
    ]:
        monkeypatch.delenv(key, raising=False)
    # Keep a stray .env in the working directory out of the test
    monkeypatch.setattr("kafka_sizing_core.runner.load_dotenv", lambda: None)


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.scenario is None
        assert args.topology is None
        assert args.policy is None
        assert args.output_dir == "results"
        assert args.no_export is False


class TestMain:
    def test_default_run_writes_csv(self, tmp_path, capsys):
        main(["--output-dir", str(tmp_path)])
        out = capsys.readouterr().out
        assert "=== Sizing Results ===" in out
        assert "Cost Summary (Single Cluster)" in out
        assert "£3024.00/mo" in out

        csv_text = (tmp_path / "kafka-sizing-calculator.csv").read_text(encoding="utf-8")
        assert csv_text.splitlines()[4] == "PRD,Unified Cluster,15,£1296.00,£1944.00,£2700.00"

    def test_scenario_with_connectors(self, tmp_path, capsys):
        main(["--scenario", str(DEFAULT_SCENARIO), "--output-dir", str(tmp_path)])
        out = capsys.readouterr().out
        assert "Connector Costs" in out
        assert "Salesforce Source" in out
        # 3024 + 150 + 200
        assert "£3374.00/mo" in out

    def test_per_domain_topology_override(self, tmp_path, capsys):
        main(["--topology", "per-domain", "--output-dir", str(tmp_path)])
        out = capsys.readouterr().out
        assert "Cluster per Domain" in out
        lines = (tmp_path / "kafka-sizing-calculator.csv").read_text(encoding="utf-8").splitlines()
        assert len(lines) == 21

    def test_no_export(self, tmp_path):
        main(["--no-export", "--output-dir", str(tmp_path)])
        assert not (tmp_path / "kafka-sizing-calculator.csv").exists()

    def test_invalid_scenario_exits(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"profiles": {"cust": {"replication_factor": 2}}}), encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            main(["--scenario", str(path), "--output-dir", str(tmp_path)])
        assert excinfo.value.code == 1
        assert "ERROR:" in capsys.readouterr().out

    def test_clamp_policy_reports_notices(self, tmp_path, capsys):
        path = tmp_path / "clamp.json"
        path.write_text(json.dumps({"profiles": {"cust": {"replication_factor": 2}}}), encoding="utf-8")
        main(["--scenario", str(path), "--policy", "clamp", "--output-dir", str(tmp_path)])
        out = capsys.readouterr().out
        assert "Clamped Inputs" in out
        assert "cust.replication_factor" in out

    def test_env_currency_symbol(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SIZING_CURRENCY_SYMBOL", "$")
        main(["--output-dir", str(tmp_path)])
        text = (tmp_path / "kafka-sizing-calculator.csv").read_text(encoding="utf-8")
        assert "$1296.00" in text
