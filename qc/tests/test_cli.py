"""
Tests for the qc command-line tool.
"""

import json

import pytest
from typer.testing import CliRunner

from qc import __version__
from qc.cli.commands.run import load_target
from qc.cli.main import app

runner = CliRunner()

SAMPLES = "qc.tests.sample_properties"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("QC_TRIALS", "QC_SIZE", "QC_VERBOSE", "QC_GROW", "QC_SEED"):
        monkeypatch.delenv(var, raising=False)


def test_run_passing_property():
    result = runner.invoke(app, ["run", f"{SAMPLES}:prop_reverse_twice"])

    assert result.exit_code == 0
    assert "passed" in result.output


def test_run_passing_property_json():
    result = runner.invoke(app, ["run", f"{SAMPLES}:prop_reverse_twice", "-n", "20", "--seed", "9", "--json"])

    assert result.exit_code == 0
    output = json.loads(result.output)
    assert output == {"success": True, "check": f"{SAMPLES}:prop_reverse_twice", "trials": 20, "seed": 9}


def test_run_falsified_property():
    result = runner.invoke(app, ["run", f"{SAMPLES}:prop_below_ten", "--seed", "3", "--trials", "500"])

    assert result.exit_code == 1
    assert "falsified" in result.output


def test_run_falsified_property_json():
    result = runner.invoke(
        app, ["run", f"{SAMPLES}:prop_below_ten", "--seed", "3", "--trials", "500", "--json"]
    )

    assert result.exit_code == 1
    output = json.loads(result.output)
    assert output["success"] is False
    assert output["outcome"] == "falsified"
    assert output["counterexample"] == "10"
    assert output["seed"] == 3


def test_run_occurs_flag():
    result = runner.invoke(app, ["run", f"{SAMPLES}:prop_negative", "--occurs", "-n", "10", "--json"])

    assert result.exit_code == 1
    output = json.loads(result.output)
    assert output["outcome"] == "no-witness"
    assert output["trials"] == 10


def test_run_decorated_occurs():
    """Decorated properties keep their mode and config."""
    result = runner.invoke(app, ["run", f"{SAMPLES}:finds_zero", "--json"])

    assert result.exit_code == 0
    output = json.loads(result.output)
    assert output["witness"] == "SmallN(0)"


def test_run_decorated_occurs_without_witness():
    result = runner.invoke(app, ["run", f"{SAMPLES}:finds_negative", "--json"])

    assert result.exit_code == 1
    assert json.loads(result.output)["trials"] == 10


@pytest.mark.parametrize(
    "target",
    [
        "no_colon_here",
        f"{SAMPLES}:missing",
        "qc.tests.no_such_module:prop",
        f"{SAMPLES}:prop_unannotated",
    ],
)
def test_run_bad_target(target):
    result = runner.invoke(app, ["run", target, "--json"])

    assert result.exit_code == 2
    assert "error" in json.loads(result.output)


def test_run_negative_trials_is_usage_error():
    result = runner.invoke(app, ["run", f"{SAMPLES}:prop_reverse_twice", "--trials=-1", "--json"])

    assert result.exit_code == 2
    assert "trials" in json.loads(result.output)["error"]


def test_load_target_unwraps_decorated():
    prop, config, of, existential = load_target(f"{SAMPLES}:finds_negative")

    assert existential is True
    assert config.trials == 10
    assert of is None
    assert prop.__name__ == "finds_negative"
    assert not hasattr(prop, "qc_property")


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert f"v{__version__}" in result.output


def test_types():
    result = runner.invoke(app, ["types"])

    assert result.exit_code == 0
    assert "Natural" in result.output
    assert "Tree[...]" in result.output
    assert "Naturals()" in result.output
