import json
import os

import pytest

from uniview_iac.parameters import load_parameters

PARAMETERS_FILE = os.path.join(
    os.path.dirname(__file__), os.pardir, os.pardir, "parameters.json"
)


def parameters():
    with open(PARAMETERS_FILE, "r") as param_file:
        return json.loads(param_file.read())


def write_parameters(tmp_path, config):
    path = tmp_path / "parameters.json"
    path.write_text(json.dumps(config))
    return str(path)


def test_load_repo_parameters():
    config = load_parameters(PARAMETERS_FILE)

    assert config["resource_name"] == "uniview"
    assert config["vpc"]["cidr_range"] == "10.0.0.0/16"
    assert [rule["port"] for rule in config["ec2"]["ingress"]] == [80, 5000]
    assert config["rds"]["port"] == 5432
    assert config["rds"]["backup_retention_days"] == 0


def test_missing_top_level_parameter(tmp_path):
    config = parameters()
    config.pop("rds")

    with pytest.raises(ValueError, match="rds instance settings"):
        load_parameters(write_parameters(tmp_path, config))


def test_missing_snapshot_identifier(tmp_path):
    config = parameters()
    config["rds"]["snapshot_identifier"] = ""

    with pytest.raises(ValueError, match="snapshot"):
        load_parameters(write_parameters(tmp_path, config))


def test_empty_ami_map(tmp_path):
    config = parameters()
    config["ec2"]["ami_map"] = {}

    with pytest.raises(ValueError, match="AMI id"):
        load_parameters(write_parameters(tmp_path, config))


def test_ingress_rule_without_port(tmp_path):
    config = parameters()
    config["ec2"]["ingress"].append({"description": "no port"})

    with pytest.raises(ValueError, match="missing a port"):
        load_parameters(write_parameters(tmp_path, config))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_parameters(str(tmp_path / "missing.json"))


def test_ingress_rule_not_an_object(tmp_path):
    config = parameters()
    config["ec2"]["ingress"] = ["80"]

    with pytest.raises(ValueError, match="must be an object with a port"):
        load_parameters(write_parameters(tmp_path, config))
