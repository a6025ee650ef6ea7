"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: MIT-0

Permission is hereby granted, free of charge, to any person obtaining a copy of this
software and associated documentation files (the "Software"), to deal in the Software
without restriction, including without limitation the rights to use, copy, modify,
merge, publish, distribute, sublicense, and/or sell copies of the Software, and to
permit persons to whom the Software is furnished to do so.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED,
INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A
PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION
OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""

import json
import logging

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

REQUIRED_PARAMETERS = {
    "resource_name": "Please provide a resource name prefix for the build",
    "instance": "Please provide the instance name to use (dev/prod/...)",
    "region": "Please provide the aws region the AMI map is pinned to",
    "tag_name": "Please provide the tag name to apply to all resources",
    "tag_value": "Please provide the tag value to apply to all resources",
    "vpc": "Please provide the vpc settings for the build",
    "ec2": "Please provide the ec2 instance settings for the build",
    "rds": "Please provide the rds instance settings for the build",
}

REQUIRED_NESTED_PARAMETERS = {
    ("vpc", "cidr_range"): "Please provide vpc cidr range for the build",
    ("ec2", "ami_map"): "Please provide an AMI id for at least one region",
    ("ec2", "ingress"): "Please provide at least one ingress port for the ec2 instance",
    ("rds", "snapshot_identifier"): "Please provide the snapshot to restore the database from",
    ("rds", "port"): "Please provide the database port",
}


def load_parameters(path="parameters.json"):
    """Read the parameters file and check that the required settings are present.

    Raises FileNotFoundError if the file does not exist and ValueError
    if a required setting is missing or empty.
    """
    with open(path, "r") as param_file:
        param_data = param_file.read()
    config = json.loads(param_data)

    validate_parameters(config)

    logger.info(
        f"Loaded parameters from {path} for {config['resource_name']}-{config['instance']}"
    )
    return config


def validate_parameters(config):
    for key, message in REQUIRED_PARAMETERS.items():
        if config.get(key) is None:
            raise ValueError(message)

    for (section, key), message in REQUIRED_NESTED_PARAMETERS.items():
        if not config[section].get(key):
            raise ValueError(message)

    for rule in config["ec2"]["ingress"]:
        if not isinstance(rule, dict):
            raise ValueError(f"Ingress rule {rule!r} must be an object with a port")
        if "port" not in rule:
            raise ValueError(f"Ingress rule {rule} is missing a port")
