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
import sys
import boto3
import logging

from botocore.exceptions import ClientError
from botocore.config import Config

logger = logging.getLogger()
logger.setLevel(logging.INFO)

REQUIRED_OUTPUTS = ["dbEndpoint", "secretName"]


def get_stack_outputs(stack_name, region, config):
    client = boto3.client("cloudformation", region_name=region, config=config)
    try:
        response = client.describe_stacks(StackName=stack_name)
    except ClientError as e:
        raise Exception(
            f"An error occurred when describing stack {stack_name}; exception: {e}"
        )

    outputs = {}
    for stack in response.get("Stacks"):
        for output in stack.get("Outputs", []):
            outputs[output["OutputKey"]] = output.get("OutputValue", "")

    logger.info(f"Found {len(outputs)} outputs on stack {stack_name}")
    return outputs


def verify_outputs(outputs):
    for key in REQUIRED_OUTPUTS:
        if not outputs.get(key):
            raise ValueError(f"Stack output {key} is missing or empty")
        logger.info(f"Stack output {key} resolved to {outputs[key]}")


def verify_secret(secret_name, region, config):
    client = boto3.client("secretsmanager", region_name=region, config=config)
    try:
        response = client.describe_secret(SecretId=secret_name)
    except ClientError as e:
        err = e.response["Error"]["Message"]
        raise Exception(f"Error describing database secret {secret_name} : {err}")

    logger.info(f"Found database secret {response['Name']}")
    return response


def handler(event, context):
    logger.info(f"Called with {event}")
    config = Config(retries={"max_attempts": 10, "mode": "adaptive"})

    outputs = get_stack_outputs(event["stack_name"], event["region"], config)
    verify_outputs(outputs)
    verify_secret(outputs["secretName"], event["region"], config)

    return outputs


if __name__ == "__main__":
    if len(sys.argv) != 3:
        raise SystemExit(
            "Usage: python -m uniview_iac.deployment_check <stack_name> <region>"
        )
    logging.basicConfig()
    handler({"stack_name": sys.argv[1], "region": sys.argv[2]}, None)
