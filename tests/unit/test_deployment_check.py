from unittest import mock

import pytest
from botocore.exceptions import ClientError

from uniview_iac import deployment_check

STACK_OUTPUTS = {
    "Stacks": [
        {
            "StackName": "UniviewIaCStack",
            "Outputs": [
                {
                    "OutputKey": "dbEndpoint",
                    "OutputValue": "uniview.abc123.ap-northeast-2.rds.amazonaws.com",
                },
                {
                    "OutputKey": "secretName",
                    "OutputValue": "univiewdbinstanceSecret-abc123",
                },
            ],
        }
    ]
}


def client_error(operation):
    return ClientError(
        {"Error": {"Code": "ValidationError", "Message": "does not exist"}},
        operation,
    )


@pytest.fixture()
def mock_boto3():
    with mock.patch.object(deployment_check, "boto3") as boto3:
        yield boto3


def test_get_stack_outputs(mock_boto3):
    mock_boto3.client.return_value.describe_stacks.return_value = STACK_OUTPUTS

    outputs = deployment_check.get_stack_outputs(
        "UniviewIaCStack", "ap-northeast-2", None
    )

    assert outputs == {
        "dbEndpoint": "uniview.abc123.ap-northeast-2.rds.amazonaws.com",
        "secretName": "univiewdbinstanceSecret-abc123",
    }
    mock_boto3.client.assert_called_once_with(
        "cloudformation", region_name="ap-northeast-2", config=None
    )


def test_get_stack_outputs_client_error(mock_boto3):
    mock_boto3.client.return_value.describe_stacks.side_effect = client_error(
        "DescribeStacks"
    )

    with pytest.raises(Exception, match="describing stack UniviewIaCStack"):
        deployment_check.get_stack_outputs("UniviewIaCStack", "ap-northeast-2", None)


@pytest.mark.parametrize("missing", ["dbEndpoint", "secretName"])
def test_verify_outputs_missing(missing):
    outputs = {"dbEndpoint": "host", "secretName": "secret"}
    outputs.pop(missing)

    with pytest.raises(ValueError, match=missing):
        deployment_check.verify_outputs(outputs)


def test_verify_outputs_empty():
    with pytest.raises(ValueError, match="dbEndpoint"):
        deployment_check.verify_outputs({"dbEndpoint": "", "secretName": "secret"})


def test_verify_secret_client_error(mock_boto3):
    mock_boto3.client.return_value.describe_secret.side_effect = client_error(
        "DescribeSecret"
    )

    with pytest.raises(Exception, match="does not exist"):
        deployment_check.verify_secret("missing-secret", "ap-northeast-2", None)


def test_handler(mock_boto3):
    client = mock_boto3.client.return_value
    client.describe_stacks.return_value = STACK_OUTPUTS
    client.describe_secret.return_value = {"Name": "univiewdbinstanceSecret-abc123"}

    outputs = deployment_check.handler(
        {"stack_name": "UniviewIaCStack", "region": "ap-northeast-2"}, None
    )

    assert outputs["secretName"] == "univiewdbinstanceSecret-abc123"
    client.describe_secret.assert_called_once_with(
        SecretId="univiewdbinstanceSecret-abc123"
    )
