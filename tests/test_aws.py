"""Tests for the boto3-backed provider."""

import io
from unittest.mock import MagicMock

from serverless_openapi_docs.aws import AwsProvider


def make_provider(response):
    client = MagicMock()
    client.describe_stacks.return_value = response
    client.get_export.return_value = response
    session = MagicMock()
    session.region_name = "eu-west-1"
    session.client.return_value = client
    return AwsProvider(session=session), session, client


def test_request_dispatches_to_snake_case_method():
    provider, session, client = make_provider({"Stacks": []})

    response = provider.request("CloudFormation", "describeStacks", {"StackName": "pets-dev"}, "dev", "us-east-2")

    assert response == {"Stacks": []}
    session.client.assert_called_once_with("cloudformation", region_name="us-east-2")
    client.describe_stacks.assert_called_once_with(StackName="pets-dev")


def test_request_reads_streaming_body():
    provider, session, client = make_provider({"body": io.BytesIO(b"swagger: '2.0'\n"), "contentType": "application/yaml"})
    params = {
        "restApiId": "abc123",
        "stageName": "dev",
        "exportType": "swagger",
        "parameters": {"extensions": "integrations"},
        "accepts": "application/yaml",
    }

    response = provider.request("APIGateway", "getExport", params)

    assert response["body"] == "swagger: '2.0'\n"
    assert response["contentType"] == "application/yaml"
    session.client.assert_called_once_with("apigateway", region_name="eu-west-1")
    client.get_export.assert_called_once_with(**params)
