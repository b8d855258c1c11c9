"""
Retrieval of documentation previously published to API Gateway.
"""

import logging
from typing import Any, Dict, Optional

from .aws import Provider
from .exceptions import ExportError
from .file_utils import FileSink, LocalFileSink, get_file_extension, is_yaml_file_extension
from .models import DocumentationOptions

logger = logging.getLogger(__name__)

REST_API_ID_OUTPUT_KEY = "AwsDocApiId"
EXPORT_TYPE = "swagger"


class DocumentationDownloader:
    """Exports the deployed REST API description and writes it to the output file."""

    def __init__(
        self,
        provider: Provider,
        options: DocumentationOptions,
        stack_name: str,
        stage: str,
        region: str,
        sink: Optional[FileSink] = None,
    ):
        self.provider = provider
        self.options = options
        self.stack_name = stack_name
        self.stage = stage
        self.region = region
        self.sink = sink if sink is not None else LocalFileSink()

    def get_rest_api_id(self, stack_name: str) -> str:
        """Look up the REST API id in the outputs of a deployed stack.

        Args:
            stack_name: Name of the CloudFormation stack

        Returns:
            str: The value of the AwsDocApiId output

        Raises:
            ExportError: If the stack has no AwsDocApiId output
        """
        response = self.provider.request(
            "CloudFormation",
            "describeStacks",
            {"StackName": stack_name},
            self.stage,
            self.region,
        )
        stacks = response.get("Stacks") or []
        outputs = (stacks[0].get("Outputs") or []) if stacks else []
        for output in outputs:
            if output.get("OutputKey") == REST_API_ID_OUTPUT_KEY:
                return output["OutputValue"]

        raise ExportError(f"Stack {stack_name} has no {REST_API_ID_OUTPUT_KEY} output")

    def _export_params(self, rest_api_id: str) -> Dict[str, Any]:
        extension = get_file_extension(self.options.output_file_name)
        return {
            "stageName": self.stage,
            "restApiId": rest_api_id,
            "exportType": EXPORT_TYPE,
            "parameters": {
                "extensions": self.options.extensions,
            },
            "accepts": "application/yaml" if is_yaml_file_extension(extension) else "application/json",
        }

    def download_documentation(self) -> str:
        """Export the published documentation and write it verbatim.

        Returns:
            str: The exported document body
        """
        rest_api_id = self.get_rest_api_id(self.stack_name)
        logger.info("Exporting documentation of REST API %s (stage %s)", rest_api_id, self.stage)
        response = self.provider.request(
            "APIGateway",
            "getExport",
            self._export_params(rest_api_id),
            self.stage,
            self.region,
        )
        body = response["body"]
        self.sink.write(self.options.output_file_name, body)
        return body
