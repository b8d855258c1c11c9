"""
boto3-backed provider for the AWS calls made by the downloader.
"""

import logging
import re
from typing import Any, Dict, Optional, Protocol

import boto3

logger = logging.getLogger(__name__)


class Provider(Protocol):
    """Issues a single request against a cloud service."""

    def request(
        self,
        service: str,
        method: str,
        params: Dict[str, Any],
        stage: Optional[str] = None,
        region: Optional[str] = None,
    ) -> Dict[str, Any]:
        ...


def _snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


class AwsProvider:
    """Dispatches requests such as ("CloudFormation", "describeStacks") to boto3 clients."""

    def __init__(self, profile: Optional[str] = None, region: Optional[str] = None, session=None):
        """Initialize the provider.

        Args:
            profile: Named AWS profile to use
            region: Default region when a request does not name one
            session: Preconfigured boto3 session, overrides profile and region
        """
        self.session = session or boto3.session.Session(profile_name=profile, region_name=region)

    def request(
        self,
        service: str,
        method: str,
        params: Dict[str, Any],
        stage: Optional[str] = None,
        region: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Call a service operation.

        Args:
            service: Service name, e.g. "APIGateway"
            method: Operation name in camelCase, e.g. "getExport"
            params: Operation parameters
            stage: Deployment stage, only used for logging
            region: Region to call, defaults to the session region

        Returns:
            dict: The operation response; a streamed "body" is read into text
        """
        client = self.session.client(service.lower(), region_name=region or self.session.region_name)
        logger.debug("Calling %s.%s (stage=%s, region=%s)", service, method, stage, region)
        response = getattr(client, _snake_case(method))(**params)

        body = response.get("body")
        if hasattr(body, "read"):
            response = dict(response)
            response["body"] = body.read().decode("utf-8")
        return response
