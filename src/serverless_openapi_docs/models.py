"""
Data models for documentation generation and export options.
"""

from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_EXTENSIONS = "integrations"


class DocumentationOptions(BaseModel):
    """Invocation options shared by the generator and the downloader."""

    model_config = ConfigDict(populate_by_name=True)

    output_file_name: str = Field(alias="outputFileName")
    export_type: Optional[str] = Field(default=None, alias="exportType")
    extensions: str = DEFAULT_EXTENSIONS


class ProviderConfig(BaseModel):
    """The subset of the provider block used to locate a deployed stack."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: Optional[str] = None
    stage: str = "dev"
    region: str = "us-east-1"
    stack_name: Optional[str] = Field(default=None, alias="stackName")


class ServiceConfig(BaseModel):
    """A parsed deployment configuration file."""

    model_config = ConfigDict(extra="allow")

    service: Union[str, Dict[str, Any]]
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    functions: Dict[str, Any] = Field(default_factory=dict)
    custom: Dict[str, Any] = Field(default_factory=dict)

    @property
    def service_name(self) -> str:
        if isinstance(self.service, dict):
            return str(self.service.get("name", ""))
        return self.service

    @property
    def documentation(self) -> Dict[str, Any]:
        return self.custom.get("documentation") or {}

    def get_stack_name(self, stage: Optional[str] = None) -> str:
        """Return the configured stack name or the default "{service}-{stage}"."""
        if self.provider.stack_name:
            return self.provider.stack_name
        return f"{self.service_name}-{stage or self.provider.stage}"
