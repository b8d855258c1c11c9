"""
Loading of deployment configuration files.

The loader reads a ``serverless.yml`` (or JSON) file and exposes the pieces the
documentation generator needs: the function declarations and the
``custom.documentation`` template. Variable interpolation is not performed.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from pydantic import ValidationError

from .exceptions import ConfigurationError
from .models import ServiceConfig

logger = logging.getLogger(__name__)


class _ConfigLoader(yaml.SafeLoader):
    """Safe loader that keeps unquoted dates and timestamps as strings."""


_ConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class Service:
    """Enumerates the functions declared by a service."""

    def __init__(self, functions: Dict[str, Any]):
        """Initialize the service.

        Args:
            functions: Mapping of function name to function declaration
        """
        self.functions = functions or {}

    def get_all_functions(self) -> List[str]:
        return list(self.functions.keys())

    def get_function(self, name: str) -> Dict[str, Any]:
        return self.functions.get(name) or {}


def load_service_config(path: Union[str, Path]) -> ServiceConfig:
    """Load a deployment configuration file.

    Args:
        path: Path to the YAML or JSON configuration file

    Returns:
        The parsed configuration

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Failed to read configuration file {path}: {e}")

    try:
        # JSON is a subset of YAML
        data = yaml.load(content, Loader=_ConfigLoader)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse configuration file {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")

    # Empty top-level blocks (e.g. a bare "functions:") load as None
    data = {key: value for key, value in data.items() if value is not None}

    try:
        config = ServiceConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration file {path}: {e}")

    logger.debug("Loaded %d functions from %s", len(config.functions), path)
    return config
