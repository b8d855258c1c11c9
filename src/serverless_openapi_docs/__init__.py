"""OpenAPI documentation generator for serverless configuration."""

from .downloader import DocumentationDownloader
from .exceptions import ConfigurationError, DocumentationError, ExportError
from .generator import DocumentationGenerator, get_openapi_version
from .models import DocumentationOptions

__version__ = "0.1.0"
__all__ = [
    "DocumentationGenerator",
    "DocumentationDownloader",
    "DocumentationOptions",
    "DocumentationError",
    "ConfigurationError",
    "ExportError",
    "get_openapi_version",
]
