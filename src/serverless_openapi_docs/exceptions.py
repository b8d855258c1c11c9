class DocumentationError(Exception):
    """Base exception for documentation generation and export errors."""
    pass

class ConfigurationError(DocumentationError):
    """Raised when the service configuration cannot be loaded."""
    pass

class ExportError(DocumentationError):
    """Raised when a published documentation export cannot be resolved."""
    pass
