"""
Generation of OpenAPI documents from deployment configuration.

The generator walks the ``http`` events of every function, maps their
``documentation`` blocks to operations, and combines them with the
``custom.documentation`` template (api info, tags, models, security schemes)
into a Swagger 2.0 or OpenAPI 3.0.1 document.
"""

import copy
import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Protocol

import yaml

from .file_utils import FileSink, LocalFileSink, get_file_extension, is_yaml_file_extension
from .models import DocumentationOptions
from .references import model_ref_schema, resolve_placeholders

logger = logging.getLogger(__name__)

SWAGGER_VERSION = "2.0"
OPENAPI_VERSION = "3.0.1"
OPENAPI_EXPORT_TYPES = ("oas30", "openapi30")

DEFAULT_INFO = {
    "title": "",
    "version": "1",
}

OPERATION_FIELDS = ("tags", "summary", "description", "deprecated")

# Documentation key -> parameter location, in output order
PARAMETER_LOCATIONS = (
    ("queryParams", "query"),
    ("pathParams", "path"),
    ("requestHeaders", "header"),
)

PARAMETER_FIELDS = (
    "description",
    "required",
    "deprecated",
    "allowEmptyValue",
    "style",
    "explode",
    "allowReserved",
    "example",
    "examples",
    "content",
)

HEADER_FIELDS = ("description",)


class FunctionSource(Protocol):
    """Enumerates declared functions and their events."""

    def get_all_functions(self) -> List[str]:
        ...

    def get_function(self, name: str) -> Dict[str, Any]:
        ...


def is_declared(value: Any) -> bool:
    """Check whether a configuration value counts as declared.

    None, False, 0 and empty strings are treated as absent. Empty mappings
    and lists are declared.
    """
    if isinstance(value, (dict, list)):
        return True
    return bool(value)


def get_openapi_version(export_type: Optional[str]) -> str:
    """Map an export type to the OpenAPI version to generate.

    Args:
        export_type: Requested export type, e.g. "swagger" or "oas30"

    Returns:
        str: "3.0.1" for "oas30" and "openapi30", "2.0" for anything else
    """
    if export_type in OPENAPI_EXPORT_TYPES:
        return OPENAPI_VERSION
    return SWAGGER_VERSION


def generate_info(api: Optional[dict]) -> dict:
    """Build the info object, filling in a default title and version."""
    api_info = api.get("info") if isinstance(api, dict) else None
    if not isinstance(api_info, dict):
        return dict(DEFAULT_INFO)

    info = dict(api_info)
    for field, default in DEFAULT_INFO.items():
        if not is_declared(info.get(field)):
            info[field] = default
    return info


def generate_models(models: Optional[Iterable[dict]]) -> Dict[str, Any]:
    """Build the named schema map from model declarations.

    Models without a name or a schema are skipped. A later model with the same
    name replaces an earlier one. Model placeholders inside the schemas are
    resolved to local references.

    Args:
        models: List of {name, schema} declarations

    Returns:
        dict: Schemas keyed by model name
    """
    result: Dict[str, Any] = {}
    if not isinstance(models, list):
        return result

    for model in models:
        if not isinstance(model, dict):
            continue
        if not is_declared(model.get("name")) or not is_declared(model.get("schema")):
            logger.debug("Skipping model without name or schema: %r", model)
            continue
        result[model["name"]] = resolve_placeholders(model["schema"])

    return result


def generate_schema(declaration: dict, exclude_keys: Iterable[str]) -> Any:
    """Return the explicit schema of a declaration, or build one from its leftover keys."""
    if is_declared(declaration.get("schema")):
        return declaration["schema"]

    excluded = set(exclude_keys)
    return {key: value for key, value in declaration.items() if key not in excluded}


def generate_content(models: Any) -> Dict[str, Any]:
    """Map content types to model references."""
    if not isinstance(models, dict):
        return {}
    return {
        content_type: {"schema": model_ref_schema(model_name)}
        for content_type, model_name in models.items()
    }


class _NoAliasDumper(yaml.SafeDumper):
    """Safe dumper that never emits anchors and indents nested sequences."""

    def ignore_aliases(self, data):
        return True

    def increase_indent(self, flow=False, indentless=False):
        # Indent block sequences under their parent key
        return super().increase_indent(flow, False)


def render_document(document: dict, output_file_name: Optional[str]) -> str:
    """Serialize a document as YAML or JSON depending on the output file extension.

    Args:
        document: The assembled OpenAPI document
        output_file_name: Target file name; "yml"/"yaml" selects YAML

    Returns:
        str: The serialized document
    """
    if is_yaml_file_extension(get_file_extension(output_file_name)):
        return yaml.dump(
            document,
            Dumper=_NoAliasDumper,
            indent=2,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
    return json.dumps(document, indent=2, ensure_ascii=False, default=str)


class DocumentationGenerator:
    """Generates an OpenAPI document from a service and its documentation template."""

    def __init__(
        self,
        service: FunctionSource,
        options: DocumentationOptions,
        template: Optional[dict] = None,
        sink: Optional[FileSink] = None,
    ):
        """Initialize the generator.

        Args:
            service: Source of function declarations
            options: Output file name and export type
            template: The ``custom.documentation`` block (api, models, securitySchemes)
            sink: Destination for the rendered document, defaults to the local file system
        """
        self.service = service
        self.options = options
        self.template = copy.deepcopy(template) if isinstance(template, dict) else {}
        self.sink = sink if sink is not None else LocalFileSink()
        self.version = get_openapi_version(options.export_type)

    @property
    def is_swagger(self) -> bool:
        return self.version == SWAGGER_VERSION

    def generate(self) -> dict:
        """Build the OpenAPI document.

        Returns:
            dict: The document, ready for serialization
        """
        document: Dict[str, Any] = {}
        if self.is_swagger:
            document["swagger"] = self.version
        else:
            document["openapi"] = self.version

        api = self.template.get("api")
        document["info"] = generate_info(api)
        document["paths"] = self._generate_paths()

        models = generate_models(self.template.get("models"))
        security_schemes = self.template.get("securitySchemes")
        has_security_schemes = is_declared(security_schemes)
        if self.is_swagger:
            if models:
                document["definitions"] = models
            if has_security_schemes:
                document["securityDefinitions"] = security_schemes
        elif models or has_security_schemes:
            document["components"] = {
                "schemas": models,
                "securitySchemes": security_schemes if has_security_schemes else {},
            }

        if isinstance(api, dict) and is_declared(api.get("tags")):
            document["tags"] = api["tags"]

        return document

    def generate_documentation(self) -> dict:
        """Generate, serialize and write the document to the configured output file.

        Returns:
            dict: The generated document
        """
        logger.info("Generating OpenAPI %s documentation", self.version)
        document = self.generate()
        output = render_document(document, self.options.output_file_name)
        self.sink.write(self.options.output_file_name, output)
        return document

    def _generate_paths(self) -> Dict[str, Dict[str, Any]]:
        paths: Dict[str, Dict[str, Any]] = {}
        for function_name in self.service.get_all_functions():
            function = self.service.get_function(function_name) or {}
            events = function.get("events") or []

            for event in events:
                http_event = event.get("http") if isinstance(event, dict) else None
                if not isinstance(http_event, dict):
                    continue
                documentation = http_event.get("documentation")
                if not is_declared(documentation) or not isinstance(documentation, dict):
                    logger.debug("Skipping undocumented http event of %s", function_name)
                    continue

                path = f"/{http_event.get('path', '')}"
                method = str(http_event.get("method", "")).lower()
                if method in paths.get(path, {}):
                    logger.debug("Replacing %s %s with operation of %s", method, path, function_name)
                paths.setdefault(path, {})[method] = self._generate_operation(
                    function_name, documentation
                )

        return paths

    def _generate_operation(self, function_name: str, documentation: dict) -> dict:
        operation: Dict[str, Any] = {"operationId": function_name}

        for field in OPERATION_FIELDS:
            if is_declared(documentation.get(field)):
                operation[field] = documentation[field]

        for key, location in PARAMETER_LOCATIONS:
            if is_declared(documentation.get(key)):
                operation.setdefault("parameters", []).extend(
                    self._generate_parameters(location, documentation[key])
                )

        request_body = documentation.get("requestBody")
        if is_declared(request_body):
            request_models = documentation.get("requestModels")
            if self.is_swagger:
                operation.setdefault("parameters", []).append(
                    self._generate_body_parameter(request_body, request_models)
                )
            else:
                operation["requestBody"] = self._generate_request_body(request_body, request_models)

        operation["responses"] = self._generate_responses(documentation.get("methodResponses"))
        return operation

    def _attach_schema(self, target: dict, schema: Any) -> None:
        """Flatten the schema onto the target for 2.0, nest it under "schema" otherwise."""
        if not self.is_swagger:
            target["schema"] = schema
        elif isinstance(schema, dict):
            target.update(schema)

    def _generate_parameters(self, location: str, declarations: Any) -> List[dict]:
        parameters: List[dict] = []
        if not isinstance(declarations, list):
            return parameters

        for declaration in declarations:
            if not isinstance(declaration, dict) or not is_declared(declaration.get("name")):
                logger.debug("Skipping %s parameter without name: %r", location, declaration)
                continue

            parameter = {"name": declaration["name"], "in": location}
            for field in PARAMETER_FIELDS:
                if is_declared(declaration.get(field)):
                    parameter[field] = declaration[field]
            # Path parameters are always mandatory
            if location == "path" and not is_declared(declaration.get("required")):
                parameter["required"] = True

            schema = generate_schema(declaration, ("name",) + PARAMETER_FIELDS)
            self._attach_schema(parameter, schema)
            parameters.append(parameter)

        return parameters

    def _generate_body_parameter(self, request_body: Any, request_models: Any) -> dict:
        parameter: Dict[str, Any] = {"name": "", "in": "body", "schema": {}}
        description = request_body.get("description") if isinstance(request_body, dict) else None
        if is_declared(description):
            parameter["description"] = description

        # Swagger 2.0 has a single body schema, only the first model is kept
        content_types = list(request_models) if isinstance(request_models, dict) else []
        if not content_types:
            return parameter

        model_name = request_models[content_types[0]]
        parameter["name"] = model_name
        parameter["schema"] = model_ref_schema(model_name)
        return parameter

    def _generate_request_body(self, request_body: Any, request_models: Any) -> dict:
        body: Dict[str, Any] = {}
        description = request_body.get("description") if isinstance(request_body, dict) else None
        if is_declared(description):
            body["description"] = description
        body["content"] = generate_content(request_models)
        return body

    def _generate_responses(self, method_responses: Any) -> Dict[str, Any]:
        responses: Dict[str, Any] = {}
        if not isinstance(method_responses, list):
            return responses

        for declaration in method_responses:
            if not isinstance(declaration, dict) or not is_declared(declaration.get("statusCode")):
                logger.debug("Skipping response without statusCode: %r", declaration)
                continue

            status_code = str(declaration["statusCode"])
            response_body = declaration.get("responseBody")
            description = response_body.get("description") if isinstance(response_body, dict) else None
            response: Dict[str, Any] = {
                "description": description if is_declared(description) else f"Status {status_code} response",
            }

            if is_declared(declaration.get("responseModels")):
                response["content"] = generate_content(declaration["responseModels"])

            if is_declared(declaration.get("responseHeaders")):
                response["headers"] = self._generate_response_headers(declaration["responseHeaders"])

            responses[status_code] = response

        return responses

    def _generate_response_headers(self, declarations: Any) -> Dict[str, Any]:
        headers: Dict[str, Any] = {}
        if not isinstance(declarations, list):
            return headers

        for declaration in declarations:
            if not isinstance(declaration, dict) or not is_declared(declaration.get("name")):
                continue

            header: Dict[str, Any] = {}
            for field in HEADER_FIELDS:
                if is_declared(declaration.get(field)):
                    header[field] = declaration[field]

            schema = generate_schema(declaration, ("name",) + HEADER_FIELDS)
            self._attach_schema(header, schema)
            headers[declaration["name"]] = header

        return headers
