"""Tests for loading serverless configuration files."""

from pathlib import Path

import pytest
import yaml

from serverless_openapi_docs.config import Service, load_service_config
from serverless_openapi_docs.exceptions import ConfigurationError
from serverless_openapi_docs.generator import DocumentationGenerator
from serverless_openapi_docs.models import DocumentationOptions

FIXTURES = Path(__file__).parent / "fixtures"


def load_expected(name: str) -> dict:
    with open(FIXTURES / "petstore" / name) as f:
        return yaml.safe_load(f)


def test_load_petstore_config():
    config = load_service_config(FIXTURES / "petstore" / "serverless.yml")

    assert config.service_name == "petstore"
    assert config.provider.stage == "prod"
    assert config.provider.region == "eu-west-1"
    assert list(config.functions) == ["listPets", "createPet", "getPet", "internal"]
    assert config.documentation["api"]["info"]["title"] == "Petstore"
    assert config.get_stack_name() == "petstore-prod"
    assert config.get_stack_name("dev") == "petstore-dev"


def test_provider_defaults_and_stack_name_override(tmp_path):
    config_file = tmp_path / "serverless.yml"
    config_file.write_text("service:\n  name: pets\nprovider:\n  stackName: custom-stack\nfunctions:\n")

    config = load_service_config(config_file)

    assert config.service_name == "pets"
    assert config.provider.stage == "dev"
    assert config.provider.region == "us-east-1"
    assert config.functions == {}
    assert config.documentation == {}
    assert config.get_stack_name("prod") == "custom-stack"


def test_load_json_config(tmp_path):
    config_file = tmp_path / "serverless.json"
    config_file.write_text('{"service": "pets", "custom": {"documentation": null}}')

    config = load_service_config(config_file)

    assert config.service_name == "pets"
    assert config.documentation == {}


@pytest.mark.parametrize(
    "content",
    [
        "service: [unclosed",
        "- just\n- a list\n",
        "provider: {}\n",
    ],
)
def test_invalid_config(tmp_path, content):
    config_file = tmp_path / "serverless.yml"
    config_file.write_text(content)

    with pytest.raises(ConfigurationError):
        load_service_config(config_file)


def test_missing_config(tmp_path):
    with pytest.raises(ConfigurationError):
        load_service_config(tmp_path / "serverless.yml")


def test_service_enumeration():
    service = Service({"a": {"events": []}, "b": None})

    assert service.get_all_functions() == ["a", "b"]
    assert service.get_function("a") == {"events": []}
    assert service.get_function("b") == {}


@pytest.mark.parametrize(
    "export_type, expected_file",
    [
        ("swagger", "expected_swagger.yaml"),
        ("oas30", "expected_oas30.yaml"),
    ],
)
def test_petstore_documentation(export_type, expected_file):
    """Test generating the petstore document end to end."""
    config = load_service_config(FIXTURES / "petstore" / "serverless.yml")
    options = DocumentationOptions(output_file_name="openapi.yml", export_type=export_type)
    generator = DocumentationGenerator(Service(config.functions), options, template=config.documentation)

    document = generator.generate()

    assert document == load_expected(expected_file)


def test_unquoted_dates_stay_strings(tmp_path):
    config_file = tmp_path / "serverless.yml"
    config_file.write_text("service: pets\ncustom:\n  documentation:\n    api:\n      info:\n        version: 2024-01-01\n")

    config = load_service_config(config_file)

    assert config.documentation["api"]["info"]["version"] == "2024-01-01"
