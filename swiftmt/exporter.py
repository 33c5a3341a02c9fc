from dataclasses import MISSING, fields, is_dataclass
from typing import Any, Dict, Union, get_args, get_origin
import json
try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False
from swiftmt import models
from swiftmt.integrations.pydantic import from_dataclass

class Exporter:
    """
    Serialization utilities for swiftmt results and models: JSON rendering of a
    ParseResult, and OpenAPI 3.0.0 / JSON Schema definitions of the dataclasses.
    """

    @staticmethod
    def to_json(result: models.ParseResult, pretty: bool = True) -> str:
        """
        Renders a ParseResult as JSON text with camelCase keys.
        """
        return from_dataclass(result).model_dump_json(by_alias=True, indent=2 if pretty else None)

    @staticmethod
    def _map_python_type_to_openapi(py_type: Any) -> Dict[str, Any]:
        """
        Maps a Python type to its OpenAPI schema representation.
        """
        origin = get_origin(py_type)
        args = get_args(py_type)

        # Handle Optional[T] (which is Union[T, NoneType])
        if origin is Union and type(None) in args:
            # OpenAPI 3.0 uses 'nullable: true'
            base_type = next(t for t in args if t is not type(None))
            schema = Exporter._map_python_type_to_openapi(base_type)
            schema["nullable"] = True
            return schema

        if py_type is str:
            return {"type": "string"}
        if py_type is int:
            return {"type": "integer"}
        if py_type is bool:
            return {"type": "boolean"}

        if origin is list or py_type is list:
            item_type = args[0] if args else Any
            return {
                "type": "array",
                "items": Exporter._map_python_type_to_openapi(item_type)
            }

        if origin is dict or py_type is dict:
            value_type = args[1] if args else Any
            return {
                "type": "object",
                "additionalProperties": Exporter._map_python_type_to_openapi(value_type)
            }

        if is_dataclass(py_type):
            return {"$ref": f"#/components/schemas/{py_type.__name__}"}

        return {"type": "string"} # Fallback

    @staticmethod
    def generate_schema(model_class: Any) -> Dict[str, Any]:
        """
        Generates a JSON Schema component for a given dataclass.
        Fields without a default are reported as required.
        """
        if not is_dataclass(model_class):
            raise ValueError(f"{model_class} is not a dataclass")

        properties = {}
        required = []

        for field in fields(model_class):
            properties[field.name] = Exporter._map_python_type_to_openapi(field.type)
            if field.default is MISSING and field.default_factory is MISSING:
                required.append(field.name)

        schema = {
            "type": "object",
            "properties": properties,
            "description": model_class.__doc__.strip() if model_class.__doc__ else None
        }

        if required:
            schema["required"] = required

        return schema

    @staticmethod
    def to_openapi() -> Dict[str, Any]:
        """
        Generates a complete OpenAPI 3.0.0 specification for all swiftmt models.
        """
        model_classes = [
            models.RawField,
            models.PartyInfo,
            models.Transaction,
            models.MessageHeader,
            models.ParseResult,
        ]

        schemas = {}
        for model in model_classes:
            schemas[model.__name__] = Exporter.generate_schema(model)

        spec = {
            "openapi": "3.0.0",
            "info": {
                "title": "swiftmt MT103 Parse Result API",
                "version": "1.0.0",
                "description": "Schema of parsed and validated SWIFT MT103 customer credit transfers."
            },
            "components": {
                "schemas": schemas
            },
            "paths": {} # Path definitions are not applicable for a library, but required for valid OpenAPI
        }

        return spec

    @staticmethod
    def export_json(path: str):
        """
        Saves the OpenAPI spec to a JSON file.
        """
        spec = Exporter.to_openapi()
        with open(path, "w") as f:
            json.dump(spec, f, indent=2)

    @staticmethod
    def to_yaml() -> str:
        """
        Renders the OpenAPI spec as YAML text.
        """
        if not HAS_YAML:
            raise ImportError("PyYAML is required for YAML export. Install it with 'pip install swiftmt[yaml]'.")
        return yaml.dump(Exporter.to_openapi(), sort_keys=False)

    @staticmethod
    def export_yaml(path: str):
        """
        Saves the OpenAPI spec to a YAML file.
        """
        text = Exporter.to_yaml()
        with open(path, "w") as f:
            f.write(text)
