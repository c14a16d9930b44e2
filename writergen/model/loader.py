"""
Build a type model from a plain JSON description.

The description lists named types and services::

    {
      "types": [
        {"name": "Vm", "kind": "struct",
         "attributes": [{"name": "id", "type": "String"}],
         "links": [{"name": "disks", "type": "Disk[]"}]},
        {"name": "VmStatus", "kind": "enum", "values": ["up", "down"]}
      ],
      "services": [{"name": "Vms"}]
    }

Type references are primitive names, declared type names, or any
reference followed by ``[]`` for lists.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import requests

from ..logging_config import get_logger
from .names import Name
from .types import EnumType, ListType, Model, Service, StructType, Type

logger = get_logger(__name__)


class ModelError(ValueError):
    """Exception raised for invalid model descriptions."""

    pass


class DescriptionLoadError(ModelError):
    """Exception raised when a model description can't be read or fetched."""

    pass


def build_model(description: Dict[str, Any]) -> Model:
    """
    Convert a model description into a Model.

    Types are declared in a first pass and their members resolved in a
    second one, so structs may reference each other in cycles.

    Args:
        description: Parsed JSON model description

    Returns:
        Model with all declared types and services

    Raises:
        ModelError: If the description is malformed
    """
    if not isinstance(description, dict):
        raise ModelError("Model description must be a JSON object")

    model = Model()
    type_entries = description.get("types", [])
    if not isinstance(type_entries, list):
        raise ModelError("'types' must be a list")

    structs: List[tuple] = []

    for entry in type_entries:
        name = _parse_name(entry, "type")
        kind = entry.get("kind", "struct")

        if kind == "struct":
            struct = StructType(name)
            structs.append((struct, entry))
            declared: Union[StructType, EnumType] = struct
        elif kind == "enum":
            values = tuple(Name.parse(str(value)) for value in entry.get("values", []))
            declared = EnumType(name, values)
        else:
            raise ModelError(f"Unknown kind '{kind}' for type '{entry.get('name')}'")

        try:
            model.add_type(declared)
        except ValueError as e:
            raise ModelError(str(e)) from e

    for struct, entry in structs:
        for member in entry.get("attributes", []):
            member_name = _parse_name(member, f"attribute of {struct.name}")
            member_type = resolve_type(model, member.get("type", ""))
            _add_member(struct.add_attribute, member_name, member_type)
        for member in entry.get("links", []):
            member_name = _parse_name(member, f"link of {struct.name}")
            member_type = resolve_type(model, member.get("type", ""))
            _add_member(struct.add_link, member_name, member_type)

    for entry in description.get("services", []):
        model.add_service(Service(_parse_name(entry, "service")))

    logger.info(
        "Built model with %d types and %d services",
        len(type_entries),
        len(description.get("services", [])),
    )
    return model


def resolve_type(model: Model, reference: str) -> Type:
    """
    Resolve a type reference against the model.

    Args:
        model: Model holding the declared types
        reference: Reference such as ``String``, ``Disk`` or ``Disk[]``

    Returns:
        The referenced type

    Raises:
        ModelError: If the reference names no known type
    """
    reference = str(reference).strip()
    if reference.endswith("[]"):
        return ListType(resolve_type(model, reference[:-2]))

    name = Name.parse(reference)
    if not name:
        raise ModelError("Empty type reference")

    resolved = model.get_type(name)
    if resolved is None:
        raise ModelError(f"Unknown type reference: '{reference}'")
    return resolved


def read_description(model_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a model description from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        DescriptionLoadError: If the file can't be read or isn't valid JSON
    """
    path = Path(model_path)
    if not path.exists():
        raise FileNotFoundError(f"Model description not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            description = json.load(f)
    except json.JSONDecodeError as e:
        raise DescriptionLoadError(f"Invalid JSON in model description {path}: {e}") from e
    except OSError as e:
        raise DescriptionLoadError(f"Can't read model description {path}: {e}") from e

    logger.info("Read model description from %s", path)
    return description


def fetch_description(url: str, timeout: int = 30) -> Dict[str, Any]:
    """
    Download a model description.

    Raises:
        DescriptionLoadError: If the request fails or the body isn't JSON
    """
    if not url.startswith(("http://", "https://")):
        raise DescriptionLoadError(f"Model description URL must be http(s): {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        description = response.json()
    except requests.exceptions.Timeout as e:
        raise DescriptionLoadError(f"Timeout fetching model description from {url}") from e
    except requests.exceptions.RequestException as e:
        raise DescriptionLoadError(f"Can't fetch model description from {url}: {e}") from e
    except ValueError as e:
        raise DescriptionLoadError(f"Model description at {url} isn't JSON: {e}") from e

    logger.info("Fetched model description from %s", url)
    return description


def load_model(
    model_path: Union[str, Path, None] = None,
    url: Optional[str] = None,
    timeout: int = 30,
) -> Model:
    """Build the model described by a JSON file or by the document at a URL."""
    if bool(model_path) == bool(url):
        raise DescriptionLoadError("Give exactly one of a model file or a URL")
    if model_path:
        return build_model(read_description(model_path))
    return build_model(fetch_description(url, timeout))


def _parse_name(entry: Any, what: str) -> Name:
    if not isinstance(entry, dict) or not entry.get("name"):
        raise ModelError(f"Missing name for {what}: {entry!r}")
    name = Name.parse(str(entry["name"]))
    if not name:
        raise ModelError(f"Name of {what} has no words: {entry['name']!r}")
    return name


def _add_member(add, name: Name, type_: Type) -> None:
    try:
        add(name, type_)
    except ValueError as e:
        raise ModelError(str(e)) from e
