"""Attribute schemas for the provider, its data sources and resources."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from .diagnostics import Diagnostics

STRING = "string"
INT64 = "int64"
LIST = "list"
OBJECT = "object"

_PYTHON_TYPES = {
    STRING: (str,),
    INT64: (int,),
    LIST: (list, tuple),
    OBJECT: (dict,),
}


@dataclass
class Attribute:
    description: str
    type: str = STRING
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    # Element attributes of nested objects (OBJECT, or LIST of objects)
    attributes: Dict[str, "Attribute"] = field(default_factory=dict)
    element_type: Optional[str] = None


@dataclass
class Schema:
    description: str
    attributes: Dict[str, Attribute]

    def validate(self, config: Dict[str, Any]) -> Diagnostics:
        """Check a configuration against the schema.

        Reports unknown arguments, missing required arguments, values set on
        computed-only attributes and values of the wrong type.
        """
        diags = Diagnostics()
        for name in config:
            if name not in self.attributes:
                diags.add_attribute_error(name, "Unsupported argument", f"An argument named '{name}' is not expected here.")

        for name, attr in self.attributes.items():
            value = config.get(name)
            if value is None:
                if attr.required:
                    diags.add_attribute_error(name, "Missing required argument", f"The argument '{name}' is required, but no definition was found.")
                continue
            if attr.computed and not (attr.required or attr.optional):
                diags.add_attribute_error(name, "Invalid configuration for read-only attribute", f"Cannot set value for attribute '{name}'.")
                continue
            # bool is an int subclass; reject it for int64
            if not isinstance(value, _PYTHON_TYPES[attr.type]) or (attr.type == INT64 and isinstance(value, bool)):
                diags.add_attribute_error(name, "Incorrect attribute value type", f"Attribute '{name}' must be of type {attr.type}.")
        return diags
