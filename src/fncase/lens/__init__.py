"""Property references and field-level transformers."""

from .ref import PropertyRef, attr, compose_refs, item, path, replace_attr, replace_item
from .setter import assign, over, property_transformer

__all__ = [
    "PropertyRef", "attr", "item", "path", "compose_refs", "replace_attr", "replace_item",
    "property_transformer", "over", "assign",
]
