"""
Export module - page model serialization.
"""

from .json_exporter import JSONExporter, pages_to_dict, pages_to_json

__all__ = [
    "JSONExporter",
    "pages_to_dict",
    "pages_to_json",
]
