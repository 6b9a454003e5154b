"""
JSON exporter for the page model.

Produces the hand-off format consumed by renderers. Keys are sorted and
numbers rounded so two passes over the same document serialize to the same
bytes.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from ..models.page import Page
from ..version import __version__

logger = logging.getLogger(__name__)


def pages_to_dict(pages: Sequence[Page]) -> Dict[str, Any]:
    return {
        "generator": f"reportquill {__version__}",
        "page_count": len(pages),
        "pages": [page.to_dict() for page in pages],
    }


def pages_to_json(pages: Sequence[Page], indent: int = None) -> str:
    return json.dumps(pages_to_dict(pages), indent=indent, sort_keys=True, ensure_ascii=False)


class JSONExporter:
    """
    Writes a page sequence to a JSON file.
    """

    def __init__(self, pages: List[Page], indent: int = 2, ensure_ascii: bool = False):
        """
        Initialize JSON exporter.

        Args:
            pages: Pages of a finished pagination pass
            indent: JSON indentation level
            ensure_ascii: Whether to escape non-ASCII characters
        """
        self.pages = list(pages)
        self.indent = indent
        self.ensure_ascii = ensure_ascii

        logger.debug(f"JSON exporter initialized ({len(self.pages)} pages)")

    def to_json(self) -> str:
        return json.dumps(
            pages_to_dict(self.pages),
            indent=self.indent,
            sort_keys=True,
            ensure_ascii=self.ensure_ascii,
        )

    def export(self, output_path: Union[str, Path]) -> Path:
        """
        Export pages to JSON.

        Args:
            output_path: Output file path

        Returns:
            Path of the written file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(), encoding="utf-8")

        logger.info(f"Pages exported to JSON: {output_path}")
        return output_path
