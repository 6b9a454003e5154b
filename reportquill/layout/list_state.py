"""
List state tracker - per-depth counters for ordered list markers.

One tracker is created per section and discarded afterwards; two passes
over the same document never share a tracker.
"""

from typing import Dict
import logging

from ..models.run import ListKind

logger = logging.getLogger(__name__)

BULLET_MARKER = "•"
DASH_MARKER = "-"


class ListStateTracker:
    """
    Tracks numbering while walking one section's runs.

    Before a marker is computed for level L, counters of every level deeper
    than L are discarded, so returning to a shallower level and re-entering a
    deeper one restarts the deeper numbering at 1.
    """

    def __init__(self):
        self.counters: Dict[int, int] = {}

    def next_marker(self, nest_level: int, list_kind: ListKind) -> str:
        """
        Marker text for the next list item.

        Args:
            nest_level: 0-based list depth of the item
            list_kind: Marker family of the item

        Returns:
            ``"<n>."`` for ordered items, ``"•"`` for bullets, ``"-"`` for
            dashes and an empty string for non-list runs
        """
        nest_level = max(0, int(nest_level))
        deeper = [level for level in self.counters if level > nest_level]
        for level in deeper:
            del self.counters[level]
        if deeper:
            logger.debug(f"List numbering below level {nest_level} restarted")

        if list_kind == ListKind.ORDERED:
            value = self.counters.get(nest_level, 0) + 1
            self.counters[nest_level] = value
            return f"{value}."
        if list_kind == ListKind.BULLET:
            return BULLET_MARKER
        if list_kind == ListKind.DASH:
            return DASH_MARKER
        return ""
