"""
Public entry points of a pagination pass.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from .config import LayoutConfig
from .layout.page_builder import PageBuilder
from .media.codec import ImageCodec
from .models.document import Document
from .models.page import Page

ConfigLike = Union[LayoutConfig, Mapping[str, Any], None]


def _resolve_config(config: ConfigLike) -> LayoutConfig:
    if config is None:
        return LayoutConfig.a4()
    if isinstance(config, LayoutConfig):
        return config
    return LayoutConfig.from_dict(config)


async def paginate_async(
    document: Document,
    config: ConfigLike = None,
    codec: Optional[ImageCodec] = None,
) -> List[Page]:
    """
    Paginate ``document`` from inside a running event loop.

    Args:
        document: Report to lay out; must not be mutated during the pass
        config: LayoutConfig or a mapping of overrides, A4 defaults if omitted
        codec: Image codec for rotation and measurement

    Returns:
        Ordered pages with positioned draw blocks
    """
    builder = PageBuilder(_resolve_config(config), codec)
    return await builder.build_async(document)


def paginate(
    document: Document,
    config: ConfigLike = None,
    codec: Optional[ImageCodec] = None,
) -> List[Page]:
    """Synchronous variant of :func:`paginate_async`."""
    return PageBuilder(_resolve_config(config), codec).build(document)
