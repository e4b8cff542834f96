"""Strategies for rendering a filtered tree as lines of text."""

from .base_strategy import RenderStrategy
from .flat_strategy import FlatRenderStrategy
from .tree_strategy import TreeRenderStrategy

__all__ = ["FlatRenderStrategy", "RenderStrategy", "TreeRenderStrategy", "create_strategy"]


def create_strategy(style: str) -> RenderStrategy:
    """Create the strategy for a rendering style name (``"tree"`` or ``"flat"``).

    Raises:
        ValueError: If the style is unknown.
    """
    style = style.lower()
    if style == "tree":
        return TreeRenderStrategy()
    if style == "flat":
        return FlatRenderStrategy()
    raise ValueError(f"Unsupported render style: {style}. Must be one of: tree, flat")
