"""Configuration system for bfwalk.

This module defines how users pick a walk strategy and the limits that
the high-level helpers in ``bfwalk.api`` apply on top of it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Union
from .core.storage import StorageProvider
from .core.signals import Visitor
from .core.walker import walk_dir, walk_dir_depth_first


class WalkStrategy(Enum):
    """Order in which a walk visits entries.

    Both strategies take the same visitor and honor the same signals.
    """
    BREADTH_FIRST = "bfs"   # Level by level
    DEPTH_FIRST = "dfs"     # Pre-order, parent before children


WalkFunction = Callable[[StorageProvider, str, Visitor], None]

_STRATEGY_NAMES = {
    'bfs': WalkStrategy.BREADTH_FIRST,
    'breadth_first': WalkStrategy.BREADTH_FIRST,
    'dfs': WalkStrategy.DEPTH_FIRST,
    'depth_first': WalkStrategy.DEPTH_FIRST,
}


@dataclass
class WalkConfig:
    """Options for the high-level walk helpers."""

    strategy: WalkStrategy = WalkStrategy.BREADTH_FIRST
    max_depth: Optional[int] = None  # Deepest level visited (root = 0)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not isinstance(self.strategy, WalkStrategy):
            errors.append(f"strategy must be a WalkStrategy, got {self.strategy!r}")
        if self.max_depth is not None and self.max_depth < 0:
            errors.append("max_depth cannot be negative")
        return errors


def parse_strategy(strategy: Union[WalkStrategy, str]) -> WalkStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string (bfs, breadth_first, dfs, depth_first)

    Returns:
        WalkStrategy enum value

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, WalkStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_NAMES:
        return _STRATEGY_NAMES[strategy_lower]

    raise ValueError(
        f"Unknown walk strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_NAMES)}"
    )


def create_walker(strategy: Union[WalkStrategy, str]) -> WalkFunction:
    """Return the walk function for a strategy.

    Example:
        >>> walker = create_walker("bfs")
        >>> walker(storage, "root", visit)
    """
    if parse_strategy(strategy) is WalkStrategy.DEPTH_FIRST:
        return walk_dir_depth_first
    return walk_dir
