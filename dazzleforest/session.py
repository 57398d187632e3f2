"""ForestSession - a forest together with the pattern cache that serves it.

The session is the owner of the query cache: every edit made through it
invalidates the cache, so pattern searches never return results computed
before the edit. Edits made to ``session.forest`` directly bypass this;
call ``session.cache.invalidate()`` afterwards.

Example:
    >>> session = ForestSession(from_json(text))
    >>> session.insert("docs", make_node("notes.txt"))
    >>> session.search(r"\\.txt$")
"""

from typing import List, Optional

from . import metrics, mutation, search
from .cache import PatternCache, PatternLike
from .config import CacheConfig
from .core.node import Forest, Node, require_forest
from .transforms import clone


class ForestSession:
    """A forest plus its PatternCache.

    Args:
        forest: Forest to manage (a new empty forest by default)
        cache_config: Configuration for the session's PatternCache
    """

    def __init__(self, forest: Optional[Forest] = None, cache_config: Optional[CacheConfig] = None):
        self.forest = require_forest([] if forest is None else forest)
        self.cache = PatternCache(cache_config)

    def __len__(self) -> int:
        return len(self.forest)

    def __repr__(self) -> str:
        return f"ForestSession(roots={len(self.forest)}, cached={len(self.cache)})"

    # ==================== Edits ====================

    def insert(self, parent_name: str, new_node: Node) -> "ForestSession":
        mutation.insert_node(self.forest, parent_name, new_node)
        self.cache.invalidate()
        return self

    def remove(self, name: str, preserve_subtree: bool = False) -> "ForestSession":
        mutation.remove_node(self.forest, name, preserve_subtree)
        self.cache.invalidate()
        return self

    def replace(self, name: str, new_node: Node, preserve_prev_subtree: bool = False) -> "ForestSession":
        mutation.replace_node(self.forest, name, new_node, preserve_prev_subtree)
        self.cache.invalidate()
        return self

    # ==================== Queries ====================

    def search(self, pattern: PatternLike, bypass_cache: bool = False) -> List[Node]:
        """Pattern search served from the session cache."""
        return search.pattern_search(pattern, self.forest, cache=self.cache, bypass_cache=bypass_cache)

    def find_key(self, key: str, include_subtree: bool = False) -> Optional[Node]:
        return search.key_search(key, self.forest, include_subtree)

    def depth(self) -> int:
        return metrics.get_depth(self.forest)

    def width(self) -> int:
        return metrics.get_width(self.forest)

    def snapshot(self) -> Forest:
        """Independent deep copy of the current forest."""
        return clone(self.forest)
