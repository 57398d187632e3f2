"""
Query cache for pattern search with LRU eviction.

A PatternCache remembers pattern_search results for one forest at a time.
Its lifetime is owned by whoever creates it: a caller that passes it to
pattern_search, or a ForestSession.

Rules:
- The cache is bound to the first forest it sees. Looking up or storing
  results for a different forest object rebinds the cache and drops every
  entry, so results from one forest are never served for another.
- Entries are keyed by (forest identity, pattern). The cache holds a
  reference to the bound forest, so the identity stays valid.
- Mutating the bound forest does NOT invalidate anything. Call invalidate()
  after editing, or use ForestSession, which does it for you.
"""

import logging
import re
from collections import OrderedDict
from typing import Any, Dict, Hashable, List, Optional, Tuple, Union

from .config import CacheConfig
from .core.node import Forest, Node
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

PatternLike = Union[str, re.Pattern]


def pattern_key(pattern: PatternLike) -> Hashable:
    """Cache key for a pattern; compiled patterns include their flags."""
    if isinstance(pattern, re.Pattern):
        return (pattern.pattern, pattern.flags)
    return pattern


class PatternCache:
    """
    LRU store of pattern_search results for a single bound forest.

    Args:
        config: Sizing and on/off switch (defaults to CacheConfig())
    """

    def __init__(self, config: Optional[CacheConfig] = None):
        self.config = config or CacheConfig()

        errors = self.config.validate()
        if errors:
            raise InvalidArgumentError(f"Invalid cache configuration: {'; '.join(errors)}")

        self.cache: "OrderedDict[Tuple[int, Hashable], List[Node]]" = OrderedDict()
        self.forest: Optional[Forest] = None
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self.cache)

    def __contains__(self, pattern: PatternLike) -> bool:
        return self.forest is not None and self._key(self.forest, pattern) in self.cache

    def bind(self, forest: Forest) -> bool:
        """
        Bind the cache to forest, clearing it if a different forest was bound.

        Returns:
            True if the binding changed
        """
        if forest is self.forest:
            return False

        if self.forest is not None:
            logger.debug("Pattern cache rebound to a new forest; dropping %d entries", len(self.cache))
        self.clear()
        self.forest = forest
        return True

    def get(self, forest: Forest, pattern: PatternLike) -> Optional[List[Node]]:
        """
        Look up cached results, updating LRU order on a hit.

        Returns:
            A new list holding the cached nodes, or None on a miss
        """
        if not self.config.enabled:
            return None

        self.bind(forest)
        key = self._key(forest, pattern)
        if key not in self.cache:
            self.misses += 1
            return None

        self.cache.move_to_end(key)
        self.hits += 1
        logger.debug("Pattern cache hit for %r", key[1])
        return list(self.cache[key])

    def put(self, forest: Forest, pattern: PatternLike, results: List[Node]) -> bool:
        """
        Store results, evicting the least recently used entry if full.

        Returns:
            True if cached, False if caching is disabled
        """
        if not self.config.enabled:
            return False

        self.bind(forest)
        key = self._key(forest, pattern)
        self.cache[key] = list(results)
        self.cache.move_to_end(key)

        max_entries = self.config.max_entries
        while max_entries is not None and len(self.cache) > max_entries:
            evicted, _ = self.cache.popitem(last=False)
            logger.debug("Pattern cache evicted %r", evicted[1])

        return True

    def invalidate(self, pattern: Optional[PatternLike] = None) -> int:
        """
        Drop cached results.

        Args:
            pattern: Only drop this pattern (None = drop everything)

        Returns:
            Number of entries invalidated
        """
        if pattern is None:
            count = len(self.cache)
            self.cache.clear()
            return count

        if self.forest is None:
            return 0
        return 1 if self.cache.pop(self._key(self.forest, pattern), None) is not None else 0

    def clear(self):
        """Drop all entries and forget the bound forest."""
        self.cache.clear()
        self.forest = None

    def get_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dictionary with cache metrics
        """
        stats = {
            'entries': len(self.cache),
            'hits': self.hits,
            'misses': self.misses,
        }

        total_attempts = self.hits + self.misses
        if total_attempts > 0:
            stats['hit_rate'] = self.hits / total_attempts

        return stats

    def _key(self, forest: Forest, pattern: PatternLike) -> Tuple[int, Hashable]:
        return (id(forest), pattern_key(pattern))
