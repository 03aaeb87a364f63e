"""An in-memory key-value store with string, list, sorted set and hash types."""

__version__ = "0.1.0"
__all__ = ["database", "hashes", "keyspace", "lists", "sortedset", "strings"]