"""Typed tables and InstaQL queries, sync configuration, topic events and presence rendering."""

__version__ = "0.1.0"
__all__ = ["cli", "render", "sync_config", "table", "topics"]