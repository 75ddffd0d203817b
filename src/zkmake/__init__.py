"""zkmake — create or jump to the zk note under a [[wikilink]]."""

__version__ = "0.1.0"
