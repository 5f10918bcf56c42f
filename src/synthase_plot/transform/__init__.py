"""Structural edits that produce new Dataset values."""

from .removal import prune_groups, remove_sequence

__all__ = ["prune_groups", "remove_sequence"]
