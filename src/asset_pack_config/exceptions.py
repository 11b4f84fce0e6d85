"""Exceptions for asset-pack-config."""

from .models import ContentSource


class AssetPackConfigError(Exception):
    """Base exception for asset pack configuration errors."""

    pass


class InvalidConfigurationError(AssetPackConfigError, ValueError):
    """A content source was assigned while another one is already set.

    Attributes:
        slot: Content source that was being assigned
        conflicting_slot: Content source that is already set
    """

    def __init__(self, slot: ContentSource, conflicting_slot: ContentSource):
        super().__init__(f"{conflicting_slot.value} is already set")
        self.slot = slot
        self.conflicting_slot = conflicting_slot
