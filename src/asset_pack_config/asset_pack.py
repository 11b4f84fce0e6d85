"""Delivery configuration for a single asset pack."""

import logging
from collections.abc import Hashable
from collections.abc import Mapping
from typing import Any

from .exceptions import InvalidConfigurationError
from .models import ContentSource
from .models import DeliveryMode

logger = logging.getLogger(__name__)


class AssetPackConfig:
    """Configuration for one asset pack.

    Holds the pack's delivery mode and the location on disk of the files that
    should be included in it. The location is given through exactly one of
    several content sources (see ContentSource); assigning a content source
    while a different one is set raises InvalidConfigurationError.

    Only None clears a content source. Empty strings and empty mappings count
    as set.

    Instances are not thread safe. Callers writing from several threads must
    hold their own lock around each assignment.

    Args:
        delivery_mode: How the pack is delivered (default: INSTALL_TIME)
    """

    def __init__(self, delivery_mode: Any = DeliveryMode.INSTALL_TIME):
        self.delivery_mode = delivery_mode
        self._sources: dict[ContentSource, Any] = dict.fromkeys(ContentSource)

    def __repr__(self) -> str:
        return f"AssetPackConfig(delivery_mode={self.delivery_mode!r}, content_source={self.content_source!r})"

    # ===== Content Sources =====

    @property
    def asset_bundle_file_path(self) -> str | None:
        """Location on disk of a single AssetBundle file."""
        return self._sources[ContentSource.ASSET_BUNDLE_FILE_PATH]

    @asset_bundle_file_path.setter
    def asset_bundle_file_path(self, value: str | None) -> None:
        self._assign(ContentSource.ASSET_BUNDLE_FILE_PATH, value)

    @property
    def asset_pack_directory_path(self) -> str | None:
        """Location on disk of a folder containing raw asset files."""
        return self._sources[ContentSource.ASSET_PACK_DIRECTORY_PATH]

    @asset_pack_directory_path.setter
    def asset_pack_directory_path(self, value: str | None) -> None:
        self._assign(ContentSource.ASSET_PACK_DIRECTORY_PATH, value)

    @property
    def compression_format_to_asset_bundle_file_path(self) -> Mapping[Hashable, str] | None:
        """AssetBundle file per texture compression format.

        The AssetBundles should be identical except for their texture
        compression format. Only the one matching the device's preferred
        format is delivered.
        """
        return self._sources[ContentSource.COMPRESSION_FORMAT_TO_ASSET_BUNDLE_FILE_PATH]

    @compression_format_to_asset_bundle_file_path.setter
    def compression_format_to_asset_bundle_file_path(self, value: Mapping[Hashable, str] | None) -> None:
        self._assign(ContentSource.COMPRESSION_FORMAT_TO_ASSET_BUNDLE_FILE_PATH, value)

    @property
    def compression_format_to_asset_pack_directory_path(self) -> Mapping[Hashable, str] | None:
        """Raw asset folder per texture compression format."""
        return self._sources[ContentSource.COMPRESSION_FORMAT_TO_ASSET_PACK_DIRECTORY_PATH]

    @compression_format_to_asset_pack_directory_path.setter
    def compression_format_to_asset_pack_directory_path(self, value: Mapping[Hashable, str] | None) -> None:
        self._assign(ContentSource.COMPRESSION_FORMAT_TO_ASSET_PACK_DIRECTORY_PATH, value)

    @property
    def device_tier_to_asset_bundle_file_path(self) -> Mapping[Hashable, str] | None:
        """AssetBundle file per device tier."""
        return self._sources[ContentSource.DEVICE_TIER_TO_ASSET_BUNDLE_FILE_PATH]

    @device_tier_to_asset_bundle_file_path.setter
    def device_tier_to_asset_bundle_file_path(self, value: Mapping[Hashable, str] | None) -> None:
        self._assign(ContentSource.DEVICE_TIER_TO_ASSET_BUNDLE_FILE_PATH, value)

    @property
    def device_tier_to_asset_pack_directory_path(self) -> Mapping[Hashable, str] | None:
        """Raw asset folder per device tier."""
        return self._sources[ContentSource.DEVICE_TIER_TO_ASSET_PACK_DIRECTORY_PATH]

    @device_tier_to_asset_pack_directory_path.setter
    def device_tier_to_asset_pack_directory_path(self, value: Mapping[Hashable, str] | None) -> None:
        self._assign(ContentSource.DEVICE_TIER_TO_ASSET_PACK_DIRECTORY_PATH, value)

    @property
    def device_group_to_asset_bundle_file_path(self) -> Mapping[str, str] | None:
        """AssetBundle file per device group name."""
        return self._sources[ContentSource.DEVICE_GROUP_TO_ASSET_BUNDLE_FILE_PATH]

    @device_group_to_asset_bundle_file_path.setter
    def device_group_to_asset_bundle_file_path(self, value: Mapping[str, str] | None) -> None:
        self._assign(ContentSource.DEVICE_GROUP_TO_ASSET_BUNDLE_FILE_PATH, value)

    @property
    def device_group_to_asset_pack_directory_path(self) -> Mapping[str, str] | None:
        """Raw asset folder per device group name."""
        return self._sources[ContentSource.DEVICE_GROUP_TO_ASSET_PACK_DIRECTORY_PATH]

    @device_group_to_asset_pack_directory_path.setter
    def device_group_to_asset_pack_directory_path(self, value: Mapping[str, str] | None) -> None:
        self._assign(ContentSource.DEVICE_GROUP_TO_ASSET_PACK_DIRECTORY_PATH, value)

    # ===== Active Source =====

    @property
    def content_source(self) -> ContentSource | None:
        """Content source currently set, or None if no source is set."""
        for slot, value in self._sources.items():
            if value is not None:
                return slot
        return None

    @property
    def content_source_value(self) -> Any:
        """Value of the content source currently set, or None."""
        slot = self.content_source
        return None if slot is None else self._sources[slot]

    def clear_content_source(self) -> None:
        """Clear whichever content source is set.

        Does nothing if no content source is set.
        """
        slot = self.content_source
        if slot is not None:
            self._assign(slot, None)

    # ===== Private Helpers =====

    def _assign(self, slot: ContentSource, value: Any) -> None:
        """Store value in slot after checking the other content sources.

        Args:
            slot: Content source being assigned
            value: New value, or None to clear the slot

        Raises:
            InvalidConfigurationError: If value is not None and another
                content source is already set. The slot is left unchanged.
        """
        if value is None:
            self._sources[slot] = None
            logger.debug(f"Cleared {slot.value}")
            return

        for other, current in self._sources.items():
            if other is not slot and current is not None:
                raise InvalidConfigurationError(slot, other)

        self._sources[slot] = value
        logger.debug(f"Set {slot.value} to {value!r}")
