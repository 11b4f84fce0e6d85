"""Data models for asset-pack-config."""

from enum import Enum


class DeliveryMode(Enum):
    """How an asset pack is delivered to the device."""

    INSTALL_TIME = "install-time"
    FAST_FOLLOW = "fast-follow"
    ON_DEMAND = "on-demand"


class ContentSource(Enum):
    """Mutually exclusive ways of locating an asset pack's content on disk.

    Each value is the name of the matching AssetPackConfig attribute. At most
    one of them may be set on a given config.
    """

    ASSET_BUNDLE_FILE_PATH = "asset_bundle_file_path"
    ASSET_PACK_DIRECTORY_PATH = "asset_pack_directory_path"
    COMPRESSION_FORMAT_TO_ASSET_BUNDLE_FILE_PATH = "compression_format_to_asset_bundle_file_path"
    COMPRESSION_FORMAT_TO_ASSET_PACK_DIRECTORY_PATH = "compression_format_to_asset_pack_directory_path"
    DEVICE_TIER_TO_ASSET_BUNDLE_FILE_PATH = "device_tier_to_asset_bundle_file_path"
    DEVICE_TIER_TO_ASSET_PACK_DIRECTORY_PATH = "device_tier_to_asset_pack_directory_path"
    DEVICE_GROUP_TO_ASSET_BUNDLE_FILE_PATH = "device_group_to_asset_bundle_file_path"
    DEVICE_GROUP_TO_ASSET_PACK_DIRECTORY_PATH = "device_group_to_asset_pack_directory_path"
