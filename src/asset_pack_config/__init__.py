"""asset-pack-config: Delivery configuration for app bundle asset packs.

This library describes how a named asset pack is delivered (install-time,
fast-follow or on-demand) and where its content lives on disk. The content
location is given through exactly one of several mutually exclusive sources:
a single AssetBundle file, a single folder of raw assets, or a mapping from
texture compression format, device tier or device group to files or folders.

The packaging pipeline that turns a finished configuration into a bundle is
not part of this library; it only reads the configured values.

Public API:
    AssetPackConfig: Configuration for one asset pack
    DeliveryMode: Enum for INSTALL_TIME/FAST_FOLLOW/ON_DEMAND delivery
    ContentSource: Enum naming the mutually exclusive content sources
    AssetPackConfigError, InvalidConfigurationError: Exception types

Example:
    ```python
    from asset_pack_config import AssetPackConfig, DeliveryMode

    pack = AssetPackConfig(DeliveryMode.ON_DEMAND)
    pack.asset_bundle_file_path = "Assets/Bundles/level1"

    # Only one content source may be set at a time
    pack.asset_bundle_file_path = None
    pack.device_tier_to_asset_bundle_file_path = {0: "low/level1", 1: "high/level1"}
    ```
"""

from .asset_pack import AssetPackConfig
from .exceptions import AssetPackConfigError
from .exceptions import InvalidConfigurationError
from .models import ContentSource
from .models import DeliveryMode

__version__ = "0.1.0"

__all__ = [
    "AssetPackConfig",
    "DeliveryMode",
    "ContentSource",
    "AssetPackConfigError",
    "InvalidConfigurationError",
]
