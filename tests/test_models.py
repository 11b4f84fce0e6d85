"""Tests for data models and exceptions."""

from asset_pack_config import AssetPackConfig
from asset_pack_config import AssetPackConfigError
from asset_pack_config import ContentSource
from asset_pack_config import DeliveryMode
from asset_pack_config import InvalidConfigurationError


class TestDeliveryMode:
    """Test DeliveryMode enum."""

    def test_values(self):
        """Test delivery modes use their wire names."""
        assert DeliveryMode.INSTALL_TIME.value == "install-time"
        assert DeliveryMode.FAST_FOLLOW.value == "fast-follow"
        assert DeliveryMode.ON_DEMAND.value == "on-demand"

    def test_lookup_by_value(self):
        """Test delivery modes can be looked up by value."""
        assert DeliveryMode("on-demand") is DeliveryMode.ON_DEMAND


class TestContentSource:
    """Test ContentSource enum."""

    def test_eight_sources(self):
        """Test every content source is listed."""
        assert len(ContentSource) == 8

    def test_values_name_config_attributes(self):
        """Test each value is a property on AssetPackConfig."""
        for slot in ContentSource:
            assert isinstance(getattr(AssetPackConfig, slot.value), property)


class TestExceptions:
    """Test exception hierarchy."""

    def test_invalid_configuration_is_config_error(self):
        """Test InvalidConfigurationError derives from the base error."""
        assert issubclass(InvalidConfigurationError, AssetPackConfigError)
        assert issubclass(InvalidConfigurationError, ValueError)

    def test_invalid_configuration_attributes(self):
        """Test the error records both content sources."""
        error = InvalidConfigurationError(
            ContentSource.ASSET_PACK_DIRECTORY_PATH,
            ContentSource.ASSET_BUNDLE_FILE_PATH,
        )
        assert error.slot is ContentSource.ASSET_PACK_DIRECTORY_PATH
        assert error.conflicting_slot is ContentSource.ASSET_BUNDLE_FILE_PATH
        assert str(error) == "asset_bundle_file_path is already set"
