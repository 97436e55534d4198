"""Models package for asset_registry."""

from .asset import Asset, AssetAttribute

__all__ = ["Asset", "AssetAttribute"]
