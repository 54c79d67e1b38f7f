"""AssetHub management API."""
