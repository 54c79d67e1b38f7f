"""Asset-specific domain helpers."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from assethub.domain.search import SearchCriteria


class AssetCategory(str, Enum):
    """Broad classification of an asset type."""

    DEVICE = "Device"
    PERSON = "Person"
    HARDWARE = "Hardware"


@dataclass(slots=True)
class AssetSearchCriteria(SearchCriteria):
    """Criteria accepted by the asset listing endpoint."""

    asset_type_token: Optional[str] = None


@dataclass(slots=True)
class AssetTypeSearchCriteria(SearchCriteria):
    """Criteria accepted by the asset type listing endpoint."""

    asset_category: Optional[AssetCategory] = None
