"""AWS region identifiers"""

from awsregion.exceptions import RegionParseError
from awsregion.models.region import (
    AWS_REGIONS,
    Region,
    get_region_list,
    is_valid_region,
    parse_region,
    to_identifier,
)

__version__ = "0.1.0"

__all__ = [
    "AWS_REGIONS",
    "Region",
    "RegionParseError",
    "get_region_list",
    "is_valid_region",
    "parse_region",
    "to_identifier",
]
