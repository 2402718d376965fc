"""Region model"""

from .region import (
    AWS_REGIONS,
    Region,
    get_region_list,
    is_valid_region,
    parse_region,
    to_identifier,
)

__all__ = [
    "AWS_REGIONS",
    "Region",
    "get_region_list",
    "is_valid_region",
    "parse_region",
    "to_identifier",
]
