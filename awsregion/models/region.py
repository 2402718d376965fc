"""AWS regions and conversion to and from their canonical identifiers.

Every ``Region`` member corresponds to exactly one lowercase hyphenated
identifier that AWS accepts (e.g. ``Region.US_EAST_1`` <-> ``"us-east-1"``).
Parsing is exact: no case folding, no trimming, no partial matches.
"""

from enum import Enum
from typing import List, Tuple

from awsregion.exceptions import RegionParseError


class Region(Enum):
    """An AWS region"""
    AP_NORTHEAST_1 = "ap-northeast-1"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    AP_SOUTHEAST_2 = "ap-southeast-2"
    EU_CENTRAL_1 = "eu-central-1"
    EU_WEST_1 = "eu-west-1"
    SA_EAST_1 = "sa-east-1"
    US_EAST_1 = "us-east-1"
    US_WEST_1 = "us-west-1"
    US_WEST_2 = "us-west-2"
    CN_NORTH_1 = "cn-north-1"

    def __str__(self) -> str:
        return self.value

    @property
    def identifier(self) -> str:
        """Canonical identifier, e.g. 'us-west-2'"""
        return self.value

    @property
    def location_name(self) -> str:
        """Human-readable location, e.g. 'Oregon'"""
        return AWS_REGIONS[self.value]

    @classmethod
    def parse(cls, text: str) -> "Region":
        """Parse a canonical identifier into a Region.

        Raises:
            RegionParseError: If text is not exactly one of the identifiers
        """
        return parse_region(text)


# Map region identifiers to location names, in declaration order
AWS_REGIONS = {
    'ap-northeast-1': 'Tokyo',
    'ap-southeast-1': 'Singapore',
    'ap-southeast-2': 'Sydney',
    'eu-central-1': 'Frankfurt',
    'eu-west-1': 'Ireland',
    'sa-east-1': 'Sao Paulo',
    'us-east-1': 'N. Virginia',
    'us-west-1': 'N. California',
    'us-west-2': 'Oregon',
    'cn-north-1': 'Beijing',
}

_REGIONS_BY_IDENTIFIER = {region.value: region for region in Region}


def to_identifier(region: Region) -> str:
    """Get the canonical identifier for a region.

    Args:
        region: Region member

    Returns:
        Identifier string (e.g., 'ap-northeast-1')
    """
    return region.value


def parse_region(text: str) -> Region:
    """Parse a canonical identifier into a Region.

    Args:
        text: Identifier to parse (e.g., 'us-east-1'); matched exactly

    Returns:
        The matching Region member

    Raises:
        RegionParseError: If text does not match any identifier
    """
    region = _REGIONS_BY_IDENTIFIER.get(text) if isinstance(text, str) else None
    if region is None:
        raise RegionParseError(text)
    return region


def is_valid_region(text: str) -> bool:
    """Check whether text is a canonical region identifier"""
    return isinstance(text, str) and text in _REGIONS_BY_IDENTIFIER


def get_region_list() -> List[Tuple[str, str]]:
    """Get (identifier, display name) pairs for all regions.

    Returns:
        List of tuples like ('us-east-1', 'us-east-1 (N. Virginia)')
    """
    return [(code, f"{code} ({name})") for code, name in AWS_REGIONS.items()]
