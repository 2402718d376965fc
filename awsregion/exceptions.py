"""Custom exceptions for awsregion"""


class AWSRegionToolError(Exception):
    """Base exception for all awsregion errors"""
    pass


class RegionParseError(AWSRegionToolError, ValueError):
    """Raised when a string is not a canonical AWS region identifier"""

    def __init__(self, value: str):
        self.message = f"Not a valid AWS region: {value}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegionParseError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)


class ConfigurationError(AWSRegionToolError):
    """Raised when configuration is invalid"""
    pass
