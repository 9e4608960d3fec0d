"""
Input validation and normalization for zone names, ids and record changes
"""

from typing import Any, Optional


HOSTED_ZONE_PREFIX = "/hostedzone/"
CHANGE_PREFIX = "/change/"

CHANGE_ACTIONS = ("CREATE", "DELETE", "UPSERT")

RECORD_TYPES = (
    "A", "AAAA", "CAA", "CNAME", "DS", "MX", "NAPTR", "NS",
    "PTR", "SOA", "SPF", "SRV", "TXT",
)


class ValidationError(Exception):
    """Custom exception for validation errors"""
    pass


class MissingParameterError(ValidationError):
    """Raised when a required parameter is not supplied"""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Required parameter '{parameter}' is not defined")


class ZoneNameValidator:
    """Validator for hosted zone and record names"""

    MAX_LENGTH = 255
    MAX_LABEL_LENGTH = 63

    @classmethod
    def normalize(cls, name: str) -> str:
        """
        Make sure a DNS name ends with a dot.

        Args:
            name: Zone or record name, e.g. 'example.com'

        Returns:
            Fully qualified name, e.g. 'example.com.'

        Raises:
            ValidationError: If the name is empty or too long
        """
        if not name:
            raise ValidationError("Zone name cannot be empty")

        name = name.strip()

        if not name.endswith("."):
            name += "."

        if len(name) > cls.MAX_LENGTH:
            raise ValidationError(f"Name too long (max {cls.MAX_LENGTH} characters): {name}")

        # Only the root zone may be a bare dot
        labels = name[:-1].split(".") if name != "." else []
        for label in labels:
            if not label:
                raise ValidationError(f"Empty label in name: {name}")
            if len(label) > cls.MAX_LABEL_LENGTH:
                raise ValidationError(
                    f"Label '{label}' too long (max {cls.MAX_LABEL_LENGTH} characters)"
                )

        return name


def require(name: str, value: Any) -> Any:
    """Fail fast on a missing required parameter"""
    if value is None or value == "":
        raise MissingParameterError(name)
    return value


def normalize_zone_name(name: str) -> str:
    """Convenience function for zone name normalization"""
    return ZoneNameValidator.normalize(name)


def strip_prefix(value: str, prefix: str) -> str:
    """Remove a resource path prefix such as '/hostedzone/' if present"""
    if value.startswith(prefix):
        return value[len(prefix):]
    return value


def strip_zone_id(zone_id: str) -> str:
    """'/hostedzone/Z123' -> 'Z123'"""
    return strip_prefix(require("zone_id", zone_id), HOSTED_ZONE_PREFIX)


def strip_change_id(change_id: str) -> str:
    """'/change/C123' -> 'C123'"""
    return strip_prefix(require("change_id", change_id), CHANGE_PREFIX)


def validate_action(action: Optional[str]) -> str:
    """Validate a change batch action (CREATE, DELETE or UPSERT)"""
    action = require("action", action).upper()
    if action not in CHANGE_ACTIONS:
        raise ValidationError(
            f"Invalid action: {action}. Valid options are: {', '.join(CHANGE_ACTIONS)}"
        )
    return action


def validate_record_type(record_type: Optional[str]) -> str:
    """Validate a resource record type"""
    record_type = require("type", record_type).upper()
    if record_type not in RECORD_TYPES:
        raise ValidationError(f"Unsupported record type: {record_type}")
    return record_type


def validate_ttl(ttl: Any) -> int:
    """TTL must be a non-negative integer number of seconds"""
    try:
        ttl = int(ttl)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid TTL: {ttl!r}")
    if ttl < 0:
        raise ValidationError(f"TTL cannot be negative: {ttl}")
    return ttl
