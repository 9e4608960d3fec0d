"""
Map parsed Route 53 XML documents onto the domain models
"""

from typing import Any, Dict, List, Optional

from route53_api.api.models import (
    AliasTarget,
    ChangeInfo,
    CreatedHostedZone,
    DelegationSet,
    HostedZone,
    HostedZoneConfig,
    HostedZoneDetail,
    HostedZoneList,
    ResourceRecordSet,
    ResourceRecordSetList,
)


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    # Empty container elements parse to '' rather than {}
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    return [value]


def _as_bool(value: Optional[str]) -> Optional[bool]:
    if value is None or value == "":
        return None
    return value.strip().lower() == "true"


def _as_int(value: Optional[str]) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


def parse_hosted_zone(zone_data: Dict[str, Any]) -> HostedZone:
    config = None
    if "Config" in zone_data:
        config_data = _section(zone_data, "Config")
        config = HostedZoneConfig(
            comment=config_data.get("Comment"),
            private_zone=_as_bool(config_data.get("PrivateZone")),
        )

    return HostedZone(
        id=zone_data.get("Id"),
        name=zone_data.get("Name"),
        caller_reference=zone_data.get("CallerReference"),
        config=config,
        resource_record_set_count=_as_int(zone_data.get("ResourceRecordSetCount")),
    )


def parse_delegation_set(data: Dict[str, Any]) -> DelegationSet:
    name_servers = _section(_section(data, "DelegationSet"), "NameServers")
    return DelegationSet(name_servers=_as_list(name_servers.get("NameServer")))


def parse_change_info(data: Dict[str, Any]) -> ChangeInfo:
    info = _section(data, "ChangeInfo")
    return ChangeInfo(
        id=info.get("Id"),
        status=info.get("Status"),
        submitted_at=info.get("SubmittedAt"),
        comment=info.get("Comment"),
    )


def parse_hosted_zone_list(data: Dict[str, Any]) -> HostedZoneList:
    zones = _section(data, "HostedZones").get("HostedZone", [])
    return HostedZoneList(
        hosted_zones=[parse_hosted_zone(zone) for zone in _as_list(zones)],
        next_marker=data.get("NextMarker"),
        marker=data.get("Marker") or None,
        max_items=_as_int(data.get("MaxItems")),
        is_truncated=_as_bool(data.get("IsTruncated")),
    )


def parse_hosted_zone_detail(data: Dict[str, Any]) -> HostedZoneDetail:
    return HostedZoneDetail(
        hosted_zone=parse_hosted_zone(_section(data, "HostedZone")),
        delegation_set=parse_delegation_set(data),
    )


def parse_created_hosted_zone(data: Dict[str, Any]) -> CreatedHostedZone:
    return CreatedHostedZone(
        hosted_zone=parse_hosted_zone(_section(data, "HostedZone")),
        change_info=parse_change_info(data),
        delegation_set=parse_delegation_set(data),
    )


def parse_resource_record_set(rrset: Dict[str, Any]) -> ResourceRecordSet:
    records = _section(rrset, "ResourceRecords").get("ResourceRecord", [])

    alias_target = None
    if "AliasTarget" in rrset:
        alias = _section(rrset, "AliasTarget")
        alias_target = AliasTarget(
            hosted_zone_id=alias.get("HostedZoneId"),
            dns_name=alias.get("DNSName"),
            evaluate_target_health=_as_bool(alias.get("EvaluateTargetHealth")),
        )

    return ResourceRecordSet(
        name=rrset.get("Name"),
        type=rrset.get("Type"),
        ttl=_as_int(rrset.get("TTL")),
        records=[record.get("Value") for record in _as_list(records) if isinstance(record, dict)],
        set_identifier=rrset.get("SetIdentifier"),
        weight=_as_int(rrset.get("Weight")),
        region=rrset.get("Region"),
        alias_target=alias_target,
    )


def parse_resource_record_set_list(data: Dict[str, Any]) -> ResourceRecordSetList:
    rrsets = _section(data, "ResourceRecordSets").get("ResourceRecordSet", [])
    return ResourceRecordSetList(
        record_sets=[parse_resource_record_set(rrset) for rrset in _as_list(rrsets)],
        is_truncated=bool(_as_bool(data.get("IsTruncated"))),
        max_items=_as_int(data.get("MaxItems")),
        next_record_name=data.get("NextRecordName"),
        next_record_type=data.get("NextRecordType"),
        next_record_identifier=data.get("NextRecordIdentifier"),
    )
