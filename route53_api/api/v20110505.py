"""
Route 53 API version 2011-05-05
Complete implementation of every zone and record set operation; newer
versions wrap it for the operations they leave unchanged
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from route53_api.api.base_api import BaseRoute53API
from route53_api.api.models import (
    AliasTarget,
    ChangeInfo,
    CreatedHostedZone,
    HostedZoneDetail,
    HostedZoneList,
    ResourceRecordSet,
    ResourceRecordSetChange,
    ResourceRecordSetList,
)
from route53_api.api.parsers import parse_change_info, parse_resource_record_set_list
from route53_api.api.xml_codec import OrderedFields, to_xml
from route53_api.utils.logger import get_logger
from route53_api.utils.validators import (
    ValidationError,
    normalize_zone_name,
    require,
    strip_change_id,
    strip_zone_id,
    validate_action,
    validate_record_type,
    validate_ttl,
)


logger = get_logger(__name__)


def build_change(item: Union[ResourceRecordSetChange, Dict[str, Any]]) -> ResourceRecordSetChange:
    """
    Validate one change and return it as a ResourceRecordSetChange.

    Dicts use the keyword form: action, name, type, ttl, records (or a
    single value), set_identifier, weight, region, alias_target.
    """
    if isinstance(item, ResourceRecordSetChange):
        item = {
            "action": item.action.value,
            **item.record_set.model_dump(exclude_none=True),
        }

    records = item.get("records")
    if records is None and item.get("value") is not None:
        records = [item["value"]]
    if isinstance(records, str):
        records = [records]

    alias_target = item.get("alias_target")
    if isinstance(alias_target, dict):
        alias_target = AliasTarget(**alias_target)

    ttl = item.get("ttl")
    if alias_target is None:
        if not records:
            raise ValidationError("A change needs either records or an alias_target")
        ttl = validate_ttl(require("ttl", ttl))
    elif records:
        raise ValidationError("A change cannot have both records and an alias_target")
    elif ttl is not None:
        raise ValidationError("Alias record sets take no TTL")

    return ResourceRecordSetChange(
        action=validate_action(item.get("action")),
        record_set=ResourceRecordSet(
            name=normalize_zone_name(require("name", item.get("name"))),
            type=validate_record_type(item.get("type")),
            ttl=ttl,
            records=list(records or []),
            set_identifier=item.get("set_identifier"),
            weight=item.get("weight"),
            region=item.get("region"),
            alias_target=alias_target,
        ),
    )


class Route53API20110505(BaseRoute53API):
    """
    Route 53 API 2011-05-05.

    Documentation: https://docs.aws.amazon.com/Route53/latest/APIReference/
    """

    api_version = "2011-05-05"

    # --- Hosted zones ---

    def list_hosted_zones(
        self,
        marker: Optional[str] = None,
        max_items: Optional[int] = None
    ) -> HostedZoneList:
        return self._list_hosted_zones(marker, max_items)

    def get_hosted_zone(self, zone_id: str) -> HostedZoneDetail:
        return self._get_hosted_zone(zone_id)

    def create_hosted_zone(
        self,
        name: str,
        caller_reference: str,
        comment: Optional[str] = None
    ) -> CreatedHostedZone:
        return self._create_hosted_zone(name, caller_reference, comment)

    def delete_hosted_zone(self, zone_id: str) -> ChangeInfo:
        """
        Delete a hosted zone.

        Args:
            zone_id: Zone id, with or without the '/hostedzone/' prefix

        Returns:
            ChangeInfo tracking the deletion

        Raises:
            HostedZoneNotEmptyError: If the zone still holds record sets
                other than the default NS and SOA
        """
        zone_id = strip_zone_id(zone_id)
        logger.info(f"Deleting hosted zone: {zone_id}")

        data = self._call("DELETE", f"hostedzone/{zone_id}")
        return parse_change_info(data)

    # --- Record sets ---

    def list_resource_record_sets(
        self,
        zone_id: str,
        name: Optional[str] = None,
        type: Optional[str] = None,
        identifier: Optional[str] = None,
        max_items: Optional[int] = None
    ) -> ResourceRecordSetList:
        """
        List record sets in a hosted zone, in the order Route 53 sorts them.

        Args:
            zone_id: Zone id, with or without the '/hostedzone/' prefix
            name: First record name to return
            type: First record type to return (requires name)
            identifier: First set identifier to return (requires type)
            max_items: Maximum number of record sets to return

        Returns:
            ResourceRecordSetList; when is_truncated, pass next_record_name,
            next_record_type and next_record_identifier to get the next page
        """
        zone_id = strip_zone_id(zone_id)

        if type is not None and name is None:
            raise ValidationError("Parameter 'type' requires 'name'")
        if identifier is not None and type is None:
            raise ValidationError("Parameter 'identifier' requires 'type'")

        params = {}
        if name is not None:
            params["name"] = name
        if type is not None:
            params["type"] = type
        if identifier is not None:
            params["identifier"] = identifier
        if max_items is not None:
            params["maxitems"] = max_items

        data = self._call(
            "GET",
            f"hostedzone/{zone_id}/rrset",
            params=params,
            force_list=("ResourceRecordSet", "ResourceRecord")
        )
        return parse_resource_record_set_list(data)

    def change_resource_record_sets(
        self,
        zone_id: str,
        changes: Optional[Iterable[Union[ResourceRecordSetChange, Dict[str, Any]]]] = None,
        comment: Optional[str] = None,
        **change
    ) -> ChangeInfo:
        """
        Submit a batch of record set changes.

        Either pass `changes`, or describe a single change with keyword
        arguments:

            api.change_resource_record_sets(
                zone_id="Z123", action="CREATE", name="www.example.com",
                type="A", ttl=300, records=["192.0.2.1"]
            )

        Args:
            zone_id: Zone id, with or without the '/hostedzone/' prefix
            changes: ResourceRecordSetChange objects or dicts
            comment: Optional comment stored with the change batch
            **change: Single change (action, name, type, ttl, records or
                value, set_identifier, weight, region, alias_target)

        Returns:
            ChangeInfo for the submitted batch
        """
        zone_id = strip_zone_id(zone_id)

        if changes is None:
            if not change:
                raise ValidationError("No changes given")
            changes = [change]
        elif change:
            raise ValidationError("Pass either 'changes' or a single change, not both")

        batch: List[ResourceRecordSetChange] = [build_change(item) for item in changes]
        if not batch:
            raise ValidationError("No changes given")

        body = to_xml("ChangeResourceRecordSetsRequest", self.client.ordered_fields(
            ("xmlns", self.xmlns),
            ("ChangeBatch", self.client.ordered_fields(
                ("Comment", comment),
                ("Changes", self.client.ordered_fields(
                    ("Change", [self._change_fields(item) for item in batch]),
                )),
            )),
        ))

        logger.info(f"Submitting {len(batch)} change(s) to hosted zone {zone_id}")

        data = self._call("POST", f"hostedzone/{zone_id}/rrset", body=body)
        return parse_change_info(data)

    def _change_fields(self, change: ResourceRecordSetChange) -> OrderedFields:
        """Change element in schema order"""
        rrset = change.record_set

        resource_records = None
        if rrset.records:
            resource_records = self.client.ordered_fields(
                ("ResourceRecord", [self.client.ordered_fields(("Value", value)) for value in rrset.records]),
            )

        alias_target = None
        if rrset.alias_target:
            alias_target = self.client.ordered_fields(
                ("HostedZoneId", rrset.alias_target.hosted_zone_id),
                ("DNSName", rrset.alias_target.dns_name),
                ("EvaluateTargetHealth", rrset.alias_target.evaluate_target_health),
            )

        return self.client.ordered_fields(
            ("Action", change.action.value),
            ("ResourceRecordSet", self.client.ordered_fields(
                ("Name", rrset.name),
                ("Type", rrset.type),
                ("SetIdentifier", rrset.set_identifier),
                ("Weight", rrset.weight),
                ("Region", rrset.region),
                ("TTL", rrset.ttl),
                ("ResourceRecords", resource_records),
                ("AliasTarget", alias_target),
            )),
        )

    def get_change(self, change_id: str) -> ChangeInfo:
        change_id = strip_change_id(change_id)
        data = self._call("GET", f"change/{change_id}")
        return parse_change_info(data)
