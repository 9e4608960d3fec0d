"""
Route 53 API version 2013-04-01
Implements the hosted zone operations and forwards the rest, unchanged,
to a wrapped 2011-05-05 implementation bound to this version's URL
"""

from typing import Any, Dict, Iterable, Optional, Union

from route53_api.api.base_api import BaseRoute53API
from route53_api.api.client import Route53Client
from route53_api.api.models import (
    ChangeInfo,
    CreatedHostedZone,
    HostedZoneDetail,
    HostedZoneList,
    ResourceRecordSetChange,
    ResourceRecordSetList,
)
from route53_api.api.v20110505 import Route53API20110505


class Route53API20130401(BaseRoute53API):
    """
    Route 53 API 2013-04-01.

    Example:
        client = Route53Client(id="AKIA...", key="...")
        api = Route53API20130401(client)
        lookup = api.find_hosted_zone("example.com")
        if lookup.found:
            print(lookup.zone.delegation_set.name_servers)
    """

    api_version = "2013-04-01"

    def __init__(self, client: Route53Client, api_version: Optional[str] = None):
        super().__init__(client, api_version)
        # Same client, same version: forwarded calls hit this version's URL
        self.previous = Route53API20110505(client, api_version=self.api_version)

    # --- Hosted zones ---

    def list_hosted_zones(
        self,
        marker: Optional[str] = None,
        max_items: Optional[int] = None
    ) -> HostedZoneList:
        """
        Get a list of hosted zones.

        Args:
            marker: Where to begin the result set; the next_marker of the
                previous page, echoed back verbatim
            max_items: Maximum number of hosted zones to retrieve

        Returns:
            HostedZoneList, e.g.

                HostedZoneList(
                    hosted_zones=[
                        HostedZone(id='/hostedzone/123ZONEID', name='example.com.',
                                   caller_reference='ExampleZone',
                                   config=HostedZoneConfig(comment='My first zone'),
                                   resource_record_set_count=10),
                    ],
                    next_marker='456ZONEID',
                )

            next_marker is None when this is the last page.
        """
        return self._list_hosted_zones(marker, max_items)

    def get_hosted_zone(self, zone_id: str) -> HostedZoneDetail:
        """
        Get hosted zone data and its name servers.

        Args:
            zone_id: Hosted zone id; a '/hostedzone/' prefix is stripped

        Returns:
            HostedZoneDetail with hosted_zone and delegation_set
        """
        return self._get_hosted_zone(zone_id)

    def create_hosted_zone(
        self,
        name: str,
        caller_reference: str,
        comment: Optional[str] = None
    ) -> CreatedHostedZone:
        """
        Create a new hosted zone.

        Args:
            name: New hosted zone name; a trailing dot is added if missing
            caller_reference: A unique string that identifies the request
            comment: Optional comment, sent as HostedZoneConfig/Comment

        Returns:
            CreatedHostedZone with hosted_zone, change_info (PENDING until
            the zone is live) and delegation_set
        """
        return self._create_hosted_zone(name, caller_reference, comment)

    # --- Forwarded to 2011-05-05 ---

    def delete_hosted_zone(self, zone_id: str) -> ChangeInfo:
        return self.previous.delete_hosted_zone(zone_id)

    def list_resource_record_sets(
        self,
        zone_id: str,
        name: Optional[str] = None,
        type: Optional[str] = None,
        identifier: Optional[str] = None,
        max_items: Optional[int] = None
    ) -> ResourceRecordSetList:
        return self.previous.list_resource_record_sets(
            zone_id, name=name, type=type, identifier=identifier, max_items=max_items
        )

    def change_resource_record_sets(
        self,
        zone_id: str,
        changes: Optional[Iterable[Union[ResourceRecordSetChange, Dict[str, Any]]]] = None,
        comment: Optional[str] = None,
        **change
    ) -> ChangeInfo:
        return self.previous.change_resource_record_sets(zone_id, changes=changes, comment=comment, **change)

    def get_change(self, change_id: str) -> ChangeInfo:
        return self.previous.get_change(change_id)
