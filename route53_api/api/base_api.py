"""
Base Route 53 API Interface
Abstract base class for the per-version API implementations
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Union

from route53_api.api.client import Route53Client
from route53_api.api.exceptions import Route53APIError
from route53_api.api.models import (
    ChangeInfo,
    CreatedHostedZone,
    HostedZoneDetail,
    HostedZoneList,
    LookupStatus,
    ResourceRecordSet,
    ResourceRecordSetChange,
    ResourceRecordSetList,
    ZoneLookup,
)
from route53_api.api.parsers import (
    parse_created_hosted_zone,
    parse_hosted_zone_detail,
    parse_hosted_zone_list,
)
from route53_api.api.xml_codec import XML_PARSE_ERRORS, to_xml, xml_to_dict
from route53_api.utils.logger import get_logger
from route53_api.utils.validators import normalize_zone_name, require, strip_zone_id


logger = get_logger(__name__)

FIND_PAGE_SIZE = 100


class BaseRoute53API(ABC):
    """
    Abstract base class for a Route 53 API version.
    Every version exposes the full set of zone and record operations, either
    implemented itself or forwarded to an older version.
    """

    api_version: str = ""

    def __init__(self, client: Route53Client, api_version: Optional[str] = None):
        """
        Args:
            client: Shared base client (credentials, session, error slot)
            api_version: Override the version used in URLs and the XML
                namespace; set when a newer version wraps this one
        """
        self.client = client
        if api_version:
            self.api_version = api_version

    @property
    def api_url(self) -> str:
        """e.g. https://route53.amazonaws.com/2013-04-01/"""
        return f"{self.client.base_url}{self.api_version}/"

    @property
    def xmlns(self) -> str:
        """e.g. https://route53.amazonaws.com/doc/2013-04-01/"""
        return f"{self.client.base_url}doc/{self.api_version}/"

    @property
    def error(self):
        """Error from the most recent failed call"""
        return self.client.error

    def _call(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        body: Optional[str] = None,
        force_list: Iterable[str] = ()
    ) -> dict:
        """
        Send a request relative to api_url and parse the XML response.

        Raises:
            MalformedResponseError: If a successful response is not XML
        """
        response = self.client.request(method, self.api_url + path, params=params, data=body)
        if not response.content:
            return {}

        try:
            return xml_to_dict(response.content, force_list=force_list)
        except XML_PARSE_ERRORS as e:
            raise self.client.malformed_response(response, e)

    # --- Hosted zone requests shared by every version ---

    def _list_hosted_zones(self, marker: Optional[str], max_items: Optional[int]) -> HostedZoneList:
        params = {}
        if marker is not None:
            params["marker"] = marker
        if max_items is not None:
            params["maxitems"] = max_items

        data = self._call("GET", "hostedzone", params=params, force_list=("HostedZone",))
        zones = parse_hosted_zone_list(data)

        logger.debug(f"Listed {len(zones.hosted_zones)} hosted zone(s), next marker: {zones.next_marker}")
        return zones

    def _get_hosted_zone(self, zone_id: str) -> HostedZoneDetail:
        zone_id = strip_zone_id(zone_id)
        logger.info(f"Getting hosted zone: {zone_id}")

        data = self._call("GET", f"hostedzone/{zone_id}", force_list=("NameServer",))
        return parse_hosted_zone_detail(data)

    def _create_hosted_zone(
        self,
        name: str,
        caller_reference: str,
        comment: Optional[str]
    ) -> CreatedHostedZone:
        name = normalize_zone_name(require("name", name))
        require("caller_reference", caller_reference)

        # Route 53 rejects elements out of schema order
        fields = self.client.ordered_fields(
            ("xmlns", self.xmlns),
            ("Name", name),
            ("CallerReference", caller_reference),
            ("HostedZoneConfig", self.client.ordered_fields(("Comment", comment)) if comment else None),
        )
        body = to_xml("CreateHostedZoneRequest", fields)

        logger.info(f"Creating hosted zone: {name}")

        data = self._call("POST", "hostedzone", body=body, force_list=("NameServer",))
        created = parse_created_hosted_zone(data)

        logger.info(f"✅ Hosted zone {created.hosted_zone.id} created, change {created.change_info.id}")
        return created

    # --- Hosted zones ---

    @abstractmethod
    def list_hosted_zones(
        self,
        marker: Optional[str] = None,
        max_items: Optional[int] = None
    ) -> HostedZoneList:
        """
        Get one page of hosted zones.

        Args:
            marker: Where to begin the result set (opaque, from next_marker)
            max_items: Maximum number of zones to return

        Returns:
            HostedZoneList; next_marker is None on the last page
        """

    @abstractmethod
    def get_hosted_zone(self, zone_id: str) -> HostedZoneDetail:
        """
        Get a hosted zone and its delegation set.

        Args:
            zone_id: Zone id, with or without the '/hostedzone/' prefix
        """

    @abstractmethod
    def create_hosted_zone(
        self,
        name: str,
        caller_reference: str,
        comment: Optional[str] = None
    ) -> CreatedHostedZone:
        """
        Create a hosted zone.

        Args:
            name: Zone name; a trailing dot is added if missing
            caller_reference: Unique string identifying the request
            comment: Optional zone comment
        """

    @abstractmethod
    def delete_hosted_zone(self, zone_id: str) -> ChangeInfo:
        """Delete a hosted zone and return the change tracking its removal"""

    # --- Record sets ---

    @abstractmethod
    def list_resource_record_sets(
        self,
        zone_id: str,
        name: Optional[str] = None,
        type: Optional[str] = None,
        identifier: Optional[str] = None,
        max_items: Optional[int] = None
    ) -> ResourceRecordSetList:
        """List one page of record sets, starting at name/type/identifier"""

    @abstractmethod
    def change_resource_record_sets(
        self,
        zone_id: str,
        changes: Optional[Iterable[Union[ResourceRecordSetChange, dict]]] = None,
        comment: Optional[str] = None,
        **change
    ) -> ChangeInfo:
        """Submit a change batch"""

    @abstractmethod
    def get_change(self, change_id: str) -> ChangeInfo:
        """Get the current status of a change batch"""

    # --- Derived operations ---

    def find_hosted_zone(self, name: str) -> ZoneLookup:
        """
        Find the first hosted zone with the given name.

        Pages through list_hosted_zones 100 zones at a time, comparing names
        exactly, then fetches the full detail of the match.

        Args:
            name: Zone name; a trailing dot is added if missing

        Returns:
            ZoneLookup with status FOUND (zone set), NOT_FOUND, or ERROR
            (error set, and client.error describes the failed call)
        """
        name = normalize_zone_name(require("name", name))
        logger.info(f"Looking for hosted zone: {name}")

        marker = None
        found_id = None

        try:
            while True:
                page = self.list_hosted_zones(marker=marker, max_items=FIND_PAGE_SIZE)
                zones = page.hosted_zones

                match = next((zone for zone in zones if zone.name == name), None)
                if match is not None:
                    found_id = match.id
                    break

                # Less than a full page has been returned -- no more zones to get
                if len(zones) < FIND_PAGE_SIZE:
                    break

                marker = page.next_marker or strip_zone_id(zones[-1].id)

            if found_id is None:
                logger.info(f"No hosted zone named {name}")
                return ZoneLookup(status=LookupStatus.NOT_FOUND)

            return ZoneLookup(status=LookupStatus.FOUND, zone=self.get_hosted_zone(found_id))

        except Route53APIError as e:
            logger.error(f"Hosted zone lookup failed for {name}: {str(e)}")
            return ZoneLookup(status=LookupStatus.ERROR, error=e)

    def list_all_resource_record_sets(self, zone_id: str) -> List[ResourceRecordSet]:
        """Follow the next_record_* cursor until every record set is fetched"""
        record_sets = []
        name = type = identifier = None

        while True:
            page = self.list_resource_record_sets(
                zone_id, name=name, type=type, identifier=identifier
            )
            record_sets.extend(page.record_sets)

            if not page.is_truncated:
                return record_sets

            name = page.next_record_name
            type = page.next_record_type
            identifier = page.next_record_identifier
