"""
Tests for the 2013-04-01 API: hosted zone operations and forwarding to 2011-05-05.
All HTTP calls are served by requests-mock, no real credentials needed.

Run:
    python -m pytest tests/test_api_20130401.py -v
"""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone

import pytest

from route53_api.api.exceptions import HostedZoneNotFoundError, MalformedResponseError, ServerError
from route53_api.api.models import ChangeStatus, LookupStatus
from route53_api.utils.validators import MissingParameterError

from conftest import (
    API_2013,
    api_requests,
    change_info_xml,
    delegation_set_xml,
    error_xml,
    get_zone_xml,
    list_zones_xml,
    zone_xml,
)


NS = "{https://route53.amazonaws.com/doc/2013-04-01/}"
NAME_SERVERS = [
    "ns-001.awsdns-01.net",
    "ns-002.awsdns-02.net",
    "ns-003.awsdns-03.net",
    "ns-004.awsdns-04.net",
]


def _create_response(name, caller_reference, comment=None):
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<CreateHostedZoneResponse xmlns="https://route53.amazonaws.com/doc/2013-04-01/">'
        f"{zone_xml('Z1PA6795UKMFR9', name, caller_reference, comment=comment)}"
        f"{change_info_xml()}"
        f"{delegation_set_xml(NAME_SERVERS)}"
        "</CreateHostedZoneResponse>"
    )


# ===========================================================================
# 1. list_hosted_zones
# ===========================================================================

class TestListHostedZones:

    def test_maps_zones_and_next_marker(self, api, http):
        http.get(API_2013 + "hostedzone", text=list_zones_xml([
            zone_xml("123ZONEID", "example.com.", "ExampleZone", comment="This is my first hosted zone", count=10),
            zone_xml("456ZONEID", "example2.com.", "ExampleZone2", count=7),
        ], next_marker="789ZONEID"))

        result = api.list_hosted_zones()

        assert [zone.name for zone in result.hosted_zones] == ["example.com.", "example2.com."]
        first = result.hosted_zones[0]
        assert first.id == "/hostedzone/123ZONEID"
        assert first.caller_reference == "ExampleZone"
        assert first.config.comment == "This is my first hosted zone"
        assert first.resource_record_set_count == 10
        assert result.hosted_zones[1].config is None
        assert result.next_marker == "789ZONEID"
        assert result.is_truncated is True

    def test_values_are_not_trimmed(self, api, http):
        http.get(API_2013 + "hostedzone", text=list_zones_xml([
            zone_xml("Z1", "example.com.", caller_reference=" ref1 ", comment="  my zone  "),
        ]))

        zone = api.list_hosted_zones().hosted_zones[0]

        assert zone.caller_reference == " ref1 "
        assert zone.config.comment == "  my zone  "

    def test_next_marker_absent_on_last_page(self, api, http):
        http.get(API_2013 + "hostedzone", text=list_zones_xml([zone_xml("Z1", "example.com.")]))

        result = api.list_hosted_zones()

        assert result.next_marker is None

    def test_single_zone_is_still_a_list(self, api, http):
        http.get(API_2013 + "hostedzone", text=list_zones_xml([zone_xml("Z1", "example.com.")]))

        result = api.list_hosted_zones()

        assert isinstance(result.hosted_zones, list)
        assert len(result.hosted_zones) == 1

    def test_empty_account(self, api, http):
        http.get(API_2013 + "hostedzone", text=list_zones_xml([]))
        assert api.list_hosted_zones().hosted_zones == []

    def test_pagination_query_parameters(self, api, http):
        http.get(API_2013 + "hostedzone", text=list_zones_xml([]))

        api.list_hosted_zones(marker="Z2 /odd+marker", max_items=15)

        sent = api_requests(http)[0]
        assert sent.qs == {"marker": ["Z2 /odd+marker"], "maxitems": ["15"]}
        assert "marker=Z2+%2Fodd%2Bmarker" in sent.url

    def test_no_query_parameters_by_default(self, api, http):
        http.get(API_2013 + "hostedzone", text=list_zones_xml([]))

        api.list_hosted_zones()

        assert api_requests(http)[0].query == ""

    def test_failure_sets_error_and_raises(self, api, http):
        http.get(API_2013 + "hostedzone", status_code=500, text=error_xml("InternalFailure", "oops", "Receiver"))

        with pytest.raises(ServerError):
            api.list_hosted_zones()

        assert api.error.code == "InternalFailure"


# ===========================================================================
# 2. get_hosted_zone
# ===========================================================================

class TestGetHostedZone:

    def test_strips_prefix_and_maps_delegation_set(self, api, http):
        http.get(
            API_2013 + "hostedzone/123ZONEID",
            text=get_zone_xml(zone_xml("123ZONEID", "example.com.", "ExampleZone", comment="c", count=10), NAME_SERVERS),
        )

        detail = api.get_hosted_zone("/hostedzone/123ZONEID")

        assert api_requests(http)[0].path == "/2013-04-01/hostedzone/123ZONEID"
        assert detail.hosted_zone.id == "/hostedzone/123ZONEID"
        assert detail.hosted_zone.zone_id == "123ZONEID"
        assert detail.hosted_zone.name == "example.com."
        assert detail.delegation_set.name_servers == NAME_SERVERS

    def test_single_name_server_is_a_list(self, api, http):
        http.get(
            API_2013 + "hostedzone/Z1",
            text=get_zone_xml(zone_xml("Z1", "example.com."), ["ns-001.awsdns-01.net"]),
        )

        detail = api.get_hosted_zone("Z1")

        assert detail.delegation_set.name_servers == ["ns-001.awsdns-01.net"]

    def test_requires_zone_id(self, api, http):
        with pytest.raises(MissingParameterError):
            api.get_hosted_zone(None)

        assert api_requests(http) == []

    def test_unreadable_body_raises_typed_error(self, api, http):
        http.get(API_2013 + "hostedzone/Z1", text="<html>proxy login</html")

        with pytest.raises(MalformedResponseError):
            api.get_hosted_zone("Z1")

        assert api.error.code == "MalformedResponse"

    def test_unknown_zone(self, api, http):
        http.get(API_2013 + "hostedzone/ZNOPE", status_code=404, text=error_xml("NoSuchHostedZone", "nope"))

        with pytest.raises(HostedZoneNotFoundError):
            api.get_hosted_zone("ZNOPE")

        assert api.error.code == "NoSuchHostedZone"


# ===========================================================================
# 3. find_hosted_zone
# ===========================================================================

class TestFindHostedZone:

    def test_found_on_second_page(self, api, http):
        page_one = [zone_xml(f"Z{i:03d}", f"zone{i:03d}.com.") for i in range(100)]
        page_two = [zone_xml("ZA", "other.com."), zone_xml("ZMATCH", "example.com.")]
        http.get(API_2013 + "hostedzone", [
            {"text": list_zones_xml(page_one, next_marker="Z100")},
            {"text": list_zones_xml(page_two)},
        ])
        http.get(
            API_2013 + "hostedzone/ZMATCH",
            text=get_zone_xml(zone_xml("ZMATCH", "example.com."), NAME_SERVERS),
        )

        lookup = api.find_hosted_zone("example.com")

        assert lookup.status is LookupStatus.FOUND
        assert lookup.found
        assert lookup.zone.hosted_zone.name == "example.com."
        assert lookup.zone.delegation_set.name_servers == NAME_SERVERS

        sent = api_requests(http)
        assert [r.qs.get("maxitems") for r in sent[:2]] == [["100"], ["100"]]
        assert "marker" not in sent[0].qs
        assert sent[1].qs["marker"] == ["Z100"]
        assert sent[2].path == "/2013-04-01/hostedzone/ZMATCH"

    def test_marker_falls_back_to_last_zone_id(self, api, http):
        page_one = [zone_xml(f"Z{i:03d}", f"zone{i:03d}.com.") for i in range(100)]
        http.get(API_2013 + "hostedzone", [
            {"text": list_zones_xml(page_one)},
            {"text": list_zones_xml([])},
        ])

        lookup = api.find_hosted_zone("example.com.")

        assert lookup.status is LookupStatus.NOT_FOUND
        assert api_requests(http)[1].qs["marker"] == ["Z099"]

    def test_stops_after_short_page(self, api, http):
        http.get(API_2013 + "hostedzone", text=list_zones_xml([
            zone_xml("Z1", "a.com."),
            zone_xml("Z2", "b.com."),
        ], next_marker="ZIGNORED"))

        lookup = api.find_hosted_zone("example.com")

        assert lookup.status is LookupStatus.NOT_FOUND
        assert lookup.zone is None
        assert lookup.error is None
        assert len(api_requests(http)) == 1

    def test_names_compare_case_sensitively(self, api, http):
        http.get(API_2013 + "hostedzone", text=list_zones_xml([zone_xml("Z1", "Example.com.")]))

        lookup = api.find_hosted_zone("example.com")

        assert lookup.status is LookupStatus.NOT_FOUND

    def test_api_failure_is_reported_as_error(self, api, http):
        http.get(API_2013 + "hostedzone", status_code=503, text=error_xml("ServiceUnavailable", "down", "Receiver"))

        lookup = api.find_hosted_zone("example.com")

        assert lookup.status is LookupStatus.ERROR
        assert isinstance(lookup.error, ServerError)
        assert not lookup.found
        assert api.error.code == "ServiceUnavailable"

    def test_unreadable_body_is_reported_as_error(self, api, http):
        http.get(API_2013 + "hostedzone", text="<html>proxy login</html")

        lookup = api.find_hosted_zone("example.com")

        assert lookup.status is LookupStatus.ERROR
        assert isinstance(lookup.error, MalformedResponseError)
        assert api.error.code == "MalformedResponse"
        assert api.error.status_code == 200

    def test_requires_name(self, api, http):
        with pytest.raises(MissingParameterError):
            api.find_hosted_zone(None)


# ===========================================================================
# 4. create_hosted_zone
# ===========================================================================

class TestCreateHostedZone:

    def test_without_comment(self, api, http):
        http.post(API_2013 + "hostedzone", status_code=201, text=_create_response("example.com.", "ref1"))

        created = api.create_hosted_zone(name="example.com", caller_reference="ref1")

        body = api_requests(http)[0].text
        assert body.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
        root = ET.fromstring(body.split("\n", 1)[1])
        assert root.tag == NS + "CreateHostedZoneRequest"
        assert [child.tag for child in root] == [NS + "Name", NS + "CallerReference"]
        assert root.find(NS + "Name").text == "example.com."
        assert root.find(NS + "CallerReference").text == "ref1"

        assert created.hosted_zone.name == "example.com."
        assert created.hosted_zone.caller_reference == "ref1"
        assert created.hosted_zone.config is None

    def test_with_comment(self, api, http):
        http.post(API_2013 + "hostedzone", status_code=201, text=_create_response("example.com.", "ref2", "hello"))

        created = api.create_hosted_zone(name="example.com.", caller_reference="ref2", comment="hello")

        root = ET.fromstring(api_requests(http)[0].text.split("\n", 1)[1])
        assert [child.tag for child in root] == [NS + "Name", NS + "CallerReference", NS + "HostedZoneConfig"]
        assert root.find(f"{NS}HostedZoneConfig/{NS}Comment").text == "hello"
        assert created.hosted_zone.config.comment == "hello"

    def test_namespace_attribute(self, api, http):
        http.post(API_2013 + "hostedzone", status_code=201, text=_create_response("example.com.", "ref1"))

        api.create_hosted_zone(name="example.com", caller_reference="ref1")

        assert 'xmlns="https://route53.amazonaws.com/doc/2013-04-01/"' in api_requests(http)[0].text

    def test_maps_change_info_and_delegation_set(self, api, http):
        http.post(API_2013 + "hostedzone", status_code=201, text=_create_response("example.com.", "ref1"))

        created = api.create_hosted_zone(name="example.com", caller_reference="ref1")

        assert created.change_info.id == "/change/C2682N5HXP0BZ4"
        assert created.change_info.status is ChangeStatus.PENDING
        assert created.change_info.submitted_at == datetime(2011, 8, 30, 23, 54, 53, 221000, tzinfo=timezone.utc)
        assert created.delegation_set.name_servers == NAME_SERVERS
        assert created.hosted_zone.resource_record_set_count == 2

    @pytest.mark.parametrize("kwargs, missing", [
        ({"name": None, "caller_reference": "ref1"}, "name"),
        ({"name": "example.com", "caller_reference": None}, "caller_reference"),
    ])
    def test_required_parameters(self, api, http, kwargs, missing):
        with pytest.raises(MissingParameterError) as exc_info:
            api.create_hosted_zone(**kwargs)

        assert exc_info.value.parameter == missing
        assert api_requests(http) == []


# ===========================================================================
# 5. Operations forwarded to 2011-05-05
# ===========================================================================

class TestForwardedOperations:

    def test_delete_uses_this_version_url(self, api, http):
        http.delete(
            API_2013 + "hostedzone/Z1",
            text=f'<DeleteHostedZoneResponse xmlns="https://route53.amazonaws.com/doc/2013-04-01/">{change_info_xml()}</DeleteHostedZoneResponse>',
        )

        change_info = api.delete_hosted_zone("/hostedzone/Z1")

        assert change_info.status is ChangeStatus.PENDING
        assert api_requests(http)[0].path == "/2013-04-01/hostedzone/Z1"

    def test_change_batch_uses_this_version_namespace(self, api, http):
        http.post(
            API_2013 + "hostedzone/Z1/rrset",
            text=f"<ChangeResourceRecordSetsResponse>{change_info_xml()}</ChangeResourceRecordSetsResponse>",
        )

        api.change_resource_record_sets(
            "Z1", action="CREATE", name="www.example.com", type="A", ttl=300, records=["192.0.2.1"]
        )

        assert 'xmlns="https://route53.amazonaws.com/doc/2013-04-01/"' in api_requests(http)[0].text

    def test_list_record_sets_and_get_change(self, api, http):
        http.get(
            API_2013 + "hostedzone/Z1/rrset",
            text="<ListResourceRecordSetsResponse><ResourceRecordSets/><IsTruncated>false</IsTruncated>"
                 "<MaxItems>100</MaxItems></ListResourceRecordSetsResponse>",
        )
        http.get(
            API_2013 + "change/C1",
            text=f"<GetChangeResponse>{change_info_xml('C1', 'INSYNC')}</GetChangeResponse>",
        )

        assert api.list_resource_record_sets("Z1").record_sets == []
        assert api.get_change("/change/C1").is_in_sync

    def test_wrapped_version_shares_the_client(self, api):
        assert api.previous.client is api.client
        assert api.previous.api_version == "2013-04-01"
        assert api.previous.api_url == API_2013
