"""
Shared fixtures: a Route 53 client whose HTTP layer is served by requests-mock
"""

from email.utils import formatdate

import pytest

from route53_api.api.client import Route53Client
from route53_api.api.v20110505 import Route53API20110505
from route53_api.api.v20130401 import Route53API20130401


BASE_URL = "https://route53.amazonaws.com/"
API_2013 = BASE_URL + "2013-04-01/"
API_2011 = BASE_URL + "2011-05-05/"
SERVER_DATE = formatdate(usegmt=True)

ACCESS_KEY_ID = "AKIDEXAMPLE"
SECRET_KEY = "wJalrXUtnFEMI/K7MDENG/bPxRfiCYEXAMPLEKEY"


# ---------------------------------------------------------------------------
# XML builders
# ---------------------------------------------------------------------------

def zone_xml(zone_id, name, caller_reference="ref", comment=None, count=2):
    config = f"<Config><Comment>{comment}</Comment></Config>" if comment else ""
    return (
        "<HostedZone>"
        f"<Id>/hostedzone/{zone_id}</Id>"
        f"<Name>{name}</Name>"
        f"<CallerReference>{caller_reference}</CallerReference>"
        f"{config}"
        f"<ResourceRecordSetCount>{count}</ResourceRecordSetCount>"
        "</HostedZone>"
    )


def list_zones_xml(zones, next_marker=None, max_items=100, version="2013-04-01"):
    truncated = "true" if next_marker else "false"
    marker = f"<NextMarker>{next_marker}</NextMarker>" if next_marker else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<ListHostedZonesResponse xmlns="https://route53.amazonaws.com/doc/{version}/">'
        f"<HostedZones>{''.join(zones)}</HostedZones>"
        "<Marker/>"
        f"<IsTruncated>{truncated}</IsTruncated>"
        f"{marker}"
        f"<MaxItems>{max_items}</MaxItems>"
        "</ListHostedZonesResponse>"
    )


def delegation_set_xml(name_servers):
    servers = "".join(f"<NameServer>{ns}</NameServer>" for ns in name_servers)
    return f"<DelegationSet><NameServers>{servers}</NameServers></DelegationSet>"


def change_info_xml(change_id="C2682N5HXP0BZ4", status="PENDING", comment=None):
    comment_xml = f"<Comment>{comment}</Comment>" if comment else ""
    return (
        "<ChangeInfo>"
        f"<Id>/change/{change_id}</Id>"
        f"<Status>{status}</Status>"
        "<SubmittedAt>2011-08-30T23:54:53.221Z</SubmittedAt>"
        f"{comment_xml}"
        "</ChangeInfo>"
    )


def get_zone_xml(zone, name_servers):
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<GetHostedZoneResponse xmlns="https://route53.amazonaws.com/doc/2013-04-01/">'
        f"{zone}{delegation_set_xml(name_servers)}"
        "</GetHostedZoneResponse>"
    )


def error_xml(code, message, error_type="Sender"):
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<ErrorResponse xmlns="https://route53.amazonaws.com/doc/2013-04-01/">'
        f"<Error><Type>{error_type}</Type><Code>{code}</Code><Message>{message}</Message></Error>"
        "<RequestId>4ec3f0fd-0c8e-11e1-a2e8-1fd0e5d8b2f1</RequestId>"
        "</ErrorResponse>"
    )


def api_requests(mocker):
    """Request history without the server-date requests"""
    return [r for r in mocker.request_history if r.path != "/date"]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def http(requests_mock):
    """requests-mock with the server clock endpoint registered"""
    requests_mock.get(BASE_URL + "date", headers={"Date": SERVER_DATE})
    return requests_mock


@pytest.fixture
def client(http):
    return Route53Client(id=ACCESS_KEY_ID, key=SECRET_KEY)


@pytest.fixture
def api(client):
    return Route53API20130401(client)


@pytest.fixture
def api_2011(client):
    return Route53API20110505(client)
