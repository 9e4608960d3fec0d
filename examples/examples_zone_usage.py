"""
Route 53 API Client - Usage Examples
====================================

This file demonstrates how to use the versioned Route 53 client for hosted
zone and record set operations.

Prerequisites:
1. Set AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY (or a .env file)
2. Optionally set ROUTE53_API_VERSION (defaults to 2013-04-01)
"""

import time
import uuid

from route53_api.api import (
    Route53APIError,
    HostedZoneNotFoundError,
    InvalidChangeBatchError,
    get_route53_api,
)
from route53_api.api.models import LookupStatus


# ==================== Example 1: Initialize API ====================

def example_initialize_api():
    """Create the API for the configured version"""
    api = get_route53_api()

    print(f"API version: {api.api_version}")
    print(f"API URL: {api.api_url}")
    print(f"Namespace: {api.xmlns}")

    return api


# ==================== Example 2: List Hosted Zones ====================

def example_list_zones():
    """Page through every hosted zone in the account"""
    api = get_route53_api()

    marker = None
    while True:
        page = api.list_hosted_zones(marker=marker, max_items=20)

        for zone in page.hosted_zones:
            print(f"  {zone.name:<40} {zone.zone_id}")

        if page.next_marker is None:
            break
        marker = page.next_marker


# ==================== Example 3: Find a Zone by Name ====================

def example_find_zone(name="example.com"):
    """Look a zone up by name, telling 'missing' apart from 'failed'"""
    api = get_route53_api()

    lookup = api.find_hosted_zone(name)

    if lookup.status is LookupStatus.FOUND:
        print(f"Found {lookup.zone.hosted_zone.id}")
        for ns in lookup.zone.delegation_set.name_servers:
            print(f"  NS {ns}")
    elif lookup.status is LookupStatus.NOT_FOUND:
        print(f"No hosted zone named {name}")
    else:
        print(f"Lookup failed: {lookup.error}")
        print(f"Error code: {api.error.code if api.error else None}")

    return lookup


# ==================== Example 4: Create a Zone and Records ====================

def example_create_zone_with_records(name="example-route53-demo.com"):
    """Create a zone, add a record and wait for the change to propagate"""
    api = get_route53_api()

    created = api.create_hosted_zone(
        name=name,
        caller_reference=str(uuid.uuid4()),
        comment="Created by examples_zone_usage.py"
    )
    zone_id = created.hosted_zone.zone_id
    print(f"Created {created.hosted_zone.name} ({zone_id})")

    change = api.change_resource_record_sets(
        zone_id,
        action="CREATE",
        name=f"www.{name}",
        type="A",
        ttl=300,
        records=["192.0.2.10"]
    )

    while not change.is_in_sync:
        print(f"  Change {change.id} is {change.status.value}, waiting...")
        time.sleep(5)
        change = api.get_change(change.id)

    print("✅ Record is in sync")
    return zone_id


# ==================== Example 5: Clean Up ====================

def example_delete_zone(zone_id):
    """Delete the records we created, then the zone itself"""
    api = get_route53_api()

    removable = [
        rrset for rrset in api.list_all_resource_record_sets(zone_id)
        if rrset.type not in ("NS", "SOA")
    ]

    if removable:
        api.change_resource_record_sets(zone_id, changes=[
            {"action": "DELETE", **rrset.model_dump(exclude_none=True)}
            for rrset in removable
        ])

    change = api.delete_hosted_zone(zone_id)
    print(f"Deletion submitted: {change.id}")


# ==================== Example 6: Error Handling ====================

def example_error_handling():
    """Typed errors plus the last-error slot"""
    api = get_route53_api()

    try:
        api.get_hosted_zone("ZDOESNOTEXIST")

    except HostedZoneNotFoundError as e:
        print(f"Zone not found: {e}")
        print(f"Request id: {api.error.request_id}")

    try:
        api.change_resource_record_sets(
            "ZDOESNOTEXIST", action="DELETE", name="missing.example.com",
            type="A", ttl=300, records=["192.0.2.1"]
        )

    except InvalidChangeBatchError as e:
        print(f"Change batch rejected: {e}")

    except Route53APIError as e:
        print(f"API error: {e}")
        print(f"Status code: {e.status_code}")
        print(f"Error code: {e.code}")


# ==================== Main ====================

def main():
    """Run the read-only examples"""
    print("=" * 60)
    print("Route 53 API Client - Usage Examples")
    print("=" * 60)

    print("\n\n--- Example 1: Initialize API ---")
    example_initialize_api()

    print("\n\n--- Example 2: List Hosted Zones ---")
    example_list_zones()

    print("\n\n--- Example 3: Find a Zone by Name ---")
    example_find_zone()

    print("\n\n--- Example 6: Error Handling ---")
    example_error_handling()

    # ⚠️  These create and delete real zones (hosted zones are billed):
    # zone_id = example_create_zone_with_records()
    # example_delete_zone(zone_id)


if __name__ == "__main__":
    main()
