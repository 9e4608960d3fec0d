"""
Main CLI Entry Point
Command-line interface for Route 53 hosted zones and record sets
"""

import sys
import argparse
import uuid

from route53_api.api import get_route53_api
from route53_api.api.client import Route53Client
from route53_api.utils.config import get_settings
from route53_api.utils.logger import configure_logging, get_logger

logger = get_logger("cli")


def _print_header(title):
    print(f"\n{'='*60}")
    print(f" {title}")
    print(f"{'='*60}")


def _print_zone_detail(detail):
    zone = detail.hosted_zone
    print(f"  ID:          {zone.id}")
    print(f"  Name:        {zone.name}")
    print(f"  Caller Ref:  {zone.caller_reference}")
    print(f"  Records:     {zone.resource_record_set_count}")
    if zone.config and zone.config.comment:
        print(f"  Comment:     {zone.config.comment}")
    print(f"  Name Servers:")
    for ns in detail.delegation_set.name_servers:
        print(f"    - {ns}")


def _print_change(change_info):
    print(f"  Change ID:   {change_info.id}")
    print(f"  Status:      {change_info.status.value}")
    print(f"  Submitted:   {change_info.submitted_at.isoformat()}")


def cmd_zone_list(args):
    """List hosted zones"""
    try:
        api = get_route53_api(args.api_version)
        result = api.list_hosted_zones(marker=args.marker, max_items=args.max_items)

        _print_header(f"HOSTED ZONES ({len(result.hosted_zones)})")
        for zone in result.hosted_zones:
            print(f"  {zone.name:<40} {zone.zone_id:<24} {zone.resource_record_set_count}")
        if result.next_marker:
            print(f"\n  More zones available, use --marker {result.next_marker}")
        print(f"{'='*60}\n")

    except Exception as e:
        logger.error(f"❌ Failed to list hosted zones: {str(e)}")
        sys.exit(1)


def cmd_zone_get(args):
    """Get hosted zone details"""
    try:
        api = get_route53_api(args.api_version)
        detail = api.get_hosted_zone(args.zone_id)

        _print_header(f"HOSTED ZONE: {detail.hosted_zone.name}")
        _print_zone_detail(detail)
        print(f"{'='*60}\n")

    except Exception as e:
        logger.error(f"❌ Failed to get hosted zone: {str(e)}")
        sys.exit(1)


def cmd_zone_find(args):
    """Find a hosted zone by name"""
    try:
        api = get_route53_api(args.api_version)
        lookup = api.find_hosted_zone(args.name)
    except Exception as e:
        logger.error(f"❌ Failed to find hosted zone: {str(e)}")
        sys.exit(1)

    if lookup.error is not None:
        logger.error(f"❌ Failed to find hosted zone: {str(lookup.error)}")
        sys.exit(1)

    if not lookup.found:
        logger.warning(f"No hosted zone named {args.name}")
        sys.exit(2)

    _print_header(f"HOSTED ZONE: {lookup.zone.hosted_zone.name}")
    _print_zone_detail(lookup.zone)
    print(f"{'='*60}\n")


def cmd_zone_create(args):
    """Create a hosted zone"""
    try:
        api = get_route53_api(args.api_version)
        created = api.create_hosted_zone(
            name=args.name,
            caller_reference=args.caller_reference or uuid.uuid4().hex,
            comment=args.comment
        )

        _print_header("HOSTED ZONE CREATED")
        print(f"  ID:          {created.hosted_zone.id}")
        print(f"  Name:        {created.hosted_zone.name}")
        _print_change(created.change_info)
        print(f"  Name Servers:")
        for ns in created.delegation_set.name_servers:
            print(f"    - {ns}")
        print(f"{'='*60}\n")

    except Exception as e:
        logger.error(f"❌ Failed to create hosted zone: {str(e)}")
        sys.exit(1)


def cmd_zone_delete(args):
    """Delete a hosted zone"""
    try:
        api = get_route53_api(args.api_version)
        change_info = api.delete_hosted_zone(args.zone_id)

        _print_header(f"HOSTED ZONE DELETED: {args.zone_id}")
        _print_change(change_info)
        print(f"{'='*60}\n")

    except Exception as e:
        logger.error(f"❌ Failed to delete hosted zone: {str(e)}")
        sys.exit(1)


def cmd_record_list(args):
    """List record sets in a hosted zone"""
    try:
        api = get_route53_api(args.api_version)
        if args.all:
            record_sets = api.list_all_resource_record_sets(args.zone_id)
            page = None
        else:
            page = api.list_resource_record_sets(
                args.zone_id,
                name=args.name,
                type=args.type,
                max_items=args.max_items
            )
            record_sets = page.record_sets

        _print_header(f"RECORD SETS ({len(record_sets)})")
        for rrset in record_sets:
            if rrset.alias_target:
                target = f"ALIAS {rrset.alias_target.dns_name}"
            else:
                target = ", ".join(rrset.records)
            print(f"  {rrset.name:<36} {rrset.type:<6} {str(rrset.ttl or '-'):<6} {target}")
        if page is not None and page.is_truncated:
            print(f"\n  More records available, use --name {page.next_record_name} --type {page.next_record_type}")
        print(f"{'='*60}\n")

    except Exception as e:
        logger.error(f"❌ Failed to list record sets: {str(e)}")
        sys.exit(1)


def cmd_record_change(args):
    """Create, delete or upsert a single record set"""
    try:
        api = get_route53_api(args.api_version)
        change_info = api.change_resource_record_sets(
            args.zone_id,
            comment=args.comment,
            action=args.action,
            name=args.name,
            type=args.type,
            ttl=args.ttl,
            records=args.value
        )

        _print_header(f"{args.action.upper()} {args.name} {args.type.upper()}")
        _print_change(change_info)
        print(f"{'='*60}\n")

    except Exception as e:
        logger.error(f"❌ Failed to change record set: {str(e)}")
        sys.exit(1)


def cmd_change_get(args):
    """Get change batch status"""
    try:
        api = get_route53_api(args.api_version)
        change_info = api.get_change(args.change_id)

        _print_header("CHANGE STATUS")
        _print_change(change_info)
        print(f"{'='*60}\n")

    except Exception as e:
        logger.error(f"❌ Failed to get change: {str(e)}")
        sys.exit(1)


def cmd_server_date(args):
    """Print the Route 53 server clock"""
    try:
        client = Route53Client.from_settings(get_settings())
        date = client.get_server_date()
        print(date or "unavailable")

    except Exception as e:
        logger.error(f"❌ Failed to get server date: {str(e)}")
        sys.exit(1)


def main():
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="Route 53 Hosted Zone Management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Credentials are read from AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY or .env

Examples:
  # List hosted zones
  python main.py zone list --max-items 20

  # Find a zone by name
  python main.py zone find example.com

  # Create a zone
  python main.py zone create example.com --comment "Marketing site"

  # Add an A record
  python main.py record change Z123 --action CREATE --name www.example.com --type A --ttl 300 --value 192.0.2.1

  # Check whether a change is in sync
  python main.py change get C2682N5HXP0BZ4
        """
    )
    parser.add_argument("--api-version", choices=["2011-05-05", "2013-04-01"], help="Route 53 API version (default: from config)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ==================== ZONE COMMAND ====================
    zone_parser = subparsers.add_parser("zone", help="Hosted zone management")
    zone_subparsers = zone_parser.add_subparsers(dest="zone_command", help="Zone operations")

    zone_list_parser = zone_subparsers.add_parser("list", help="List hosted zones")
    zone_list_parser.add_argument("--marker", help="Pagination marker from a previous page")
    zone_list_parser.add_argument("--max-items", type=int, help="Maximum zones to return")
    zone_list_parser.set_defaults(func=cmd_zone_list)

    zone_get_parser = zone_subparsers.add_parser("get", help="Get hosted zone details")
    zone_get_parser.add_argument("zone_id", help="Hosted zone ID")
    zone_get_parser.set_defaults(func=cmd_zone_get)

    zone_find_parser = zone_subparsers.add_parser("find", help="Find a hosted zone by name")
    zone_find_parser.add_argument("name", help="Zone name")
    zone_find_parser.set_defaults(func=cmd_zone_find)

    zone_create_parser = zone_subparsers.add_parser("create", help="Create a hosted zone")
    zone_create_parser.add_argument("name", help="Zone name")
    zone_create_parser.add_argument("--caller-reference", help="Unique request reference (default: random)")
    zone_create_parser.add_argument("--comment", help="Zone comment")
    zone_create_parser.set_defaults(func=cmd_zone_create)

    zone_delete_parser = zone_subparsers.add_parser("delete", help="Delete a hosted zone")
    zone_delete_parser.add_argument("zone_id", help="Hosted zone ID")
    zone_delete_parser.set_defaults(func=cmd_zone_delete)

    # ==================== RECORD COMMAND ====================
    record_parser = subparsers.add_parser("record", help="Resource record set management")
    record_subparsers = record_parser.add_subparsers(dest="record_command", help="Record operations")

    record_list_parser = record_subparsers.add_parser("list", help="List record sets")
    record_list_parser.add_argument("zone_id", help="Hosted zone ID")
    record_list_parser.add_argument("--name", help="Start listing at this name")
    record_list_parser.add_argument("--type", help="Start listing at this type (requires --name)")
    record_list_parser.add_argument("--max-items", type=int, help="Maximum record sets to return")
    record_list_parser.add_argument("--all", action="store_true", help="Fetch every page")
    record_list_parser.set_defaults(func=cmd_record_list)

    record_change_parser = record_subparsers.add_parser("change", help="Change a single record set")
    record_change_parser.add_argument("zone_id", help="Hosted zone ID")
    record_change_parser.add_argument("--action", required=True, choices=["CREATE", "DELETE", "UPSERT"], help="Change action")
    record_change_parser.add_argument("--name", required=True, help="Record name")
    record_change_parser.add_argument("--type", required=True, help="Record type (A, CNAME, MX, ...)")
    record_change_parser.add_argument("--ttl", type=int, default=300, help="TTL in seconds (default: 300)")
    record_change_parser.add_argument("--value", action="append", required=True, help="Record value (repeat for several)")
    record_change_parser.add_argument("--comment", help="Change batch comment")
    record_change_parser.set_defaults(func=cmd_record_change)

    # ==================== CHANGE COMMAND ====================
    change_parser = subparsers.add_parser("change", help="Change batch status")
    change_subparsers = change_parser.add_subparsers(dest="change_command", help="Change operations")

    change_get_parser = change_subparsers.add_parser("get", help="Get change status")
    change_get_parser.add_argument("change_id", help="Change ID")
    change_get_parser.set_defaults(func=cmd_change_get)

    # ==================== SERVER DATE ====================
    date_parser = subparsers.add_parser("server-date", help="Show the Route 53 server clock")
    date_parser.set_defaults(func=cmd_server_date)

    # Parse and execute
    args = parser.parse_args()

    try:
        configure_logging(get_settings().log_level)
    except Exception as e:
        logger.error(f"❌ Invalid configuration: {str(e)}")
        sys.exit(1)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
