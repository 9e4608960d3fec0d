"""
Quick check script to verify Route 53 client setup
Run this to test your AWS credentials against the configured API version

Usage:
    python examples/check_route53_connection.py
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from route53_api.api import AuthenticationError, NetworkError, Route53APIError, get_route53_api
from route53_api.utils.config import get_settings

console = Console()


def check_server_date(api):
    """The date endpoint needs no credentials"""
    console.print("\n[bold cyan]Reading Route 53 server clock...[/bold cyan]\n")

    try:
        date = api.client.get_server_date()

    except NetworkError as e:
        console.print(Panel(
            f"[bold red]❌ Network Error[/bold red]\n\n{str(e)}",
            title="Error",
            border_style="red"
        ))
        return False

    if not date:
        console.print("[yellow]⚠️  No Date header returned; clock skew can't be checked[/yellow]")
        return True

    console.print(f"  Server date: [green]{date}[/green]")

    skew = api.client.check_clock_skew(date)
    if skew is not None:
        console.print(f"  Local clock skew: [green]{skew:+.0f}s[/green]")
    return True


def check_authentication(api):
    """List one page of zones to validate the credentials"""
    console.print("\n[bold cyan]Testing Route 53 Authentication...[/bold cyan]\n")

    settings = get_settings()

    info_table = Table(show_header=False, box=None)
    info_table.add_row("[cyan]API Version:[/cyan]", f"[yellow]{api.api_version}[/yellow]")
    info_table.add_row("[cyan]API URL:[/cyan]", f"[blue]{api.api_url}[/blue]")
    key_id = settings.aws_access_key_id or ""
    info_table.add_row("[cyan]Access Key:[/cyan]", f"[green]{key_id[:4]}...{key_id[-4:]}[/green]")

    console.print(info_table)
    console.print()

    try:
        console.print("[yellow]→ Attempting to list hosted zones...[/yellow]")
        page = api.list_hosted_zones(max_items=5)

    except AuthenticationError as e:
        console.print(Panel(
            f"[bold red]❌ Authentication Failed[/bold red]\n\n"
            f"{str(e)}\n\n"
            f"[yellow]→ Please check AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY[/yellow]",
            title="Error",
            border_style="red"
        ))
        return False

    except Route53APIError as e:
        console.print(Panel(
            f"[bold red]❌ API Error[/bold red]\n\n{str(e)}",
            title="Error",
            border_style="red"
        ))
        return False

    console.print(Panel(
        f"[bold green]✅ Authentication Successful![/bold green]\n\n"
        f"First page holds [cyan]{len(page.hosted_zones)}[/cyan] hosted zone(s).",
        title="Connection Test",
        border_style="green"
    ))

    if page.hosted_zones:
        zone_table = Table(show_header=True, header_style="bold magenta")
        zone_table.add_column("Zone", style="cyan")
        zone_table.add_column("ID", style="green")
        zone_table.add_column("Records", style="yellow")

        for zone in page.hosted_zones:
            zone_table.add_row(zone.name, zone.zone_id, str(zone.resource_record_set_count))

        console.print(zone_table)

    return True


def main():
    """Run all checks"""
    console.print(Panel.fit(
        "[bold magenta]🚀 Route 53 API Client Check[/bold magenta]\n"
        "[dim]Testing connection and credentials[/dim]",
        border_style="magenta"
    ))

    api = get_route53_api()

    if not check_server_date(api):
        return

    if not check_authentication(api):
        console.print("\n[bold red]⚠️  Authentication failed. Fix credentials before proceeding.[/bold red]")
        return

    console.print("\n" + "=" * 60)
    console.print(Panel.fit(
        "[bold green]✅ All checks completed![/bold green]\n"
        "[dim]Your Route 53 client is ready to use.[/dim]",
        border_style="green"
    ))


if __name__ == "__main__":
    main()
