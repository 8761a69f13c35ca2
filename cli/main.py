"""CLI entry point and argument parsing"""

import argparse
import logging

from rich.console import Console
from rich.table import Table

import settings
from oauth import mask_token
from proxy import RealtimeServer


console = Console()


def show_startup_banner(host: str, port: int, config: settings.Settings):
    """Print the routes and which integrations are configured"""
    base = f"http://{host}:{port}"

    table = Table(title="Kira Realtime Server")
    table.add_column("Route", style="cyan")
    table.add_column("URL")
    table.add_row("Health", f"{base}/health")
    table.add_row("Realtime token", f"{base}/realtime-ephemeral")
    table.add_row("TikTok login", f"{base}/tiktok/login")
    table.add_row("Persona", f"{base}/persona")
    console.print(table)

    status = Table(title="Configuration")
    status.add_column("Setting", style="cyan")
    status.add_column("Value")
    status.add_row("OPENAI_API_KEY", mask_token(config.openai_api_key))
    status.add_row("TIKTOK_CLIENT_KEY", config.tiktok_client_key or "<none>")
    status.add_row("TIKTOK_CLIENT_SECRET", mask_token(config.tiktok_client_secret))
    status.add_row("TIKTOK_REDIRECT_URI", config.tiktok_redirect_uri or "<none>")
    status.add_row("TIKTOK_SCOPES", ",".join(config.tiktok_scopes))
    status.add_row("KIRA_SPICE", str(config.default_spice))
    status.add_row("Static persona", "set" if config.static_persona.strip() else "not set")
    status.add_row("OAuth state TTL", f"{config.oauth_state_ttl_seconds}s" if config.oauth_state_ttl_seconds else "none")
    console.print(status)

    if not config.realtime_configured:
        console.print("[yellow]⚠️ Missing OPENAI_API_KEY - /realtime-ephemeral will fail[/yellow]")
    if not config.tiktok_configured:
        console.print("[yellow]TikTok OAuth env missing - /tiktok/login will fail[/yellow]")


def main():
    """Entry point for the CLI"""
    parser = argparse.ArgumentParser(description="Kira realtime token server + TikTok OAuth")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    parser.add_argument("--bind", "-b", default=None, help="Override bind address (default: from config)")
    parser.add_argument("--port", "-p", type=int, default=None, help="Override port (default: from config)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: from config)")
    args = parser.parse_args()

    log_level = (args.log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    server = RealtimeServer(
        debug=args.debug,
        bind_address=args.bind,
        port=args.port,
        log_level=args.log_level.lower() if args.log_level else None,
    )

    show_startup_banner(server.bind_address, server.port, settings.Settings())

    try:
        server.run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Shutting down...[/yellow]")
        server.stop()


if __name__ == "__main__":
    main()
