"""
CLI main entry point.
"""

import argparse
import logging
import sys
from pathlib import Path

from ..client import YodleeClient
from ..config import Config, build_client, create_default_config, load_config
from ..errors import YodleeError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _add_user_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--user-login", required=True, help="End-user login name")
    parser.add_argument("--user-password", required=True, help="End-user password")


def create_cli() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="yodlee-client",
        description="Query accounts and transactions from the Yodlee REST API",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("login", help="Authenticate the cobrand")

    user_token_parser = subparsers.add_parser("user-token", help="Log in an end user")
    _add_user_arguments(user_token_parser)

    accounts_parser = subparsers.add_parser("accounts", help="List a user's site accounts")
    _add_user_arguments(accounts_parser)

    tx_parser = subparsers.add_parser("transactions", help="Search a user's transactions")
    _add_user_arguments(tx_parser)
    tx_parser.add_argument("--container", type=str, help="Container type (default from config)")
    tx_parser.add_argument("--start", type=int, help="First result number")
    tx_parser.add_argument("--end", type=int, help="Last result number")
    tx_parser.add_argument("--currency", type=str, help="Currency code")

    register_parser = subparsers.add_parser("register", help="Register a new user")
    register_parser.add_argument("--email", required=True, help="Email, also the login name")
    register_parser.add_argument("--password", required=True, help="Password for the new user")

    subparsers.add_parser("init-config", help="Write a default config file")

    return parser


def cmd_login(client: YodleeClient) -> int:
    """Authenticate the cobrand."""
    client.authenticate()
    print("✓ Cobrand authenticated")
    return 0


def cmd_user_token(client: YodleeClient, login: str, password: str) -> int:
    """Print a user session token."""
    client.authenticate()
    print(client.get_user_session_token(login, password))
    return 0


def cmd_accounts(client: YodleeClient, login: str, password: str) -> int:
    """List site accounts."""
    client.authenticate()
    user_token = client.get_user_session_token(login, password)
    accounts = client.get_accounts(user_token)

    for account in accounts:
        containers = ", ".join(c.container_name for c in account.site_info.enabled_containers)
        print(f"  🏦 [{account.site_account_id}] {account.display_name} ({containers})")

    print(f"\n✓ Found {len(accounts)} site account(s)")
    return 0


def cmd_transactions(
    client: YodleeClient,
    config: Config,
    login: str,
    password: str,
    container: str | None = None,
    start: int | None = None,
    end: int | None = None,
    currency: str | None = None,
) -> int:
    """Search transactions and print a summary."""
    params = config.transactions.to_search_params()
    if container:
        params.container_type = container
    if start is not None:
        params.start_number = start
        params.lower_fetch_limit = str(start)
    if end is not None:
        params.end_number = end
        params.higher_fetch_limit = str(end)
    if currency:
        params.currency_code = currency

    client.authenticate()
    user_token = client.get_user_session_token(login, password)
    result = client.get_transactions(user_token, params)

    for tx in result.transactions:
        print(
            f"  {tx.post_date[:10]}  {tx.amount.amount:>12.2f} {tx.amount.currency_code}  "
            f"{tx.description}"
        )

    print()
    print("📊 Transaction Search")
    print("=" * 40)
    print(f"  Hits:          {result.number_of_hits}")
    print(f"  Returned:      {len(result.transactions)}")
    print(f"  Credit total:  {result.credit_total.amount:.2f} {result.credit_total.currency_code}")
    print(f"  Debit total:   {result.debit_total.amount:.2f} {result.debit_total.currency_code}")
    return 0


def cmd_register(client: YodleeClient, email: str, password: str) -> int:
    """Register a user."""
    client.authenticate()
    result = client.register(email, password)
    print(f"✓ Registered {result.login_name} (user id {result.user_id})")
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_cli()
    parsed = parser.parse_args(args)

    setup_logging(parsed.verbose)

    if not parsed.command:
        parser.print_help()
        return 1

    if parsed.command == "init-config":
        create_default_config(parsed.config)
        print(f"✓ Wrote default config to {parsed.config}")
        return 0

    try:
        config = load_config(parsed.config)
    except Exception as e:
        print(f"❌ Failed to load config: {e}")
        return 1

    errors = config.validate()
    if errors:
        print("❌ Invalid configuration:")
        for error in errors:
            print(f"   - {error}")
        return 1

    client = build_client(config)

    try:
        if parsed.command == "login":
            return cmd_login(client)
        elif parsed.command == "user-token":
            return cmd_user_token(client, parsed.user_login, parsed.user_password)
        elif parsed.command == "accounts":
            return cmd_accounts(client, parsed.user_login, parsed.user_password)
        elif parsed.command == "transactions":
            return cmd_transactions(
                client,
                config,
                parsed.user_login,
                parsed.user_password,
                container=parsed.container,
                start=parsed.start,
                end=parsed.end,
                currency=parsed.currency,
            )
        elif parsed.command == "register":
            return cmd_register(client, parsed.email, parsed.password)
        else:
            parser.print_help()
            return 1
    except YodleeError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"❌ {e}")
        if len(e.errors) > 1:
            for error in e.errors:
                print(f"   - {error}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
