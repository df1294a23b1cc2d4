"""
CLI runner module.

Provides commands:
- login: Authenticate the cobrand
- user-token: Log in an end user
- accounts: List a user's site accounts
- transactions: Search a user's transactions
- register: Register a new user
- init-config: Write a default config file
"""

from .main import create_cli, main

__all__ = [
    "create_cli",
    "main",
]
