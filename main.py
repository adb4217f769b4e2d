#!/usr/bin/env python3
"""
AccountGate -- account registration, login and bearer-token profile updates.

Usage:
  python main.py serve
  python main.py serve --host 0.0.0.0 --port 8080
  python main.py serve --reload
  python main.py create-account --name "Ada" --email ada@example.com

Environment variables (or .env):
  SECRET_KEY    Token signing key, 32+ characters. Required unless DEBUG=true.
  DATABASE_URL  SQLAlchemy URL. Defaults to a SQLite file under auth/.
  DEBUG         true to auto-generate SECRET_KEY for local development.
"""

import argparse
import getpass
import sys


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return 0


def _create_account(args: argparse.Namespace) -> int:
    """Run the registration flow against the configured store.

    The password is read with getpass so it never lands in shell history.
    """
    from auth.accounts import register_account
    from auth.errors import AuthError
    from auth.store import AccountStore

    password = getpass.getpass("  Password: ")
    confirm = getpass.getpass("  Confirm password: ")

    store = AccountStore()
    try:
        account = register_account(
            store,
            {"name": args.name, "email": args.email, "password": password, "passwordConfirm": confirm},
        )
    except AuthError as exc:
        print(f"  [!] {exc.message}")
        return 1
    finally:
        store.close()

    print(f"  Created account {account.id} ({account.email}).")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="accountgate",
        description="Account registration, login and bearer-token protected profile updates.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    serve = subparsers.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    serve.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    serve.set_defaults(handler=_serve)

    create = subparsers.add_parser("create-account", help="Register an account from the command line")
    create.add_argument("--name", required=True, help="Display name")
    create.add_argument("--email", required=True, help="Login email (unique, case-sensitive)")
    create.set_defaults(handler=_create_account)

    args = parser.parse_args(argv)
    if not getattr(args, "handler", None):
        parser.print_help()
        return 0
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
