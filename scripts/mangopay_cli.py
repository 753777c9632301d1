"""Command-line access to Mangopay hooks and the platform client profile.

This module serves as a CLI wrapper around mangopay_provider.provider: it
configures the provider, runs one data source or resource operation and
prints the resulting state as JSON.
"""
from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mangopay_provider.provider import MangopayProvider, Diagnostics
from mangopay_provider.config.settings import ENV_CLIENT_ID, ENV_ENVIRONMENT


def _report(diags: Diagnostics) -> None:
    for diag in diags:
        print(f"[mangopay] {diag}", file=sys.stderr)


def _emit(state) -> None:
    print(json.dumps(state, indent=2, sort_keys=True))


def main(argv=None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Mangopay hooks helper")
    # Unset values fall back to the MANGOPAY_* environment variables
    parser.add_argument("--client-id", default=None, help=f"defaults to ${ENV_CLIENT_ID}")
    parser.add_argument("--client-secret", default=None, help="defaults to $MANGOPAY_CLIENT_SECRET")
    parser.add_argument("--environment", default=None, help=f"sandbox or production, defaults to ${ENV_ENVIRONMENT}")
    parser.add_argument("-v", "--verbose", action="store_true", help="log HTTP exchanges")

    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("client", help="show the platform client profile")
    sub.add_parser("hooks", help="list hooks")

    sr = sub.add_parser("hook-read")
    sr.add_argument("--id", required=True)

    sc = sub.add_parser("hook-create")
    sc.add_argument("--url", required=True)
    sc.add_argument("--event-type", required=True)
    sc.add_argument("--tag")

    su = sub.add_parser("hook-update")
    su.add_argument("--id", required=True)
    su.add_argument("--url", required=True)
    su.add_argument("--status", choices=["ENABLED", "DISABLED"])
    su.add_argument("--tag")

    args = parser.parse_args(argv)

    if not args.cmd:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = {
        "client_id": args.client_id,
        "client_secret": args.client_secret,
        "environment": args.environment or os.environ.get(ENV_ENVIRONMENT) or "sandbox",
    }
    provider = MangopayProvider(version="cli")
    diags = provider.configure({k: v for k, v in config.items() if v is not None})
    if diags.has_error():
        _report(diags)
        return 1

    if args.cmd == "client":
        result = provider.data_source("mangopay_clients").read()
    elif args.cmd == "hooks":
        result = provider.data_source("mangopay_hooks").read()
    else:
        hook = provider.resource("mangopay_hook")
        if args.cmd == "hook-read":
            result = hook.read({"id": args.id})
        elif args.cmd == "hook-create":
            hook_config = {"url": args.url, "event_type": args.event_type}
            if args.tag is not None:
                hook_config["tag"] = args.tag
            result = hook.create(hook_config)
        else:
            current = hook.read({"id": args.id})
            if not current.ok:
                _report(current.diagnostics)
                return 1
            hook_config = {"url": args.url, "event_type": current.state["event_type"]}
            if args.status is not None:
                hook_config["status"] = args.status
            if args.tag is not None:
                hook_config["tag"] = args.tag
            result = hook.update(hook_config, current.state)

    _report(result.diagnostics)
    if not result.ok:
        return 1
    _emit(result.state)
    return 0


if __name__ == "__main__":
    sys.exit(main())
