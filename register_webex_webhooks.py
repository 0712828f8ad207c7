#!/usr/bin/env python3
"""
Register (or update) the Webex webhooks the bot needs.

Usage:
    python register_webex_webhooks.py [publicBaseUrl] [--dry-run]

Environment:
    WEBEX_BOT_TOKEN                  Required. Bot token used for Webex API calls.
    WEBEX_WEBHOOK_SECRET             Required. Shared secret for webhook signatures.
    WEBEX_WEBHOOK_BASE_URL           Optional. Public base URL (ngrok URL). Can pass as first CLI arg.
    WEBEX_WEBHOOK_PATH               Optional. Defaults to /api/webhooks/webex
    WEBEX_WEBHOOK_URL                Optional. Full target URL (overrides BASE_URL + PATH).
    WEBEX_WEBHOOK_NAME_PREFIX        Optional. Defaults to chat-sdk-webex
    WEBEX_WEBHOOK_MESSAGES_FILTER    Optional. e.g. roomId=<ROOM_ID>
    WEBEX_WEBHOOK_ACTIONS_FILTER     Optional. e.g. roomId=<ROOM_ID>
    WEBEX_API_BASE_URL               Optional. Defaults to https://webexapis.com/v1
"""
import argparse
import asyncio
import json
import sys
from typing import Optional


async def register(public_base_url: Optional[str], dry_run: bool) -> int:
    from aiohttp import ClientSession

    from config import LOG_LEVEL, load_webex_webhook_settings
    from core.errors import AdapterError
    from core.log import ChatLogger, LOG_LEVELS, setup_logging
    from platforms.webex import WebexApiClient, WebhookRegistrar, desired_webhooks

    try:
        settings = load_webex_webhook_settings(public_base_url)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    level = LOG_LEVEL if LOG_LEVEL in LOG_LEVELS else "info"
    setup_logging(level)
    logger = ChatLogger(level).child("webex")

    desired = desired_webhooks(settings)
    print("Registering Webex webhooks with config:")
    print(json.dumps(
        {
            "apiBaseUrl": settings.api_base_url,
            "dryRun": dry_run,
            "names": [hook.name for hook in desired],
            "targetUrl": settings.target_url,
        },
        indent=2,
    ))

    async with ClientSession() as session:
        api = WebexApiClient(session, settings.token, settings.api_base_url)
        registrar = WebhookRegistrar(api, secret=settings.secret, logger=logger, dry_run=dry_run)
        try:
            results = await registrar.sync(desired)
        except AdapterError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    failed = [result for result in results if not result.ok]
    for result in failed:
        print(f"Error: failed to {result.operation} {result.name}: {result.error}", file=sys.stderr)
    if failed:
        return 1

    if dry_run:
        print("Dry run complete. No changes were sent to Webex.")
    else:
        print("Webhook registration complete.")
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    from dotenv import load_dotenv

    # Prefer .env.local when present, then fall back to .env
    load_dotenv(".env.local")
    load_dotenv(".env")

    parser = argparse.ArgumentParser(description="Register Webex webhooks for the chat bot")
    parser.add_argument("public_base_url", nargs="?", default=None, help="Public base URL (e.g. ngrok URL)")
    parser.add_argument("--dry-run", action="store_true", help="Report changes without calling Webex")
    args = parser.parse_args(argv)

    sys.exit(asyncio.run(register(args.public_base_url, args.dry_run)))


if __name__ == "__main__":
    main()
