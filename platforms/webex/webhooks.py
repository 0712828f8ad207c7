"""Webex webhook registration.

Reconciles a declared list of webhooks against the live registry:

1. List every existing webhook, following ``Link: <...>; rel="next"`` cursors.
2. For each desired webhook, in order: update the first existing webhook with
   the same name, or create a new one. Dry runs only report.

The listing happens once per run and is never cached across runs. All calls
are sequential.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from config import WebexWebhookSettings
from core.errors import AdapterError, ValidationError
from core.log import Logger
from .client import PLATFORM, WebexApiClient

DEFAULT_PAGE_SIZE = 100

_NEXT_LINK_RE = re.compile(r'^<([^>]+)>\s*;\s*rel="?next"?$', re.IGNORECASE)


@dataclass(frozen=True)
class WebhookConfig:
    """Desired webhook; ``name`` is the reconciliation key."""
    name: str
    resource: str
    event: str
    target_url: str
    filter: Optional[str] = None


@dataclass(frozen=True)
class WebexWebhook:
    """Webhook record as returned by the registry."""
    id: str
    name: str
    resource: str = ""
    event: str = ""
    target_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WebexWebhook:
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            resource=str(data.get("resource", "")),
            event=str(data.get("event", "")),
            target_url=str(data.get("targetUrl", "")),
        )


@dataclass
class WebhookSyncResult:
    """Outcome of reconciling one desired webhook."""
    name: str
    operation: str  # "create" | "update"
    dry_run: bool = False
    webhook_id: Optional[str] = None
    error: Optional[AdapterError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_next_link(link_header: Optional[str]) -> Optional[str]:
    """Extract the rel="next" URL from an RFC 5988 Link header."""
    if not link_header:
        return None
    for part in link_header.split(","):
        match = _NEXT_LINK_RE.match(part.strip())
        if match:
            return match.group(1)
    return None


async def list_all_webhooks(
    api: WebexApiClient,
    page_size: int = DEFAULT_PAGE_SIZE,
    logger: Optional[Logger] = None,
) -> list[WebexWebhook]:
    """Fetch every registered webhook across all pages.

    Stops when there is no next link or a next link was already visited.

    Raises:
        AdapterError: any page fails; no partial list is returned
    """
    hooks: list[WebexWebhook] = []
    next_url: Optional[str] = f"{api.api_base_url}/webhooks?max={page_size}"
    seen_urls: set[str] = set()

    while next_url:
        if next_url in seen_urls:
            if logger:
                logger.warn("Pagination cycle detected, stopping", next_url)
            break
        seen_urls.add(next_url)

        data, headers = await api.request("GET", next_url)
        items = data.get("items") if isinstance(data, dict) else None
        hooks.extend(WebexWebhook.from_dict(item) for item in items or [] if isinstance(item, dict))
        if logger:
            logger.debug("Fetched webhook page", next_url, len(items or []))
        next_url = parse_next_link(headers.get("Link"))

    return hooks


def build_webhook_body(config: WebhookConfig, secret: str) -> dict[str, Any]:
    body: dict[str, Any] = {
        "name": config.name,
        "targetUrl": config.target_url,
        "resource": config.resource,
        "event": config.event,
        "secret": secret,
    }
    if config.filter:
        body["filter"] = config.filter
    return body


def find_existing(existing: Sequence[WebexWebhook], name: str) -> Optional[WebexWebhook]:
    for hook in existing:
        if hook.name == name:
            return hook
    return None


def desired_webhooks(settings: WebexWebhookSettings) -> list[WebhookConfig]:
    """The two subscriptions a chat bot needs: new messages and card submits."""
    return [
        WebhookConfig(
            name=f"{settings.name_prefix}-messages-created",
            resource="messages",
            event="created",
            target_url=settings.target_url,
            filter=settings.messages_filter,
        ),
        WebhookConfig(
            name=f"{settings.name_prefix}-attachment-actions-created",
            resource="attachmentActions",
            event="created",
            target_url=settings.target_url,
            filter=settings.actions_filter,
        ),
    ]


class WebhookRegistrar:
    """Idempotent create-or-update of named webhooks."""

    def __init__(
        self,
        api: WebexApiClient,
        *,
        secret: str,
        logger: Logger,
        dry_run: bool = False,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._api = api
        self._secret = secret
        self._logger = logger.child("webhooks")
        self._dry_run = dry_run
        self._page_size = page_size

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    async def upsert(self, config: WebhookConfig, existing: Sequence[WebexWebhook]) -> WebhookSyncResult:
        """Create or update one webhook.

        Raises:
            AdapterError: the create/update call failed
        """
        match = find_existing(existing, config.name)
        body = build_webhook_body(config, self._secret)

        if match:
            if self._dry_run:
                self._logger.info(f"[dry-run] Would update webhook {match.id} ({config.name})")
                return WebhookSyncResult(config.name, "update", dry_run=True, webhook_id=match.id)
            await self._api.request("PUT", f"/webhooks/{match.id}", body)
            self._logger.info(f"Updated webhook: {config.name}")
            return WebhookSyncResult(config.name, "update", webhook_id=match.id)

        if self._dry_run:
            self._logger.info(f"[dry-run] Would create webhook ({config.name})")
            return WebhookSyncResult(config.name, "create", dry_run=True)

        data, _ = await self._api.request("POST", "/webhooks", body)
        webhook_id = data.get("id") if isinstance(data, dict) else None
        self._logger.info(f"Created webhook: {config.name}")
        return WebhookSyncResult(config.name, "create", webhook_id=webhook_id)

    async def sync(self, desired: Sequence[WebhookConfig], *, fail_fast: bool = False) -> list[WebhookSyncResult]:
        """Reconcile ``desired`` against a fresh listing of the registry.

        A failing descriptor is recorded in its result and the rest still run,
        unless ``fail_fast`` is set, in which case the error propagates.

        Raises:
            ValidationError: duplicate names in ``desired``
            AdapterError: the listing failed (nothing is created or updated)
        """
        names = [config.name for config in desired]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValidationError(PLATFORM, f"Duplicate webhook names: {', '.join(duplicates)}")

        existing = await list_all_webhooks(self._api, self._page_size, self._logger)
        self._logger.debug("Existing webhooks", len(existing))

        results: list[WebhookSyncResult] = []
        for config in desired:
            operation = "update" if find_existing(existing, config.name) else "create"
            try:
                results.append(await self.upsert(config, existing))
            except AdapterError as e:
                if fail_fast:
                    raise
                self._logger.error(f"Failed to {operation} webhook {config.name}: {e}")
                results.append(WebhookSyncResult(config.name, operation, error=e))
        return results
