import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except (TypeError, ValueError):
        return default


LOG_LEVEL = os.getenv("LOG_LEVEL", "info").lower()

# --- Callback payload limits (per platform) ---
# Telegram rejects callback_data longer than 64 bytes
TELEGRAM_CALLBACK_DATA_LIMIT = _env_int("TELEGRAM_CALLBACK_DATA_LIMIT", 64)
# Discord component custom_id max length
DISCORD_CUSTOM_ID_LIMIT = _env_int("DISCORD_CUSTOM_ID_LIMIT", 100)

# --- Webex Webhook Registration ---
DEFAULT_WEBEX_API_BASE = "https://webexapis.com/v1"
DEFAULT_WEBHOOK_PATH = "/api/webhooks/webex"
DEFAULT_NAME_PREFIX = "chat-sdk-webex"


@dataclass(frozen=True)
class WebexWebhookSettings:
    token: str
    secret: str
    api_base_url: str
    target_url: str
    name_prefix: str
    messages_filter: Optional[str] = None
    actions_filter: Optional[str] = None


def _trim_trailing_slash(value: str) -> str:
    return value.rstrip("/")


def load_webex_webhook_settings(
    public_base_url: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> WebexWebhookSettings:
    """Resolve webhook registration settings from the environment.

    WEBEX_WEBHOOK_URL wins over WEBEX_WEBHOOK_BASE_URL / PUBLIC_BASE_URL /
    the ``public_base_url`` argument joined with WEBEX_WEBHOOK_PATH.

    Raises:
        ValueError: a required value is missing
    """
    if env is None:
        env = os.environ

    token = env.get("WEBEX_BOT_TOKEN")
    secret = env.get("WEBEX_WEBHOOK_SECRET")
    if not token:
        raise ValueError("WEBEX_BOT_TOKEN is required")
    if not secret:
        raise ValueError("WEBEX_WEBHOOK_SECRET is required")

    api_base_url = _trim_trailing_slash(env.get("WEBEX_API_BASE_URL") or DEFAULT_WEBEX_API_BASE)
    webhook_path = env.get("WEBEX_WEBHOOK_PATH") or DEFAULT_WEBHOOK_PATH
    base_url = env.get("WEBEX_WEBHOOK_BASE_URL") or env.get("PUBLIC_BASE_URL") or public_base_url

    target_url = env.get("WEBEX_WEBHOOK_URL")
    if not target_url and base_url:
        separator = "" if webhook_path.startswith("/") else "/"
        target_url = f"{_trim_trailing_slash(base_url)}{separator}{webhook_path}"
    if not target_url:
        raise ValueError(
            "Provide WEBEX_WEBHOOK_URL, WEBEX_WEBHOOK_BASE_URL, PUBLIC_BASE_URL, or a public base URL arg"
        )

    return WebexWebhookSettings(
        token=token,
        secret=secret,
        api_base_url=api_base_url,
        target_url=target_url,
        name_prefix=env.get("WEBEX_WEBHOOK_NAME_PREFIX") or DEFAULT_NAME_PREFIX,
        messages_filter=env.get("WEBEX_WEBHOOK_MESSAGES_FILTER") or None,
        actions_filter=env.get("WEBEX_WEBHOOK_ACTIONS_FILTER") or None,
    )
