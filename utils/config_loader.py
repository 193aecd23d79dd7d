# utils/config_loader.py
import logging
import os
from dataclasses import dataclass, field

from scanner.models import split_tags
from utils.errors import ConfigurationError
from utils.http_helpers import DEFAULT_TIMEOUT, mask_secret, normalize_store_domain

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "2023-10"
DEFAULT_EMAIL_SUBJECT = "Missing Tags Report"

# Env var -> Config field
REQUIRED_KEYS = {
    "SHOPIFY_STORE_DOMAIN": "store_domain",
    "SHOPIFY_ADMIN_API_PASSWORD": "access_token",
    "TAGS_TO_CHECK": "required_tags",
    "EMAIL_TO": "email_to",
    "EMAIL_FROM": "email_from",
    "POSTMARK_API_KEY": "postmark_token",
}

# A custom app's admin API password is its access token
TOKEN_ALIASES = ("SHOPIFY_ADMIN_API_PASSWORD", "SHOPIFY_ACCESS_TOKEN")


@dataclass(frozen=True)
class Config:
    """Settings for one compliance run."""

    store_domain: str
    access_token: str = field(repr=False)
    required_tags: frozenset
    email_to: str
    email_from: str
    postmark_token: str = field(repr=False)
    api_version: str = DEFAULT_API_VERSION
    email_subject: str = DEFAULT_EMAIL_SUBJECT
    timeout: float = DEFAULT_TIMEOUT

    @property
    def products_url(self):
        return f"https://{self.store_domain}/admin/api/{self.api_version}/products.json"


def _get(environ, key):
    return (environ.get(key) or "").strip()


def _get_timeout(environ):
    raw = _get(environ, "HTTP_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"HTTP_TIMEOUT must be a number, got {raw!r}")
    if timeout <= 0:
        raise ConfigurationError(f"HTTP_TIMEOUT must be positive, got {raw!r}")
    return timeout


def load_config(environ=None):
    """Build a validated Config from the environment.

    Raises ConfigurationError naming every missing key, or when
    TAGS_TO_CHECK contains no usable tag.
    """
    environ = os.environ if environ is None else environ

    values = {name: _get(environ, key) for key, name in REQUIRED_KEYS.items()}
    if not values["access_token"]:
        values["access_token"] = next(
            (_get(environ, k) for k in TOKEN_ALIASES if _get(environ, k)), ""
        )

    missing = [key for key, name in REQUIRED_KEYS.items() if not values[name]]
    if missing:
        raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

    required_tags = split_tags(values["required_tags"])
    if not required_tags:
        raise ConfigurationError("TAGS_TO_CHECK does not contain any tags")

    config = Config(
        store_domain=normalize_store_domain(values["store_domain"]),
        access_token=values["access_token"],
        required_tags=required_tags,
        email_to=values["email_to"],
        email_from=values["email_from"],
        postmark_token=values["postmark_token"],
        api_version=_get(environ, "SHOPIFY_API_VERSION") or DEFAULT_API_VERSION,
        email_subject=_get(environ, "EMAIL_SUBJECT") or DEFAULT_EMAIL_SUBJECT,
        timeout=_get_timeout(environ),
    )

    logger.info(
        f"Config loaded: store={config.store_domain} api_version={config.api_version} "
        f"tags={sorted(config.required_tags)} email_to={config.email_to} "
        f"email_from={config.email_from} token={mask_secret(config.access_token)}"
    )
    return config
