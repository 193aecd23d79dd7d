from unittest.mock import MagicMock

import pytest

from utils.config_loader import load_config

BASE_ENV = {
    "SHOPIFY_STORE_DOMAIN": "test-store.myshopify.com",
    "SHOPIFY_ADMIN_API_PASSWORD": "shpat_test_token",
    "TAGS_TO_CHECK": "VIP, wholesale",
    "EMAIL_TO": "ops@example.com",
    "EMAIL_FROM": "bot@example.com",
    "POSTMARK_API_KEY": "postmark-test-token",
}


def make_response(status_code=200, json_data=None, headers=None, text=""):
    """Build a fake requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    response.text = text
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


def next_link(page_info, domain="test-store.myshopify.com"):
    url = f"https://{domain}/admin/api/2023-10/products.json?limit=250&page_info={page_info}"
    return {"Link": f'<{url}>; rel="next"'}


@pytest.fixture
def env():
    return dict(BASE_ENV)


@pytest.fixture
def config(env):
    return load_config(env)


@pytest.fixture
def session():
    return MagicMock()
