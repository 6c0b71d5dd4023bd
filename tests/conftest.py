import os

import pytest
from flask import Flask

# Keep the developer's real relay settings out of the module-level config.
for name in ("SMTP_HOST", "SMTP_PORT", "SMTP_USER", "SMTP_PASS", "EMAIL_TO", "EMAIL_FROM_NAME"):
    os.environ.pop(name, None)

from config import SmtpConfig  # noqa: E402


@pytest.fixture
def app():
    return Flask(__name__)


@pytest.fixture
def smtp_config():
    return SmtpConfig(
        host="smtp.example.com",
        port=587,
        user="shop@example.com",
        password="app-password",
        email_to="owner@example.com",
    )


@pytest.fixture
def sample_payload():
    return {
        "orderMeta": {
            "id": 4711,
            "order_number": "CMD-0042",
            "order_name": "Awa Diop",
            "phone": "+221 77 000 00 00",
            "shipping_address": "Rue 10, Dakar",
        },
        "items": [
            {"title": "A", "qty": 2, "price": 500},
            {"title": "B", "qty": 1, "price": 1000},
        ],
    }
