import pytest
import sys
import os
from unittest.mock import AsyncMock, Mock

# Add the backend directory to Python path so we can import linkedin_token
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from linkedin_token import StrategyOptions

ADA_BODY = '{"id":"42","firstName":"Ada","lastName":"Lovelace"}'
ADA_EMAIL_BODY = '{"id":"42","firstName":"Ada","lastName":"Lovelace","emailAddress":"ada@example.com"}'

def make_oauth_client(body: str = ADA_BODY, error: Exception = None) -> AsyncMock:
    """OAuth client stub returning ``body`` or raising ``error``."""
    client = AsyncMock()
    if error is not None:
        client.get = AsyncMock(side_effect=error)
    else:
        client.get = AsyncMock(return_value=(body, Mock(status_code=200)))
    return client

@pytest.fixture
def options():
    return StrategyOptions(consumer_key="123-456-789", consumer_secret="shhh-its-a-secret")

@pytest.fixture
def oauth_client():
    return make_oauth_client()
