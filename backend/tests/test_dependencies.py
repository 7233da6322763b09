"""Tests for the FastAPI LinkedIn token dependency."""
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from conftest import make_oauth_client
from linkedin_token import LinkedInTokenStrategy, OAuthRequestError
from linkedin_token.dependencies import LinkedInTokenAuth


def verify(token, token_secret, profile, done):
    if profile.id == "404":
        return done(None, False, {"message": "not found"})
    if profile.id == "500":
        return done(RuntimeError("db down"))
    done(None, {"id": profile.id, "name": profile.display_name})


def make_app(options, oauth_client) -> TestClient:
    strategy = LinkedInTokenStrategy(options, verify, oauth_client=oauth_client)
    linkedin_user = LinkedInTokenAuth(strategy)
    app = FastAPI()

    @app.post("/auth/linkedin/token")
    async def login(user=Depends(linkedin_user)):
        return user

    @app.get("/auth/linkedin/token")
    async def login_query(user=Depends(linkedin_user)):
        return user

    return TestClient(app)


class TestLinkedInTokenAuth:
    """Tests for LinkedInTokenAuth dependency."""

    def test_json_body(self, options, oauth_client):
        client = make_app(options, oauth_client)

        response = client.post("/auth/linkedin/token", json={"token": "t1", "tokenSecret": "s1"})

        assert response.status_code == 200
        assert response.json() == {"id": "42", "name": "Ada Lovelace"}
        assert oauth_client.get.await_args.args[1:] == ("t1", "s1")

    def test_form_body(self, options, oauth_client):
        client = make_app(options, oauth_client)

        response = client.post("/auth/linkedin/token", data={"token": "t2", "tokenSecret": "s2"})

        assert response.status_code == 200
        assert oauth_client.get.await_args.args[1:] == ("t2", "s2")

    def test_query_params(self, options, oauth_client):
        client = make_app(options, oauth_client)

        response = client.get("/auth/linkedin/token", params={"token": "t3", "tokenSecret": "s3"})

        assert response.status_code == 200
        assert oauth_client.get.await_args.args[1:] == ("t3", "s3")

    def test_denied(self, options, oauth_client):
        client = make_app(options, oauth_client)

        response = client.get("/auth/linkedin/token", params={"denied": "abc"})

        assert response.status_code == 401
        oauth_client.get.assert_not_called()

    def test_rejected_user(self, options):
        client = make_app(options, make_oauth_client('{"id":"404","firstName":"No","lastName":"One"}'))

        response = client.post("/auth/linkedin/token", json={"token": "t1", "tokenSecret": "s1"})

        assert response.status_code == 401
        assert response.json()["detail"] == "not found"

    def test_linkedin_unreachable(self, options):
        client = make_app(options, make_oauth_client(error=OAuthRequestError(503, "")))

        response = client.post("/auth/linkedin/token", json={"token": "t1", "tokenSecret": "s1"})

        assert response.status_code == 502
        assert response.json()["detail"].startswith("failed to fetch user profile")

    def test_verify_error(self, options):
        client = make_app(options, make_oauth_client('{"id":"500","firstName":"A","lastName":"B"}'))

        response = client.post("/auth/linkedin/token", json={"token": "t1", "tokenSecret": "s1"})

        assert response.status_code == 500

    def test_malformed_json(self, options, oauth_client):
        client = make_app(options, oauth_client)

        response = client.post(
            "/auth/linkedin/token",
            content="{oops",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        oauth_client.get.assert_not_called()
