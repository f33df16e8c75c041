#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from unittest import mock

import pytest
import requests
from keyring.errors import NoKeyringError

from gateway_client import (
	GatewayClient, Config, GatewayConfigError, GatewayAuthenticationError,
	GatewayNotFoundError, GatewayRateLimitError, GatewayServerError, GatewayRequestError
)
from gateway_client.api import GatewayAccountsAPI
from gateway_client.core.auth import GatewayAuth, SecureCredentialStore


def make_response(status_code=200, body=b"", headers=None, url="https://api.example.test/x"):
	response = requests.Response()
	response.status_code = status_code
	response._content = body
	response.headers.update(headers or {})
	response.url = url
	return response


@pytest.fixture
def client():
	config = Config(api_token="token-123", base_url="https://api.example.test/client/v4/")
	with GatewayClient(config) as gateway_client:
		yield gateway_client


def test_request_prefixes_base_url_and_returns_raw_body(client):
	with mock.patch.object(client.session, "request", return_value=make_response(body=b'{"success": true}')) as request:
		body = client.request("GET", "/accounts/abc123/gateway")

	assert body == b'{"success": true}'
	request.assert_called_once_with(
		"GET", "https://api.example.test/client/v4/accounts/abc123/gateway", timeout=30
	)


def test_put_sends_json_body_and_timeout(client):
	with mock.patch.object(client.session, "request", return_value=make_response(body=b"{}")) as request:
		client.put("/accounts/abc123/devices/settings", json={"gateway_proxy_enabled": True}, timeout=5)

	request.assert_called_once_with(
		"PUT", "https://api.example.test/client/v4/accounts/abc123/devices/settings",
		timeout=5, json={"gateway_proxy_enabled": True}
	)


@pytest.mark.parametrize("status,error_type", [
	(401, GatewayAuthenticationError),
	(403, GatewayAuthenticationError),
	(404, GatewayNotFoundError),
	(429, GatewayRateLimitError),
	(500, GatewayServerError),
	(503, GatewayServerError),
	(400, GatewayRequestError),
])
def test_status_codes_are_translated(client, status, error_type):
	body = b'{"success": false, "errors": [{"code": 10000, "message": "nope"}], "messages": [], "result": null}'
	with mock.patch.object(client.session, "request", return_value=make_response(status, body)):
		with pytest.raises(error_type) as excinfo:
			client.get("/accounts/abc123/gateway")

	assert excinfo.value.status_code == status
	assert excinfo.value.errors == [{"code": 10000, "message": "nope"}]


def test_rate_limit_error_carries_retry_after(client):
	response = make_response(429, b"slow down", headers={"Retry-After": "12"})
	with mock.patch.object(client.session, "request", return_value=response):
		with pytest.raises(GatewayRateLimitError) as excinfo:
			client.get("/accounts/abc123/gateway")

	assert excinfo.value.retry_after == 12
	assert excinfo.value.errors == []


def test_gateway_property_is_bound_to_client(client):
	assert isinstance(client.gateway, GatewayAccountsAPI)
	assert client.gateway.client is client
	assert client.gateway is client.gateway


def test_end_to_end_device_settings(client):
	body = b'{"success": true, "errors": [], "messages": [], "result": {"gateway_proxy_enabled": true, "gateway_udp_proxy_enabled": false}}'
	with mock.patch.object(client.session, "request", return_value=make_response(body=body)):
		settings = client.gateway.get_device_settings("abc123")

	assert settings.gateway_proxy_enabled is True
	assert settings.gateway_udp_proxy_enabled is False


def test_kwargs_override_config():
	gateway_client = GatewayClient(Config(api_token="token-123"), timeout=7)
	assert gateway_client.config.timeout == 7
	gateway_client.close()


def test_missing_credentials_raise_config_error():
	with mock.patch("gateway_client.core.client.SecureCredentialStore.get_credentials",
					return_value={"api_token": None, "api_key": None, "api_email": None}):
		with pytest.raises(GatewayConfigError):
			GatewayClient(Config())


def test_credentials_loaded_from_keyring():
	with mock.patch("gateway_client.core.client.SecureCredentialStore.get_credentials",
					return_value={"api_token": "stored-token", "api_key": None, "api_email": None}):
		gateway_client = GatewayClient(Config())

	assert gateway_client.config.api_token == "stored-token"
	gateway_client.close()


def test_token_auth_header():
	request = mock.Mock(headers={})
	GatewayAuth(api_token="token-123")(request)
	assert request.headers == {"Authorization": "Bearer token-123"}


def test_key_and_email_auth_headers():
	request = mock.Mock(headers={})
	GatewayAuth(api_key="key", api_email="user@example.com")(request)
	assert request.headers == {"X-Auth-Key": "key", "X-Auth-Email": "user@example.com"}


def test_auth_requires_credentials():
	with pytest.raises(GatewayAuthenticationError):
		GatewayAuth(api_key="key")


@pytest.mark.parametrize("header,expected", [
	("Wed, 21 Oct 2015 07:28:00 GMT", 0),
	("not a date", None),
	("-5", 0),
])
def test_rate_limit_error_with_unusual_retry_after(client, header, expected):
	response = make_response(429, b"", headers={"Retry-After": header})
	with mock.patch.object(client.session, "request", return_value=response):
		with pytest.raises(GatewayRateLimitError) as excinfo:
			client.get("/accounts/abc123/gateway")

	assert excinfo.value.retry_after == expected


def test_rate_limit_error_with_future_http_date(client):
	retry_at = datetime.now(timezone.utc) + timedelta(seconds=120)
	response = make_response(429, b"", headers={"Retry-After": format_datetime(retry_at, usegmt=True)})
	with mock.patch.object(client.session, "request", return_value=response):
		with pytest.raises(GatewayRateLimitError) as excinfo:
			client.get("/accounts/abc123/gateway")

	assert 100 <= excinfo.value.retry_after <= 120


def test_credential_store_reads_keyring_profile():
	stored = {"production_api_token": "stored-token"}
	with mock.patch("gateway_client.core.auth.keyring.get_password",
					side_effect=lambda service, key: stored.get(key)) as get_password:
		credentials = SecureCredentialStore.get_credentials("production")

	assert credentials == {"api_token": "stored-token", "api_key": None, "api_email": None}
	get_password.assert_any_call("gateway-client", "production_api_token")


def test_credential_store_wraps_keyring_errors():
	with mock.patch("gateway_client.core.auth.keyring.get_password", side_effect=NoKeyringError("no backend")):
		with pytest.raises(GatewayAuthenticationError):
			SecureCredentialStore.get_credentials()
