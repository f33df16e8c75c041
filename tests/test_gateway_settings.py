#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

import json
from unittest import mock

import pytest

import gateway_settings
from gateway_client.models import DeviceSettings, LoggingSettings, LoggingConfiguration, RuleType


@pytest.fixture
def api():
	gateway = mock.Mock()
	client = mock.MagicMock()
	client.__enter__.return_value = client
	client.gateway = gateway
	with mock.patch.object(gateway_settings, "GatewayClient", return_value=client):
		yield gateway


@pytest.fixture(autouse=True)
def token(monkeypatch):
	monkeypatch.setenv("CLOUDFLARE_API_TOKEN", "token-123")


def test_show_devices(api, capsys):
	api.get_device_settings.return_value = DeviceSettings(True, False)

	gateway_settings.main(["abc123", "devices"])

	api.get_device_settings.assert_called_once_with("abc123")
	assert json.loads(capsys.readouterr().out) == {
		"gateway_proxy_enabled": True,
		"gateway_udp_proxy_enabled": False,
	}


def test_set_devices_keeps_unspecified_flag(api):
	api.get_device_settings.return_value = DeviceSettings(True, True)
	api.update_device_settings.side_effect = lambda account_id, settings: settings

	gateway_settings.main(["abc123", "set-devices", "--no-udp"])

	api.update_device_settings.assert_called_once_with("abc123", DeviceSettings(True, False))


def test_set_logging_replaces_one_rule_type(api):
	api.get_logging_settings.return_value = LoggingSettings(
		settings_by_rule_type={RuleType.HTTP: LoggingConfiguration(True, False)}
	)
	api.update_logging_settings.side_effect = lambda account_id, settings: settings

	gateway_settings.main(["abc123", "set-logging", "dns", "--log-blocks"])

	sent = api.update_logging_settings.call_args[0][1]
	assert sent.settings_by_rule_type == {
		RuleType.HTTP: LoggingConfiguration(True, False),
		RuleType.DNS: LoggingConfiguration(False, True),
	}
