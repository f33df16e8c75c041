#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

"""
Gateway account configuration API operations
"""

import json
import logging
from typing import Optional, Dict, Any

from ..core.exceptions import GatewayUnmarshalError, GatewayResponseError
from ..models.response import ResultResponse
from ..models.account import (
	AccountIdentity, AccountConfiguration, DeviceSettings, LoggingSettings
)

logger = logging.getLogger(__name__)


class GatewayAccountsAPI:
	"""
	API operations for gateway account settings

	The executor is any object with
	request(method, endpoint, json=None, timeout=None) -> bytes,
	normally a GatewayClient.
	"""

	def __init__(self, client):
		"""Initialize with request executor"""
		self.client = client

	def _call(self, method: str, endpoint: str, result_type,
			  body: Optional[Dict[str, Any]] = None, timeout: Optional[float] = None):
		"""Issue one request and decode its envelope into result_type"""
		logger.debug(f"{method} {endpoint}")
		raw = self.client.request(method, endpoint, json=body, timeout=timeout)

		try:
			envelope = ResultResponse.from_dict(json.loads(raw), result_type)
		except (ValueError, TypeError, KeyError) as e:
			raise GatewayUnmarshalError(e) from e

		if not envelope.success:
			logger.warning(f"{method} {endpoint} returned success=false")
			details = "; ".join(str(error) for error in envelope.errors) or "no error details"
			raise GatewayResponseError(
				f"{method} {endpoint} failed: {details}",
				errors=envelope.errors,
				messages=envelope.messages
			)

		return envelope.result

	def get_account(self, account_id: str, timeout: Optional[float] = None) -> AccountIdentity:
		"""
		Get gateway identity of an account

		Args:
			account_id: Account identifier
			timeout: Optional per-call timeout in seconds

		Returns:
			AccountIdentity object
		"""
		return self._call('GET', f'/accounts/{account_id}/gateway', AccountIdentity, timeout=timeout)

	def get_configuration(self, account_id: str, timeout: Optional[float] = None) -> AccountConfiguration:
		"""
		Get gateway configuration of an account

		Args:
			account_id: Account identifier
			timeout: Optional per-call timeout in seconds

		Returns:
			AccountConfiguration object
		"""
		return self._call(
			'GET', f'/accounts/{account_id}/gateway/configuration',
			AccountConfiguration, timeout=timeout
		)

	def update_configuration(self, account_id: str, config: AccountConfiguration,
							 timeout: Optional[float] = None) -> AccountConfiguration:
		"""
		Replace gateway configuration of an account

		Args:
			account_id: Account identifier
			config: New configuration, unset sections are not sent
			timeout: Optional per-call timeout in seconds

		Returns:
			Configuration as stored by the API
		"""
		return self._call(
			'PUT', f'/accounts/{account_id}/gateway/configuration',
			AccountConfiguration, body=config.to_dict(), timeout=timeout
		)

	def get_device_settings(self, account_id: str, timeout: Optional[float] = None) -> DeviceSettings:
		"""Get device proxy settings of an account"""
		return self._call(
			'GET', f'/accounts/{account_id}/devices/settings',
			DeviceSettings, timeout=timeout
		)

	def update_device_settings(self, account_id: str, settings: DeviceSettings,
							   timeout: Optional[float] = None) -> DeviceSettings:
		"""Update device proxy settings, returns the stored settings"""
		return self._call(
			'PUT', f'/accounts/{account_id}/devices/settings',
			DeviceSettings, body=settings.to_dict(), timeout=timeout
		)

	def get_logging_settings(self, account_id: str, timeout: Optional[float] = None) -> LoggingSettings:
		"""Get logging settings of an account"""
		return self._call(
			'GET', f'/accounts/{account_id}/gateway/logging',
			LoggingSettings, timeout=timeout
		)

	def update_logging_settings(self, account_id: str, settings: LoggingSettings,
								timeout: Optional[float] = None) -> LoggingSettings:
		"""Update logging settings, returns the stored settings"""
		return self._call(
			'PUT', f'/accounts/{account_id}/gateway/logging',
			LoggingSettings, body=settings.to_dict(), timeout=timeout
		)
