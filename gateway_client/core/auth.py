#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

"""
Authentication handling for Gateway Client
"""

from typing import Optional, Dict
import keyring
from keyring.errors import KeyringError
from requests.auth import AuthBase
from .exceptions import GatewayAuthenticationError


class GatewayAuth(AuthBase):
	"""Attach API token or key/email headers to every request"""

	def __init__(self, api_token: Optional[str] = None, api_key: Optional[str] = None,
				 api_email: Optional[str] = None):
		if not api_token and not (api_key and api_email):
			raise GatewayAuthenticationError("API token or API key and email are required")
		self.api_token = api_token
		self.api_key = api_key
		self.api_email = api_email

	def __call__(self, r):
		"""Apply authentication to request"""
		r.headers.update(self.get_auth_headers())
		return r

	def get_auth_headers(self) -> Dict[str, str]:
		"""Generate authorization headers"""
		if self.api_token:
			return {'Authorization': f"Bearer {self.api_token}"}
		return {
			'X-Auth-Key': self.api_key,
			'X-Auth-Email': self.api_email
		}


class SecureCredentialStore:
	"""Read stored API credentials from the system keyring"""

	SERVICE_NAME = "gateway-client"
	FIELDS = ("api_token", "api_key", "api_email")

	@classmethod
	def get_credentials(cls, profile: str = "default") -> Dict[str, Optional[str]]:
		"""Retrieve credentials from system keyring"""
		try:
			return {
				name: keyring.get_password(cls.SERVICE_NAME, f"{profile}_{name}")
				for name in cls.FIELDS
			}
		except KeyringError as e:
			raise GatewayAuthenticationError(f"Failed to retrieve credentials: {e}") from e
