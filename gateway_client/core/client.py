#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

"""
Core Gateway API Client
"""

import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional, Dict, Any, List
import requests
import urllib3

from .config import Config
from .auth import GatewayAuth, SecureCredentialStore
from .exceptions import (
	GatewayAuthenticationError, GatewayRateLimitError,
	GatewayNotFoundError, GatewayServerError, GatewayRequestError
)

logger = logging.getLogger(__name__)


class GatewayClient:
	"""Authenticated request executor for the gateway API"""

	def __init__(self, config: Optional[Config] = None, **kwargs):
		"""
		Initialize gateway client

		Args:
			config: Configuration object
			**kwargs: Override config parameters
		"""
		# Load config
		self.config = config or Config()

		# Override config with kwargs
		for key, value in kwargs.items():
			if hasattr(self.config, key):
				setattr(self.config, key, value)

		self._load_stored_credentials()

		# Validate config
		self.config.validate()

		# Initialize components
		self._setup_session()
		self._setup_auth()

		logger.info(f"Gateway client initialized for {self.config.base_url}")

	def _load_stored_credentials(self):
		"""Fill missing credentials from the system keyring"""
		if self.config.has_credentials:
			return
		try:
			stored = SecureCredentialStore.get_credentials()
		except GatewayAuthenticationError as e:
			logger.debug(f"Keyring lookup failed: {e}")
			return
		for name, value in stored.items():
			if value and not getattr(self.config, name):
				setattr(self.config, name, value)

	def _setup_session(self):
		"""Setup requests session"""
		self.session = requests.Session()
		self.session.headers.update({
			'Content-Type': 'application/json',
			'User-Agent': self.config.user_agent
		})

		# Disable SSL warnings if configured
		if not self.config.verify_ssl:
			urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
			self.session.verify = False

	def _setup_auth(self):
		"""Setup authentication"""
		self.auth = GatewayAuth(
			api_token=self.config.api_token,
			api_key=self.config.api_key,
			api_email=self.config.api_email
		)
		self.session.auth = self.auth

	def _build_url(self, endpoint: str) -> str:
		"""Build full URL for endpoint"""
		return f"{self.config.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

	@staticmethod
	def _retry_after(value: Optional[str]) -> Optional[int]:
		"""Seconds to wait from a Retry-After header (delay or HTTP-date)"""
		if value is None:
			return 60
		try:
			return max(0, int(value))
		except ValueError:
			pass
		try:
			retry_at = parsedate_to_datetime(value)
		except (TypeError, ValueError):
			logger.debug(f"Unparseable Retry-After header: {value}")
			return None
		if retry_at.tzinfo is None:
			retry_at = retry_at.replace(tzinfo=timezone.utc)
		return max(0, int((retry_at - datetime.now(timezone.utc)).total_seconds()))

	@staticmethod
	def _error_details(response: requests.Response) -> List[Any]:
		"""Extract the API error list from an error body, if there is one"""
		try:
			data = response.json()
		except ValueError:
			return []
		if isinstance(data, dict) and isinstance(data.get('errors'), list):
			return data['errors']
		return []

	def _handle_response(self, response: requests.Response) -> bytes:
		"""Handle API response and errors"""
		status = response.status_code
		if 200 <= status < 300:
			return response.content

		errors = self._error_details(response)
		if status in (401, 403):
			raise GatewayAuthenticationError(
				f"Authentication failed: HTTP {status}",
				status_code=status, errors=errors
			)
		elif status == 404:
			raise GatewayNotFoundError(
				f"Resource not found: {response.url}",
				status_code=status, errors=errors
			)
		elif status == 429:
			retry_after = self._retry_after(response.headers.get('Retry-After'))
			raise GatewayRateLimitError(
				"Rate limit exceeded",
				retry_after=retry_after, status_code=status, errors=errors
			)
		elif status >= 500:
			raise GatewayServerError(
				f"Server error: {status}",
				status_code=status, errors=errors
			)
		else:
			raise GatewayRequestError(
				f"Request failed: HTTP {status}",
				status_code=status, errors=errors
			)

	def request(self, method: str, endpoint: str, json: Optional[Dict[str, Any]] = None,
				timeout: Optional[float] = None) -> bytes:
		"""
		Make authenticated request to the gateway API

		Args:
			method: HTTP method
			endpoint: API path, e.g. /accounts/<id>/gateway
			json: Request body, encoded as JSON when given
			timeout: Per-call timeout in seconds

		Returns:
			Raw response body
		"""
		url = self._build_url(endpoint)

		kwargs = {'timeout': timeout if timeout is not None else self.config.timeout}
		if json is not None:
			kwargs['json'] = json

		logger.debug(f"{method} {url}")
		response = self.session.request(method, url, **kwargs)

		return self._handle_response(response)

	def get(self, endpoint: str, timeout: Optional[float] = None) -> bytes:
		"""Make GET request"""
		return self.request('GET', endpoint, timeout=timeout)

	def put(self, endpoint: str, json: Optional[Dict] = None, timeout: Optional[float] = None) -> bytes:
		"""Make PUT request"""
		return self.request('PUT', endpoint, json=json, timeout=timeout)

	def __enter__(self):
		"""Context manager entry"""
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		"""Context manager exit"""
		self.close()

	def close(self):
		"""Close client and cleanup resources"""
		self.session.close()

	@property
	def gateway(self):
		"""Access gateway account configuration endpoints"""
		if not hasattr(self, '_gateway'):
			from ..api.accounts import GatewayAccountsAPI
			self._gateway = GatewayAccountsAPI(self)
		return self._gateway
