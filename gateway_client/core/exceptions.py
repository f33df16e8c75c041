#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

"""
Custom exceptions for Gateway Client
"""

from typing import Optional, List, Any


class GatewayError(Exception):
	"""Base exception for all gateway client errors"""
	pass


class GatewayConfigError(GatewayError):
	"""Raised when configuration is invalid"""
	pass


class GatewayHTTPError(GatewayError):
	"""Base for errors translated from a non-2xx HTTP status"""
	def __init__(self, message, status_code: Optional[int] = None, errors: Optional[List[Any]] = None):
		super().__init__(message)
		self.status_code = status_code
		self.errors = errors or []


class GatewayAuthenticationError(GatewayHTTPError):
	"""Raised when authentication fails"""
	pass


class GatewayNotFoundError(GatewayHTTPError):
	"""Raised when requested resource is not found"""
	pass


class GatewayRateLimitError(GatewayHTTPError):
	"""Raised when rate limit is exceeded"""
	def __init__(self, message, retry_after=None, **kwargs):
		super().__init__(message, **kwargs)
		self.retry_after = retry_after


class GatewayServerError(GatewayHTTPError):
	"""Raised when server returns 5xx error"""
	pass


class GatewayRequestError(GatewayHTTPError):
	"""Raised for any other non-2xx response"""
	pass


class GatewayUnmarshalError(GatewayError):
	"""Raised when a response body cannot be decoded into its envelope"""

	LABEL = "error unmarshalling the JSON response"

	def __init__(self, cause: Exception):
		super().__init__(f"{self.LABEL}: {cause}")
		self.cause = cause


class GatewayResponseError(GatewayError):
	"""Raised when a well-formed envelope reports success=false"""
	def __init__(self, message, errors: Optional[List[Any]] = None, messages: Optional[List[Any]] = None):
		super().__init__(message)
		self.errors = errors or []
		self.messages = messages or []
