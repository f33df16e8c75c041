#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

"""
Core modules for Gateway Client
"""

from .client import GatewayClient
from .config import Config
from .auth import GatewayAuth, SecureCredentialStore
from .exceptions import (
	GatewayError,
	GatewayConfigError,
	GatewayHTTPError,
	GatewayAuthenticationError,
	GatewayNotFoundError,
	GatewayRateLimitError,
	GatewayServerError,
	GatewayRequestError,
	GatewayUnmarshalError,
	GatewayResponseError
)

__all__ = [
	"GatewayClient",
	"Config",
	"GatewayAuth",
	"SecureCredentialStore",
	"GatewayError",
	"GatewayConfigError",
	"GatewayHTTPError",
	"GatewayAuthenticationError",
	"GatewayNotFoundError",
	"GatewayRateLimitError",
	"GatewayServerError",
	"GatewayRequestError",
	"GatewayUnmarshalError",
	"GatewayResponseError"
]
