#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

"""
Cloudflare Gateway Account Configuration Client Library

Typed bindings for the gateway account, configuration, device settings
and logging settings endpoints.
"""

from .core.client import GatewayClient
from .core.config import Config
from .core.exceptions import (
	GatewayError,
	GatewayConfigError,
	GatewayAuthenticationError,
	GatewayNotFoundError,
	GatewayRateLimitError,
	GatewayServerError,
	GatewayRequestError,
	GatewayUnmarshalError,
	GatewayResponseError
)
from .api.accounts import GatewayAccountsAPI

__version__ = "1.0.0"
__all__ = [
	"GatewayClient",
	"GatewayAccountsAPI",
	"Config",
	"GatewayError",
	"GatewayConfigError",
	"GatewayAuthenticationError",
	"GatewayNotFoundError",
	"GatewayRateLimitError",
	"GatewayServerError",
	"GatewayRequestError",
	"GatewayUnmarshalError",
	"GatewayResponseError"
]
