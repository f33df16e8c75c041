#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

"""
API modules for Gateway Client
"""

from .accounts import GatewayAccountsAPI

__all__ = [
	"GatewayAccountsAPI"
]
