#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

"""
Data models for Gateway Client
"""

from .response import Response, ResponseInfo, ResultResponse
from .account import (
	RuleType,
	AccountIdentity,
	AccountConfiguration,
	AccountSettings,
	AntivirusSettings,
	TLSDecryptSettings,
	ActivityLogSettings,
	BrowserIsolationSettings,
	FIPSSettings,
	BlockPageSettings,
	LoggingConfiguration,
	LoggingSettings,
	DeviceSettings
)

__all__ = [
	"Response",
	"ResponseInfo",
	"ResultResponse",
	"RuleType",
	"AccountIdentity",
	"AccountConfiguration",
	"AccountSettings",
	"AntivirusSettings",
	"TLSDecryptSettings",
	"ActivityLogSettings",
	"BrowserIsolationSettings",
	"FIPSSettings",
	"BlockPageSettings",
	"LoggingConfiguration",
	"LoggingSettings",
	"DeviceSettings"
]
