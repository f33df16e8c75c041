#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

"""
Gateway account data models

Fields set to None are "not configured" and are left out of the JSON
sent to the API, which is not the same as sending false or "".
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from datetime import datetime

from .response import require_dict, require_bool, require_str

_FRACTION = re.compile(r'\.(\d+)')


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
	"""Parse RFC 3339 timestamp"""
	if not value:
		return None
	if not isinstance(value, str):
		raise TypeError(f"timestamp must be a string, got {type(value).__name__}")
	# fromisoformat before 3.11 only takes 3 or 6 fraction digits
	value = _FRACTION.sub(
		lambda m: '.' + m.group(1)[:6].ljust(6, '0'),
		value.replace('Z', '+00:00'),
		count=1
	)
	return datetime.fromisoformat(value)


def _format_timestamp(value: datetime) -> str:
	"""Format timestamp as RFC 3339 with a Z suffix for UTC"""
	return value.isoformat().replace('+00:00', 'Z')


def _without_unset(data: Dict[str, Any]) -> Dict[str, Any]:
	"""Drop keys whose value is None"""
	return {key: value for key, value in data.items() if value is not None}


class RuleType:
	"""Gateway rule types used as logging settings keys"""
	HTTP = "http"
	DNS = "dns"
	L4 = "l4"

	ALL = (HTTP, DNS, L4)


@dataclass
class AccountIdentity:
	"""Gateway identity of an account"""
	gateway_tag: str = ""
	provider_name: str = ""
	id: str = ""

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "AccountIdentity":
		"""Create AccountIdentity from API response"""
		data = require_dict(data, "account")
		return cls(
			gateway_tag=require_str(data, 'gateway_tag'),
			provider_name=require_str(data, 'provider_name'),
			id=require_str(data, 'id')
		)

	def to_dict(self) -> Dict[str, Any]:
		return {
			'gateway_tag': self.gateway_tag,
			'provider_name': self.provider_name,
			'id': self.id
		}


@dataclass
class AntivirusSettings:
	"""Antivirus scanning settings"""
	enabled_download_phase: bool = False
	enabled_upload_phase: bool = False
	fail_closed: bool = False

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "AntivirusSettings":
		data = require_dict(data, "antivirus")
		return cls(
			enabled_download_phase=require_bool(data, 'enabled_download_phase'),
			enabled_upload_phase=require_bool(data, 'enabled_upload_phase'),
			fail_closed=require_bool(data, 'fail_closed')
		)

	def to_dict(self) -> Dict[str, Any]:
		return {
			'enabled_download_phase': self.enabled_download_phase,
			'enabled_upload_phase': self.enabled_upload_phase,
			'fail_closed': self.fail_closed
		}


@dataclass
class TLSDecryptSettings:
	enabled: bool = False

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "TLSDecryptSettings":
		return cls(enabled=require_bool(require_dict(data, "tls_decrypt"), 'enabled'))

	def to_dict(self) -> Dict[str, Any]:
		return {'enabled': self.enabled}


@dataclass
class ActivityLogSettings:
	enabled: bool = False

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "ActivityLogSettings":
		return cls(enabled=require_bool(require_dict(data, "activity_log"), 'enabled'))

	def to_dict(self) -> Dict[str, Any]:
		return {'enabled': self.enabled}


@dataclass
class BrowserIsolationSettings:
	url_browser_isolation_enabled: bool = False

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "BrowserIsolationSettings":
		data = require_dict(data, "browser_isolation")
		return cls(url_browser_isolation_enabled=require_bool(data, 'url_browser_isolation_enabled'))

	def to_dict(self) -> Dict[str, Any]:
		return {'url_browser_isolation_enabled': self.url_browser_isolation_enabled}


@dataclass
class FIPSSettings:
	tls: bool = False

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "FIPSSettings":
		return cls(tls=require_bool(require_dict(data, "fips"), 'tls'))

	def to_dict(self) -> Dict[str, Any]:
		return {'tls': self.tls}


@dataclass
class BlockPageSettings:
	"""Block page customization, every field optional"""
	enabled: Optional[bool] = None
	footer_text: Optional[str] = None
	header_text: Optional[str] = None
	logo_path: Optional[str] = None
	background_color: Optional[str] = None
	name: Optional[str] = None
	mailto_address: Optional[str] = None
	mailto_subject: Optional[str] = None

	TEXT_FIELDS = (
		'footer_text', 'header_text', 'logo_path', 'background_color',
		'name', 'mailto_address', 'mailto_subject'
	)

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "BlockPageSettings":
		data = require_dict(data, "block_page")
		return cls(
			enabled=require_bool(data, 'enabled', default=None),
			**{name: require_str(data, name, default=None) for name in cls.TEXT_FIELDS}
		)

	def to_dict(self) -> Dict[str, Any]:
		data = {'enabled': self.enabled}
		data.update({name: getattr(self, name) for name in self.TEXT_FIELDS})
		return _without_unset(data)


@dataclass
class AccountSettings:
	"""Settings bundle of an account configuration"""
	antivirus: Optional[AntivirusSettings] = None
	tls_decrypt: Optional[TLSDecryptSettings] = None
	activity_log: Optional[ActivityLogSettings] = None
	block_page: Optional[BlockPageSettings] = None
	browser_isolation: Optional[BrowserIsolationSettings] = None
	fips: Optional[FIPSSettings] = None

	# JSON key -> model class of each optional sub-object
	SECTIONS = {
		'antivirus': AntivirusSettings,
		'tls_decrypt': TLSDecryptSettings,
		'activity_log': ActivityLogSettings,
		'block_page': BlockPageSettings,
		'browser_isolation': BrowserIsolationSettings,
		'fips': FIPSSettings
	}

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "AccountSettings":
		data = require_dict(data, "settings")
		return cls(**{
			key: model.from_dict(data[key]) if data.get(key) is not None else None
			for key, model in cls.SECTIONS.items()
		})

	def to_dict(self) -> Dict[str, Any]:
		return {
			key: getattr(self, key).to_dict()
			for key in self.SECTIONS
			if getattr(self, key) is not None
		}


@dataclass
class AccountConfiguration:
	"""Gateway configuration of an account"""
	settings: AccountSettings = field(default_factory=AccountSettings)
	created_at: Optional[datetime] = None
	updated_at: Optional[datetime] = None

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "AccountConfiguration":
		"""Create AccountConfiguration from API response"""
		data = require_dict(data, "configuration")
		settings = data.get('settings')
		return cls(
			settings=AccountSettings.from_dict(settings) if settings is not None else AccountSettings(),
			created_at=_parse_timestamp(data.get('created_at')),
			updated_at=_parse_timestamp(data.get('updated_at'))
		)

	def to_dict(self) -> Dict[str, Any]:
		"""Convert to dictionary"""
		data = {'settings': self.settings.to_dict()}

		if self.created_at:
			data['created_at'] = _format_timestamp(self.created_at)
		if self.updated_at:
			data['updated_at'] = _format_timestamp(self.updated_at)

		return data


@dataclass
class LoggingConfiguration:
	"""Logging behaviour of one rule type"""
	log_all: bool = False
	log_blocks: bool = False

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "LoggingConfiguration":
		data = require_dict(data, "logging configuration")
		return cls(
			log_all=require_bool(data, 'log_all'),
			log_blocks=require_bool(data, 'log_blocks')
		)

	def to_dict(self) -> Dict[str, Any]:
		return {'log_all': self.log_all, 'log_blocks': self.log_blocks}


@dataclass
class LoggingSettings:
	"""Account logging settings keyed by rule type"""
	settings_by_rule_type: Dict[str, LoggingConfiguration] = field(default_factory=dict)
	redact_pii: Optional[bool] = None

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "LoggingSettings":
		"""Create LoggingSettings from API response"""
		data = require_dict(data, "logging settings")
		by_rule_type = data.get('settings_by_rule_type') or {}
		return cls(
			settings_by_rule_type={
				rule_type: LoggingConfiguration.from_dict(config)
				for rule_type, config in require_dict(by_rule_type, "settings_by_rule_type").items()
			},
			redact_pii=require_bool(data, 'redact_pii', default=None)
		)

	def to_dict(self) -> Dict[str, Any]:
		"""Convert to dictionary"""
		data = {
			'settings_by_rule_type': {
				rule_type: config.to_dict()
				for rule_type, config in self.settings_by_rule_type.items()
			}
		}
		if self.redact_pii is not None:
			data['redact_pii'] = self.redact_pii
		return data

	def for_rule_type(self, rule_type: str) -> Optional[LoggingConfiguration]:
		"""Get logging configuration of a rule type, None when not set"""
		return self.settings_by_rule_type.get(rule_type)


@dataclass
class DeviceSettings:
	"""Device-level proxy settings"""
	gateway_proxy_enabled: bool = False
	gateway_udp_proxy_enabled: bool = False

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "DeviceSettings":
		"""Create DeviceSettings from API response"""
		data = require_dict(data, "device settings")
		return cls(
			gateway_proxy_enabled=require_bool(data, 'gateway_proxy_enabled'),
			gateway_udp_proxy_enabled=require_bool(data, 'gateway_udp_proxy_enabled')
		)

	def to_dict(self) -> Dict[str, Any]:
		return {
			'gateway_proxy_enabled': self.gateway_proxy_enabled,
			'gateway_udp_proxy_enabled': self.gateway_udp_proxy_enabled
		}
