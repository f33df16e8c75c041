#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

"""
Configuration management for Gateway Client
"""

import os
import json
import configparser
from pathlib import Path
from typing import Optional
from dataclasses import dataclass
from .exceptions import GatewayConfigError

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_USER_AGENT = "gateway-client/1.0.0"


@dataclass
class Config:
	"""Configuration for Gateway Client"""
	api_token: Optional[str] = None
	api_key: Optional[str] = None
	api_email: Optional[str] = None
	base_url: str = DEFAULT_BASE_URL
	verify_ssl: bool = True
	timeout: int = 30
	user_agent: str = DEFAULT_USER_AGENT

	@property
	def has_credentials(self) -> bool:
		"""True when either a token or a key/email pair is set"""
		return bool(self.api_token or (self.api_key and self.api_email))

	@classmethod
	def from_env(cls) -> "Config":
		"""Create config from environment variables"""
		return cls(
			api_token=os.getenv("CLOUDFLARE_API_TOKEN"),
			api_key=os.getenv("CLOUDFLARE_API_KEY"),
			api_email=os.getenv("CLOUDFLARE_API_EMAIL"),
			base_url=os.getenv("CLOUDFLARE_BASE_URL", DEFAULT_BASE_URL),
			verify_ssl=os.getenv("CLOUDFLARE_VERIFY_SSL", "true").lower() == "true",
			timeout=int(os.getenv("CLOUDFLARE_TIMEOUT", "30")),
			user_agent=os.getenv("CLOUDFLARE_USER_AGENT", DEFAULT_USER_AGENT)
		)

	@classmethod
	def from_file(cls, path: str) -> "Config":
		"""Create config from file (JSON or INI format)"""
		path_obj = Path(path)
		if not path_obj.exists():
			raise GatewayConfigError(f"Config file not found: {path}")

		if path_obj.suffix == ".json":
			return cls._from_json(path_obj)
		elif path_obj.suffix in [".ini", ".txt", ".conf"]:
			return cls._from_ini(path_obj)
		else:
			raise GatewayConfigError(f"Unsupported config format: {path_obj.suffix}")

	@classmethod
	def _from_json(cls, path: Path) -> "Config":
		"""Load config from JSON file"""
		with open(path, 'r') as f:
			data = json.load(f)
		try:
			return cls(**data)
		except TypeError as e:
			raise GatewayConfigError(f"Invalid config file {path}: {e}") from e

	@classmethod
	def _from_ini(cls, path: Path) -> "Config":
		"""Load config from INI file"""
		parser = configparser.ConfigParser()
		parser.read(path)

		if 'settings' in parser:
			settings = parser['settings']
		elif 'api' in parser:
			settings = parser['api']
		else:
			raise GatewayConfigError("Config file must have [settings] or [api] section")
		return cls(
			api_token=settings.get('api_token'),
			api_key=settings.get('api_key'),
			api_email=settings.get('api_email'),
			base_url=settings.get('base_url', DEFAULT_BASE_URL),
			verify_ssl=settings.getboolean('verify_ssl', True),
			timeout=settings.getint('timeout', 30),
			user_agent=settings.get('user_agent', DEFAULT_USER_AGENT)
		)

	def validate(self):
		"""Validate configuration"""
		if not self.has_credentials:
			raise GatewayConfigError("api_token or api_key and api_email are required")
		if not self.base_url:
			raise GatewayConfigError("base_url is required")
		if self.timeout <= 0:
			raise GatewayConfigError("timeout must be positive")
