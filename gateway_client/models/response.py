#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

"""
Generic API response envelope
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


def require_dict(data: Any, what: str) -> Dict[str, Any]:
	"""Return data if it is a JSON object, else raise TypeError"""
	if not isinstance(data, dict):
		raise TypeError(f"{what} must be a JSON object, got {type(data).__name__}")
	return data


def _require_type(data: Dict[str, Any], key: str, kind, kind_name: str, default):
	value = data.get(key)
	if value is None:
		return default
	if not isinstance(value, kind):
		raise TypeError(f"{key} must be a {kind_name}, got {type(value).__name__}")
	return value


def require_bool(data: Dict[str, Any], key: str, default: Optional[bool] = False) -> Optional[bool]:
	"""Return data[key] as a bool, default when missing or null, else raise TypeError"""
	return _require_type(data, key, bool, "boolean", default)


def require_str(data: Dict[str, Any], key: str, default: Optional[str] = "") -> Optional[str]:
	"""Return data[key] as a str, default when missing or null, else raise TypeError"""
	return _require_type(data, key, str, "string", default)


@dataclass
class ResponseInfo:
	"""Single entry of an envelope's errors or messages list"""
	code: Optional[int] = None
	message: str = ""

	@classmethod
	def from_dict(cls, data: Any) -> "ResponseInfo":
		"""Create ResponseInfo from API response"""
		if isinstance(data, str):
			return cls(message=data)
		data = require_dict(data, "response info")
		return cls(
			code=data.get('code'),
			message=data.get('message', '')
		)

	def __str__(self) -> str:
		return f"{self.code}: {self.message}" if self.code is not None else self.message


@dataclass
class Response:
	"""Success flag plus errors and messages carried by every envelope"""
	success: bool = False
	errors: List[ResponseInfo] = field(default_factory=list)
	messages: List[ResponseInfo] = field(default_factory=list)

	@staticmethod
	def _info_list(items: Optional[List[Any]]) -> List[ResponseInfo]:
		return [ResponseInfo.from_dict(item) for item in items or []]


@dataclass
class ResultResponse(Response):
	"""Envelope with a typed result payload"""
	result: Any = None

	@classmethod
	def from_dict(cls, data: Any, result_type) -> "ResultResponse":
		"""
		Create envelope from decoded JSON

		Args:
			data: Decoded response body
			result_type: Model class with a from_dict classmethod

		Returns:
			ResultResponse whose result is a result_type instance
		"""
		data = require_dict(data, "response")
		result = data.get('result')
		return cls(
			success=require_bool(data, 'success', default=True),
			errors=cls._info_list(data.get('errors')),
			messages=cls._info_list(data.get('messages')),
			result=result_type.from_dict(result) if result is not None else result_type()
		)
