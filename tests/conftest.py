#!/usr/bin/env python3
"""
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt
"""

import json

import pytest


class FakeExecutor:
	"""Records requests and answers with canned bytes or an exception"""

	def __init__(self, payload=b"", error=None, echo=False):
		self.payload = payload
		self.error = error
		self.echo = echo
		self.calls = []

	def request(self, method, endpoint, json=None, timeout=None):
		self.calls.append((method, endpoint, json, timeout))
		if self.error is not None:
			raise self.error
		if self.echo:
			return envelope(json)
		return self.payload


def envelope(result, success=True, errors=None, messages=None):
	return json.dumps({
		"success": success,
		"errors": errors or [],
		"messages": messages or [],
		"result": result,
	}).encode()


@pytest.fixture
def fake_executor():
	return FakeExecutor()
