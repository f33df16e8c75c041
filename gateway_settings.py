#!/usr/bin/env python3
"""
Script Name: gateway_settings.py
Author: Jerzy 'Yuri' Kramarz (op7ic)
Copyright: See LICENSE file
Github: https://github.com/op7ic/amphunt

gateway_settings.py - Show and update gateway account settings

This script reads the gateway identity, configuration, device settings and
logging settings of an account and prints them as JSON. Device proxy flags
and per rule type logging can be updated in place.

Usage:
	python gateway_settings.py -c <config_file> <account_id> account
	python gateway_settings.py -c <config_file> <account_id> configuration
	python gateway_settings.py -c <config_file> <account_id> devices
	python gateway_settings.py -c <config_file> <account_id> logging
	python gateway_settings.py -c <config_file> <account_id> set-devices [--proxy|--no-proxy] [--udp|--no-udp]
	python gateway_settings.py -c <config_file> <account_id> set-logging <http|dns|l4> [--log-all] [--log-blocks]
"""

import sys
import json
import logging
import argparse
import requests
from gateway_client import GatewayClient, Config, GatewayError
from gateway_client.models import RuleType, LoggingConfiguration


def build_parser():
	parser = argparse.ArgumentParser(description='Show and update gateway account settings')
	parser.add_argument('-c', '--config', help='Configuration file path (environment is used when omitted)')
	parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
	parser.add_argument('account_id', help='Account identifier')

	commands = parser.add_subparsers(dest='command', required=True)
	commands.add_parser('account', help='Show gateway identity of the account')
	commands.add_parser('configuration', help='Show gateway configuration')
	commands.add_parser('devices', help='Show device settings')
	commands.add_parser('logging', help='Show logging settings')

	devices = commands.add_parser('set-devices', help='Update device proxy settings')
	devices.add_argument('--proxy', action=argparse.BooleanOptionalAction, default=None,
						 help='Enable or disable the gateway proxy')
	devices.add_argument('--udp', action=argparse.BooleanOptionalAction, default=None,
						 help='Enable or disable the gateway UDP proxy')

	log = commands.add_parser('set-logging', help='Update logging of one rule type')
	log.add_argument('rule_type', choices=RuleType.ALL, help='Rule type to update')
	log.add_argument('--log-all', action='store_true', help='Log all requests')
	log.add_argument('--log-blocks', action='store_true', help='Log blocked requests only')
	return parser


def run(client, args):
	"""Run one command and return the result to print"""
	api = client.gateway
	if args.command == 'account':
		return api.get_account(args.account_id)
	elif args.command == 'configuration':
		return api.get_configuration(args.account_id)
	elif args.command == 'devices':
		return api.get_device_settings(args.account_id)
	elif args.command == 'logging':
		return api.get_logging_settings(args.account_id)
	elif args.command == 'set-devices':
		settings = api.get_device_settings(args.account_id)
		if args.proxy is not None:
			settings.gateway_proxy_enabled = args.proxy
		if args.udp is not None:
			settings.gateway_udp_proxy_enabled = args.udp
		return api.update_device_settings(args.account_id, settings)
	elif args.command == 'set-logging':
		settings = api.get_logging_settings(args.account_id)
		settings.settings_by_rule_type[args.rule_type] = LoggingConfiguration(
			log_all=args.log_all,
			log_blocks=args.log_blocks
		)
		return api.update_logging_settings(args.account_id, settings)
	raise ValueError(f"Unknown command: {args.command}")


def main(argv=None):
	args = build_parser().parse_args(argv)

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format='%(asctime)s %(levelname)s %(name)s: %(message)s'
	)

	try:
		# Load configuration
		config = Config.from_file(args.config) if args.config else Config.from_env()

		with GatewayClient(config) as client:
			result = run(client, args)
	except (GatewayError, requests.RequestException) as e:
		sys.exit(f"[-] Error: {e}")

	print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
	main()
