#!/usr/bin/env python3
"""
Command line entry point

    python -m nuban possible-banks 0123456789 --weighted
    python -m nuban lookup 058 --by old-code
    python -m nuban check-digit 123456789 000014
    python -m nuban validate 0123456789 057
    python -m nuban bin 539983

Results are printed as JSON on stdout; logs go to stderr.
"""

import argparse
import json
import sys
from typing import List, Optional

from .banks import BankProperty, NIGERIAN_BANKS, WEIGHTED_NIGERIAN_BANKS, get_bank
from .check_digit import InvalidSerialLength, compute_check_digit, get_possible_issuers, is_valid_nuban
from .config import get_config
from .logging_config import setup_logging
from .providers import create_client

LOOKUP_PROPERTIES = {
    "slug": BankProperty.SLUG,
    "code": BankProperty.CODE,
    "old-code": BankProperty.OLD_CODE,
}


def _emit(payload) -> None:
    print(json.dumps(payload, indent=2))


def _possible_banks(args) -> int:
    if not is_valid_nuban(args.account_number):
        _emit({"error": "Invalid account number, digits should be exactly 10"})
        return 1
    candidates = WEIGHTED_NIGERIAN_BANKS if args.weighted else NIGERIAN_BANKS
    banks = get_possible_issuers(args.account_number, candidates)
    _emit([bank.to_dict() for bank in banks])
    return 0


def _lookup(args) -> int:
    bank = get_bank(args.value, LOOKUP_PROPERTIES[args.by])
    if bank is None:
        _emit({"error": f"No bank found for {args.by} '{args.value}'"})
        return 1
    _emit(bank.to_dict())
    return 0


def _is_ascii_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _check_digit(args) -> int:
    if args.serial and not _is_ascii_digits(args.serial):
        _emit({"error": "Serial should contain digits only"})
        return 1
    if len(args.bank_code) != 6 or not _is_ascii_digits(args.bank_code):
        _emit({"error": "Bank code should be exactly 6 digits"})
        return 1
    try:
        digit = compute_check_digit(args.serial, args.bank_code)
    except InvalidSerialLength as e:
        _emit({"error": str(e)})
        return 1
    _emit({"serial": args.serial, "bank_code": args.bank_code, "check_digit": digit})
    return 0


def _validate(args) -> int:
    try:
        client = create_client()
    except ValueError as e:
        _emit({"error": str(e)})
        return 1
    with client:
        result = client.validate_account(args.account_number, args.bank_code)
    _emit(result.model_dump(mode="json", exclude_none=True))
    return 0 if result.status else 1


def _resolve_bin(args) -> int:
    try:
        client = create_client()
    except ValueError as e:
        _emit({"error": str(e)})
        return 1
    with client:
        result = client.resolve_card_bin(args.first_six_digits)
    _emit(result.model_dump(mode="json", exclude_none=True))
    return 0 if result.status else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nuban", description="Nigerian NUBAN account tools")
    commands = parser.add_subparsers(dest="command", required=True)

    possible = commands.add_parser("possible-banks", help="Banks that could have issued an account number")
    possible.add_argument("account_number")
    possible.add_argument("--weighted", action="store_true",
                          help="Only check the curated list of major banks")
    possible.set_defaults(handler=_possible_banks)

    lookup = commands.add_parser("lookup", help="Look a bank up by slug, code or legacy code")
    lookup.add_argument("value")
    lookup.add_argument("--by", choices=sorted(LOOKUP_PROPERTIES), default="code")
    lookup.set_defaults(handler=_lookup)

    check = commands.add_parser("check-digit", help="Compute the NUBAN check digit")
    check.add_argument("serial")
    check.add_argument("bank_code")
    check.set_defaults(handler=_check_digit)

    validate = commands.add_parser("validate", help="Resolve an account through the payment provider")
    validate.add_argument("account_number")
    validate.add_argument("bank_code")
    validate.set_defaults(handler=_validate)

    resolve_bin = commands.add_parser("bin", help="Resolve a card BIN through the payment provider")
    resolve_bin.add_argument("first_six_digits")
    resolve_bin.set_defaults(handler=_resolve_bin)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()
    setup_logging(config.log_level, fmt=config.log_format)

    args = build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
