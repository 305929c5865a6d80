# static_ids/cli.py

import argparse
import logging
import sys
from typing import List, Optional

from static_ids import config
from static_ids.core.declarations import declare_id, declare_pda
from static_ids.core.exceptions import StaticIdsException
from static_ids.core.pda import derive_program_address
from static_ids.core.pubkeys import decode_pubkey
from static_ids.utils.logger import get_logger

logger = get_logger(__name__)


def _format_bytes(raw: bytes) -> str:
    return "[" + ", ".join(str(b) for b in raw) + "]"


def _resolve_program_id(value: Optional[str]) -> str:
    program_id = value or config.get_default_program_id()
    if not program_id:
        raise ValueError("No program id given and STATIC_IDS_DEFAULT_PROGRAM_ID is not set")
    return program_id


def _parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def cmd_decode(args: argparse.Namespace) -> None:
    static_id = declare_id(args.key)
    print(f"ID:    {static_id.ID}")
    print(f"BYTES: {_format_bytes(bytes(static_id.ID))}")


def cmd_derive(args: argparse.Namespace) -> None:
    program_id = decode_pubkey(_resolve_program_id(args.program_id))
    result = derive_program_address(program_id, args.seed)
    print(f"ID:    {result.address}")
    print(f"BUMP:  {result.bump}")


def cmd_validate(args: argparse.Namespace) -> None:
    pda = declare_pda(args.pda, _resolve_program_id(args.program_id), args.seed)
    print(f"ID:    {pda.ID}")
    print(f"BYTES: {_format_bytes(bytes(pda.ID))}")
    print(f"BUMP:  {pda.BUMP}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="static-ids",
        description="Validate static program ids and program derived addresses",
    )
    parser.add_argument("--log-level", help="Override STATIC_IDS_LOG_LEVEL (e.g. DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_decode = sub.add_parser("decode", help="Decode a base58 program id")
    p_decode.add_argument("key", help="Base58 public key literal")
    p_decode.set_defaults(func=cmd_decode)

    p_derive = sub.add_parser("derive", help="Derive a PDA and its bump seed")
    p_derive.add_argument("seed", help="Seed string (UTF-8, at most 32 bytes)")
    p_derive.add_argument("--program-id", help="Base58 program id (defaults to STATIC_IDS_DEFAULT_PROGRAM_ID)")
    p_derive.set_defaults(func=cmd_derive)

    p_validate = sub.add_parser("validate", help="Check a claimed PDA against its derivation")
    p_validate.add_argument("pda", help="Claimed base58 PDA")
    p_validate.add_argument("seed", help="Seed string the PDA was derived from")
    p_validate.add_argument("--program-id", help="Base58 program id (defaults to STATIC_IDS_DEFAULT_PROGRAM_ID)")
    p_validate.set_defaults(func=cmd_validate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    config.load_env()  # early .env load, before any setting is read

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(
            level=_parse_log_level(args.log_level or config.get_log_level()),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        args.func(args)
    except (StaticIdsException, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
