#!/usr/bin/env python3
"""
hill97 - Command-line entry point.

Usage:
    hill97 encrypt --key key.json --text "Hill Cipher!"
    hill97 decrypt --key key.json --input secret.txt --output plain.txt
    hill97 check --key key.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .cipher.hill import HillCipher, is_valid_key, key_fingerprint
from .config import DEFAULT_CONFIG, load_config
from .core_math.inverse import determinant
from .exceptions import HillCipherError
from .utils import read_key_file, setup_basic_logger


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hill97",
        description="Hill cipher over Z/97Z (educational, not secure).",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "--config",
        "-c",
        default=None,
        help="Optional JSON config file to override defaults.",
    )
    p.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    
    sub = p.add_subparsers(dest="command", required=True)
    for name, help_text in (("encrypt", "Encrypt text with a key."),
                            ("decrypt", "Decrypt text with a key.")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("--key", "-k", required=True, help="JSON key file.")
        source = cmd.add_mutually_exclusive_group(required=True)
        source.add_argument("--text", "-t", help="Text given on the command line.")
        source.add_argument("--input", "-i", help="Read text from this file.")
        cmd.add_argument("--output", "-o", default=None,
                         help="Write the result to this file instead of stdout.")
    
    check = sub.add_parser("check", help="Report whether a key is invertible.")
    check.add_argument("--key", "-k", required=True, help="JSON key file.")
    return p


def _run_check(key_path: str, cfg: dict) -> int:
    key = read_key_file(key_path)
    valid = is_valid_key(key, pivoting=cfg["pivoting"])
    print(f"key:         {key_path}")
    print(f"size:        {key.row_count}x{key.column_count}")
    print(f"fingerprint: {key_fingerprint(key)}")
    print(f"determinant: {determinant(key)}")
    print(f"valid:       {'yes' if valid else 'no'}")
    return 0 if valid else 1


def _run_cipher(args: argparse.Namespace, cfg: dict) -> int:
    key = read_key_file(args.key)
    cipher = HillCipher(key, pad_symbol=cfg["pad_symbol"], pivoting=cfg["pivoting"])
    
    if args.input is not None:
        text = Path(args.input).read_text(encoding="utf-8")
    else:
        text = args.text
    
    if args.command == "encrypt":
        result = cipher.encrypt(text)
    else:
        result = cipher.decrypt(text)
    
    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as fh:
            fh.write(result)
    else:
        sys.stdout.write(result)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    
    try:
        cfg = DEFAULT_CONFIG.copy()
        if args.config:
            cfg = load_config(args.config, base=cfg)
    except (OSError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    
    level = logging.DEBUG if args.verbose else getattr(logging, str(cfg["log_level"]).upper(), logging.WARNING)
    log = setup_basic_logger("hill97", level=level)
    log.debug("Running %s with config %s", args.command, cfg)
    
    try:
        if args.command == "check":
            return _run_check(args.key, cfg)
        return _run_cipher(args, cfg)
    except HillCipherError as exc:
        log.debug("Command %s failed", args.command, exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
