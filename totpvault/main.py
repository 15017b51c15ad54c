"""
TotpVault - Command line entry point.

Subcommands:
- seed   : generate a new hex seed
- code   : print the TOTP for a seed (current time or --timestamp)
- hotp   : print the HOTP for a seed and counter
- verify : check a TOTP code, exit 0 when valid
- demo   : fresh 64-byte seed and its current code

Failures are printed to stderr with a non-zero exit status; a partial or
malformed code is never printed.

eg..:
    totpvault seed --algorithm SHA256
    totpvault code --seed 3132333435363738393031323334353637383930 --digits 8
    totpvault hotp --seed 3132333435363738393031323334353637383930 --counter 1
"""

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional

from cryptography.exceptions import UnsupportedAlgorithm

from . import __version__
from .auth.counter import now, remaining_seconds
from .auth.seed import generate_seed, generate_seed_for
from .auth.totp import generate_totp, hotp, verify_totp
from .config import DEMO_SEED_BYTES, TotpConfig
from .exceptions import TotpVaultError
from .utils.logger import get_logger, setup_logger

logger = logging.getLogger(__name__)


def _pick(value, default):
    return default if value is None else value


def _print_failure(message) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


# --- CLI command handlers ---
def cmd_seed(args, config: TotpConfig, clock: Callable[[], float]) -> int:
    if args.length is not None:
        seed = generate_seed(args.length)
    else:
        seed = generate_seed_for(_pick(args.algorithm, config.algorithm))
    print(seed.value)
    return 0


def cmd_code(args, config: TotpConfig, clock: Callable[[], float]) -> int:
    timestamp = args.timestamp if args.timestamp is not None else now(clock)
    period = _pick(args.period, config.time_step)
    result = generate_totp(
        _pick(args.algorithm, config.algorithm),
        _pick(args.digits, config.digits),
        args.seed,
        timestamp,
        period,
    )
    if result.is_err():
        return _print_failure(result.error)
    print(result.value)
    if args.verbose:
        print(f"valid for {remaining_seconds(timestamp, period)}s", file=sys.stderr)
    return 0


def cmd_hotp(args, config: TotpConfig, clock: Callable[[], float]) -> int:
    result = hotp(
        args.seed,
        args.counter,
        _pick(args.digits, config.digits),
        _pick(args.algorithm, config.algorithm),
    )
    if result.is_err():
        return _print_failure(result.error)
    print(result.value)
    return 0


def cmd_verify(args, config: TotpConfig, clock: Callable[[], float]) -> int:
    result = verify_totp(
        args.seed,
        args.code,
        timestamp=args.timestamp,
        digits=_pick(args.digits, config.digits),
        time_step=_pick(args.period, config.time_step),
        algorithm=_pick(args.algorithm, config.algorithm),
        drift_tolerance=_pick(args.window, config.drift_tolerance),
        clock=clock,
    )
    if result.is_err():
        return _print_failure(result.error)
    if result.value:
        print("[+] code is VALID")
        return 0
    print("[-] code is INVALID")
    return 1


def cmd_demo(args, config: TotpConfig, clock: Callable[[], float]) -> int:
    seed = generate_seed(DEMO_SEED_BYTES)
    result = generate_totp(config.algorithm, config.digits, seed, now(clock), config.time_step)
    if result.is_err():
        return _print_failure(result.error)
    print(result.value)
    return 0


# --- Argparse builder ---
def _add_code_options(p: argparse.ArgumentParser, period: bool = True) -> None:
    p.add_argument("--seed", required=True, help="Hex-encoded shared secret")
    p.add_argument("--algorithm", help="SHA1, SHA256 or SHA512")
    p.add_argument("--digits", type=int, help="Number of OTP digits (1-8)")
    if period:
        p.add_argument("--period", type=int, help="TOTP time step (seconds)")
        p.add_argument("--timestamp", type=int, help="Unix time to use instead of the clock")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="totpvault", description="HOTP/TOTP one-time password generator")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    sub = p.add_subparsers(dest="cmd")

    # seed
    ps = sub.add_parser("seed", help="Generate a new hex seed")
    group = ps.add_mutually_exclusive_group()
    group.add_argument("--length", type=int, help="Seed length in bytes")
    group.add_argument("--algorithm", help="Use the RFC key length for SHA1, SHA256 or SHA512")
    ps.set_defaults(func=cmd_seed)

    # code
    pc = sub.add_parser("code", help="Print the TOTP code")
    _add_code_options(pc)
    pc.add_argument("--verbose", action="store_true", help="Also print seconds until the next code")
    pc.set_defaults(func=cmd_code)

    # hotp
    ph = sub.add_parser("hotp", help="Print the HOTP code for a counter")
    _add_code_options(ph, period=False)
    ph.add_argument("--counter", type=int, required=True, help="Event counter")
    ph.set_defaults(func=cmd_hotp)

    # verify
    pv = sub.add_parser("verify", help="Verify a TOTP code")
    _add_code_options(pv)
    pv.add_argument("--code", required=True, help="OTP code to verify")
    pv.add_argument("--window", type=int, help="Allowed +/- step window")
    pv.set_defaults(func=cmd_verify)

    # demo
    pd = sub.add_parser("demo", help="Generate a 64-byte seed and print its current code")
    pd.set_defaults(func=cmd_demo)

    return p


def main(argv: Optional[List[str]] = None, clock: Callable[[], float] = time.time) -> int:
    """Main entry point for TotpVault."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level:
        setup_logger(log_level=args.log_level)
    else:
        get_logger()

    if not hasattr(args, "func"):
        parser.print_help()
        return 2

    try:
        config = TotpConfig.from_env()
        return args.func(args, config, clock)
    except (TotpVaultError, UnsupportedAlgorithm, ValueError) as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        return _print_failure(e)


if __name__ == "__main__":
    sys.exit(main())
