import argparse
import logging
import sys
import time
from typing import List, Optional

from . import __version__
from .config import DEFAULT_DIGEST, DEFAULT_DIGITS, DEFAULT_TIMESTEP
from .exceptions import OATHError
from .oath import OATH

logger = logging.getLogger(__name__)


def cmd_hotp(oath: OATH, args: argparse.Namespace) -> None:
    code = oath.hotp(args.secret, args.counter)
    logger.debug("HOTP: digest=%s, digits=%d, counter=%d", oath.digest_algorithm, oath.digits, args.counter)
    print(code)


def cmd_totp(oath: OATH, args: argparse.Namespace) -> None:
    now = time.time() if args.time is None else args.time
    code = oath.totp(args.secret, now)
    counter = oath.timecode(now)
    logger.debug("TOTP: digest=%s, digits=%d, counter=%d", oath.digest_algorithm, oath.digits, counter)
    if args.verbose:
        print("{}  (valid ~{}s)".format(code, oath.time_remaining(now)))
    else:
        print(code)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pyoath", description="Generate HOTP (RFC 4226) and TOTP (RFC 6238) codes.")
    p.add_argument("--version", action="version", version="%(prog)s " + __version__)
    p.add_argument("--digits", type=int, default=DEFAULT_DIGITS, help="number of digits in the code (at least 6)")
    p.add_argument("--digest", default=DEFAULT_DIGEST, help="HMAC digest, e.g. SHA1, SHA256, SHA512")
    p.add_argument("--timestep", type=int, default=DEFAULT_TIMESTEP, help="TOTP time step in seconds")
    p.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    sub = p.add_subparsers(dest="cmd", required=True)

    ph = sub.add_parser("hotp", help="counter-based code")
    ph.add_argument("secret", help="shared key, raw or hex-encoded (32+ hex characters)")
    ph.add_argument("counter", type=int, help="HMAC counter")
    ph.set_defaults(func=cmd_hotp)

    pt = sub.add_parser("totp", help="time-based code")
    pt.add_argument("secret", help="shared key, raw or hex-encoded (32+ hex characters)")
    pt.add_argument("--time", type=int, default=None, help="Unix time to generate the code for (default: now)")
    pt.set_defaults(func=cmd_totp)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="[%(levelname)s] %(message)s")
    try:
        oath = OATH(digits=args.digits, digest_algorithm=args.digest, timestep=args.timestep)
        args.func(oath, args)
    except OATHError as e:
        print("error: {}".format(e), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
