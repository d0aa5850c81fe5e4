import binascii
import calendar
import datetime
import math
import re
import time
from typing import Union

from .exceptions import EncodingError, SecretError

HEX_SECRET = re.compile(r"[0-9a-fA-F]{32,}")

Secret = Union[bytes, bytearray, memoryview, str]
Timestamp = Union[int, float, datetime.datetime]


def normalize_secret(secret: Secret) -> bytes:
    """
    Returns the HMAC key for a caller-supplied secret.

    A secret made only of hexadecimal characters and at least 32 characters
    long is taken to be the hex encoding of the real key and is decoded two
    characters per byte; an odd trailing character is dropped. Anything else
    is used as-is (text is UTF-8 encoded).

    Beware: a raw secret that happens to look like a long hex string, such as
    ``b"0123456789abcdef0123456789abcdef"``, is decoded too, giving a 16 byte
    key instead of the 32 bytes passed in.

    :param secret: hex-encoded key or raw key, as bytes or str
    :returns: key bytes
    :raises SecretError: the secret is neither text nor bytes-like
    """
    if isinstance(secret, str):
        raw = secret.encode("utf-8")
    elif isinstance(secret, (bytes, bytearray, memoryview)):
        raw = bytes(secret)
    else:
        raise SecretError("secret must be bytes or str, not {!r}".format(type(secret).__name__))

    if HEX_SECRET.fullmatch(raw.decode("latin-1")):
        return binascii.unhexlify(raw[: len(raw) - len(raw) % 2])
    return raw


def int_to_bytestring(i: int, padding: int = 8) -> bytes:
    """
    Turns an integer to the OATH specified
    bytestring, which is fed to the HMAC
    along with the secret

    :raises EncodingError: the value is negative, not an integer, or needs more than ``padding`` bytes
    """
    if isinstance(i, bool) or not isinstance(i, int):
        raise EncodingError("counter must be an integer, not {!r}".format(i))
    if i < 0:
        raise EncodingError("counter must be a non-negative integer, got {}".format(i))

    value = i
    result = bytearray()
    while value != 0:
        result.append(value & 0xFF)
        value >>= 8
    if len(result) > padding:
        raise EncodingError("counter {} does not fit in {} bytes".format(i, padding))
    return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))


def unix_time(for_time: Timestamp) -> Union[int, float]:
    """
    Seconds since the epoch for a timestamp or datetime.

    Naive datetimes are read as local time, aware ones are converted through UTC.
    """
    if isinstance(for_time, datetime.datetime):
        if for_time.tzinfo:
            return calendar.timegm(for_time.utctimetuple())
        return time.mktime(for_time.timetuple())
    if isinstance(for_time, bool) or not isinstance(for_time, (int, float)):
        raise EncodingError("timestamp must be a number or datetime, not {!r}".format(for_time))
    if not math.isfinite(for_time):
        raise EncodingError("timestamp must be finite, got {!r}".format(for_time))
    return for_time


def timecode(for_time: Timestamp, timestep: int) -> int:
    """
    Number of whole time steps elapsed at ``for_time``, the TOTP counter.
    """
    return int(unix_time(for_time) // timestep)
