from typing import Optional

from .config import DEFAULT_DIGEST as DEFAULT_DIGEST
from .config import DEFAULT_DIGITS as DEFAULT_DIGITS
from .config import DEFAULT_TIMESTEP as DEFAULT_TIMESTEP
from .config import GeneratorConfig as GeneratorConfig
from .exceptions import ConfigError as ConfigError
from .exceptions import EncodingError as EncodingError
from .exceptions import OATHError as OATHError
from .exceptions import SecretError as SecretError
from .exceptions import UnsupportedDigestError as UnsupportedDigestError
from .oath import OATH as OATH
from .otp import OTP as OTP
from .otp import Code
from .utils import Secret, Timestamp

__version__ = "1.0.0"


def hotp(secret: Secret, counter: int, **options) -> Code:
    """
    One-shot HOTP: builds a generator from ``options`` and returns the code for ``counter``.

    :param secret: shared key, raw or hex-encoded
    :param counter: the OTP HMAC counter
    :param options: ``digits``, ``digest_algorithm`` and ``timestep``, see :class:`GeneratorConfig`
    """
    return OATH(**options).hotp(secret, counter)


def totp(secret: Secret, timestamp: Optional[Timestamp] = None, **options) -> Code:
    """
    One-shot TOTP: builds a generator from ``options`` and returns the code for ``timestamp`` (now if omitted).
    """
    return OATH(**options).totp(secret, timestamp)
