import hmac
from typing import Optional, Union

from . import utils
from .config import GeneratorConfig
from .exceptions import ConfigError

Code = Union[str, int]


class OTP(object):
    """
    Base class for OTP generators.

    Holds an immutable :class:`GeneratorConfig` and turns (secret, counter)
    pairs into codes. Nothing about a secret or counter is kept between calls.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None, **options) -> None:
        if config is None:
            config = GeneratorConfig(**options)
        elif options:
            raise ConfigError("pass either a GeneratorConfig or keyword options, not both")
        self.config = config

    @property
    def digits(self) -> int:
        return self.config.digits

    @property
    def digest_algorithm(self) -> str:
        return self.config.digest_algorithm

    @property
    def timestep(self) -> int:
        return self.config.timestep

    def generate_otp(self, secret: utils.Secret, input: int) -> Code:
        """
        :param secret: shared key, raw or hex-encoded (see :func:`utils.normalize_secret`)
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        # Implements RFC 4226
        self.config.validate()
        message = utils.int_to_bytestring(input)
        hasher = hmac.new(utils.normalize_secret(secret), message, self.config.digest)
        return self.format_code(self.dynamic_truncate(hasher.digest()))

    @staticmethod
    def dynamic_truncate(digest: bytes) -> int:
        """
        RFC 4226 dynamic truncation: the low nibble of the last byte picks
        four bytes, read big-endian with the sign bit cleared.
        """
        offset = digest[-1] & 0xF
        return (
            (digest[offset] & 0x7F) << 24
            | (digest[offset + 1] & 0xFF) << 16
            | (digest[offset + 2] & 0xFF) << 8
            | (digest[offset + 3] & 0xFF)
        )

    def format_code(self, code: int) -> Code:
        """
        Reduces a truncated value to ``digits`` decimal digits.

        Codes shorter than 10 digits come back as zero-padded strings. From 10
        digits on, the bare number is returned and leading zeros are lost.
        """
        value = code % 10**self.digits
        if self.digits < 10:
            return str(value).zfill(self.digits)
        return value
