import time
from typing import Optional

from . import utils
from .otp import OTP, Code


class OATH(OTP):
    """
    HOTP (RFC 4226) and TOTP (RFC 6238) generator.

    >>> oath = OATH(digits=8)
    >>> oath.totp(b"12345678901234567890", 59)
    '94287082'
    """

    def hotp(self, secret: utils.Secret, counter: int) -> Code:
        """
        Generates the OTP for the given counter.

        :param secret: shared key, raw or hex-encoded
        :param counter: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(secret, counter)

    def totp(self, secret: utils.Secret, timestamp: Optional[utils.Timestamp] = None) -> Code:
        """
        Generates the OTP for the time step containing ``timestamp``.

        :param secret: shared key, raw or hex-encoded
        :param timestamp: Unix time or datetime to generate the code for, defaults to now
        :returns: OTP
        """
        self.config.validate()
        return self.generate_otp(secret, self.timecode(timestamp))

    def timecode(self, timestamp: Optional[utils.Timestamp] = None) -> int:
        """
        The TOTP counter for ``timestamp`` (now if omitted).
        """
        if timestamp is None:
            timestamp = time.time()
        return utils.timecode(timestamp, self.timestep)

    def time_remaining(self, timestamp: Optional[utils.Timestamp] = None) -> int:
        """
        Whole seconds until the code for ``timestamp`` (now if omitted) rolls over.
        """
        if timestamp is None:
            timestamp = time.time()
        return int(self.timestep - utils.unix_time(timestamp) % self.timestep)
