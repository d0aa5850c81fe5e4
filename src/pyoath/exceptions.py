class OATHError(ValueError):
    """
    Base class for errors raised while generating one-time passwords.
    """


class ConfigError(OATHError):
    """
    The generator configuration is invalid (too few digits, bad timestep, ...).
    """


class UnsupportedDigestError(ConfigError):
    """
    The requested digest algorithm is not one the generator can use inside HMAC.
    """


class EncodingError(OATHError):
    """
    A counter cannot be represented in the fixed-width HMAC message.
    """


class SecretError(OATHError):
    """
    The secret is not text or a bytes-like object.
    """
