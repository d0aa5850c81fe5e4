import hashlib
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Tuple, Union

from .exceptions import ConfigError, UnsupportedDigestError

logger = logging.getLogger(__name__)

DEFAULT_DIGITS = 6
DEFAULT_DIGEST = "SHA1"
DEFAULT_TIMESTEP = 30

# Dynamic truncation reads 4 bytes at an offset of up to 15.
MIN_DIGEST_SIZE = 20

# Keyed by the normalized name (upper case, no "-" or "_").
DIGESTS: Dict[str, Tuple[str, Callable[..., Any]]] = {
    "SHA1": ("SHA1", hashlib.sha1),
    "SHA224": ("SHA224", hashlib.sha224),
    "SHA256": ("SHA256", hashlib.sha256),
    "SHA384": ("SHA384", hashlib.sha384),
    "SHA512": ("SHA512", hashlib.sha512),
    "SHA3224": ("SHA3-224", hashlib.sha3_224),
    "SHA3256": ("SHA3-256", hashlib.sha3_256),
    "SHA3384": ("SHA3-384", hashlib.sha3_384),
    "SHA3512": ("SHA3-512", hashlib.sha3_512),
    "BLAKE2B": ("BLAKE2B", hashlib.blake2b),
    "BLAKE2S": ("BLAKE2S", hashlib.blake2s),
}

DigestSpec = Union[str, Callable[..., Any]]


def _normalize_name(name: str) -> str:
    return name.strip().upper().replace("-", "").replace("_", "")


def resolve_digest(algorithm: DigestSpec) -> Tuple[str, Callable[..., Any]]:
    """
    Looks up a digest by name ("SHA1", "sha-256", "SHA3_512", ...) or by its
    hashlib constructor (``hashlib.sha256``).

    Only digests listed in :data:`DIGESTS` are accepted, so a typo never falls
    back to SHA-1 and short digests such as MD5 are rejected up front.

    :param algorithm: digest name or hashlib constructor
    :returns: (canonical name, hashlib constructor)
    :raises UnsupportedDigestError: the digest is not in the table
    """
    if isinstance(algorithm, str):
        name = algorithm
    elif callable(algorithm):
        try:
            name = algorithm().name
        except (AttributeError, TypeError) as e:
            raise UnsupportedDigestError("{!r} is not a hashlib digest constructor".format(algorithm)) from e
    else:
        raise UnsupportedDigestError("digest must be a name or a hashlib constructor, not {!r}".format(algorithm))

    try:
        canonical, digest = DIGESTS[_normalize_name(name)]
    except KeyError:
        raise UnsupportedDigestError(
            "Unsupported digest {!r}, must be one of {}".format(name, ", ".join(n for n, _ in DIGESTS.values()))
        ) from None

    if digest().digest_size < MIN_DIGEST_SIZE:
        raise UnsupportedDigestError("digest size of {} is lower than {} bytes".format(canonical, MIN_DIGEST_SIZE))
    logger.debug("resolved digest %r to %s", algorithm, canonical)
    return canonical, digest


def _check_int(name: str, value: Any) -> None:
    # bool is an int subclass, but digits=True is never intended
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError("{} must be an integer, not {!r}".format(name, value))


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Immutable settings shared by every code a generator produces.

    :param digits: number of decimal digits in the code, at least 6
    :param digest_algorithm: digest used inside HMAC, by name or hashlib constructor.
        SHA1 is what RFC 4226 and RFC 6238 specify; the others are an extension.
    :param timestep: TOTP time step in seconds
    """

    digits: int = DEFAULT_DIGITS
    digest_algorithm: DigestSpec = DEFAULT_DIGEST
    timestep: int = DEFAULT_TIMESTEP
    digest: Callable[..., Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.validate()
        canonical, digest = resolve_digest(self.digest_algorithm)
        # frozen dataclass, so bypass __setattr__ for the derived fields
        object.__setattr__(self, "digest_algorithm", canonical)
        object.__setattr__(self, "digest", digest)

    def validate(self) -> None:
        """
        Checks the numeric settings; raises :class:`ConfigError` on the first violation.
        """
        _check_int("digits", self.digits)
        if self.digits < 6:
            raise ConfigError("Must request at least 6 digits, got {}".format(self.digits))
        _check_int("timestep", self.timestep)
        if self.timestep <= 0:
            raise ConfigError("timestep must be a positive number of seconds, got {}".format(self.timestep))
