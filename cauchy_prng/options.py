"""
Generator options.
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Callable, Optional

from .errors import InvalidOptionsError

logger = logging.getLogger(__name__)


@dataclass
class Options:
    """Options for constructing a Cauchy generator"""
    # External uniform generator on [0, 1); disables state access
    prng: Optional[Callable[[], float]] = None

    # Positive 32-bit integer, or sequence of unsigned 32-bit integers
    seed: Any = None

    # uint32 state buffer
    state: Any = None

    # Copy a provided `state` (False shares the caller's buffer); unused with `prng`
    copy: bool = True

    def __post_init__(self):
        """Validate option types"""
        if self.prng is not None and not callable(self.prng):
            raise InvalidOptionsError(
                f"invalid option. `prng` option must be a pseudorandom number generator function. Option: `{self.prng!r}`."
            )
        # `copy` governs the internal state buffer, which an external `prng` replaces
        if self.prng is None and not isinstance(self.copy, bool):
            raise InvalidOptionsError(
                f"invalid option. `copy` option must be a boolean. Option: `{self.copy!r}`."
            )

    @property
    def source(self) -> str:
        """Which state-initialization path is honoured: prng > state > seed > default."""
        if self.prng is not None:
            return 'prng'
        if self.state is not None:
            return 'state'
        if self.seed is not None:
            return 'seed'
        return 'default'

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> 'Options':
        """Build options from a dict-like, ignoring unrecognized keys."""
        known = {f.name for f in fields(cls)}
        unknown = [key for key in mapping if key not in known]
        if unknown:
            logger.debug("Ignoring unrecognized options: %s", unknown)
        return cls(**{key: mapping[key] for key in mapping if key in known})


def coerce_options(value) -> Options:
    """Return `value` as `Options`, accepting an `Options` instance or a mapping."""
    if isinstance(value, Options):
        return value
    if isinstance(value, Mapping):
        return Options.from_mapping(value)
    raise InvalidOptionsError(
        f"invalid argument. Options argument must be an object. Value: `{value!r}`."
    )
