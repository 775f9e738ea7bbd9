"""
Factory for pseudorandom number generators drawing from a Cauchy distribution.
"""
import logging

from .options import Options, coerce_options
from .prngs import BoxMullerNormal, MT19937Normal
from .utils.cauchy import cauchy, cauchy_unbound
from .utils.typedarray import typedarray_to_json
from .utils.validate import validate

logger = logging.getLogger(__name__)


class BaseCauchy:
    """
    Callable Cauchy generator.
    
    With bound parameters the generator is called without arguments; otherwise
    it is called as ``rand(x0, gamma)`` and returns NaN for a NaN parameter or
    a non-positive scale.
    """

    NAME = 'cauchy'

    def __init__(self, rnorm, x0=None, gamma=None):
        self._rnorm = rnorm
        self._x0 = x0
        self._gamma = gamma

    @property
    def PRNG(self):
        """Underlying standard normal generator"""
        return self._rnorm

    @property
    def x0(self):
        return self._x0

    @property
    def gamma(self):
        return self._gamma

    @property
    def bound(self) -> bool:
        return self._x0 is not None

    def __call__(self, *args):
        if self.bound:
            if args:
                raise TypeError(
                    f"{self.NAME}() with bound parameters takes no arguments ({len(args)} given)"
                )
            return cauchy(self._rnorm, self._x0, self._gamma)
        if len(args) != 2:
            raise TypeError(
                f"{self.NAME}() takes exactly 2 arguments (x0, gamma) ({len(args)} given)"
            )
        return cauchy_unbound(self._rnorm, args[0], args[1])

    def __repr__(self):
        if self.bound:
            return f"{type(self).__name__}(x0={self._x0!r}, gamma={self._gamma!r})"
        return f"{type(self).__name__}()"


class Cauchy(BaseCauchy):
    """Cauchy generator owning (or sharing) the state of its normal source."""

    @property
    def seed(self):
        return self._rnorm.seed

    @property
    def seed_length(self):
        return self._rnorm.seed_length

    @property
    def state(self):
        return self._rnorm.state

    @state.setter
    def state(self, s):
        self._rnorm.state = s

    @property
    def state_length(self):
        return self._rnorm.state_length

    @property
    def byte_length(self):
        return self._rnorm.byte_length

    def serialize(self):
        """
        Serialize the generator as a JSON-compatible dict.
        
        Returns:
        --------
        dict : ``{"type": "PRNG", "name": "cauchy", "state": {...}, "params": [...]}``
        """
        return {
            'type': 'PRNG',
            'name': self.NAME,
            'state': typedarray_to_json(self._rnorm.state),
            'params': [self._x0, self._gamma] if self.bound else [],
        }


class ExternalCauchy(BaseCauchy):
    """Cauchy generator over an external uniform generator; state access is disabled."""

    seed = None
    seed_length = None
    state_length = None
    byte_length = None

    @property
    def state(self):
        return None

    @state.setter
    def state(self, s):
        pass

    def serialize(self):
        return None


def _normal_source(options: Options):
    source = options.source
    logger.debug("Initializing standard normal source from %s", source)
    if source == 'prng':
        return BoxMullerNormal(options.prng)
    return MT19937Normal(seed=options.seed, state=options.state, copy=options.copy)


def factory(*args, **kwargs):
    """
    Return a pseudorandom number generator for the Cauchy distribution.
    
    Call forms:
    
        factory()                       unbound generator, random seed
        factory(options)                unbound generator
        factory(x0, gamma)              bound generator
        factory(x0, gamma, options)     bound generator
    
    Options may also be passed as keyword arguments, which take precedence
    over a positional options argument.
    
    Parameters:
    -----------
    x0 : float, optional
        Location parameter
    gamma : float, optional
        Scale parameter
    options : Options or dict, optional
        ``prng`` (uniform generator on [0, 1)), ``seed``, ``state``, ``copy``
        
    Returns:
    --------
    Cauchy or ExternalCauchy : pseudorandom number generator
    
    Raises:
    -------
    InvalidLocationError, InvalidScaleError : invalid bound parameters
    InvalidOptionsError : options are not a mapping or hold invalid values
    InvalidStateError : provided state is not a valid state buffer
    """
    x0 = gamma = None
    opts = {}
    if len(args) == 1:
        opts = args[0]
    elif len(args) in (2, 3):
        x0, gamma = args[0], args[1]
        validate(x0, gamma)
        x0, gamma = float(x0), float(gamma)
        if len(args) == 3:
            opts = args[2]
    elif len(args) > 3:
        raise TypeError(f"factory() takes at most 3 positional arguments ({len(args)} given)")

    options = coerce_options(opts)
    if kwargs:
        merged = {f: getattr(options, f) for f in ('prng', 'seed', 'state', 'copy')}
        merged.update(kwargs)
        options = Options.from_mapping(merged)

    rnorm = _normal_source(options)
    if options.prng is not None:
        prng = ExternalCauchy(rnorm, x0, gamma)
    else:
        prng = Cauchy(rnorm, x0, gamma)
    logger.debug("Created %r", prng)
    return prng
