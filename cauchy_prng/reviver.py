"""
Rebuild Cauchy generators from their serialized form.
"""
import logging

from .errors import InvalidStateError
from .factory import BaseCauchy, factory
from .utils.typedarray import json_to_typedarray, typedarray_to_json

logger = logging.getLogger(__name__)

__all__ = ['revive', 'json_to_typedarray', 'typedarray_to_json']


def revive(data):
    """
    Return a generator equivalent to the one that produced `data`.
    
    Parameters:
    -----------
    data : dict
        Output of ``serialize()``
        
    Returns:
    --------
    Cauchy : generator continuing the serialized sequence
    """
    if not isinstance(data, dict) or data.get('type') != 'PRNG' or data.get('name') != BaseCauchy.NAME:
        raise InvalidStateError(
            f"invalid argument. Must provide a serialized `{BaseCauchy.NAME}` PRNG. Value: `{data!r}`."
        )
    state = json_to_typedarray(data.get('state'))
    params = data.get('params', [])
    if not isinstance(params, (list, tuple)) or len(params) not in (0, 2):
        raise InvalidStateError(
            f"invalid argument. Serialized parameters must be empty or `[x0, gamma]`. Value: `{params!r}`."
        )
    logger.debug("Reviving %s generator with params %s", BaseCauchy.NAME, params)
    return factory(*params, {'state': state})
