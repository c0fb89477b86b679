"""
Built-in defaults. A trinum.yaml only needs the keys it overrides.
"""

from typing import Any, Dict


DEFAULTS: Dict[str, Dict[str, Any]] = {
    'triangular': {
        # Width used by forward() when none is given
        'width': 'uint64',
    },
    'indexer': {
        # Width that bounds the source size of a TriangularIndexer
        'width': 'int32',
    },
    'logging': {
        'level': 'WARNING',
        'format': '%(asctime)s %(name)s %(levelname)s %(message)s',
    },
}


CONFIG_FILENAME = 'trinum.yaml'
CONFIG_ENV_VAR = 'TRINUM_CONFIG'
