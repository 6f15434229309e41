"""Settings for building the XPath parser.

Values are read from the environment when the module is first imported:

``XPATHSTEPS_PARSER_DEBUG``
    Build the PLY parser in debug mode. Grammar details and conflicts are
    written to the ``xpathsteps.xpath.core`` logger.

``XPATHSTEPS_WRITE_TABLES``
    Let PLY write its generated ``parsetab`` module next to the grammar so
    that later imports skip table generation. Off by default, since the
    package directory is often read-only once installed.
"""

import os

TRUE_VALUES = ('1', 'true', 'yes', 'on')

def env_flag(name, default=False):
    'Read a boolean setting from the environment variable ``name``.'
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES

PARSER_DEBUG = env_flag('XPATHSTEPS_PARSER_DEBUG')
WRITE_TABLES = env_flag('XPATHSTEPS_WRITE_TABLES')
