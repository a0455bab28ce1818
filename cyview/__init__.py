import logging
from .core.error import *
from .collections import *

logging.getLogger(__name__).addHandler(logging.NullHandler())
