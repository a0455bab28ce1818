from .error import *
