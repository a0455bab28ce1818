from .assertion import *
