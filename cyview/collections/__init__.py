from .cview import CyclicView, ViewIterator, cview
from .builder import ViewConfig, ViewBuilder, build_view, create
