"""
Reader Config

Configuration and content-click routing core of an embedded e-book reader:
presentation settings, direction-dependent value resolution, and
scheme-based routing of clicks in rendered chapters back to host code.
"""

__version__ = "0.1.0"

from .direction import (
    LayoutDirection,
    ScrollAxis,
    resolve,
)

from .listeners import (
    Point,
    ClickListenerRegistration,
    ContentClickRegistry,
)

from .config import (
    ReaderConfiguration,
    default_configuration,
    load_config,
    save_config,
)

from .binding import (
    ListenerBinding,
    bind_listeners,
)

__all__ = [
    # Direction
    'LayoutDirection',
    'ScrollAxis',
    'resolve',
    # Click listeners
    'Point',
    'ClickListenerRegistration',
    'ContentClickRegistry',
    # Config
    'ReaderConfiguration',
    'default_configuration',
    'load_config',
    'save_config',
    # Selector attachment
    'ListenerBinding',
    'bind_listeners',
]
