"""
Content Click Listeners

Registrations binding a URL scheme, a query selector and an attribute to a
host callback, and the registry that routes intercepted navigations back to
those callbacks.

A registration with scheme ``quote``, selector ``.quote`` and attribute
``id`` receives ``"12345"`` when the reader taps
``<section class="quote" id="12345">`` in the rendered chapter.
"""

import logging
from typing import Callable, Iterator, List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    """Touch point relative to the rendering surface."""
    x: float
    y: float


OnClick = Callable[[Optional[str], Point], None]


class ClickListenerRegistration(BaseModel):
    """Click listener for elements of rendered content.

    Scheme names are lower-cased once here so dispatch is a plain comparison.
    Make sure the scheme name is a valid URL scheme; it is not checked.
    """
    model_config = ConfigDict(frozen=True)

    scheme_name: str = Field(description="URL scheme recognizing this listener's navigations")
    query_selector: str = Field(description="Selector for the elements the listener is added to")
    attribute_name: str = Field(description="Attribute whose content is passed to on_click")
    select_all: bool = Field(True, description="Add to every matched element, or only the first one")
    on_click: OnClick = Field(description="Called with the attribute content and the touch point")

    @field_validator('scheme_name', mode='before')
    @classmethod
    def normalize_scheme_name(cls, v):
        """Lower-case the scheme name."""
        if isinstance(v, str):
            return v.lower()
        return v


class ContentClickRegistry:
    """Ordered, append-only collection of click listener registrations.

    Dispatch is first-match in registration order: when several
    registrations share a scheme name only the first one is ever called.
    """

    def __init__(self) -> None:
        self._registrations: List[ClickListenerRegistration] = []

    def register(self, registration: ClickListenerRegistration) -> None:
        self._registrations.append(registration)
        logger.debug("Registered click listener %r for %r",
                     registration.scheme_name, registration.query_selector)

    def all_registrations(self) -> Tuple[ClickListenerRegistration, ...]:
        """Get all registrations in registration order."""
        return tuple(self._registrations)

    def find(self, scheme_name: str) -> Optional[ClickListenerRegistration]:
        """Get the registration receiving dispatch for a scheme name."""
        scheme_name = scheme_name.lower()
        for registration in self._registrations:
            if registration.scheme_name == scheme_name:
                return registration
        return None

    def dispatch(self, scheme_name: str, attribute_value: Optional[str], point: Point) -> bool:
        """Route an intercepted navigation to its listener.

        Args:
            scheme_name: Scheme of the intercepted navigation (any case)
            attribute_value: Attribute content of the tapped element, or None
            point: Touch point relative to the rendering surface

        Returns:
            True if a listener was called, False if no registration matches
        """
        registration = self.find(scheme_name)
        if registration is None:
            logger.debug("No click listener for scheme %r", scheme_name)
            return False

        registration.on_click(attribute_value, point)
        return True

    def __len__(self) -> int:
        return len(self._registrations)

    def __iter__(self) -> Iterator[ClickListenerRegistration]:
        return iter(self.all_registrations())
