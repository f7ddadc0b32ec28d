"""
Selector Attachment for Rendered Content

Finds the elements of an XHTML/HTML chapter that click listeners attach to,
the same way the rendering surface does when content loads.
"""

import logging
from typing import Iterable, List, NamedTuple, Optional, Union

from cssselect import SelectorError
from lxml import etree
from lxml.cssselect import CSSSelector

from .listeners import ClickListenerRegistration, ContentClickRegistry, Point

logger = logging.getLogger(__name__)

Content = Union[str, bytes, etree._Element]


class ListenerBinding(NamedTuple):
    """A registration attached to one element of the content."""
    registration: ClickListenerRegistration
    element: etree._Element
    attribute_value: Optional[str]

    def click(self, registry: ContentClickRegistry, point: Point) -> bool:
        """Simulate a tap on the bound element.

        Goes through the registry like an intercepted navigation, so a
        registration shadowed by an earlier one with the same scheme never
        receives the click.
        """
        return registry.dispatch(self.registration.scheme_name, self.attribute_value, point)


def parse_content(content: Content) -> Optional[etree._Element]:
    """Parse chapter markup into an element tree.

    The HTML parser is used for XHTML too, so selectors match on local tag
    names regardless of the XHTML namespace.

    Args:
        content: Markup string/bytes or an already parsed element

    Returns:
        Root element, or None for empty content
    """
    if isinstance(content, etree._Element):
        return content
    if isinstance(content, str):
        content = content.encode('utf-8')
    if not content.strip():
        return None

    parser = etree.HTMLParser(encoding='utf-8')
    return etree.fromstring(content, parser)


def attribute_value(element: etree._Element, attribute_name: str) -> Optional[str]:
    """Get an attribute's content, None for an empty name or a missing attribute."""
    if not attribute_name:
        return None
    return element.get(attribute_name)


def find_targets(root: etree._Element, registration: ClickListenerRegistration) -> List[etree._Element]:
    """Find the elements a registration attaches to.

    Raises:
        cssselect.SelectorError: If the query selector is invalid
    """
    selector = CSSSelector(registration.query_selector, translator='html')
    matches = selector(root)
    if not registration.select_all:
        matches = matches[:1]
    return matches


def bind_listeners(content: Content,
                   registrations: Iterable[ClickListenerRegistration]) -> List[ListenerBinding]:
    """Attach every registration to its matching elements.

    A selector matching nothing attaches nothing. Each registration is
    attached on its own: an invalid selector is logged and skipped without
    affecting the others.

    Args:
        content: Chapter markup or parsed root element
        registrations: Registrations in registration order

    Returns:
        Bindings grouped by registration, in document order within each
    """
    root = parse_content(content)
    if root is None:
        return []

    bindings = []
    for registration in registrations:
        try:
            targets = find_targets(root, registration)
        except SelectorError as e:
            logger.warning("Skipping click listener %r, invalid selector %r: %s",
                           registration.scheme_name, registration.query_selector, e)
            continue
        if not targets:
            logger.debug("Selector %r matched no elements", registration.query_selector)
        for element in targets:
            bindings.append(ListenerBinding(
                registration=registration,
                element=element,
                attribute_value=attribute_value(element, registration.attribute_name),
            ))
    return bindings
