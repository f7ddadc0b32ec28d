"""
Layout Direction

Reader layout directions and the direction resolver used by layout code to
pick direction-specific values without branching at every call site.
"""

from enum import Enum
from typing import TypeVar

T = TypeVar('T')

# Marks an omitted candidate; None is a valid candidate value
UNSET = object()


class ScrollAxis(str, Enum):
    """Axis along which reader sections scroll."""
    VERTICAL = 'vertical'
    HORIZONTAL = 'horizontal'


class LayoutDirection(str, Enum):
    """Reader scrolling direction.

    - VERTICAL: sections and content scroll vertically.
    - HORIZONTAL: sections and content scroll horizontally.
    - HORIZONTAL_WITH_VERTICAL_CONTENT: sections scroll horizontally,
      content inside a section scrolls vertically.
    - DEFAULT_VERTICAL: not overridden by the user; works as VERTICAL.
    """
    VERTICAL = 'vertical'
    HORIZONTAL = 'horizontal'
    HORIZONTAL_WITH_VERTICAL_CONTENT = 'horizontal_with_vertical_content'
    DEFAULT_VERTICAL = 'default_vertical'

    @classmethod
    def parse(cls, value) -> "LayoutDirection":
        """Parse a direction from its value, member name, camelCase spelling or raw index."""
        if isinstance(value, cls):
            return value
        # Raw values stored by older hosts, in member order
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
            raise ValueError(f"Unknown layout direction: {value!r}")
        token = str(value).strip()
        # horizontalWithVerticalContent -> horizontal_with_vertical_content
        snake = ''.join('_' + c.lower() if c.isupper() else c for c in token).lstrip('_')
        for candidate in (token.lower(), snake.lower()):
            for member in cls:
                if candidate == member.value:
                    return member
        raise ValueError(f"Unknown layout direction: {value!r}")

    def scroll_axis(self) -> ScrollAxis:
        """Get the axis sections scroll along for this direction."""
        return resolve(self, ScrollAxis.VERTICAL, ScrollAxis.HORIZONTAL, ScrollAxis.HORIZONTAL)


def resolve(direction: LayoutDirection, vertical: T, horizontal: T,
            horizontal_with_vertical_content: T = UNSET) -> T:
    """Pick the candidate value matching a layout direction.

    Shorthand for a switch over every direction. Vertical and
    horizontal-with-vertical-content layouts usually share a value, so the
    last candidate can be omitted and falls back to ``vertical``:

        offset = resolve(direction, (0, page_offset), (page_offset, 0))

    Args:
        direction: Active layout direction
        vertical: Value for VERTICAL and DEFAULT_VERTICAL
        horizontal: Value for HORIZONTAL
        horizontal_with_vertical_content: Value for
            HORIZONTAL_WITH_VERTICAL_CONTENT, defaults to ``vertical``

    Returns:
        One of the given candidates
    """
    if horizontal_with_vertical_content is UNSET:
        horizontal_with_vertical_content = vertical

    if direction in (LayoutDirection.VERTICAL, LayoutDirection.DEFAULT_VERTICAL):
        return vertical
    if direction == LayoutDirection.HORIZONTAL:
        return horizontal
    return horizontal_with_vertical_content
