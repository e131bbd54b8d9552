"""Base widget classes for reusable KubeFinOps components.

Provides configurable ID patterns and CSS class helpers shared by all
widgets.

Example:
    >>> from kubefinops.widgets._base import BaseWidget
    >>>
    >>> class CustomCard(BaseWidget):
    ...     _id_pattern = "card-{uuid}"
    ...     _default_classes = "widget-custom-card"
"""

from __future__ import annotations

import uuid
from typing import ClassVar

from textual.widget import Widget


class BaseWidget(Widget):
    """Base widget with configuration support for consistent widget patterns.

    Attributes:
        _id_pattern: Pattern string for auto-generating widget IDs.
        _default_classes: Default CSS classes for the widget.
    """

    _id_pattern: ClassVar[str | None] = None
    _default_classes: ClassVar[str] = ""

    def __init__(
        self,
        *,
        id: str | None = None,
        id_pattern: str | None = None,
        classes: str = "",
        name: str | None = None,
    ) -> None:
        """Initialize the base widget.

        Args:
            id: Explicit widget ID. Takes precedence over id_pattern.
            id_pattern: Pattern for auto-generating ID with UUID.
                Supports placeholders: {name}, {uuid}
            classes: CSS classes to apply to the widget.
            name: Optional widget name.
        """
        pattern = id_pattern or self._id_pattern
        if pattern and not id:
            id = self._generate_id(pattern, name=name or "")

        super().__init__(id=id, classes=classes, name=name)

        if self._default_classes:
            self.add_class(*self._default_classes.split())

    @staticmethod
    def _generate_id(pattern: str, name: str = "") -> str:
        """Generate widget ID from pattern."""
        slug = (name or "widget").lower().replace(" ", "-")
        return pattern.format(name=slug, uuid=uuid.uuid4().hex[:8])

