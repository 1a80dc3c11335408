"""
Scoped render handle passed to content and effect callbacks.

A ``Ui`` carries the style state an effect may change (opacity, layer
transform, clip rectangle, text colour override) and a reference to its
``UiContext``. Child scopes are opened with ``scope()``; a child inherits its
parent's style and is invalidated when the ``with`` block exits. Using an
invalidated handle raises ``ScopeInvalidatedError``.

Backends subclass ``Ui`` to add drawing primitives (see
``rendering.painter_ui.PainterUi``) and override ``_spawn`` so children
share the backend resources.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional

from core.animation.errors import ScopeInvalidatedError
from core.context.geometry import Color, Rect, Transform, clamp_channel
from core.context.ids import ROOT_LAYER, WidgetId

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from core.context.context import UiContext


class Ui:
    """Headless scoped handle. Holds style state only."""

    def __init__(
        self,
        ctx: "UiContext",
        layer_id: WidgetId = ROOT_LAYER,
        parent: Optional["Ui"] = None,
    ) -> None:
        self._ctx = ctx
        self._layer_id = layer_id
        self._parent = parent
        self._valid = True
        if parent is not None:
            if layer_id == parent._layer_id:
                self._inherited_transform = parent._inherited_transform
            else:
                self._inherited_transform = parent.total_transform
            self._base_opacity = parent.opacity
            self._opacity = parent.opacity
            self._clip_rect = parent.clip_rect
            self._text_color = parent.text_color
        else:
            self._inherited_transform = Transform.IDENTITY
            self._base_opacity = 1.0
            self._opacity = 1.0
            self._clip_rect = ctx.screen_rect
            self._text_color = ctx.text_color

    # ------------------------------------------------------------------
    # Scope lifetime
    # ------------------------------------------------------------------

    def _check(self) -> None:
        if not self._valid:
            raise ScopeInvalidatedError(
                f"Ui scope for layer {self._layer_id} used after its call returned"
            )

    @property
    def is_valid(self) -> bool:
        return self._valid

    def invalidate(self) -> None:
        self._valid = False

    def _spawn(self, layer_id: WidgetId) -> "Ui":
        return Ui(self._ctx, layer_id, parent=self)

    @contextmanager
    def scope(self, layer_id: Optional[WidgetId] = None) -> Iterator["Ui"]:
        """Open a child scope, optionally on a different layer."""
        self._check()
        child = self._spawn(layer_id if layer_id is not None else self._layer_id)
        try:
            yield child
        finally:
            child.invalidate()

    # ------------------------------------------------------------------
    # Context access
    # ------------------------------------------------------------------

    @property
    def ctx(self) -> "UiContext":
        self._check()
        return self._ctx

    @property
    def layer_id(self) -> WidgetId:
        self._check()
        return self._layer_id

    # ------------------------------------------------------------------
    # Style state
    # ------------------------------------------------------------------

    @property
    def opacity(self) -> float:
        self._check()
        return self._opacity

    def set_opacity(self, opacity: float) -> None:
        """Set opacity relative to the opacity inherited from the parent."""
        self._check()
        self._opacity = self._base_opacity * max(0.0, min(1.0, float(opacity)))

    @property
    def clip_rect(self) -> Rect:
        self._check()
        return self._clip_rect

    def set_clip_rect(self, rect: Rect) -> None:
        self._check()
        self._clip_rect = rect

    @property
    def text_color(self) -> Color:
        self._check()
        return self._text_color

    def override_text_color(self, color: Color) -> None:
        self._check()
        r, g, b, *rest = color
        a = rest[0] if rest else 255
        self._text_color = (
            clamp_channel(r), clamp_channel(g), clamp_channel(b), clamp_channel(a)
        )

    @property
    def layer_transform(self) -> Transform:
        self._check()
        return self._ctx.layers.get_transform(self._layer_id)

    def set_layer_transform(self, transform: Transform) -> None:
        """Set the transform of this scope's whole layer.

        Layer transforms live in the context and persist across frames until
        removed, which the animation controller does at phase boundaries.
        """
        self._check()
        self._ctx.layers.set_transform(self._layer_id, transform)

    @property
    def total_transform(self) -> Transform:
        """Layer transform combined with those of enclosing layers."""
        self._check()
        return self._inherited_transform.then(self.layer_transform)
