"""Viewer interaction engine: state, commands, paging, and view models."""

from .commands import Command, reduce, type_character
from .paging import BACKWARD_SHORTFALL_POLICY, FORWARD_SHORTFALL_POLICY, ShortfallPolicy
from .session import ViewerSession
from .state import Mode, ViewerState, Viewport, clamp_state
from .view_model import ViewModel, ViewRow, build_view_model

__all__ = [
    "BACKWARD_SHORTFALL_POLICY",
    "Command",
    "FORWARD_SHORTFALL_POLICY",
    "Mode",
    "ShortfallPolicy",
    "ViewModel",
    "ViewRow",
    "ViewerSession",
    "ViewerState",
    "Viewport",
    "build_view_model",
    "clamp_state",
    "reduce",
    "type_character",
]
