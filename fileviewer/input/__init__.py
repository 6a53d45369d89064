"""Input-layer public API for key decoding and key dispatch.

Exports are split between low-level terminal decoding (`read_key`) and the
registry used to bind abstract key tokens to viewer actions.
"""

from .key_registry import KeyComboBinding, KeyComboRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
]
