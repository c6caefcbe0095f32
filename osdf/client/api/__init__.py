"""Public client API."""

from .callbacks import Callback, callback_compatible, deliver
from .osdf_api import OSDFClient

__all__ = ["OSDFClient", "Callback", "callback_compatible", "deliver"]
