from .signal import ObservableProperty, Signal, observe
from .base import BaseViewModel
from .runner import RequestRunner, SynchronousRunner

__all__ = [
    "BaseViewModel",
    "ObservableProperty",
    "RequestRunner",
    "Signal",
    "SynchronousRunner",
    "observe",
]
