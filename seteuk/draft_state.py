"""
Draft generation state.

Tracks the four-state status shown by the page (IDLE, LOADING, SUCCESS,
ERROR) together with the current result or error message. Held in process
memory only; a restart starts again from IDLE.

    IDLE ──begin──> LOADING ──succeed──> SUCCESS ──begin──> LOADING
                       │
                       └────fail────> ERROR ──reset──> IDLE
"""
import threading
from enum import Enum
from typing import Optional

from .errors import InvalidTransitionError, SubmissionInProgressError
from .models import SeTeukResult
from .services.result_renderer import render_result


class LoadingState(str, Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class DraftState:
    """Current status, result and error for the SeTeuk form."""

    def __init__(self):
        self._lock = threading.Lock()
        self.status = LoadingState.IDLE
        self.result: Optional[SeTeukResult] = None
        self.error: Optional[str] = None
        self.length_option: Optional[str] = None

    def begin(self, length_option: str = None):
        """Enter LOADING for a new submission and clear the previous outcome."""
        with self._lock:
            if self.status == LoadingState.LOADING:
                raise SubmissionInProgressError("A draft is already being generated")
            self.status = LoadingState.LOADING
            self.result = None
            self.error = None
            self.length_option = length_option

    def succeed(self, result: SeTeukResult):
        with self._lock:
            self._require_loading()
            self.status = LoadingState.SUCCESS
            self.result = result

    def fail(self, message: str):
        with self._lock:
            self._require_loading()
            self.status = LoadingState.ERROR
            self.error = message

    def reset(self):
        """Retry action: ERROR back to IDLE with result and error cleared."""
        with self._lock:
            if self.status != LoadingState.ERROR:
                raise InvalidTransitionError(f"Cannot retry from {self.status.value}")
            self.status = LoadingState.IDLE
            self.result = None
            self.error = None

    def _require_loading(self):
        if self.status != LoadingState.LOADING:
            raise InvalidTransitionError(f"No submission is loading (state {self.status.value})")

    def to_dict(self) -> dict:
        with self._lock:
            return {
                "status": self.status.value,
                "error": self.error,
                "result": render_result(self.result, self.length_option) if self.result else None,
            }
