"""Start-up ramp wrapper around an external closed-loop controller."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from .clock import TimeSource, default_clock
from .ranges import sign


class Controller(Protocol):
    """Closed-loop controller contract (e.g. a PID)."""

    def compute(self, position: float, target: float) -> float:
        ...


class AccelWrappedController:
    """Pairs a controller with a one-shot start-up ramp.

    Every call evaluates the ramp value ``sign(output) * elapsed_s / accel_time``
    against the controller output. Once the ramp magnitude reaches the output
    magnitude the ramp period ends, and it stays ended until ``initialize()``.

    The controller output is returned unchanged; ``ramp_value`` exposes the
    computed ramp value for callers that want to apply it themselves.
    """

    def __init__(self, controller: Controller, accel_time: float, clock: Optional[TimeSource] = None):
        if accel_time <= 0:
            raise ValueError(f"accel_time must be > 0 (got {accel_time})")

        self._logger = logging.getLogger(__name__)
        self._controller = controller
        self._accel_time = float(accel_time)
        self._clock: TimeSource = clock if clock is not None else default_clock()

        self._is_ramping = True
        self._ramp_value = 0.0
        self._start_time = self._clock()

    @property
    def controller(self) -> Controller:
        return self._controller

    @property
    def accel_time(self) -> float:
        return self._accel_time

    @property
    def is_ramping(self) -> bool:
        return self._is_ramping

    @property
    def ramp_value(self) -> float:
        """Ramp value computed on the last call (0.0 when the controller output is 0)."""
        return self._ramp_value

    def get_output(self, position: float, target: float) -> float:
        output = self._controller.compute(position, target)
        elapsed_s = (self._clock() - self._start_time) / 1000.0
        self._ramp_value = sign(output) * elapsed_s / self._accel_time

        if self._is_ramping and abs(self._ramp_value) >= abs(output):
            self._is_ramping = False
            self._logger.debug("Start-up ramp finished after %.3f s (output=%s)", elapsed_s, output)

        return output

    def initialize(self) -> None:
        """(Re)activate the ramp period and reset its timer."""
        self._is_ramping = True
        self._ramp_value = 0.0
        self._start_time = self._clock()
