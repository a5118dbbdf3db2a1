from abc import ABC
from dataclasses import dataclass


class Pulse(ABC):
    """
    One of a series of operations on a two-level system.

    "Pulse" is used in a very loose sense here, as this includes delays, etc.
    """


@dataclass(frozen=True)
class Delay(Pulse):
    """
    A wait time without any control field.

    The duration is only meaningful in conjunction with a system giving the strength of the
    perturbation/static detuning, as there is ideally no time evolution during a wait time.
    """

    duration: float
    perturbation_on: bool

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"Delay duration must be non-negative, got {self.duration}")


@dataclass(frozen=True)
class XYRotation(Pulse):
    """
    A rotation by theta (the target gate area, in radians) around the axis in the xy plane
    of the Bloch sphere with azimuthal angle phi (the gate phase, in radians).
    """

    theta: float
    phi: float
