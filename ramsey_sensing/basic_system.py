from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np
from numpy.typing import NDArray

from ramsey_sensing.abstract_classes.abstract_system import System
from ramsey_sensing.pulses import Delay, Pulse, XYRotation
from ramsey_sensing.unitary_manipulation import (
    GROUND_STATE,
    excited_state_probability,
    phase_accumulation_unitary,
    xy_rotation_unitary,
)


@dataclass(frozen=True)
class BasicSystem(System):
    """
    A simple system, where the description of all operations is unitary, and the gate pulses
    are (apart from a configurable area error) ideal and instantaneous.

    Args:
        perturbation_strength (float): Strength of the perturbation to measure, in rad/unit time; active
                                       during the delays that have the perturbation switched on.
        detuning_strength (float): Strength of a constant (unexpected) detuning, in rad/unit time, which
                                   leads to phase accumulation during all delays.
        rabi_frequency_scale (float): Rabi frequency scale factor that leads to coherent area errors on
                                      all rotations.
    """

    SYSTEM_KEY = 1.0

    perturbation_strength: float
    detuning_strength: float
    rabi_frequency_scale: float = 1.0

    def unitary(self, pulse: Pulse) -> NDArray:
        if isinstance(pulse, Delay):
            frequency_rad = self.detuning_strength
            if pulse.perturbation_on:
                frequency_rad += self.perturbation_strength
            return phase_accumulation_unitary(frequency_rad, pulse.duration)
        if isinstance(pulse, XYRotation):
            return xy_rotation_unitary(pulse.theta * self.rabi_frequency_scale, pulse.phi)
        raise TypeError(f"BasicSystem cannot simulate pulse of type {type(pulse).__name__}")

    def measure(self, pulses: Sequence[Pulse]) -> float:
        state = np.array(GROUND_STATE)
        for pulse in pulses:
            state = self.unitary(pulse) @ state
        return excited_state_probability(state)

    def get_metadata_dict(self) -> Dict[str, float]:
        return {
            "System": BasicSystem.SYSTEM_KEY,
            "Perturbation Strength (rad/time)": self.perturbation_strength,
            "Detuning Strength (rad/time)": self.detuning_strength,
            "Rabi Frequency Scale": self.rabi_frequency_scale,
        }
