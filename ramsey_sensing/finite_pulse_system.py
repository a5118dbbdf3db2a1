from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np
from numpy.typing import NDArray
from qutip import Qobj, basis, sigmax, sigmay

from ramsey_sensing.abstract_classes.abstract_system import System
from ramsey_sensing.pulses import Delay, Pulse, XYRotation
from ramsey_sensing.unitary_manipulation import GROUND_STATE, excited_state_probability


@dataclass(frozen=True)
class FinitePulseSystem(System):
    """
    A unitary system where rotations are driven at a finite Rabi frequency, so each rotation takes
    a time |θ| / rabi_frequency during which the detuning keeps acting (the perturbation is always
    off during pulses). With zero detuning, this reproduces BasicSystem.

    Args:
        perturbation_strength (float): Strength of the perturbation to measure, in rad/unit time
        detuning_strength (float): Strength of a constant detuning, in rad/unit time
        rabi_frequency_scale (float): Scale factor on the drive amplitude (coherent area error)
        rabi_frequency (float): Nominal Rabi frequency, in rad/unit time
    """

    SYSTEM_KEY = 2.0

    perturbation_strength: float
    detuning_strength: float
    rabi_frequency_scale: float = 1.0
    rabi_frequency: float = 2 * np.pi

    def __post_init__(self) -> None:
        if self.rabi_frequency <= 0:
            raise ValueError(f"rabi_frequency must be positive, got {self.rabi_frequency}")

    @staticmethod
    def _excited_state_projector() -> Qobj:
        return basis(2, 1) * basis(2, 1).dag()

    def _internal_hamiltonian(self, perturbation_on: bool) -> Qobj:
        frequency_rad = self.detuning_strength
        if perturbation_on:
            frequency_rad += self.perturbation_strength
        return -float(frequency_rad) * FinitePulseSystem._excited_state_projector()

    def _control_hamiltonian(self, drive_sign: float, phase_rad: float) -> Qobj:
        amplitude = drive_sign * self.rabi_frequency * self.rabi_frequency_scale / 2
        return amplitude * (float(np.cos(phase_rad)) * sigmax() + float(np.sin(phase_rad)) * sigmay())

    def unitary(self, pulse: Pulse) -> NDArray:
        if isinstance(pulse, Delay):
            hamiltonian = self._internal_hamiltonian(pulse.perturbation_on)
            duration = pulse.duration
        elif isinstance(pulse, XYRotation):
            hamiltonian = self._internal_hamiltonian(False) + self._control_hamiltonian(
                float(np.sign(pulse.theta)), pulse.phi
            )
            duration = abs(pulse.theta) / self.rabi_frequency
        else:
            raise TypeError(f"FinitePulseSystem cannot simulate pulse of type {type(pulse).__name__}")
        return (-1.0j * duration * hamiltonian).expm().full()

    def measure(self, pulses: Sequence[Pulse]) -> float:
        state = np.array(GROUND_STATE)
        for pulse in pulses:
            state = self.unitary(pulse) @ state
        return excited_state_probability(state)

    def get_metadata_dict(self) -> Dict[str, float]:
        return {
            "System": FinitePulseSystem.SYSTEM_KEY,
            "Perturbation Strength (rad/time)": self.perturbation_strength,
            "Detuning Strength (rad/time)": self.detuning_strength,
            "Rabi Frequency Scale": self.rabi_frequency_scale,
            "Rabi Frequency (rad/time)": self.rabi_frequency,
        }
