from copy import deepcopy
from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np


@dataclass
class SweepParameters:
    perturbation_strengths: Sequence[float]
    detuning_strength: float
    rabi_frequency_scale: float

    def get_metadata_dict(self) -> Dict[str, float]:
        return {
            "Sweep Detuning Strength (rad/time)": self.detuning_strength,
            "Sweep Rabi Frequency Scale": self.rabi_frequency_scale,
        }


class SweepParametersFactory:
    def __init__(self):
        self._sweep_parameters = SweepParameters(
            np.linspace(-np.pi / 2, np.pi / 2, 101),
            0.0,
            1.0,
        )

    @staticmethod
    def _has_at_least_one_element(sequence: Sequence[float]) -> None:
        assert len(sequence) >= 1, "Perturbation strength sequence must have at least one element"

    def set_perturbation_strengths(self, perturbation_strengths: Sequence[float]) -> None:
        self._has_at_least_one_element(perturbation_strengths)
        self._sweep_parameters.perturbation_strengths = perturbation_strengths

    def set_detuning(self, detuning_strength: float) -> None:
        self._sweep_parameters.detuning_strength = detuning_strength

    def set_rabi_frequency_scale(self, rabi_frequency_scale: float) -> None:
        assert rabi_frequency_scale > 0, "Rabi frequency scale must be positive"
        self._sweep_parameters.rabi_frequency_scale = rabi_frequency_scale

    def get_sweep_parameters(self) -> SweepParameters:
        return deepcopy(self._sweep_parameters)
