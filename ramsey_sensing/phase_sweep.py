import logging
from copy import deepcopy
from typing import Callable, Dict, List, Union

import numpy as np
from numpy.typing import NDArray
from pandas import DataFrame

from ramsey_sensing.abstract_classes.abstract_system import System
from ramsey_sensing.basic_system import BasicSystem
from ramsey_sensing.sequences import WaitSequence
from ramsey_sensing.sweep_parameters import SweepParameters

logger = logging.getLogger(__name__)

MeasurementProtocol = Callable[[System, WaitSequence], float]


class SweepHeaders:
    perturbation_strength = "Perturbation Strength (rad/time)"
    ideal_phase = "Ideal Phase (rad)"
    estimated_phase = "Estimated Phase (rad)"
    phase_error = "Phase Error (rad)"


class PhaseSweep:
    """
    Runs a measurement protocol over a wait sequence for each perturbation strength in the sweep
    parameters, with a new system built for each strength.

    The ideal phase is the perturbation strength times the time the perturbation is on in the wait
    sequence. Systems with further parameters can be swept by passing e.g.
    functools.partial(FinitePulseSystem, rabi_frequency=...) as `system_constructor`.
    """

    def __init__(
        self,
        sweep_params: SweepParameters,
        wait_sequence: WaitSequence,
        protocol: MeasurementProtocol,
        system_constructor: Callable[..., System] = BasicSystem,
    ):
        self._sweep_params = deepcopy(sweep_params)
        self._wait_sequence = wait_sequence
        self._protocol = protocol
        self._system_constructor = system_constructor
        self._systems: Union[List[System], None] = None
        self._estimated_phases: Union[NDArray, None] = None

        self._simulate_on_construction()

    @property
    def sweep_params(self) -> SweepParameters:
        return deepcopy(self._sweep_params)

    @property
    def wait_sequence(self) -> WaitSequence:
        return self._wait_sequence

    @property
    def estimated_phases(self) -> NDArray:
        assert self._estimated_phases is not None
        return np.copy(self._estimated_phases)

    @property
    def ideal_phases(self) -> NDArray:
        return np.asarray(self._sweep_params.perturbation_strengths) * self._wait_sequence.perturbation_on_duration

    @property
    def phase_errors(self) -> NDArray:
        return self.estimated_phases - self.ideal_phases

    @property
    def dataframe(self) -> DataFrame:
        df = DataFrame(
            {
                SweepHeaders.perturbation_strength: np.asarray(self._sweep_params.perturbation_strengths),
                SweepHeaders.ideal_phase: self.ideal_phases,
                SweepHeaders.estimated_phase: self.estimated_phases,
                SweepHeaders.phase_error: self.phase_errors,
            }
        )
        return self._append_metadata_columns(df)

    def _simulate_on_construction(self):
        self._systems = [
            self._system_constructor(
                perturbation_strength=perturbation_strength,
                detuning_strength=self._sweep_params.detuning_strength,
                rabi_frequency_scale=self._sweep_params.rabi_frequency_scale,
            )
            for perturbation_strength in self._sweep_params.perturbation_strengths
        ]
        logger.debug("Sweeping %s over %d systems", getattr(self._protocol, "__name__", "protocol"), len(self._systems))
        self._estimated_phases = np.array([self._protocol(system, self._wait_sequence) for system in self._systems])

    def _append_metadata_columns(self, df: DataFrame) -> DataFrame:
        assert self._systems is not None
        metadata: Dict[str, float] = {
            key: datum
            for key, datum in self._systems[0].get_metadata_dict().items()
            if key != SweepHeaders.perturbation_strength
        }
        metadata.update(self._sweep_params.get_metadata_dict())
        metadata.update(self._wait_sequence.get_metadata_dict())

        for key, datum in metadata.items():
            df[key] = datum
        return df
