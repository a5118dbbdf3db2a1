import numpy as np

from ramsey_sensing.abstract_classes.abstract_system import System
from ramsey_sensing.sequences import WaitSequence, ramsey_sequence


def measure_simple_ramsey(system: System, wait_sequence: WaitSequence, flip_analysis: bool = False) -> float:
    """
    Measures the phase accumulation over the given WaitSequence using a simple Ramsey experiment by
    first doing an X π/2 pulse (which makes the state |-Y⟩), and then measuring in the X basis (via a
    ±π/2 pulse) to determine the amount the Bloch vector has rotated by (if any).

    This works only in the range [-π/2, π/2], as the expectation value is the sin() of the accumulated
    angle, so ambiguous beyond that. Outside of this range the returned value is silently wrapped.

    If `flip_analysis` is true, the measurement is performed in the -X direction instead, and the
    result is negated (asin(⟨X⟩) = -asin(⟨-X⟩)).
    """
    final_phase = wait_sequence.final_phase_transform(np.pi / 2 if flip_analysis else -np.pi / 2)
    x_expected = 1 - 2 * system.measure(ramsey_sequence(wait_sequence.pulses, final_phase))
    return float(np.arcsin(x_expected) * (-1 if flip_analysis else 1))


def measure_four_point_ramsey(system: System, wait_sequence: WaitSequence) -> float:
    """
    Measures the phase accumulation over the given WaitSequence using a "four-point" Ramsey experiment,
    where first an X π/2 pulse prepares the |-Y⟩ state, and after the wait sequence, the expectation
    value is measured along all four ±X, ±Y directions.

    This reconstructs the entire xy part of the Bloch vector including signs, and as such works across
    the [-π, π] range. It is also robust against a shrinking Bloch vector, which would cause the simple
    Ramsey method to under-report the accumulated angle.

    Using both the positive and negative signs of each axis also rejects constant readout bias (e.g. if
    |1⟩ is sometimes read out as 0), as the bias cancels in each difference.
    """

    def meas(final_phase: float) -> float:
        pulses = ramsey_sequence(wait_sequence.pulses, wait_sequence.final_phase_transform(final_phase))
        return system.measure(pulses)

    x_expected = meas(np.pi / 2) - meas(-np.pi / 2)
    y_expected = meas(np.pi) - meas(0.0)
    return float(np.arctan2(x_expected, -y_expected))
