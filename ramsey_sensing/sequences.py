import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

import numpy as np

from ramsey_sensing.phase_transform import IDENTITY_TRANSFORM, PhaseTransform
from ramsey_sensing.pulses import Delay, Pulse, XYRotation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WaitSequence:
    """
    A sequence of pulses to spend time accumulating a perturbation, along with the transformation
    of the closing phase in a "wrapping" Ramsey experiment that achieves the same measurement
    outcome as a straightforward Ramsey experiment.

    Only the constructors below should pair pulses with a transform, as the transform is derived
    from the same parameters as the pulses.
    """

    pulses: List[Pulse]
    final_phase_transform: PhaseTransform

    @property
    def perturbation_on_duration(self) -> float:
        return sum(pulse.duration for pulse in self.pulses if isinstance(pulse, Delay) and pulse.perturbation_on)

    @property
    def total_duration(self) -> float:
        return sum(pulse.duration for pulse in self.pulses if isinstance(pulse, Delay))

    @property
    def echo_count(self) -> int:
        return sum(1 for pulse in self.pulses if isinstance(pulse, XYRotation))

    def get_metadata_dict(self) -> Dict[str, float]:
        metadata = {
            "Perturbation On Duration": self.perturbation_on_duration,
            "Total Wait Duration": self.total_duration,
            "Echo Pulses": float(self.echo_count),
        }
        metadata.update(self.final_phase_transform.get_metadata_dict())
        return metadata


def trivial_wait_sequence(perturbation_duration: float) -> WaitSequence:
    """
    Constructs a trivial wait sequence consisting of a single delay of the given time.
    """
    return WaitSequence([Delay(perturbation_duration, True)], IDENTITY_TRANSFORM)


def spin_echo_wait_sequence(perturbation_duration: float, echo_phase: float, on_in_first: bool = True) -> WaitSequence:
    """
    Constructs a spin echo wait sequence with the given phase for the spin-echo pulse.
    `on_in_first` determines whether the perturbation is on during the first or second half.
    """
    pulses: List[Pulse] = [
        Delay(perturbation_duration, on_in_first),
        XYRotation(np.pi, echo_phase),
        Delay(perturbation_duration, not on_in_first),
    ]
    transform = PhaseTransform(2 * echo_phase + np.pi, (-1) ** on_in_first)
    return WaitSequence(pulses, transform)


def multi_spin_echo_phase_transform(echo_phases: Sequence[float], on_in_first: bool = True) -> PhaseTransform:
    """
    Closing phase transform for a train of π pulses with the given phases.

    Each π pulse at phase ϕ reflects the equatorial Bloch vector about its axis, which maps the
    azimuth α to 2ϕ - α. Folding this over the echo phases starting from the -Y state prepared by
    the opening pulse gives the "null" phase expected at the end without any perturbation.
    """
    null_phase = -np.pi / 2
    for phase in echo_phases:
        null_phase = np.mod(2 * phase - null_phase, 2 * np.pi)
    is_even = len(echo_phases) % 2 == 0
    return PhaseTransform(float(null_phase + np.pi / 2), (-1) ** (on_in_first ^ is_even))


def multi_spin_echo_wait_sequence(
    total_perturbation_duration: float, echo_phases: Sequence[float], on_in_first: bool = True
) -> WaitSequence:
    """
    Constructs a "multi-spin echo" wait sequence consisting of multiple π pulses with the given
    phases, where the total time spent with the perturbation on is `total_perturbation_duration`.

    The perturbation is on during alternating intervals; `on_in_first` determines which.

    For an even number of π pulses, the number of intervals between the bracketing π/2 pulses is
    odd. As such, the first/last delays are made half the duration to keep the overall time spent
    "in each parity" constant.
    """
    if len(echo_phases) == 0:
        raise ValueError("Multi-spin echo wait sequence needs at least one echo phase")

    perturbation_duration = total_perturbation_duration / ((len(echo_phases) + 1) // 2)

    echo_pulses: List[Pulse] = [XYRotation(np.pi, echo_phases[0])]
    on_in_next = not on_in_first
    for phase in echo_phases[1:]:
        echo_pulses.append(Delay(perturbation_duration, on_in_next))
        on_in_next = not on_in_next
        echo_pulses.append(XYRotation(np.pi, phase))

    if len(echo_phases) % 2 == 0:
        pulses = [
            Delay(perturbation_duration / 2, on_in_first),
            *echo_pulses,
            Delay(perturbation_duration / 2, on_in_first),
        ]
    else:
        pulses = [
            Delay(perturbation_duration, on_in_first),
            *echo_pulses,
            Delay(perturbation_duration, not on_in_first),
        ]

    logger.debug(
        "Built multi-spin echo with %d echo pulses, interval duration %g", len(echo_phases), perturbation_duration
    )
    return WaitSequence(pulses, multi_spin_echo_phase_transform(echo_phases, on_in_first))


def ramsey_sequence(wait_pulses: Sequence[Pulse], final_phase: float) -> List[Pulse]:
    """
    Constructs a Ramsey sequence around the given wait pulses: an X π/2 pulse, the wait pulses, and a
    π/2 pulse with the given final phase.
    """
    return [XYRotation(np.pi / 2, 0.0), *wait_pulses, XYRotation(np.pi / 2, final_phase)]
