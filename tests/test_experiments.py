import unittest

import numpy as np

from ramsey_sensing.basic_system import BasicSystem
from ramsey_sensing.experiments import measure_four_point_ramsey, measure_simple_ramsey
from ramsey_sensing.sequences import (
    WaitSequence,
    multi_spin_echo_wait_sequence,
    spin_echo_wait_sequence,
    trivial_wait_sequence,
)

DETUNINGS = [-1.3, -0.2, 0.45, 2.0]
DURATIONS = [0.1, 0.5, 1.0, 2.5]
ECHO_PHASES = [0.0, np.pi / 4, np.pi / 2, 2.7, -1.0]
BOUNDARY_ECHO_PHASE_COUNT = 401
FULL_RANGE_PHASES = [-np.pi + 1e-3, -2.5, -np.pi / 2, -0.3, 0.0, 0.3, np.pi / 2, 2.5, np.pi - 1e-3]


class TestSimpleRamsey(unittest.TestCase):
    def test_zero_duration_gives_zero_phase(self) -> None:
        system = BasicSystem(perturbation_strength=0.0, detuning_strength=0.0)
        self.assertAlmostEqual(measure_simple_ramsey(system, trivial_wait_sequence(0.0)), 0.0)

    def test_detuning_phase(self) -> None:
        for detuning in DETUNINGS:
            for duration in DURATIONS:
                if abs(detuning * duration) > np.pi / 2:
                    continue
                system = BasicSystem(perturbation_strength=0.0, detuning_strength=detuning)
                for flip_analysis in [False, True]:
                    with self.subTest(detuning=detuning, duration=duration, flip_analysis=flip_analysis):
                        self.assertAlmostEqual(
                            measure_simple_ramsey(system, trivial_wait_sequence(duration), flip_analysis=flip_analysis),
                            detuning * duration,
                        )

    def test_perturbation_phase(self) -> None:
        system = BasicSystem(perturbation_strength=0.8, detuning_strength=0.0)
        self.assertAlmostEqual(measure_simple_ramsey(system, trivial_wait_sequence(1.5)), 1.2)

    def test_phase_outside_range_is_wrapped(self) -> None:
        system = BasicSystem(perturbation_strength=2.0, detuning_strength=0.0)
        self.assertAlmostEqual(measure_simple_ramsey(system, trivial_wait_sequence(1.0)), np.pi - 2.0)

    def test_phase_at_range_boundary(self) -> None:
        echo_phases = list(np.linspace(-np.pi, np.pi, BOUNDARY_ECHO_PHASE_COUNT)) + [-2.9684336381820478]
        for phase in [np.pi / 2, -np.pi / 2]:
            system = BasicSystem(perturbation_strength=phase, detuning_strength=0.0)
            for echo_phase in echo_phases:
                for flip_analysis in [False, True]:
                    result = measure_simple_ramsey(
                        system, spin_echo_wait_sequence(1.0, echo_phase), flip_analysis=flip_analysis
                    )
                    with self.subTest(phase=phase, echo_phase=echo_phase, flip_analysis=flip_analysis):
                        self.assertTrue(np.isfinite(result))
                        self.assertAlmostEqual(result, phase, places=6)

    def test_spin_echo_small_phase(self) -> None:
        system = BasicSystem(perturbation_strength=0.4, detuning_strength=1.1)
        for echo_phase in ECHO_PHASES:
            with self.subTest(echo_phase=echo_phase):
                self.assertAlmostEqual(measure_simple_ramsey(system, spin_echo_wait_sequence(1.0, echo_phase)), 0.4)


class TestFourPointRamsey(unittest.TestCase):
    def test_full_range(self) -> None:
        for phase in FULL_RANGE_PHASES:
            system = BasicSystem(perturbation_strength=0.0, detuning_strength=phase)
            with self.subTest(phase=phase):
                self.assertAlmostEqual(measure_four_point_ramsey(system, trivial_wait_sequence(1.0)), phase)

    def test_matches_simple_ramsey_in_range(self) -> None:
        system = BasicSystem(perturbation_strength=0.7, detuning_strength=-0.3)
        wait_sequence = trivial_wait_sequence(1.2)
        self.assertAlmostEqual(
            measure_four_point_ramsey(system, wait_sequence), measure_simple_ramsey(system, wait_sequence)
        )

    def test_spin_echo_cancels_detuning(self) -> None:
        for detuning in DETUNINGS:
            for duration in DURATIONS:
                system = BasicSystem(perturbation_strength=0.0, detuning_strength=detuning)
                for echo_phase in ECHO_PHASES:
                    wait_sequence = spin_echo_wait_sequence(duration, echo_phase)
                    with self.subTest(detuning=detuning, duration=duration, echo_phase=echo_phase):
                        self.assertAlmostEqual(measure_four_point_ramsey(system, wait_sequence), 0.0)

    def test_spin_echo_perturbation_phase(self) -> None:
        perturbation_strength = 0.9
        duration = 1.5
        system = BasicSystem(perturbation_strength=perturbation_strength, detuning_strength=0.35)
        for echo_phase in ECHO_PHASES:
            for on_in_first in [True, False]:
                wait_sequence = spin_echo_wait_sequence(duration, echo_phase, on_in_first=on_in_first)
                with self.subTest(echo_phase=echo_phase, on_in_first=on_in_first):
                    self.assertAlmostEqual(
                        measure_four_point_ramsey(system, wait_sequence), perturbation_strength * duration
                    )

    def test_spin_echo_with_perturbation_in_both_halves_cancels(self) -> None:
        system = BasicSystem(perturbation_strength=0.9, detuning_strength=0.0)
        spin_echo = spin_echo_wait_sequence(1.0, 0.0)
        pulses = list(spin_echo.pulses)
        pulses[-1] = pulses[0]
        both_halves = WaitSequence(pulses, spin_echo.final_phase_transform)
        self.assertAlmostEqual(measure_four_point_ramsey(system, both_halves), 0.0)

    def test_multi_spin_echo_perturbation_phase(self) -> None:
        perturbation_strength = 0.6
        total_duration = 2.0
        system = BasicSystem(perturbation_strength=perturbation_strength, detuning_strength=-0.8)
        for number_of_echoes in range(1, 8):
            echo_phases = (ECHO_PHASES * 2)[:number_of_echoes]
            for on_in_first in [True, False]:
                wait_sequence = multi_spin_echo_wait_sequence(total_duration, echo_phases, on_in_first=on_in_first)
                with self.subTest(number_of_echoes=number_of_echoes, on_in_first=on_in_first):
                    self.assertAlmostEqual(
                        measure_four_point_ramsey(system, wait_sequence), perturbation_strength * total_duration
                    )

    def test_area_error_stays_in_range(self) -> None:
        wait_sequence = multi_spin_echo_wait_sequence(1.0, [0.0, np.pi / 2, 0.0, np.pi / 2])
        for rabi_frequency_scale in [0.8, 0.95, 1.05, 1.2]:
            system = BasicSystem(
                perturbation_strength=0.5, detuning_strength=0.2, rabi_frequency_scale=rabi_frequency_scale
            )
            phase = measure_four_point_ramsey(system, wait_sequence)
            with self.subTest(rabi_frequency_scale=rabi_frequency_scale):
                self.assertTrue(-np.pi <= phase <= np.pi)


if __name__ == "__main__":
    unittest.main()
