import numpy as np
from numpy.typing import NDArray


def _read_only(matrix: NDArray) -> NDArray:
    matrix.setflags(write=False)
    return matrix


IDENTITY = _read_only(np.array([[1, 0], [0, 1]], dtype=complex))
SIGMA_X = _read_only(np.array([[0, 1], [1, 0]], dtype=complex))
SIGMA_Y = _read_only(np.array([[0, -1j], [1j, 0]], dtype=complex))

GROUND_STATE = _read_only(np.array([1, 0], dtype=complex))


def xy_rotation_unitary(theta: float, phi: float) -> NDArray:
    """
    The single-qubit unitary for a rotation by theta around the axis in the xy plane of the
    Bloch sphere with azimuthal angle phi.
    """
    return np.cos(theta / 2) * IDENTITY - 1.0j * np.sin(theta / 2) * (np.cos(phi) * SIGMA_X + np.sin(phi) * SIGMA_Y)


def phase_accumulation_unitary(frequency_rad: float, duration: float) -> NDArray:
    return np.array([[1, 0], [0, np.exp(1.0j * frequency_rad * duration)]], dtype=complex)


def excited_state_probability(state: NDArray) -> float:
    # Renormalised against rounding drift, never clipped.
    return float(np.abs(state[1]) ** 2 / np.sum(np.abs(state) ** 2))
