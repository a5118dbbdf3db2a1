from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class PhaseTransform:
    """
    An affine map phi -> offset + sign * phi of the analysis phase of the closing π/2 pulse in a
    Ramsey experiment. Used to compensate for the phase imparted by echo pulses within a wait
    sequence, so that the same closing phases as in a plain Ramsey experiment can be requested.
    """

    offset: float = 0.0
    sign: int = 1

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError(f"Phase transform sign must be +1 or -1, got {self.sign}")

    def __call__(self, phi: float) -> float:
        return self.offset + self.sign * phi

    def get_metadata_dict(self) -> Dict[str, float]:
        return {"Final Phase Offset (rad)": self.offset, "Final Phase Sign": float(self.sign)}


IDENTITY_TRANSFORM = PhaseTransform()
