from abc import ABC, abstractmethod
from typing import Dict, Sequence

from ramsey_sensing.pulses import Pulse


class System(ABC):
    """
    A description of a physical system.

    Implementations give the measured spin flip probability for an ideal pulse sequence under the
    conditions they describe, i.e. if |0⟩ is the initial state, the probability of measuring |1⟩
    (which is |⟨1|ψ⟩|² for the final state |ψ⟩).
    """

    @abstractmethod
    def measure(self, pulses: Sequence[Pulse]) -> float:
        pass

    @abstractmethod
    def get_metadata_dict(self) -> Dict[str, float]:
        pass


def measure(system: System, pulses: Sequence[Pulse]) -> float:
    return system.measure(pulses)
