"""Specialised neuron types with their characteristic morphology."""

from __future__ import annotations

from neurosim.cell import Axon, Dendrite, Neuron


class PyramidalNeuron(Neuron):
    """The most common excitatory cortical neuron."""

    def __init__(self) -> None:
        super().__init__(25.0, 15, True, 1)
        for length, diameter, spines in (
            (800.0, 3.0, 8000),  # apical
            (400.0, 2.0, 3000),
            (350.0, 2.0, 2500),
            (300.0, 1.8, 2000),
        ):
            self.add_dendrite(Dendrite(length, diameter, spines, self))


class Interneuron(Neuron):
    """An inhibitory local-circuit neuron with small, easily triggered spikes."""

    def __init__(self) -> None:
        super().__init__(15.0, 8, False, 2)
        self.spike_amplitude = 40.0
        self.threshold_potential = -45.0
        for length, diameter, spines in (
            (200.0, 1.5, 1000),
            (180.0, 1.5, 800),
            (160.0, 1.4, 600),
        ):
            self.add_dendrite(Dendrite(length, diameter, spines, self))


class PurkinjeNeuron(Neuron):
    """A cerebellar Purkinje cell with an extensive dendritic tree."""

    def __init__(self) -> None:
        super().__init__(30.0, 20, False, 3)
        self.spike_amplitude = 60.0
        for branch in range(8):
            self.add_dendrite(Dendrite(600.0 + branch * 50.0, 2.5, 15000, self))


class MotorNeuron(Neuron):
    """A motor neuron with large dendrites and a long myelinated axon."""

    def __init__(self) -> None:
        super().__init__(40.0, 12, True, 4)
        self.spike_amplitude = 70.0
        for _ in range(6):
            self.add_dendrite(Dendrite(500.0, 4.0, 5000, self))
        self.axon = Axon(100000.0, 15.0, True, 100)


class SensoryNeuron(Neuron):
    """A sensory neuron with a few specialised dendrites."""

    def __init__(self) -> None:
        super().__init__(18.0, 6, True, 5)
        self.threshold_potential = -55.0
        for length, diameter, spines in (
            (250.0, 2.0, 1500),
            (200.0, 1.8, 1200),
        ):
            self.add_dendrite(Dendrite(length, diameter, spines, self))