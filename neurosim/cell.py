"""Cellular building blocks of the network: synapses, dendrites, axons and neurons."""

from __future__ import annotations

import math

RESTING_POTENTIAL_MV = -70.0
DENDRITE_ACTIVE_THRESHOLD_MV = -50.0
DEFAULT_SYNAPSE_THRESHOLD_MV = -50.0
MIN_SYNAPSE_WEIGHT = 0.1
MAX_SYNAPSE_WEIGHT = 10.0
_PI = 3.14159


class Synapse:
    """A chemical synapse that delivers an EPSP or IPSP to dendrites."""

    def __init__(
        self,
        weight: float = 1.0,
        threshold: float = DEFAULT_SYNAPSE_THRESHOLD_MV,
        inhibitory: bool = False,
        max_connections: int = 1,
    ) -> None:
        self.weight = weight
        self.threshold = threshold
        self.inhibitory = inhibitory
        self.max_connections = max_connections
        self.connections: list[Dendrite] = []

    def __repr__(self) -> str:
        kind = "inhibitory" if self.inhibitory else "excitatory"
        return f"Synapse(weight={self.weight}, {kind}, connections={len(self.connections)})"

    @property
    def connection_count(self) -> int:
        return len(self.connections)

    def contribution(self) -> float:
        """Signed change in membrane potential this synapse produces."""
        return -self.weight if self.inhibitory else self.weight

    def transmit(self, membrane_potential: float) -> bool:
        """Whether transmission occurs at the given membrane potential."""
        return membrane_potential + self.contribution() >= self.threshold

    def connect_to_dendrite(self, dendrite: Dendrite | None) -> bool:
        """Attach to a dendrite; False when full or the dendrite refuses."""
        if dendrite is None or len(self.connections) >= self.max_connections:
            return False
        self.connections.append(dendrite)
        return dendrite.add_synapse(self)

    def disconnect_from_dendrite(self, dendrite: Dendrite) -> bool:
        """Detach from one dendrite; False when not connected to it."""
        for position, connected in enumerate(self.connections):
            if connected is dendrite:
                dendrite.remove_synapse(self)
                del self.connections[position]
                return True
        return False

    def disconnect_all(self) -> None:
        """Detach from every connected dendrite."""
        for dendrite in self.connections:
            dendrite.remove_synapse(self)
        self.connections.clear()

    def propagate_signal(self, signal_strength: float) -> None:
        """Deliver an incoming signal to every connected dendrite that it reaches."""
        for dendrite in list(self.connections):
            if self.transmit(signal_strength):
                dendrite.update_membrane_potential()

    def adjust_weight(self, delta: float) -> None:
        """Change the weight, clamped to a realistic EPSP/IPSP range."""
        self.weight = min(MAX_SYNAPSE_WEIGHT, max(MIN_SYNAPSE_WEIGHT, self.weight + delta))


class Dendrite:
    """A dendritic branch that sums the synaptic input it receives."""

    def __init__(
        self,
        length: float = 300.0,
        diameter: float = 2.0,
        spines: int = 5000,
        parent: Neuron | None = None,
    ) -> None:
        self.length = length
        self.diameter = diameter
        self.spine_count = spines
        self.max_synapses = spines
        self.parent = parent
        self.membrane_potential = RESTING_POTENTIAL_MV
        self.is_active = False
        self.synapses: list[Synapse] = []

    def __repr__(self) -> str:
        return (
            f"Dendrite(length={self.length}, diameter={self.diameter}, "
            f"synapses={len(self.synapses)}/{self.max_synapses})"
        )

    @property
    def synapse_count(self) -> int:
        return len(self.synapses)

    def integrate_synaptic_inputs(self) -> float:
        """Sum of the contributions of all attached synapses."""
        return sum(synapse.contribution() for synapse in self.synapses)

    def update_membrane_potential(self) -> None:
        """Recompute the local potential and let the parent neuron react."""
        potential = RESTING_POTENTIAL_MV + self.integrate_synaptic_inputs()
        if potential > RESTING_POTENTIAL_MV:
            potential -= 0.1
        self.membrane_potential = potential
        self.is_active = potential >= DENDRITE_ACTIVE_THRESHOLD_MV
        if self.parent is not None:
            self.parent.update_and_check_spike()

    def add_synapse(self, synapse: Synapse) -> bool:
        """Attach a synapse; False when every spine is taken."""
        if len(self.synapses) >= self.max_synapses:
            return False
        self.synapses.append(synapse)
        return True

    def remove_synapse(self, synapse: Synapse) -> bool:
        """Detach a synapse, keeping the order of the rest."""
        for position, attached in enumerate(self.synapses):
            if attached is synapse:
                del self.synapses[position]
                return True
        return False

    def surface_area(self) -> float:
        """Lateral area of the branch, treated as a cylinder."""
        return _PI * self.diameter * self.length

    def synaptic_density(self) -> float:
        """Synapses per unit of surface area."""
        return len(self.synapses) / self.surface_area()


class Axon:
    """An axon that carries action potentials to its output synapses."""

    def __init__(
        self,
        length: float = 10000.0,
        diameter: float = 1.0,
        myelinated: bool = True,
        max_synapses: int = 1000,
    ) -> None:
        self.length = length
        self.diameter = diameter
        self.myelinated = myelinated
        self.max_synapses = max_synapses
        self.conduction_velocity = (6.0 if myelinated else 0.5) * diameter
        self.output_synapses: list[Synapse] = []

    def __repr__(self) -> str:
        return (
            f"Axon(length={self.length}, diameter={self.diameter}, "
            f"myelinated={self.myelinated}, synapses={len(self.output_synapses)})"
        )

    @property
    def synapse_count(self) -> int:
        return len(self.output_synapses)

    def add_output_synapse(self, synapse: Synapse) -> bool:
        """Attach an output synapse; False when the axon is full."""
        if len(self.output_synapses) >= self.max_synapses:
            return False
        self.output_synapses.append(synapse)
        return True

    def propagate_action_potential(self, amplitude: float = 50.0) -> None:
        """Send an action potential through every output synapse."""
        for synapse in list(self.output_synapses):
            synapse.propagate_signal(amplitude)


class Neuron:
    """A point neuron with dendrites, a single axon and a refractory period."""

    def __init__(
        self,
        soma_diameter: float = 20.0,
        max_dendrites: int = 10,
        excitatory: bool = True,
        type_id: int = 0,
    ) -> None:
        self.soma_diameter = soma_diameter
        self.max_dendrites = max_dendrites
        self.excitatory = excitatory
        self.type_id = type_id
        self.membrane_potential = RESTING_POTENTIAL_MV
        self.resting_potential = RESTING_POTENTIAL_MV
        self.threshold_potential = -50.0
        self.is_spiking = False
        self.refractory_period = 0.0
        self.spike_amplitude = 50.0
        self.dendrites: list[Dendrite] = []
        self.axon = Axon()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(type_id={self.type_id}, "
            f"potential={self.membrane_potential:.2f}, dendrites={len(self.dendrites)})"
        )

    @property
    def dendrite_count(self) -> int:
        return len(self.dendrites)

    def add_dendrite(self, dendrite: Dendrite) -> bool:
        """Attach a dendrite; False when the neuron has no room for more."""
        if len(self.dendrites) >= self.max_dendrites:
            return False
        self.dendrites.append(dendrite)
        return True

    def integrate_inputs(self) -> float:
        """Total synaptic input over all dendrites."""
        return sum(dendrite.integrate_synaptic_inputs() for dendrite in self.dendrites)

    def update_and_check_spike(self) -> bool:
        """Advance one step and return whether the neuron fired."""
        if self.refractory_period > 0.0:
            self.refractory_period -= 1.0
            self.membrane_potential = self.resting_potential
            self.is_spiking = False
            return False

        self.membrane_potential = self.resting_potential + self.integrate_inputs()
        if self.membrane_potential >= self.threshold_potential:
            self.spike()
            return True

        if self.membrane_potential != self.resting_potential:
            decay_factor = 0.9
            self.membrane_potential = (
                self.resting_potential
                + (self.membrane_potential - self.resting_potential) * decay_factor
            )
        return False

    def spike(self) -> None:
        """Fire an action potential and send it down the axon."""
        self.is_spiking = True
        self.membrane_potential = self.spike_amplitude
        self.refractory_period = 2.0
        if self.axon is not None:
            self.axon.propagate_action_potential(self.spike_amplitude)

    def connect_to_neuron(
        self,
        target: Neuron | None,
        target_dendrite_idx: int = 0,
        synapse_weight: float = 1.0,
        inhibitory: bool = False,
    ) -> bool:
        """Create a synapse from this neuron's axon onto a dendrite of ``target``."""
        if target is None or not 0 <= target_dendrite_idx < len(target.dendrites):
            return False
        synapse = Synapse(synapse_weight, DEFAULT_SYNAPSE_THRESHOLD_MV, inhibitory)
        if not self.axon.add_output_synapse(synapse):
            return False
        return synapse.connect_to_dendrite(target.dendrites[target_dendrite_idx])