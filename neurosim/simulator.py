"""Network simulation of ten neurons under normal and metabolically impaired conditions."""

from __future__ import annotations

import argparse
import copy
import logging
import math
import os
import random
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from pathlib import Path

from neurosim.cell import Neuron
from neurosim.neuron_types import (
    Interneuron,
    MotorNeuron,
    PurkinjeNeuron,
    PyramidalNeuron,
    SensoryNeuron,
)

logger = logging.getLogger(__name__)

NEURON_COUNT = 10
TARGET_ACTIVITY_MV = -65.0

_NETWORK_LAYOUT = (
    PyramidalNeuron,
    PyramidalNeuron,
    PyramidalNeuron,
    PyramidalNeuron,
    Interneuron,
    PurkinjeNeuron,
    MotorNeuron,
    MotorNeuron,
    SensoryNeuron,
    SensoryNeuron,
)


@dataclass
class SimulationData:
    """Everything recorded during one simulation run."""

    membrane_potentials: list[list[float]] = field(default_factory=list)
    spike_events: list[tuple[int, int]] = field(default_factory=list)
    spikes_per_timestep: list[int] = field(default_factory=list)
    network_activity: list[float] = field(default_factory=list)
    total_timesteps: int = 0
    total_spikes: int = 0


@dataclass
class StabilityMetrics:
    """Measures of how regular and homeostatic the network activity was."""

    coefficient_of_variation: float = 0.0
    burst_coefficient: float = 0.0
    synchrony_index: float = 0.0
    entropy: float = 0.0
    lyapunov_exponent: float = 0.0
    homeostatic_deviation: float = 0.0
    network_coherence: float = 0.0
    critical_branching_ratio: float = 0.0


@dataclass(frozen=True)
class MetabolicCondition:
    """A metabolic disturbance and the moment it sets in."""

    name: str
    glucose_level: float
    atp_efficiency: float
    ion_pump_function: float
    neurotransmitter_synthesis: float
    membrane_integrity: float
    oxidative_stress: float
    progressive: bool
    onset_timestep: int


def create_hypoglycemia() -> MetabolicCondition:
    """Severe low blood glucose."""
    return MetabolicCondition("Severe Hypoglycemia", 35.0, 0.3, 0.4, 0.5, 0.8, 2.5, True, 1000)


def create_diabetes_ketoacidosis() -> MetabolicCondition:
    """Very high blood glucose with ketoacidosis."""
    return MetabolicCondition("Diabetic Ketoacidosis", 350.0, 0.6, 0.3, 0.4, 0.6, 3.5, True, 800)


def create_hypoxia() -> MetabolicCondition:
    """Oxygen starvation of the brain."""
    return MetabolicCondition("Cerebral Hypoxia", 85.0, 0.1, 0.2, 0.3, 0.5, 4.0, True, 500)


def create_mitochondrial_dysfunction() -> MetabolicCondition:
    """Impaired mitochondrial energy production."""
    return MetabolicCondition(
        "Mitochondrial Dysfunction", 90.0, 0.4, 0.6, 0.7, 0.7, 3.0, False, 200
    )


def _fmt(value: float) -> str:
    return f"{value:g}"


class NeuronSimulator:
    """Runs a small mixed network and records its activity."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.neurons: list[Neuron] = []
        self.data = SimulationData()

    def simulation_data(self) -> SimulationData:
        """A copy of the data recorded by the last run."""
        return copy.deepcopy(self.data)

    def _initialize_neurons(self) -> None:
        self.neurons = [neuron_type() for neuron_type in _NETWORK_LAYOUT]

    def _create_random_connections(self, connection_density: int = 6) -> None:
        rng = self.rng
        for source_id, source in enumerate(self.neurons):
            for _ in range(connection_density):
                target_id = rng.randrange(NEURON_COUNT)
                target = self.neurons[target_id]
                if target_id == source_id or target.dendrite_count <= 0:
                    continue
                dendrite_idx = rng.randrange(target.dendrite_count)
                weight = 1.5 + rng.random() * 3.0
                inhibitory = not source.excitatory or rng.randrange(8) == 0
                source.connect_to_neuron(target, dendrite_idx, weight, inhibitory)

    def _reset(self) -> None:
        self.data.membrane_potentials.clear()
        self.data.spike_events.clear()
        self.data.network_activity.clear()
        self._initialize_neurons()
        self._create_random_connections()

    def _collect_membrane_data(self) -> None:
        potentials = [neuron.membrane_potential for neuron in self.neurons]
        self.data.membrane_potentials.append(potentials)
        self.data.network_activity.append(sum(potentials) / NEURON_COUNT)

    def _stimulate_random_neuron(self) -> None:
        self.neurons[self.rng.randrange(NEURON_COUNT)].spike()

    def _apply_background_activity(self, noise_probability: float = 0.3) -> None:
        for neuron in self.neurons:
            if self.rng.random() < noise_probability and self.rng.random() < 0.25:
                neuron.spike()

    def _update_neurons(self, timestep: int) -> int:
        fired = 0
        for neuron_id, neuron in enumerate(self.neurons):
            if neuron.update_and_check_spike():
                fired += 1
                self.data.spike_events.append((timestep, neuron_id))
        return fired

    def run_standard_simulation(self, max_timesteps: int = 5000) -> None:
        """Run the network with periodic stimulation and background noise."""
        self._reset()
        total_spikes = 0
        timestep = 0
        while timestep < max_timesteps:
            self._collect_membrane_data()
            if timestep % 2 == 0:
                self._stimulate_random_neuron()
            self._apply_background_activity(0.6)
            total_spikes += self._update_neurons(timestep)
            timestep += 1
        self.data.total_timesteps = timestep
        self.data.total_spikes = total_spikes

    def _apply_metabolic_dysfunction(
        self, condition: MetabolicCondition, current_timestep: int
    ) -> None:
        if current_timestep < condition.onset_timestep:
            return
        rng = self.rng

        time_factor = 1.0
        if condition.progressive:
            time_factor = min(
                1.0 + (current_timestep - condition.onset_timestep) * 0.001, 3.0
            )

        if condition.glucose_level < 50.0 and rng.randrange(20) == 0:
            if time_factor < 2.0:
                logger.info("Hypoglycemia: Reduced excitability")
            elif rng.randrange(10) == 0:
                self._stimulate_random_neuron()
                logger.info("Severe hypoglycemia: Depolarization block!")

        if condition.glucose_level > 250.0 and rng.randrange(15) == 0:
            for _ in range(3):
                self._stimulate_random_neuron()

        if condition.atp_efficiency < 0.2 and rng.randrange(5) == 0:
            for _ in range(5):
                self._stimulate_random_neuron()

    def run_metabolic_dysfunction_simulation(
        self, condition: MetabolicCondition, max_timesteps: int = 3000
    ) -> None:
        """Run the network and impose ``condition`` from its onset on."""
        self._reset()
        logger.info("Running %s simulation...", condition.name)

        dysfunction_phase = False
        timestep = 0
        while timestep < max_timesteps:
            if timestep == condition.onset_timestep and not dysfunction_phase:
                logger.info("Metabolic dysfunction onset at timestep %d", timestep)
                dysfunction_phase = True

            if dysfunction_phase:
                self._apply_metabolic_dysfunction(condition, timestep)

            self._collect_membrane_data()

            stimulation_probability = (
                max(0.1, 0.5 * condition.atp_efficiency) if dysfunction_phase else 0.5
            )
            if self.rng.random() < stimulation_probability:
                self._stimulate_random_neuron()

            self._update_neurons(timestep)
            timestep += 1

        self.data.total_timesteps = timestep
        self.data.total_spikes = len(self.data.spike_events)

    def calculate_stability_metrics(self) -> StabilityMetrics:
        """Spike-interval variability and deviation from the target activity."""
        metrics = StabilityMetrics()

        spike_times: defaultdict[int, list[int]] = defaultdict(list)
        for timestep, neuron_id in self.data.spike_events:
            spike_times[neuron_id].append(timestep)
        intervals = [
            later - earlier
            for neuron_id in range(NEURON_COUNT)
            for earlier, later in zip(spike_times[neuron_id], spike_times[neuron_id][1:])
        ]
        if intervals:
            mean = sum(intervals) / len(intervals)
            variance = sum((interval - mean) ** 2 for interval in intervals) / len(intervals)
            metrics.coefficient_of_variation = math.sqrt(variance) / mean if mean > 0 else 0.0

        activity = self.data.network_activity
        if activity:
            mean_activity = sum(activity) / len(activity)
            metrics.homeostatic_deviation = abs(mean_activity - TARGET_ACTIVITY_MV)

        return metrics

    def export_csv_data(self, prefix: str | os.PathLike[str] = "") -> None:
        """Write membrane potentials, the spike raster and an activity summary."""
        base = os.fspath(prefix)
        data = self.data

        with open(base + "membrane_potentials.csv", "w", encoding="utf-8", newline="") as out:
            header = ",".join(f"Neuron_{i}" for i in range(NEURON_COUNT))
            out.write(f"Timestep,{header}\n")
            for timestep, potentials in enumerate(data.membrane_potentials):
                values = ",".join(_fmt(value) for value in potentials[:NEURON_COUNT])
                out.write(f"{timestep},{values}\n")

        with open(base + "spike_raster.csv", "w", encoding="utf-8", newline="") as out:
            out.write("Timestep,Neuron_ID\n")
            for timestep, neuron_id in data.spike_events:
                out.write(f"{timestep},{neuron_id}\n")

        with open(base + "activity_summary.csv", "w", encoding="utf-8", newline="") as out:
            out.write("Timestep,Average_Potential,Spike_Count\n")
            spike_counts = Counter(
                timestep
                for timestep, _ in data.spike_events
                if 0 <= timestep < data.total_timesteps
            )
            for timestep, average in enumerate(data.network_activity):
                out.write(f"{timestep},{_fmt(average)},{spike_counts[timestep]}\n")

    def run_metabolic_dysfunction_studies(
        self, directory: str | os.PathLike[str] = "."
    ) -> list[tuple[MetabolicCondition, StabilityMetrics]]:
        """Simulate every predefined condition and export each run's data."""
        conditions = [
            create_hypoglycemia(),
            create_diabetes_ketoacidosis(),
            create_hypoxia(),
            create_mitochondrial_dysfunction(),
        ]
        logger.info("Running metabolic dysfunction studies...")

        results = []
        for number, condition in enumerate(conditions, start=1):
            logger.info("\nStudy %d/%d: %s", number, len(conditions), condition.name)
            self.run_metabolic_dysfunction_simulation(condition, 2000)

            safe_name = condition.name.replace(" ", "_")
            self.export_csv_data(Path(directory) / f"{safe_name}_")

            metrics = self.calculate_stability_metrics()
            logger.info(
                "CV: %s, Homeostatic deviation: %s",
                _fmt(metrics.coefficient_of_variation),
                _fmt(metrics.homeostatic_deviation),
            )
            results.append((condition, metrics))
        return results


def main(argv: list[str] | None = None) -> int:
    """Run the metabolic studies, or a standard simulation with ``--standard``."""
    parser = argparse.ArgumentParser(
        prog="neurosim",
        description="Neural network simulator with metabolic dysfunction.",
    )
    parser.add_argument("--standard", action="store_true", help="run a standard simulation")
    parser.add_argument("--timesteps", type=int, default=5000, help="steps of a standard run")
    parser.add_argument("--output-dir", default=".", help="where CSV files are written")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    simulator = NeuronSimulator(random.Random(args.seed))
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if args.standard:
        simulator.run_standard_simulation(args.timesteps)
        simulator.export_csv_data(f"{output_dir}{os.sep}")
        metrics = simulator.calculate_stability_metrics()
        data = simulator.data
        print(f"Timesteps: {data.total_timesteps}, spikes: {data.total_spikes}")
        print(
            f"CV: {_fmt(metrics.coefficient_of_variation)}, "
            f"Homeostatic deviation: {_fmt(metrics.homeostatic_deviation)}"
        )
    else:
        simulator.run_metabolic_dysfunction_studies(output_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())