# neurosim

A small spiking neural network simulator. It builds a network of ten
neurons (four pyramidal cells, an interneuron, a Purkinje cell, two motor
neurons and two sensory neurons), wires them together at random through
synapses and dendrites, and steps the network through time while recording
membrane potentials and spike events. Besides the standard run it can
simulate metabolic dysfunction (severe hypoglycemia, diabetic ketoacidosis,
cerebral hypoxia and mitochondrial dysfunction) and compute simple
stability metrics.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
neurosim
```

runs the metabolic dysfunction studies: each predefined condition is
simulated for 2000 timesteps, its results are written as three CSV files
whose names start with the condition's name (spaces replaced by
underscores, e.g. `Cerebral_Hypoxia_spike_raster.csv`), and the coefficient
of variation of inter-spike intervals and the homeostatic deviation are
logged for each study.

Options:

- `--standard` – run one standard simulation instead of the studies; its
  CSV files are written without a prefix and the timestep count, spike count
  and the two metrics are printed
- `--timesteps N` – number of steps of the standard run (default 5000)
- `--output-dir DIR` – directory the CSV files go to (default: current
  directory; created if missing)
- `--seed N` – seed for the random number generator, for reproducible runs

## Library use

```python
import random

from neurosim.simulator import NeuronSimulator, create_hypoxia

sim = NeuronSimulator(random.Random(42))

# A plain run with periodic stimulation and background noise.
sim.run_standard_simulation(500)
metrics = sim.calculate_stability_metrics()
print(metrics.coefficient_of_variation, metrics.homeostatic_deviation)

# A run in which a metabolic condition sets in part-way through.
sim.run_metabolic_dysfunction_simulation(create_hypoxia(), 1000)
sim.export_csv_data("hypoxia_")

data = sim.simulation_data()  # a copy of the recorded SimulationData
print(data.total_timesteps, data.total_spikes)
```

`NeuronSimulator` takes an optional `random.Random`; without one it uses a
fresh, unseeded generator. Each run rebuilds and rewires the network and
replaces the recorded data.

`export_csv_data(prefix)` writes three files, each name starting with the
prefix:

- `membrane_potentials.csv` – one row per timestep, one column per neuron
- `spike_raster.csv` – one row per spike: timestep and neuron id
- `activity_summary.csv` – mean network potential and spike count per timestep

`run_metabolic_dysfunction_studies(directory)` runs every predefined
condition, exports each run into `directory`, and returns a list of
`(MetabolicCondition, StabilityMetrics)` pairs.

### Predefined conditions

| Function                             | Condition                  |
|--------------------------------------|----------------------------|
| `create_hypoglycemia()`              | Severe Hypoglycemia        |
| `create_diabetes_ketoacidosis()`     | Diabetic Ketoacidosis      |
| `create_hypoxia()`                   | Cerebral Hypoxia           |
| `create_mitochondrial_dysfunction()` | Mitochondrial Dysfunction  |

Each returns a frozen `MetabolicCondition` holding glucose level, ATP
efficiency, ion pump function, neurotransmitter synthesis, membrane
integrity, oxidative stress, whether it is progressive, and the timestep at
which the dysfunction begins.

### Stability metrics

`calculate_stability_metrics()` returns a `StabilityMetrics`. Only two of
its fields are computed: `coefficient_of_variation` (of the inter-spike
intervals of each neuron, pooled) and `homeostatic_deviation` (distance of
the mean network potential from -65 mV). The other fields
(`burst_coefficient`, `synchrony_index`, `entropy`, `lyapunov_exponent`,
`network_coherence`, `critical_branching_ratio`) are always 0.0.

### Building blocks

The cell model lives in `neurosim.cell` (`Synapse`, `Dendrite`, `Axon`,
`Neuron`) and the specialised cell types in `neurosim.neuron_types`
(`PyramidalNeuron`, `Interneuron`, `PurkinjeNeuron`, `MotorNeuron`,
`SensoryNeuron`). They can be used directly to build custom networks:

```python
from neurosim.neuron_types import Interneuron, PyramidalNeuron

source = PyramidalNeuron()
target = Interneuron()
source.connect_to_neuron(target, 0, 3.0, False)
source.spike()
print(target.update_and_check_spike())
```

Adding a synapse, dendrite or axon output beyond its capacity returns
`False` rather than raising.

## What it does not do

The package produces CSV files only. It draws no plots and writes no
plotting scripts; the CSV output has to be charted with a tool of your own.