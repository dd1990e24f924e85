"""Spiking neural network simulator with metabolic dysfunction scenarios."""

__version__ = "0.1.0"

__all__ = ["cell", "neuron_types", "simulator"]