import pytest

from neurosim.cell import Axon, Dendrite, Neuron, Synapse


def _neuron_with_dendrite():
    neuron = Neuron()
    dendrite = Dendrite(parent=neuron)
    neuron.add_dendrite(dendrite)
    return neuron, dendrite


def test_synapse_contribution_sign():
    assert Synapse(weight=2.5).contribution() == 2.5
    assert Synapse(weight=2.5, inhibitory=True).contribution() == -2.5


def test_synapse_transmit_threshold_boundary():
    synapse = Synapse(weight=5.0, threshold=-50.0)
    assert synapse.transmit(-55.0) is True
    assert synapse.transmit(-56.0) is False


def test_inhibitory_synapse_transmit():
    synapse = Synapse(weight=5.0, threshold=-50.0, inhibitory=True)
    assert synapse.transmit(-45.0) is True
    assert synapse.transmit(-46.0) is False


def test_adjust_weight_clamps_upper():
    synapse = Synapse(weight=9.5)
    synapse.adjust_weight(2.0)
    assert synapse.weight == pytest.approx(10.0)


def test_adjust_weight_clamps_lower():
    synapse = Synapse(weight=0.5)
    synapse.adjust_weight(-3.0)
    assert synapse.weight == pytest.approx(0.1)


def test_adjust_weight_within_range():
    synapse = Synapse(weight=2.0)
    synapse.adjust_weight(1.5)
    assert synapse.weight == pytest.approx(2.0 + 1.5)


def test_connect_to_dendrite_links_both_sides():
    synapse = Synapse()
    dendrite = Dendrite()
    assert synapse.connect_to_dendrite(dendrite) is True
    assert synapse.connections == [dendrite]
    assert dendrite.synapses == [synapse]


def test_connect_respects_max_connections_and_none():
    synapse = Synapse(max_connections=1)
    assert synapse.connect_to_dendrite(None) is False
    assert synapse.connect_to_dendrite(Dendrite()) is True
    assert synapse.connect_to_dendrite(Dendrite()) is False
    assert synapse.connection_count == 1


def test_disconnect_from_dendrite():
    synapse = Synapse(max_connections=2)
    first, second = Dendrite(), Dendrite()
    synapse.connect_to_dendrite(first)
    synapse.connect_to_dendrite(second)
    assert synapse.disconnect_from_dendrite(first) is True
    assert synapse.connections == [second]
    assert first.synapse_count == 0
    assert synapse.disconnect_from_dendrite(first) is False


def test_disconnect_all():
    synapse = Synapse(max_connections=3)
    dendrites = [Dendrite() for _ in range(3)]
    for dendrite in dendrites:
        synapse.connect_to_dendrite(dendrite)
    synapse.disconnect_all()
    assert synapse.connection_count == 0
    assert all(d.synapse_count == 0 for d in dendrites)


def test_dendrite_capacity_follows_spines():
    dendrite = Dendrite(spines=2)
    assert dendrite.add_synapse(Synapse()) is True
    assert dendrite.add_synapse(Synapse()) is True
    assert dendrite.add_synapse(Synapse()) is False
    assert dendrite.synapse_count == 2


def test_dendrite_remove_keeps_order():
    dendrite = Dendrite()
    synapses = [Synapse(weight=w) for w in (1.0, 2.0, 3.0)]
    for synapse in synapses:
        dendrite.add_synapse(synapse)
    assert dendrite.remove_synapse(synapses[1]) is True
    assert dendrite.synapses == [synapses[0], synapses[2]]
    assert dendrite.remove_synapse(synapses[1]) is False


def test_dendrite_integration_sums_signed_contributions():
    dendrite = Dendrite()
    dendrite.add_synapse(Synapse(weight=4.0))
    dendrite.add_synapse(Synapse(weight=1.5, inhibitory=True))
    assert dendrite.integrate_synaptic_inputs() == pytest.approx(4.0 - 1.5)


def test_dendrite_update_without_input_stays_at_rest():
    dendrite = Dendrite()
    dendrite.update_membrane_potential()
    assert dendrite.membrane_potential == pytest.approx(-70.0)
    assert dendrite.is_active is False


def test_dendrite_update_with_strong_input_becomes_active():
    dendrite = Dendrite()
    dendrite.add_synapse(Synapse(weight=25.0))
    dendrite.update_membrane_potential()
    assert dendrite.is_active is True
    assert -70.0 < dendrite.membrane_potential < -70.0 + 25.0


def test_dendrite_update_with_weak_input_is_inactive():
    dendrite = Dendrite()
    dendrite.add_synapse(Synapse(weight=5.0))
    dendrite.update_membrane_potential()
    assert dendrite.is_active is False
    assert dendrite.membrane_potential > -70.0


def test_surface_area_unit_cylinder():
    assert Dendrite(length=1.0, diameter=1.0).surface_area() == pytest.approx(3.14159)


def test_surface_area_scales_with_length():
    short = Dendrite(length=10.0, diameter=2.0)
    long = Dendrite(length=20.0, diameter=2.0)
    assert long.surface_area() == pytest.approx(2 * short.surface_area())


def test_synaptic_density():
    dendrite = Dendrite(length=50.0, diameter=1.0)
    assert dendrite.synaptic_density() == 0
    dendrite.add_synapse(Synapse())
    dendrite.add_synapse(Synapse())
    assert dendrite.synaptic_density() == pytest.approx(2 / dendrite.surface_area())


def test_axon_velocity_depends_on_myelination_and_diameter():
    thin = Axon(diameter=1.0, myelinated=True)
    thick = Axon(diameter=3.0, myelinated=True)
    bare = Axon(diameter=1.0, myelinated=False)
    assert thick.conduction_velocity == pytest.approx(3 * thin.conduction_velocity)
    assert thin.conduction_velocity > bare.conduction_velocity


def test_axon_capacity():
    axon = Axon(max_synapses=1)
    assert axon.add_output_synapse(Synapse()) is True
    assert axon.add_output_synapse(Synapse()) is False
    assert axon.synapse_count == 1


def test_axon_propagation_updates_dendrites():
    axon = Axon()
    synapse = Synapse(weight=25.0)
    dendrite = Dendrite()
    synapse.connect_to_dendrite(dendrite)
    axon.add_output_synapse(synapse)
    axon.propagate_action_potential(50.0)
    assert dendrite.is_active is True


def test_neuron_add_dendrite_capacity():
    neuron = Neuron(max_dendrites=1)
    assert neuron.add_dendrite(Dendrite()) is True
    assert neuron.add_dendrite(Dendrite()) is False
    assert neuron.dendrite_count == 1


def test_neuron_integrate_inputs_sums_dendrites():
    neuron = Neuron()
    first, second = Dendrite(parent=neuron), Dendrite(parent=neuron)
    first.add_synapse(Synapse(weight=3.0))
    second.add_synapse(Synapse(weight=2.0, inhibitory=True))
    neuron.add_dendrite(first)
    neuron.add_dendrite(second)
    assert neuron.integrate_inputs() == pytest.approx(
        first.integrate_synaptic_inputs() + second.integrate_synaptic_inputs()
    )


def test_neuron_without_input_stays_at_rest():
    neuron, _ = _neuron_with_dendrite()
    assert neuron.update_and_check_spike() is False
    assert neuron.membrane_potential == neuron.resting_potential


def test_neuron_subthreshold_input_decays():
    neuron, dendrite = _neuron_with_dendrite()
    dendrite.add_synapse(Synapse(weight=10.0))
    assert neuron.update_and_check_spike() is False
    assert neuron.resting_potential < neuron.membrane_potential < neuron.resting_potential + 10.0


def test_neuron_suprathreshold_input_spikes():
    neuron, dendrite = _neuron_with_dendrite()
    dendrite.add_synapse(Synapse(weight=25.0))
    assert neuron.update_and_check_spike() is True
    assert neuron.is_spiking is True
    assert neuron.membrane_potential == neuron.spike_amplitude


def test_spike_and_refractory_period():
    neuron, dendrite = _neuron_with_dendrite()
    dendrite.add_synapse(Synapse(weight=25.0))
    neuron.spike()
    assert neuron.is_spiking is True
    assert neuron.membrane_potential == neuron.spike_amplitude
    assert neuron.update_and_check_spike() is False
    assert neuron.is_spiking is False
    assert neuron.membrane_potential == neuron.resting_potential
    assert neuron.update_and_check_spike() is False
    assert neuron.refractory_period == 0.0
    assert neuron.update_and_check_spike() is True


def test_connect_to_neuron_rejects_bad_targets():
    source = Neuron()
    target, _ = _neuron_with_dendrite()
    assert source.connect_to_neuron(None) is False
    assert source.connect_to_neuron(target, 1) is False
    assert source.connect_to_neuron(target, -1) is False
    assert source.axon.synapse_count == 0


def test_connect_to_neuron_links_axon_and_dendrite():
    source = Neuron()
    target, dendrite = _neuron_with_dendrite()
    assert source.connect_to_neuron(target, 0, 2.0) is True
    assert source.axon.synapse_count == 1
    assert dendrite.synapses == source.axon.output_synapses
    assert dendrite.synapses[0].weight == 2.0


def test_connect_to_neuron_fails_when_axon_full():
    source = Neuron()
    source.axon = Axon(max_synapses=1)
    target, dendrite = _neuron_with_dendrite()
    assert source.connect_to_neuron(target) is True
    assert source.connect_to_neuron(target) is False
    assert dendrite.synapse_count == 1


def test_spike_excites_connected_neuron():
    source = Neuron()
    target, _ = _neuron_with_dendrite()
    source.connect_to_neuron(target, 0, 25.0)
    source.spike()
    assert target.is_spiking is True


def test_spike_through_inhibitory_synapse_does_not_fire_target():
    source = Neuron()
    target, _ = _neuron_with_dendrite()
    source.connect_to_neuron(target, 0, 5.0, inhibitory=True)
    source.spike()
    assert target.is_spiking is False
    assert target.membrane_potential < target.resting_potential