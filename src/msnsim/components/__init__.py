"""
Neural components: neuron models.
"""
