#!/usr/bin/env python3
"""
Example: Dopamine Modulation of a Striatal MSN

Runs the reference AMPA pulse protocol on a single medium spiny neuron and
compares responses across D1/D2 receptor activation levels.
"""

import logging

from msnsim import MSNSimulation, SimulationConfig
from msnsim.neuromodulation import DopamineModulation


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    base = SimulationConfig(
        n_steps=2000,
        amplitude=100.0,
        ampa_frac=0.7,
        nmda_frac=0.3,
        modulation=DopamineModulation.PRE_APPLIED,
    )
    sim = MSNSimulation(base)

    print("\n" + "=" * 50)
    print("MSN response vs. dopamine receptor activation")
    print("=" * 50)

    for d1, d2 in [(0.0, 0.0), (0.5, 0.0), (1.0, 0.0), (0.0, 0.5), (0.0, 1.0)]:
        result = sim.reconfigure(d1=d1, d2=d2).run()
        v = result.voltage_trace()
        print(f"\nD1={d1:.1f}  D2={d2:.1f}")
        print(f"  Spikes: {result.spike_count} ({result.firing_rate_hz():.1f} Hz)")
        print(f"  Peak v: {v.max().item():.2f} mV")
        print(f"  Final v: {v[-1].item():.2f} mV")
        if result.spike_steps:
            first_ms = result.spike_steps[0] * result.dt_ms
            print(f"  First spike: {first_ms:.1f} ms")


if __name__ == "__main__":
    main()
