"""
Medium Spiny Neuron Constants - Humphries et al. (2009) tuning tables.

Biological Basis:
=================

The striatal medium spiny neuron (MSN) is modelled with the Izhikevich (2007)
"simple model" in its capacitance form:

    C dv/dt = k (v - v_r)(v - v_t) - u + I
    du/dt   = a [b (v - v_r) - u]
    if v >= threshold:  v <- c,  u <- u + d

Humphries et al. extend it with D1/D2 dopamine receptor modulation and three
synaptic channels (AMPA, NMDA with Mg2+ block, GABA_A).

Dopamine constants:
-------------------
- K (0.0289): K+ current constant, scales v_r with D1 activation
- L (0.331): L-type Ca2+ current constant, scales d with D1 activation
- ALPHA (0.032): reduction of k with D2 activation (fits the f-I curve)
- BETA_1 (6.3): D1 enhancement of NMDA current
- BETA_2 (0.215): D2 reduction of AMPA current

Synaptic constants:
-------------------
- Reversal potentials: E_AMPA = E_NMDA = 0 mV, E_GABA = -60 mV
- Time constants: tau_AMPA = 6 ms, tau_NMDA = 160 ms, tau_GABA = 4 ms
- Max conductances: g_NMDA = g_AMPA / 2, g_GABA = g_AMPA / 1.4

References:
-----------
- Humphries, Lepora, Wood & Gurney (2009): Capturing dopaminergic modulation
  and bimodal membrane behaviour of striatal medium spiny neurons in
  accurate, reduced models. Front. Comput. Neurosci. 3:26.
- Izhikevich (2003): Simple model of spiking neurons. IEEE TNN 14(6).

Author: msnsim Project
Date: March 2026
"""

# =============================================================================
# IZHIKEVICH CORE (MSN)
# =============================================================================

MSN_A = 0.01
"""Recovery time scale a (1/ms)."""

MSN_B = -20.0
"""Recovery sensitivity b. Negative for MSNs (u is an outward current)."""

MSN_C = -55.0
"""After-spike reset voltage c (mV)."""

MSN_THRESHOLD = 30.0
"""Fixed spike cut-off of the original Izhikevich formulation (mV)."""

MSN_V0 = -65.0
"""Initial membrane potential (mV)."""

MSN_U0 = -14.0
"""Initial recovery variable."""

# =============================================================================
# HUMPHRIES 2009 MEMBRANE
# =============================================================================

MSN_K_GAIN = 1.0
"""Quadratic gain k."""

MSN_V_REST = -80.0
"""Resting potential v_r (mV)."""

MSN_V_PEAK = 40.0
"""Spike peak voltage (mV)."""

MSN_CAPACITANCE = 15.2
"""Membrane capacitance C (pF)."""

MSN_V_T = -29.7
"""Instantaneous threshold v_t (mV). Used as the spike test."""

MSN_D = 91.0
"""Baseline after-spike recovery increment d."""

# =============================================================================
# DOPAMINE MODULATION
# =============================================================================

MSN_K_POTASSIUM = 0.0289
"""K: D1 scaling of resting potential (K+ current constant)."""

MSN_L_CALCIUM = 0.331
"""L: D1 scaling of reset increment (L-type Ca2+ current constant)."""

MSN_ALPHA = 0.032
"""alpha: D2 reduction of gain k."""

MSN_BETA_1 = 6.3
"""beta_1: D1 enhancement of NMDA current."""

MSN_BETA_2 = 0.215
"""beta_2: D2 reduction of AMPA current."""

# =============================================================================
# SYNAPTIC CHANNELS
# =============================================================================

MSN_E_AMPA = 0.0
MSN_E_NMDA = 0.0
MSN_E_GABA = -60.0

MSN_TAU_AMPA = 6.0
MSN_TAU_NMDA = 160.0
MSN_TAU_GABA = 4.0

MSN_MG = 1.0
"""Extracellular magnesium concentration [Mg2+]_0 (mM)."""

MSN_G_AMPA = 6.9
MSN_G_NMDA = 0.5 * MSN_G_AMPA
MSN_G_GABA = MSN_G_AMPA / 1.4

# =============================================================================
# SIMULATION
# =============================================================================

MSN_DT_MS = 0.1
"""Reference integration timestep (ms)."""

# =============================================================================
# CLASSIC IZHIKEVICH (2003) REFERENCE VALUES
# =============================================================================

CLASSIC_A = 0.1
CLASSIC_B = 0.2
CLASSIC_C = -65.0
CLASSIC_D = 8.0
CLASSIC_THRESHOLD = 30.0
CLASSIC_V0 = -65.0
CLASSIC_U0 = -14.0
