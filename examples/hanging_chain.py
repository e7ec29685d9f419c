"""
Reference scenario: fifteen links sagging between two anchors.

Run:
  python examples/hanging_chain.py
"""
import logging

from chain_sim import ChainSimulation, Profiler
from chain_sim.renderer import DebugRenderer

logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

prof = Profiler()
sim = ChainSimulation(profiler=prof)
renderer = DebugRenderer(verbose=False)

for i in range(200):
    sim.advance()
    if i % 50 == 49:
        renderer.render_simulation(sim)

print("max stretch:", sim.max_stretch())
prof.log_summary()

sim.reset()
print("after reset, max stretch:", sim.max_stretch())
