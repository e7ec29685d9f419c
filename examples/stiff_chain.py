"""
Baumgarte bias and extra solver sweeps versus the single-sweep default.
"""
from chain_sim import ChainSimulation

for beta, iters in [(0.0, 1), (0.2, 1), (0.2, 10)]:
    sim = ChainSimulation(beta=beta, solver_iters=iters)
    for _ in range(200):
        sim.advance()
    print(f"beta={beta:.1f} iters={iters:2d}  max stretch={sim.max_stretch():8.3f}")
