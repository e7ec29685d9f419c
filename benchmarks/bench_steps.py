"""
Microbenchmark: time per frame vs number of chain links.
Run:
  python benchmarks/bench_steps.py
"""
import time
from chain_sim import ChainSimulation, Profiler


def run(n: int, frames: int = 300):
    prof = Profiler()
    sim = ChainSimulation(
        n_links=n,
        link_length=800.0 / (n + 1),
        substeps=5,
        profiler=prof,
    )

    # warmup
    for _ in range(30):
        sim.advance()
    prof.stats.clear()

    t0 = time.perf_counter()
    for _ in range(frames):
        sim.advance()
    t1 = time.perf_counter()

    per_frame = (t1 - t0) / frames
    return per_frame, prof.stats.summary()


if __name__ == "__main__":
    for n in [5, 15, 50, 100, 250]:
        per_frame, summary = run(n)
        print(f"N={n:4d}  frame={1e3*per_frame:8.3f} ms  frames/s={1/per_frame:8.1f}")
        for k in ["integrate", "solve"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
