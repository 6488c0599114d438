"""
Microbenchmark: time per world step vs number of solids.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from kinematics2d import World, create_solid
from kinematics2d.core import kinetic_energy
from kinematics2d.profiler import Profiler

def run(n: int, steps: int = 300, dt: float = 1/60):
    prof = Profiler()
    world = World(profiler=prof)

    rng = np.random.default_rng(12345)  # determinism
    for _ in range(n):
        s = create_solid(
            mass=float(rng.uniform(0.5, 5.0)),
            velocity=tuple(rng.normal(size=2)),
            position=tuple(rng.uniform(-10.0, 10.0, size=2)),
        )
        s.angular_velocity = float(rng.normal(scale=90.0))
        # half the population under thrust, half drifting
        if rng.random() < 0.5:
            s.set_force(*rng.normal(size=2))
        world.add_solid(s)

    # warmup
    for _ in range(10):
        world.step(dt)

    t0 = time.perf_counter()
    for _ in range(steps):
        world.step(dt)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary(), kinetic_energy(world.solids)

if __name__ == "__main__":
    for n in [10, 50, 100, 250, 500]:
        per_step, summary, ke = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}  KE={ke:10.3f}")
        print("  integrate", summary["integrate"])
        print()
