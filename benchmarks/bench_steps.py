"""
Microbenchmark: time per tick vs number of projectile bodies.
Run:
  python benchmarks/bench_steps.py
"""
import numpy as np
from physics_playground.config import Configuration, SimulationSettings, Viewport
from physics_playground.driver import FrameDriver
from physics_playground.profiler import Profiler
from physics_playground.renderer.adapter import NullRenderer


def run(n: int, ticks: int = 300):
    prof = Profiler()
    driver = FrameDriver(
        Configuration(mode="projectile"),
        Viewport(1280, 720),
        SimulationSettings(max_bodies=max(n, 1)),
        renderer=NullRenderer(),
        seed=12345,  # determinism
        profiler=prof,
    )

    rng = np.random.default_rng(12345)
    for _ in range(n):
        driver.click(float(rng.uniform(40, 1240)), float(rng.uniform(40, 400)))

    driver.start()
    # warmup
    driver.run(max_ticks=30)
    prof.reset()

    driver.run(max_ticks=ticks)
    driver.stop()
    return prof.summary()


if __name__ == "__main__":
    for n in [10, 50, 100, 250]:
        summary = run(n)
        physics, render = summary["physics"], summary["render"]
        per_tick = physics["mean_ms"] + render["mean_ms"]
        print(f"N={n:4d}  tick={per_tick:8.3f} ms  ticks/s={1e3 / per_tick:8.1f}")
        for k in ["physics", "render"]:
            print(f"    {k:8s} mean={summary[k]['mean_ms']:.3f} ms  max={summary[k]['max_ms']:.3f} ms")
