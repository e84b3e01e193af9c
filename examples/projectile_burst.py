# examples/projectile_burst.py
import logging

import numpy as np

from physics_playground.config import Configuration, SimulationSettings, Viewport
from physics_playground.driver import FrameDriver
from physics_playground.renderer.adapter import BufferedRenderer

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

renderer = BufferedRenderer()
driver = FrameDriver(
    Configuration(mode="projectile", elasticity=0.6),
    Viewport(800, 500),
    SimulationSettings(max_bodies=8),
    renderer=renderer,
    seed=7,
)
driver.start()

rng = np.random.default_rng(1)
for _ in range(12):
    driver.click(float(rng.uniform(50, 750)), 450.0)
    driver.run(max_ticks=15)
driver.stop()

print("bodies alive:", len(driver.controller.bodies))
print("frames recorded:", len(renderer.frames))
print("commands in last frame:", len(renderer.frames[-1]["commands"]))
