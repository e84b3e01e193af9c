# examples/headless_collision.py
import sys

from physics_playground.config import Configuration, SimulationSettings, Viewport
from physics_playground.core.invariants import kinetic_energy
from physics_playground.driver import FrameDriver
from physics_playground.renderer.adapter import DebugRenderer, NullRenderer

resolver = sys.argv[1] if len(sys.argv) > 1 else "positional"

driver = FrameDriver(
    Configuration(mode="collision", gravity=0.0, elasticity=1.0),
    Viewport(800, 500),
    SimulationSettings(resolver=resolver),
    renderer=NullRenderer(),
)

ke0 = kinetic_energy(driver.controller.bodies)
driver.start()
driver.run(max_ticks=120)

# dump the last frame as text
driver.renderer = DebugRenderer()
driver.run(max_ticks=1)
driver.stop()

for b in driver.controller.bodies:
    print("pos", b.position, "vel", b.velocity)
print("ke0", ke0, "ke1", kinetic_energy(driver.controller.bodies))
