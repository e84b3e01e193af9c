# examples/pendulum_energy.py
from physics_playground.config import Configuration, SimulationSettings, Viewport
from physics_playground.core.invariants import pendulum_energy
from physics_playground.driver import FrameDriver

cfg = Configuration(mode="pendulum", gravity=9.8)
settings = SimulationSettings()
driver = FrameDriver(cfg, Viewport(800, 500), settings)

state = driver.controller.pendulum
e0 = pendulum_energy(state, cfg.gravity, settings.gravity_scale)

driver.start()
for second in range(1, 6):
    driver.run(max_ticks=60)
    e = pendulum_energy(state, cfg.gravity, settings.gravity_scale)
    print(f"t={second}s  angle={state.angle:+.4f}  omega={state.angular_velocity:+.4f}  E/E0={e / e0:.4f}")
driver.stop()
