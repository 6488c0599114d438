# examples/constant_thrust.py
import logging

from kinematics2d import create_solid
from kinematics2d.logging_config import setup_logging

setup_logging(logging.DEBUG)

ship = create_solid(mass=2.0)
ship.set_force(4.0, 0.0)
ship.update(1.0)

print("pos:", ship.position)
print("vel:", ship.velocity)
print("expected pos: (1, 0)  vel: (2, 0)")
