# examples/turning_drift.py
# A ship drifts while its heading turns; thrust is applied along the
# heading every tick, the way a host game loop would drive it.
import math

from kinematics2d import World, create_solid

world = World()
ship = create_solid(mass=1.0, velocity=(1.0, 0.0))
ship.angular_velocity = 90.0
world.add_solid(ship)

dt = 1 / 60
for tick in range(600):
    thrust = 0.5 if tick % 120 < 60 else 0.0
    if thrust:
        ship.set_force(thrust * math.cos(ship.heading), thrust * math.sin(ship.heading))
    else:
        ship.clear_force()
    world.step(dt)

print("t:", world.time)
print("heading:", ship.heading)
print("pos:", ship.position)
print("vel:", ship.velocity)
