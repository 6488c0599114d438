# MIT License (see LICENSE)
"""
JSON serialization and deserialization for solids and worlds.

JSON Schema Overview:
---------------------
{
  "time": float,                   # Default: 0
  "solids": [
    {
      "mass": float,               # Required (> 0)
      "position": [x, y],          # Default: [0, 0]
      "velocity": [vx, vy],        # Default: [0, 0]
      "force": [fx, fy],           # Default: [0, 0] (no force)
      "heading": float,            # Radians, default: 0
      "angular_velocity": float,   # Degrees per unit time, default: 0
      "integrator": {              # Default: {"type": "rk4", "min_step": 0.01}
        "type": "rk4" | "euler",
        "min_step": float          # rk4 only
      }
    }
  ]
}
"""
from __future__ import annotations
import json
from typing import Any

from ..constants import DEFAULT_MIN_STEP
from ..core.integrators import RK4Integrator, integrator_from_json
from ..errors import InvalidArgumentError
from ..solid import Solid, create_solid
from ..util import is_finite, normalize_heading
from ..vector import Vector2d, to_vector
from ..world import World

# Written out only when a solid departs from this
_DEFAULT_INTEGRATOR = {"type": RK4Integrator.name, "min_step": DEFAULT_MIN_STEP}


def load_world_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a world file without building any objects.

    Args:
        path: Absolute or relative path to the JSON file.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_world(path: str) -> World:
    """
    Load a World and all of its solids from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        InvalidArgumentError: If a solid definition is invalid.
    """
    return world_from_json(load_world_raw(path))


def world_from_json(data: dict[str, Any]) -> World:
    """Build a World from its dictionary form."""
    if not isinstance(data, dict):
        raise InvalidArgumentError(f"World definition must be an object, got {data!r}")
    solids = data.get("solids", [])
    if not isinstance(solids, list):
        raise InvalidArgumentError(f"'solids' must be a list, got {solids!r}")
    world = World(time=_float(data, "time"))
    for d in solids:
        world.add_solid(solid_from_json(d))
    return world


def solid_from_json(d: dict[str, Any]) -> Solid:
    """
    Parse a single solid definition from a dictionary.

    Raises:
        InvalidArgumentError: If d is not an object, mass is missing or
            invalid, a vector is not an [x, y] pair, a scalar is not a
            number, or the integrator is unknown.
    """
    if not isinstance(d, dict):
        raise InvalidArgumentError(f"Solid definition must be an object, got {d!r}")
    if "mass" not in d:
        raise InvalidArgumentError("Solid definition missing required 'mass' field.")

    integrator_data = d.get("integrator")
    integrator = (
        integrator_from_json(integrator_data)
        if integrator_data is not None
        else RK4Integrator(min_step=DEFAULT_MIN_STEP)
    )

    solid = create_solid(
        mass=d["mass"],
        velocity=d.get("velocity"),
        position=d.get("position"),
        integrator=integrator,
    )

    if "force" in d:
        solid.force.copy_from(to_vector(d["force"]))
    solid.heading = normalize_heading(_float(d, "heading"))
    solid.angular_velocity = _float(d, "angular_velocity")
    return solid


def solid_to_json(solid: Solid) -> dict[str, Any]:
    """
    Serialize a Solid to a dictionary (round-trip compatible).

    Defaults are omitted to keep the output concise.
    """
    result = {
        "mass": solid.mass,
        "position": _to_list(solid.position),
        "velocity": _to_list(solid.velocity),
    }

    if solid.has_force:
        result["force"] = _to_list(solid.force)
    if solid.heading != 0.0:
        result["heading"] = solid.heading
    if solid.angular_velocity != 0.0:
        result["angular_velocity"] = solid.angular_velocity

    integrator = solid.integrator.to_json()
    if integrator != _DEFAULT_INTEGRATOR:
        result["integrator"] = integrator

    return result


def solids_to_json(solids: list[Solid]) -> list[dict[str, Any]]:
    """Serialize a list of solids to a JSON-compatible list."""
    return [solid_to_json(s) for s in solids]


def world_to_json(world: World) -> dict[str, Any]:
    """Serialize a World: clock and every registered solid."""
    return {
        "time": world.time,
        "solids": solids_to_json(world.solids),
    }


def save_world(world: World, path: str, indent: int = 2) -> None:
    """Save a World to a JSON file on disk."""
    data = world_to_json(world)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)


def _float(d: dict[str, Any], key: str, default: float = 0.0) -> float:
    """Helper: read an optional finite number, rejecting anything else."""
    value = d.get(key, default)
    if isinstance(value, bool):
        raise InvalidArgumentError(f"'{key}' must be a number, got {value!r}")
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"'{key}' must be a number, got {value!r}") from exc
    if not is_finite(value):
        raise InvalidArgumentError(f"'{key}' must be finite, got {value!r}")
    return value


def _to_list(v: Vector2d) -> list[float]:
    """Helper: cartesian components as a plain list of floats."""
    return [v.x, v.y]
