# MIT License (see LICENSE)
"""
Input/Output utilities for solids and worlds.

This subpackage provides:
    - JSON serialization: Save and load worlds to/from JSON files.
    - Round-trip support: Serialized solids load back with the same state.

Typical usage:
    from kinematics2d.io import load_world, save_world, solid_to_json

    world = load_world("fleet.json")
    world.step(1 / 60)
    save_world(world, "fleet_after.json")
"""
from .json_io import (
    load_world,
    load_world_raw,
    save_world,
    world_from_json,
    world_to_json,
    solids_to_json,
    solid_to_json,
    solid_from_json,
)

__all__ = [
    # Loading
    "load_world",
    "load_world_raw",
    "world_from_json",
    # Saving
    "save_world",
    # Serialization
    "world_to_json",
    "solids_to_json",
    "solid_to_json",
    "solid_from_json",
]
