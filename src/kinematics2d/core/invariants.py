# MIT License (see LICENSE)
"""
Conserved quantities of a population of solids.

Used for verifying integration results. With no applied forces both
quantities stay constant; with forces applied the change in momentum over
an update equals the impulse F·dt.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

import numpy as np

if TYPE_CHECKING:
    from ..solid import Solid


def kinetic_energy(solids: Iterable[Solid]) -> float:
    """
    Total translational kinetic energy.

    T = Σ 0.5 * m * v²

    Destroyed solids are skipped. Heading rotation carries no energy in
    this model.
    """
    ke = 0.0
    for s in solids:
        if s.destroyed:
            continue
        v = s.velocity.magnitude
        ke += 0.5 * s.mass * v * v
    return ke


def linear_momentum(solids: Iterable[Solid]) -> np.ndarray:
    """
    Total linear momentum P = Σ m * v as [Px, Py].

    Destroyed solids are skipped.
    """
    p = np.zeros(2, dtype=np.float64)
    for s in solids:
        if s.destroyed:
            continue
        p += s.mass * s.velocity.as_array()
    return p
