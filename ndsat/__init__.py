# Copyright (C) 2025, Miklos Maroti
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""
NDSAT library for nondeterministic booleans: build boolean formulas with
ordinary looking operations, let a SAT solver pick the values.
"""

__version__ = "0.1.0"

from .errors import (NdsatError, UninitializedMachine,
                     MachineAlreadyInitialized, NoSolutionAvailable,
                     ForeignValue, SolverFailure)
from .instance import Instance, Assignment
from .config import Config
from .backends import Backend, PySatBackend, DimacsBackend, default_backend
from .machine import Machine, Session
from .equality import NdEq
from .ndbool import NdBool

__all__ = [
    "NdsatError",
    "UninitializedMachine",
    "MachineAlreadyInitialized",
    "NoSolutionAvailable",
    "ForeignValue",
    "SolverFailure",
    "Instance",
    "Assignment",
    "Config",
    "Backend",
    "PySatBackend",
    "DimacsBackend",
    "default_backend",
    "Machine",
    "Session",
    "NdEq",
    "NdBool",
]
