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

import dataclasses
import json
import os
import shlex
from typing import List, Optional

BACKENDS = ("pysat", "dimacs")


@dataclasses.dataclass
class Config:
    """
    Selects the backend used when solve_with() is called without one.

    Attributes:
        backend: either `pysat` (in process) or `dimacs` (external program).
        pysat_solver: any solver name accepted by `pysat.solvers.Solver`.
        command: the external solver command line for the `dimacs` backend,
            the input file name is appended to it.
        output_file: the external solver writes its result into a file
            given as a second argument (the MiniSat convention).
        timeout: seconds to wait for the external solver, or None.
    """

    backend: str = "pysat"
    pysat_solver: str = "minisat22"
    command: List[str] = dataclasses.field(default_factory=list)
    output_file: bool = False
    timeout: Optional[float] = None

    def __post_init__(self):
        if self.backend not in BACKENDS:
            raise ValueError(f"unknown backend {self.backend!r}, "
                             f"expected one of {', '.join(BACKENDS)}")

    @staticmethod
    def from_env() -> 'Config':
        """
        Reads the JSON file named by NDSAT_CONFIG_PATH if it is set, then
        applies the NDSAT_BACKEND, NDSAT_PYSAT_SOLVER, NDSAT_COMMAND,
        NDSAT_OUTPUT_FILE and NDSAT_TIMEOUT environment variables on top.
        """

        data = {}
        config_path = os.environ.get("NDSAT_CONFIG_PATH")
        if config_path:
            with open(config_path, "r") as file:
                data = json.load(file)

        backend = os.environ.get("NDSAT_BACKEND", data.get("backend", "pysat"))
        pysat_solver = os.environ.get(
            "NDSAT_PYSAT_SOLVER", data.get("pysat_solver", "minisat22"))

        command = data.get("command", [])
        if isinstance(command, str):
            command = shlex.split(command)
        if "NDSAT_COMMAND" in os.environ:
            command = shlex.split(os.environ["NDSAT_COMMAND"])

        output_file = bool(data.get("output_file", False))
        if "NDSAT_OUTPUT_FILE" in os.environ:
            output_file = os.environ["NDSAT_OUTPUT_FILE"].lower() \
                in ("1", "true", "yes")

        timeout = data.get("timeout")
        if os.environ.get("NDSAT_TIMEOUT"):
            timeout = os.environ["NDSAT_TIMEOUT"]
        if timeout is not None:
            timeout = float(timeout)

        return Config(backend=backend, pysat_solver=pysat_solver,
                      command=list(command), output_file=output_file,
                      timeout=timeout)
