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
Solving backends. A backend is any callable taking an Instance and
returning a satisfying Assignment, or None if the instance is
unsatisfiable. A backend that cannot produce a result raises SolverFailure.
"""

import os
import subprocess
import tempfile
from typing import Callable, List, Optional, Sequence

from pysat.solvers import Solver
from typeguard import typechecked

from .config import Config
from .dimacs import parse_solution
from .errors import SolverFailure
from .instance import Assignment, Instance
from .logging import get_logger

logger = get_logger(__name__)

Backend = Callable[[Instance], Optional[Assignment]]


class PySatBackend:
    """
    Solves instances in process with one of the solvers of the PySAT
    library, MiniSat 2.2 by default.

    Attributes:
        name: the PySAT solver name.
        status: None if the last call failed or there was no call yet,
            True if the last instance was satisfiable and False if not.
        error: the message of the last failure, or None.
    """

    @typechecked
    def __init__(self, name: str = "minisat22"):
        self.name = name
        self.status: Optional[bool] = None
        self.error: Optional[str] = None

    def __call__(self, instance: Instance) -> Optional[Assignment]:
        self.status = None
        self.error = None

        try:
            with Solver(name=self.name,
                        bootstrap_with=[list(c) for c in instance.clauses]) as solver:
                if not solver.solve():
                    self.status = False
                    return None
                model = solver.get_model() or []
        except Exception as error:
            self.error = f"pysat solver {self.name!r} failed: {error}"
            raise SolverFailure(self.error) from error

        self.status = True
        return Assignment.from_model(instance.num_variables, model)

    def __repr__(self) -> str:
        return f"PySatBackend({self.name!r})"


class DimacsBackend:
    """
    Solves instances by running an external SAT solver program. The
    instance is written in DIMACS format into a temporary file whose name
    is appended to the command line. If output_file is set, then the name
    of a second file is appended as well, and the result is read from
    that file as MiniSat does. Otherwise the standard output is parsed in
    the SAT competition format.
    """

    @typechecked
    def __init__(self, command: Sequence[str], output_file: bool = False,
                 timeout: Optional[float] = None):
        if not command:
            raise ValueError("empty solver command")
        self.command: List[str] = list(command)
        self.output_file = output_file
        self.timeout = timeout
        self.status: Optional[bool] = None
        self.error: Optional[str] = None

    def __call__(self, instance: Instance) -> Optional[Assignment]:
        self.status = None
        self.error = None

        try:
            assignment = self._run(instance)
        except SolverFailure as error:
            self.error = str(error)
            raise

        self.status = assignment is not None
        return assignment

    def _run(self, instance: Instance) -> Optional[Assignment]:
        with tempfile.TemporaryDirectory(prefix="ndsat-") as tmpdir:
            input_path = os.path.join(tmpdir, "input.cnf")
            with open(input_path, "w") as file:
                file.write(instance.to_dimacs())

            args = self.command + [input_path]
            if self.output_file:
                output_path = os.path.join(tmpdir, "output.txt")
                args.append(output_path)

            logger.debug("running %s", " ".join(args))
            try:
                proc = subprocess.run(args, capture_output=True,
                                      timeout=self.timeout)
            except subprocess.TimeoutExpired as error:
                raise SolverFailure(
                    f"{self.command[0]} timed out after {self.timeout}s") from error
            except OSError as error:
                raise SolverFailure(
                    f"could not run {self.command[0]}: {error}") from error

            if self.output_file:
                try:
                    with open(output_path, "rb") as file:
                        output = file.read()
                except OSError as error:
                    raise SolverFailure(
                        f"{self.command[0]} exited with code {proc.returncode} "
                        "without writing a result") from error
            else:
                output = proc.stdout

        # solvers may write arbitrary bytes
        text = output.decode("utf-8", errors="replace")

        logger.debug("%s exited with code %d", self.command[0], proc.returncode)
        return parse_solution(text, instance.num_variables)

    def __repr__(self) -> str:
        return f"DimacsBackend({self.command!r})"


def default_backend(config: Optional[Config] = None) -> Backend:
    """
    Returns the backend selected by the given configuration, or by the
    environment if no configuration is given.
    """
    if config is None:
        config = Config.from_env()

    if config.backend == "pysat":
        return PySatBackend(config.pysat_solver)
    else:
        assert config.backend == "dimacs"
        return DimacsBackend(config.command, output_file=config.output_file,
                             timeout=config.timeout)
