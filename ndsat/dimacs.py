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

from typing import Iterable, List, Optional, Sequence

from .errors import SolverFailure
from .instance import Assignment


def format_dimacs(num_variables: int, clauses: Sequence[Iterable[int]]) -> str:
    """
    Returns the formula in DIMACS CNF format, one clause per line.
    """
    lines = [f"p cnf {num_variables} {len(clauses)}"]
    for clause in clauses:
        lines.append(" ".join(str(lit) for lit in clause) + " 0")
    return "\n".join(lines) + "\n"


def _parse_literals(tokens: Iterable[str]) -> List[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError as error:
        raise SolverFailure(f"malformed solver output: {error}") from error


def parse_solution(text: str, num_variables: int) -> Optional[Assignment]:
    """
    Parses the output of a SAT solver. Both the SAT competition format
    (`s SATISFIABLE` followed by `v` lines) and the MiniSat result file
    format (`SAT` or `UNSAT` on the first line followed by the model) are
    understood. Returns None if the formula is unsatisfiable and raises
    SolverFailure if the output cannot be interpreted.
    """

    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line and not line.startswith("c")]
    if not lines:
        raise SolverFailure("empty solver output")

    if lines[0] in ("SAT", "UNSAT", "INDET"):
        if lines[0] == "UNSAT":
            return None
        elif lines[0] == "INDET":
            raise SolverFailure("solver could not decide the formula")
        model = _parse_literals(" ".join(lines[1:]).split())
    else:
        status = None
        model = []
        for line in lines:
            if line.startswith("s "):
                status = line[2:].strip()
            elif line.startswith("v "):
                model.extend(_parse_literals(line[2:].split()))

        if status == "UNSATISFIABLE":
            return None
        elif status != "SATISFIABLE":
            raise SolverFailure(f"unexpected solver status {status!r}")

    if model and model[-1] == 0:
        model.pop()
    return Assignment.from_model(num_variables, model)
