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

import sys

import pytest

from ndsat import (Assignment, Config, DimacsBackend, Instance, Machine,
                   NdBool, PySatBackend, SolverFailure, default_backend)
from ndsat.dimacs import format_dimacs, parse_solution

# A brute force solver printing its result in the SAT competition format,
# or into the file given as second argument in the MiniSat format.
BRUTE_FORCE = """
import itertools
import sys

clauses = []
num_vars = 0
for line in open(sys.argv[1]):
    tokens = line.split()
    if not tokens or tokens[0] == "c":
        continue
    if tokens[0] == "p":
        num_vars = int(tokens[2])
        continue
    clauses.append([int(t) for t in tokens[:-1]])

model = None
for values in itertools.product([False, True], repeat=num_vars):
    if all(any(values[abs(l) - 1] == (l > 0) for l in c) for c in clauses):
        model = [i + 1 if v else -(i + 1) for i, v in enumerate(values)]
        break

if len(sys.argv) > 2:
    with open(sys.argv[2], "w") as file:
        if model is None:
            file.write("UNSAT\\n")
        else:
            file.write("SAT\\n" + " ".join(map(str, model + [0])) + "\\n")
else:
    print("c brute force")
    if model is None:
        print("s UNSATISFIABLE")
    else:
        print("s SATISFIABLE")
        print("v " + " ".join(map(str, model)))
        print("v 0")
"""


@pytest.fixture
def brute_force(tmp_path):
    script = tmp_path / "brute_force.py"
    script.write_text(BRUTE_FORCE)
    return [sys.executable, str(script)]


def test_format_dimacs():
    instance = Instance()
    a = instance.fresh_var()
    b = instance.fresh_var()
    instance.add_clause([a, -b])
    instance.add_clause([b])
    assert instance.to_dimacs() == "p cnf 2 2\n1 -2 0\n2 0\n"
    assert format_dimacs(0, []) == "p cnf 0 0\n"


def test_invalid_clause():
    instance = Instance()
    instance.fresh_var()
    try:
        instance.add_clause([1, 2])
        assert False
    except ValueError:
        pass
    try:
        instance.add_clause([0])
        assert False
    except ValueError:
        pass
    assert instance.num_clauses == 0


def test_parse_competition():
    text = "c comment\ns SATISFIABLE\nv 1 -2\nv 3 0\n"
    assignment = parse_solution(text, 4)
    assert assignment.literals() == [1, -2, 3, -4]
    assert parse_solution("s UNSATISFIABLE\n", 4) is None


def test_parse_minisat():
    assignment = parse_solution("SAT\n-1 2 0\n", 2)
    assert assignment.literals() == [-1, 2]
    assert parse_solution("UNSAT\n", 2) is None


def test_parse_malformed():
    for text in ["", "s UNKNOWN\n", "INDET\n", "s SATISFIABLE\nv 1 x 0\n",
                 "s SATISFIABLE\nv 1 5 0\n", "hello\n"]:
        try:
            parse_solution(text, 2)
            assert False
        except SolverFailure:
            pass


def test_assignment():
    assignment = Assignment.from_model(3, [-1, 3])
    assert assignment.num_variables == 3
    assert not assignment.get(1) and assignment.get(-1)
    assert not assignment.get(2)
    assert assignment.get(3)
    assert repr(assignment) == "Assignment(001)"

    try:
        assignment._table[0] = True
        assert False
    except ValueError:
        pass

    try:
        Assignment.from_model(2, [1, -3])
        assert False
    except SolverFailure:
        pass


def test_pysat_backend():
    instance = Instance()
    a = instance.fresh_var()
    b = instance.fresh_var()
    instance.fresh_var()
    instance.add_clause([a, b])
    instance.add_clause([-a])

    backend = PySatBackend()
    assignment = backend(instance)
    assert backend.status is True
    assert assignment.num_variables == 3
    assert assignment.satisfies(instance)

    instance.add_clause([-b])
    assert backend(instance) is None
    assert backend.status is False


def test_pysat_unknown_solver():
    backend = PySatBackend("no-such-solver")
    try:
        backend(Instance())
        assert False
    except SolverFailure:
        pass
    assert backend.status is None and backend.error is not None

    machine = Machine()
    machine.initialize()
    assert not machine.solve_with(backend)


def test_dimacs_backend(brute_force):
    for output_file in [False, True]:
        backend = DimacsBackend(brute_force, output_file=output_file)

        machine = Machine()
        machine.initialize()
        b0 = NdBool.fresh(machine)
        b1 = NdBool.fresh(machine)
        machine.ndassert(b0 ^ b1)
        machine.ndassert(b0)
        assert machine.solve_with(backend)
        assert backend.status is True
        assert b0.value() and not b1.value()

        machine.ndassert(b1)
        assert not machine.solve_with(backend)
        assert backend.status is False


def test_dimacs_backend_failure(tmp_path):
    backend = DimacsBackend([str(tmp_path / "missing-solver")])
    machine = Machine()
    machine.initialize()
    NdBool.fresh(machine)
    assert not machine.solve_with(backend)
    assert backend.status is None and "could not run" in backend.error

    backend = DimacsBackend([sys.executable, "-c", "print('garbage')"])
    try:
        backend(machine.instance)
        assert False
    except SolverFailure:
        pass

    backend = DimacsBackend([sys.executable, "-c", "pass"], output_file=True)
    try:
        backend(machine.instance)
        assert False
    except SolverFailure:
        pass

    backend = DimacsBackend(
        [sys.executable, "-c", "import time; time.sleep(10)"], timeout=0.2)
    try:
        backend(machine.instance)
        assert False
    except SolverFailure as error:
        assert "timed out" in str(error)


def test_dimacs_backend_undecodable_output(tmp_path):
    machine = Machine()
    machine.initialize()
    NdBool.fresh(machine)

    backend = DimacsBackend([sys.executable, "-c",
                             "import sys; sys.stdout.buffer.write(b'\\xff\\xfe s SAT\\n')"])
    assert machine.solve_with(backend) is False
    assert backend.status is None and backend.error is not None

    script = tmp_path / "write_result.py"
    script.write_text("import sys\n"
                      "with open(sys.argv[2], 'wb') as file:\n"
                      "    file.write(b'SAT\\n\\xff 0\\n')\n")
    backend = DimacsBackend([sys.executable, str(script)], output_file=True)
    assert machine.solve_with(backend) is False
    assert backend.status is None and backend.error is not None


def test_default_backend():
    backend = default_backend(Config(pysat_solver="cadical153"))
    assert isinstance(backend, PySatBackend) and backend.name == "cadical153"

    backend = default_backend(Config(backend="dimacs", command=["kissat"],
                                     timeout=5.0))
    assert isinstance(backend, DimacsBackend)
    assert backend.command == ["kissat"] and backend.timeout == 5.0

    try:
        default_backend(Config(backend="dimacs"))
        assert False
    except ValueError:
        pass
