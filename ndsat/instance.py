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

from typing import Iterable, List, Tuple

import numpy
from typeguard import typechecked

from .errors import SolverFailure


class Instance:
    """
    A growing CNF formula. Variables are positive integers starting at 1
    and literals are unwrapped positive and negative integers, exactly as
    in the DIMACS format. Clauses can only be added, never removed.
    """

    def __init__(self):
        self._num_variables = 0
        self._clauses: List[Tuple[int, ...]] = []

    @property
    def num_variables(self) -> int:
        return self._num_variables

    @property
    def num_clauses(self) -> int:
        return len(self._clauses)

    @property
    def clauses(self) -> Tuple[Tuple[int, ...], ...]:
        """
        Returns the clauses in the order they were added.
        """
        return tuple(self._clauses)

    def fresh_var(self) -> int:
        """
        Allocates a new variable and returns its positive literal.
        """
        self._num_variables += 1
        return self._num_variables

    @typechecked
    def add_clause(self, clause: Iterable[int]):
        """
        Adds the given clause to the formula. All literals must be non-zero
        and must refer to variables already allocated from this instance.
        """
        clause = tuple(clause)
        for lit in clause:
            if lit == 0 or abs(lit) > self._num_variables:
                raise ValueError(f"invalid literal {lit} in clause {clause}")
        self._clauses.append(clause)

    def to_dimacs(self) -> str:
        from .dimacs import format_dimacs
        return format_dimacs(self._num_variables, self._clauses)

    def __repr__(self) -> str:
        return f"Instance(num_variables={self._num_variables}, " \
            f"num_clauses={len(self._clauses)})"


class Assignment:
    """
    A read-only total assignment of boolean values to the variables
    1, ..., num_variables of an instance.
    """

    def __init__(self, values: Iterable[bool]):
        table = numpy.array(list(values), dtype=bool)
        table.flags.writeable = False
        self._table = table

    @staticmethod
    def from_model(num_variables: int, model: Iterable[int]) -> 'Assignment':
        """
        Builds an assignment from a list of literals as returned by a SAT
        solver. Variables not mentioned in the model are set to false.
        """
        lits = numpy.array(list(model), dtype=numpy.int64)
        if lits.size and (numpy.any(lits == 0)
                          or numpy.abs(lits).max() > num_variables):
            raise SolverFailure("model refers to unknown variables")

        table = numpy.zeros(num_variables, dtype=bool)
        table[lits[lits > 0] - 1] = True
        return Assignment(table)

    @property
    def num_variables(self) -> int:
        return len(self._table)

    def get(self, lit: int) -> bool:
        """
        Returns the value of the given literal.
        """
        assert lit != 0 and abs(lit) <= len(self._table)
        value = bool(self._table[abs(lit) - 1])
        return value if lit > 0 else not value

    def satisfies(self, instance: Instance) -> bool:
        """
        Returns True if this assignment covers every variable of the
        instance and makes every clause true.
        """
        if len(self._table) != instance.num_variables:
            return False
        for clause in instance.clauses:
            if not any(self.get(lit) for lit in clause):
                return False
        return True

    def literals(self) -> List[int]:
        """
        Returns the assignment as a list of literals, one per variable.
        """
        return [idx + 1 if val else -(idx + 1)
                for idx, val in enumerate(self._table)]

    def __repr__(self) -> str:
        return "Assignment(" + "".join(
            "1" if val else "0" for val in self._table) + ")"
