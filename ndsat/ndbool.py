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

from typeguard import typechecked

from .equality import NdEq
from .instance import Instance
from .machine import Machine, Session


class NdBool(NdEq['NdBool']):
    """
    A boolean whose value is decided by the SAT solver. Each instance wraps
    a single literal of the formula of a machine. The boolean operations
    add a fresh variable together with the clauses forcing it to be equal
    to the result (the Tseitin encoding), so a solution of the formula
    always respects the usual two-valued semantics.
    """

    __slots__ = ("machine", "instance", "literal")

    def __init__(self, machine: Machine, instance: Instance, literal: int):
        assert literal != 0
        self.machine = machine
        self.instance = instance
        self.literal = literal

    @staticmethod
    @typechecked
    def fresh(machine: Machine) -> 'NdBool':
        """
        Returns a new unconstrained value.
        """
        def op(session: Session) -> NdBool:
            return NdBool(machine, session.instance, session.fresh_var())

        return machine.with_active(op)

    @staticmethod
    @typechecked
    def constant_true(machine: Machine) -> 'NdBool':
        """
        Returns a new value forced to be true. Each call allocates a new
        variable.
        """
        def op(session: Session) -> NdBool:
            lit = session.fresh_var()
            session.add_clause(lit)
            return NdBool(machine, session.instance, lit)

        return machine.with_active(op)

    @staticmethod
    @typechecked
    def constant_false(machine: Machine) -> 'NdBool':
        def op(session: Session) -> NdBool:
            lit = session.fresh_var()
            session.add_clause(-lit)
            return NdBool(machine, session.instance, lit)

        return machine.with_active(op)

    true = constant_true
    false = constant_false

    def not_(self) -> 'NdBool':
        return NdBool(self.machine, self.instance, -self.literal)

    @typechecked
    def and_(self, other: 'NdBool') -> 'NdBool':
        def op(session: Session) -> NdBool:
            session.check(self, other)
            lit = session.fresh_var()
            session.add_clause(-self.literal, -other.literal, lit)
            session.add_clause(self.literal, -lit)
            session.add_clause(other.literal, -lit)
            return NdBool(self.machine, session.instance, lit)

        return self.machine.with_active(op)

    @typechecked
    def or_(self, other: 'NdBool') -> 'NdBool':
        def op(session: Session) -> NdBool:
            session.check(self, other)
            lit = session.fresh_var()
            session.add_clause(self.literal, other.literal, -lit)
            session.add_clause(-self.literal, lit)
            session.add_clause(-other.literal, lit)
            return NdBool(self.machine, session.instance, lit)

        return self.machine.with_active(op)

    def xor_(self, other: 'NdBool') -> 'NdBool':
        return self.or_(other).and_(self.and_(other).not_())

    def imp_(self, other: 'NdBool') -> 'NdBool':
        return self.not_().or_(other)

    def ndeq(self, rhs: 'NdBool') -> 'NdBool':
        return self.or_(rhs.not_()).and_(self.not_().or_(rhs))

    def value(self) -> bool:
        """
        Returns the value of this boolean in the last solution. Raises
        NoSolutionAvailable if the formula was not solved, was found
        unsatisfiable, or was changed since.
        """
        return self.machine.value(self)

    __invert__ = not_
    __and__ = and_
    __or__ = or_
    __xor__ = xor_

    def __bool__(self):
        raise TypeError("the truth value of an NdBool is not known, "
                        "use value() after solving")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NdBool):
            return NotImplemented
        return self.instance is other.instance and self.literal == other.literal

    def __hash__(self) -> int:
        return hash((id(self.instance), self.literal))

    def __repr__(self) -> str:
        return f"NdBool({self.literal})"
