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

import threading
import time
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

from .backends import Backend, default_backend
from .errors import (ForeignValue, MachineAlreadyInitialized,
                     NoSolutionAvailable, SolverFailure, UninitializedMachine)
from .instance import Assignment, Instance
from .logging import get_logger

if TYPE_CHECKING:
    from .equality import NdEq
    from .ndbool import NdBool

logger = get_logger(__name__)

R = TypeVar("R")


class Session:
    """
    The formula built so far together with the last solution. The solution
    is dropped whenever a variable or a clause is added, so it is always
    a solution of the current formula.
    """

    def __init__(self):
        self.instance = Instance()
        self.assignment: Optional[Assignment] = None

    def fresh_var(self) -> int:
        self.assignment = None
        return self.instance.fresh_var()

    def add_clause(self, *lits: int):
        self.assignment = None
        self.instance.add_clause(lits)

    def check(self, *values: 'NdBool'):
        for value in values:
            if value.instance is not self.instance:
                raise ForeignValue(
                    f"{value!r} does not belong to the current session")

    def get(self, value: 'NdBool') -> bool:
        self.check(value)
        if self.assignment is None:
            raise NoSolutionAvailable(
                "no solution available, call solve_with() first")
        return self.assignment.get(value.literal)


class Machine:
    """
    Owns a single session and mediates every access to it. A machine must
    be initialized before use, and it can be reset to start over with an
    empty formula. Values created before a reset cannot be used afterwards.
    """

    def __init__(self):
        self._session: Optional[Session] = None
        self._lock = threading.RLock()

    @property
    def initialized(self) -> bool:
        return self._session is not None

    def initialize(self):
        """
        Installs an empty session. Raises MachineAlreadyInitialized if this
        machine already has one, use reset() to discard it explicitly.
        """
        with self._lock:
            if self._session is not None:
                raise MachineAlreadyInitialized(
                    "machine is already initialized, call reset() to "
                    "discard the current session")
            self._session = Session()
        logger.debug("session initialized")

    def reset(self):
        """
        Replaces the session with an empty one, discarding all variables,
        clauses and the last solution.
        """
        with self._lock:
            if self._session is not None:
                logger.debug("discarding session with %d variables and "
                             "%d clauses", self._session.instance.num_variables,
                             self._session.instance.num_clauses)
            self._session = Session()

    def with_active(self, op: Callable[[Session], R]) -> R:
        """
        Calls the given function with exclusive access to the session and
        returns its result.
        """
        with self._lock:
            if self._session is None:
                raise UninitializedMachine(
                    "machine is not initialized, call initialize() first")
            return op(self._session)

    @property
    def instance(self) -> Instance:
        return self.with_active(lambda session: session.instance)

    @property
    def num_variables(self) -> int:
        return self.with_active(lambda session: session.instance.num_variables)

    @property
    def num_clauses(self) -> int:
        return self.with_active(lambda session: session.instance.num_clauses)

    @property
    def solved(self) -> bool:
        """
        Returns True if there is a solution of the current formula.
        """
        return self.with_active(lambda session: session.assignment is not None)

    def solve_with(self, backend: Optional[Backend] = None) -> bool:
        """
        Passes the formula to the backend and keeps the returned solution.
        Returns True if a solution was found, and False if the formula is
        unsatisfiable or the backend failed. Exceptions raised by the backend
        are logged and never propagate. The backend given by the
        configuration is used if none is specified.
        """
        if backend is None:
            backend = default_backend()

        def op(session: Session) -> bool:
            instance = session.instance
            session.assignment = None

            start = time.perf_counter()
            try:
                assignment = backend(instance)
            except SolverFailure as error:
                logger.warning("backend %r failed: %s", backend, error)
                return False
            except Exception as error:
                logger.warning("backend %r raised %s: %s", backend,
                               type(error).__name__, error)
                return False

            if assignment is not None and not assignment.satisfies(instance):
                logger.warning("backend %r returned an invalid solution",
                               backend)
                return False

            logger.debug("solved %d variables and %d clauses in %.3fs: %s",
                         instance.num_variables, instance.num_clauses,
                         time.perf_counter() - start,
                         "sat" if assignment is not None else "unsat")
            session.assignment = assignment
            return assignment is not None

        return self.with_active(op)

    def ndassert(self, value: 'NdBool'):
        """
        Forces the given value to be true in every solution.
        """
        def op(session: Session):
            session.check(value)
            session.add_clause(value.literal)

        self.with_active(op)

    def ndassert_eq(self, lhs: 'NdEq[Any]', rhs: Any):
        self.ndassert(lhs.ndeq(rhs))

    def ndassert_ne(self, lhs: 'NdEq[Any]', rhs: Any):
        self.ndassert(lhs.ndne(rhs))

    def value(self, value: 'NdBool') -> bool:
        """
        Returns the value in the last solution.
        """
        return self.with_active(lambda session: session.get(value))

    def __repr__(self) -> str:
        if self._session is None:
            return "Machine(uninitialized)"
        return f"Machine({self._session.instance!r})"
