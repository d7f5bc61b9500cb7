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
An ambient machine for the current execution context, so short scripts
do not have to pass a machine around. Every thread and asyncio task sees
its own machine.

    init()
    b0, b1 = fresh(), fresh()
    ndassert(b0 & b1)
    assert solve_by()
    assert b0.value() and b1.value()
"""

import contextvars
from typing import Any, Optional

from .backends import Backend
from .equality import NdEq
from .errors import MachineAlreadyInitialized, UninitializedMachine
from .machine import Machine
from .ndbool import NdBool

_MACHINE: contextvars.ContextVar[Optional[Machine]] = \
    contextvars.ContextVar("ndsat_machine", default=None)


def init() -> Machine:
    if _MACHINE.get() is not None:
        raise MachineAlreadyInitialized(
            "context already has a machine, call reset() to discard it")
    machine = Machine()
    machine.initialize()
    _MACHINE.set(machine)
    return machine


def reset() -> Machine:
    machine = Machine()
    machine.initialize()
    _MACHINE.set(machine)
    return machine


def current() -> Machine:
    machine = _MACHINE.get()
    if machine is None:
        raise UninitializedMachine(
            "no machine in this context, call init() first")
    return machine


def fresh() -> NdBool:
    return NdBool.fresh(current())


def true() -> NdBool:
    return NdBool.constant_true(current())


def false() -> NdBool:
    return NdBool.constant_false(current())


def ndassert(value: NdBool):
    current().ndassert(value)


def ndassert_eq(lhs: NdEq[Any], rhs: Any):
    current().ndassert_eq(lhs, rhs)


def ndassert_ne(lhs: NdEq[Any], rhs: Any):
    current().ndassert_ne(lhs, rhs)


def solve_by(backend: Optional[Backend] = None) -> bool:
    return current().solve_with(backend)
