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


class NdsatError(Exception):
    """Base exception for all ndsat errors."""
    pass


class UninitializedMachine(NdsatError):
    """Raised when a machine is used before initialize() was called."""
    pass


class MachineAlreadyInitialized(NdsatError):
    """Raised when initialize() is called on a machine holding a session."""
    pass


class NoSolutionAvailable(NdsatError):
    """Raised when a value is read while there is no current solution."""
    pass


class ForeignValue(NdsatError):
    """Raised when a value is used outside of the session it was made in."""
    pass


class SolverFailure(NdsatError):
    """Raised by a backend that could not produce or interpret a result."""
    pass
