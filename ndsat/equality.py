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

from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .ndbool import NdBool

Rhs = TypeVar("Rhs")


class NdEq(Generic[Rhs]):
    """
    Mixin for types that can encode equality with a right hand side of
    type Rhs as a nondeterministic boolean. Inequality is derived as the
    negation of equality.
    """

    __slots__ = ()

    def ndeq(self, rhs: Rhs) -> 'NdBool':
        raise NotImplementedError()

    def ndne(self, rhs: Rhs) -> 'NdBool':
        return self.ndeq(rhs).not_()
