"""Scheduling algorithms for rotating and fixed partner play."""

# Court Pairing
# Copyright (C) 2025  Court Pairing developers
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

from courtpairing.pairing.estimate import RoundEstimate, estimate_rounds
from courtpairing.pairing.fixed import circle_method_rounds, generate_fixed, make_teams
from courtpairing.pairing.rotating import generate_rotating

__all__ = [
    "RoundEstimate",
    "circle_method_rounds",
    "estimate_rounds",
    "generate_fixed",
    "generate_rotating",
    "make_teams",
]
