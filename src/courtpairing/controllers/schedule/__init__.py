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

from courtpairing.controllers.schedule.division_partitioner import (
    balanced_split,
    fit_round_count,
    generate_schedule,
    merge_division_schedules,
    partition_schedules,
    run_scheduler,
    truncate_rounds,
    validate_divisions,
)

__all__ = [
    "balanced_split",
    "fit_round_count",
    "generate_schedule",
    "merge_division_schedules",
    "partition_schedules",
    "run_scheduler",
    "truncate_rounds",
    "validate_divisions",
]
