# Copyright 2025 DeepMind Technologies Limited.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Opt-in checks for the UTM operational envelope.

`projection.forward` and `projection.inverse` never validate their inputs.
Callers that want to reject out-of-envelope values call these first.
"""

import math

MIN_LATITUDE, MAX_LATITUDE = -80.0, 84.0
MIN_LONGITUDE, MAX_LONGITUDE = -180.0, 180.0
MIN_ZONE, MAX_ZONE = 1, 60
MIN_EASTING, MAX_EASTING = 100_000.0, 1_000_000.0  # [min, max).
MIN_NORTHING, MAX_NORTHING = 0.0, 10_000_000.0


class OutOfRangeError(ValueError):
  pass


def _check(name, value, low, high, *, high_inclusive=True):
  upper_ok = value <= high if high_inclusive else value < high
  if not low <= value or not upper_ok:
    bracket = "]" if high_inclusive else ")"
    raise OutOfRangeError(
        f"{name} {value} out of range [{low}, {high}{bracket}.")


def check_latitude(latitude: float) -> None:
  _check("latitude", latitude, MIN_LATITUDE, MAX_LATITUDE)


def check_longitude(longitude: float) -> None:
  _check("longitude", longitude, MIN_LONGITUDE, MAX_LONGITUDE)


def check_zone(zone: int) -> None:
  if not math.isfinite(zone) or int(zone) != zone:
    raise OutOfRangeError(f"zone {zone} is not an integer.")
  _check("zone", zone, MIN_ZONE, MAX_ZONE)


def check_easting(easting: float) -> None:
  _check("easting", easting, MIN_EASTING, MAX_EASTING, high_inclusive=False)


def check_northing(northing: float) -> None:
  _check("northing", northing, MIN_NORTHING, MAX_NORTHING)
