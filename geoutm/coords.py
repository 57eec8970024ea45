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

"""Coordinate value types."""

from collections.abc import Iterator
import dataclasses
import enum

import dataclasses_json


class Hemisphere(str, enum.Enum):
  """Selects the UTM northing false origin."""
  NORTH = "north"
  SOUTH = "south"

  @classmethod
  def parse(cls, value: "str | Hemisphere") -> "Hemisphere":
    """Accepts a member, "north"/"south" (any case), or "N"/"S"."""
    if isinstance(value, Hemisphere):
      return value
    name = str(value).strip().lower()
    name = {"n": "north", "s": "south"}.get(name, name)
    try:
      return cls(name)
    except ValueError:
      raise ValueError(
          f"Unknown hemisphere {value!r}, expected 'north' or 'south'."
      ) from None

  def epsg(self, zone: int) -> str:
    """EPSG code of the WGS84 UTM projection for the given zone."""
    return f"EPSG:32{6 if self is Hemisphere.NORTH else 7}{zone:02}"


@dataclasses.dataclass(frozen=True)
class GeodeticPoint(dataclasses_json.DataClassJsonMixin):
  """WGS84 latitude/longitude, in decimal degrees."""
  latitude: float
  longitude: float

  def __iter__(self) -> Iterator[float]:
    return iter((self.latitude, self.longitude))


@dataclasses.dataclass(frozen=True)
class UtmPoint(dataclasses_json.DataClassJsonMixin):
  """UTM grid coordinates, in meters.

  Easting includes the 500 km false easting; in the southern hemisphere
  northing includes the 10,000 km false northing.
  """
  easting: float
  northing: float

  def __iter__(self) -> Iterator[float]:
    return iter((self.easting, self.northing))
