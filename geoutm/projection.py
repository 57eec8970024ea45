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

"""Conversions between WGS84 lat/lon and UTM easting/northing.

Transverse Mercator series expansions on the WGS84 ellipsoid (Snyder, Map
Projections - A Working Manual, 1987). Both directions are total functions:
nothing is validated and nothing is raised for finite input. Results outside
the UTM envelope (roughly latitude -80..84) are numerically defined but not
geodetically meaningful. See `geoutm.validation` for opt-in checks.

Example:
  >>> forward(59.805241567229885, 11.40618711509996)
  UtmPoint(easting=634980.0000762338, northing=6632172.011406599)
  >>> inverse(634980.0, 6632172.0, 32, "north")
  GeodeticPoint(latitude=59.805241567229885, longitude=11.40618711509996)
"""

import math

from geoutm import coords
from geoutm import ellipsoid

FALSE_EASTING = 500_000
FALSE_NORTHING_SOUTH = 10_000_000
ZONE_WIDTH_DEG = 6

_C = ellipsoid.WGS84
_DRAD = ellipsoid.DEG_TO_RAD


def _zone_number(longitude: float) -> int:
  # Not wrapped: 180 maps to 61, whose meridian coincides with zone 1's.
  return 1 + math.floor((longitude + 180) / ZONE_WIDTH_DEG)


def _central_meridian(zone: int) -> int:
  return 3 + ZONE_WIDTH_DEG * (zone - 1) - 180


def forward(latitude: float, longitude: float) -> coords.UtmPoint:
  """Converts WGS84 latitude/longitude (degrees) to UTM easting/northing.

  The zone is implied by the longitude. Southern hemisphere points are
  recognized by a negative raw northing and get the 10,000 km false northing.

  Args:
    latitude: Latitude in decimal degrees.
    longitude: Longitude in decimal degrees.

  Returns:
    UtmPoint with easting and northing in meters.
  """
  phi = latitude * _DRAD
  zcm = _central_meridian(_zone_number(longitude))

  n = _C.a / math.sqrt(1 - math.pow(_C.e * math.sin(phi), 2))
  t = math.pow(math.tan(phi), 2)
  c = _C.e0sq * math.pow(math.cos(phi), 2)
  a = (longitude - zcm) * _DRAD * math.cos(phi)
  a2 = math.pow(a, 2)

  x = _C.k0 * n * a * (
      1 + a2 * ((1 - t + c) / 6
                + a2 * (5 - 18 * t + math.pow(t, 2) + 72 * c
                        - 58 * _C.e0sq) / 120)
  ) + FALSE_EASTING

  m = phi * _C.mc1
  m = m - math.sin(2 * phi) * _C.mc2
  m = m + math.sin(4 * phi) * _C.mc3
  m = m - math.sin(6 * phi) * _C.mc4
  m = m * _C.a

  y = _C.k0 * (m + n * math.tan(phi) * (
      a2 * (1 / 2 + a2 * (
          (5 - t + 9 * c + 4 * math.pow(c, 2)) / 24
          + a2 * (61 - 58 * t + math.pow(t, 2) + 600 * c
                  - 330 * _C.e0sq) / 720))))

  if y < 0:
    y = y + FALSE_NORTHING_SOUTH
  return coords.UtmPoint(easting=x, northing=y)


def inverse(easting: float, northing: float, zone: int,
            hemisphere: coords.Hemisphere | str) -> coords.GeodeticPoint:
  """Converts UTM easting/northing to WGS84 latitude/longitude (degrees).

  Args:
    easting: Easting in meters, including the false easting.
    northing: Northing in meters, including the false northing in the south.
    zone: UTM zone number (1-60). Not range checked.
    hemisphere: `Hemisphere` or a string accepted by `Hemisphere.parse`.

  Returns:
    GeodeticPoint with latitude and longitude in decimal degrees.
  """
  if coords.Hemisphere.parse(hemisphere) is coords.Hemisphere.SOUTH:
    northing = northing - FALSE_NORTHING_SOUTH

  m = northing / _C.k0
  mu = m / (_C.a * _C.mc1)

  # Footpoint latitude.
  e1 = _C.e1
  phi_1 = mu + e1 * (3 / 2 - 27 / 32 * math.pow(e1, 2)) * math.sin(2 * mu)
  phi_1 = phi_1 + math.pow(e1, 2) * (
      21 / 16 - 55 / 32 * math.pow(e1, 2)) * math.sin(4 * mu)
  phi_1 = phi_1 + math.pow(e1, 3) * (
      math.sin(6 * mu) * 151 / 96 + e1 * math.sin(8 * mu) * 1097 / 512)

  c_1 = _C.e0sq * math.pow(math.cos(phi_1), 2)
  t_1 = math.pow(math.tan(phi_1), 2)
  n_1 = _C.a / math.sqrt(1 - math.pow(_C.e * math.sin(phi_1), 2))
  r_1 = n_1 * (1 - _C.esq) / (1 - math.pow(_C.e * math.sin(phi_1), 2))
  d = (easting - FALSE_EASTING) / (n_1 * _C.k0)
  d2 = d * d  # Overflows to inf for huge eastings instead of raising.

  phi = d2 * (1 / 2 - d2 * (5 + 3 * t_1 + 10 * c_1 - 4 * math.pow(c_1, 2)
                            - 9 * _C.e0sq) / 24)
  phi = phi + d2 * d2 * d2 * (
      61 + 90 * t_1 + 298 * c_1 + 45 * math.pow(t_1, 2) - 252 * _C.e0sq
      - 3 * math.pow(c_1, 2)) / 720
  phi = phi_1 - n_1 * math.tan(phi_1) / r_1 * phi

  lon = d * (
      1 + d2 * ((-1 - 2 * t_1 - c_1) / 6
                + d2 * (5 - 2 * c_1 + 28 * t_1 - 3 * math.pow(c_1, 2)
                        + 8 * _C.e0sq + 24 * math.pow(t_1, 2)) / 120)
  ) / math.cos(phi_1)

  zcm = _central_meridian(zone)
  return coords.GeodeticPoint(latitude=phi / _DRAD,
                              longitude=zcm + lon / _DRAD)
