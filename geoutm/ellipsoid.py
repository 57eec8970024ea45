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

"""WGS84 ellipsoid constants shared by the UTM projections."""

import dataclasses
import functools
import math

from absl import logging

SEMI_MAJOR_AXIS = 6_378_137.0  # a, in meters.
INVERSE_FLATTENING = 298.2572236  # 1/f.
SCALE_FACTOR = 0.9996  # k0, on the central meridian.

DEG_TO_RAD = math.pi / 180


@dataclasses.dataclass(frozen=True)
class EllipsoidConstants:
  """Scalars derived from the ellipsoid's defining parameters.

  Attributes:
    a: Semi-major axis, in meters.
    b: Semi-minor axis, in meters.
    f: Flattening.
    k0: Scale factor on the central meridian.
    e: First eccentricity.
    esq: First eccentricity squared.
    e0sq: Second eccentricity squared.
    e1: Third flattening-like term, used by the footpoint latitude series.
    mc1: Meridian arc coefficient of phi.
    mc2: Meridian arc coefficient of sin(2 phi).
    mc3: Meridian arc coefficient of sin(4 phi).
    mc4: Meridian arc coefficient of sin(6 phi).
  """
  a: float
  b: float
  f: float
  k0: float
  e: float
  esq: float
  e0sq: float
  e1: float
  mc1: float
  mc2: float
  mc3: float
  mc4: float


def derive(semi_major_axis: float, inverse_flattening: float,
           scale_factor: float) -> EllipsoidConstants:
  """Derives projection constants from a, 1/f and k0."""
  a = semi_major_axis
  f = 1 / inverse_flattening
  b = a * (1 - f)
  e = math.sqrt(1 - math.pow(b / a, 2))
  esq = math.pow(e, 2)
  e0sq = esq / (1 - esq)
  e1 = (1 - math.sqrt(1 - esq)) / (1 + math.sqrt(1 - esq))

  mc1 = 1 - esq * (1 / 4 + esq * (3 / 64 + 5 / 256 * esq))
  mc2 = esq * (3 / 8 + esq * (3 / 32 + 45 / 1024 * esq))
  # 1204 (not 1024) is part of the published coefficients we reproduce.
  mc3 = math.pow(esq, 2) * (15 / 256 + esq * 45 / 1204)
  mc4 = math.pow(esq, 3) * 35 / 3072

  constants = EllipsoidConstants(a=a, b=b, f=f, k0=scale_factor, e=e, esq=esq,
                                 e0sq=e0sq, e1=e1, mc1=mc1, mc2=mc2, mc3=mc3,
                                 mc4=mc4)
  logging.vlog(1, "Derived ellipsoid constants: %s", constants)
  return constants


@functools.cache
def wgs84() -> EllipsoidConstants:
  return derive(SEMI_MAJOR_AXIS, INVERSE_FLATTENING, SCALE_FACTOR)


WGS84 = wgs84()
