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

"""Tests for ellipsoid constants."""

import dataclasses
import math

from absl.testing import absltest
from absl.testing import parameterized
from geoutm import ellipsoid


class EllipsoidTest(parameterized.TestCase):

  def test_wgs84_is_memoized(self):
    self.assertIs(ellipsoid.wgs84(), ellipsoid.WGS84)
    self.assertIs(ellipsoid.wgs84(), ellipsoid.wgs84())

  def test_wgs84_defining_parameters(self):
    c = ellipsoid.WGS84
    self.assertEqual(c.a, 6378137.0)
    self.assertEqual(c.f, 1 / 298.2572236)
    self.assertEqual(c.k0, 0.9996)

  @parameterized.parameters(
      ("b", 6356752.3142, 3),
      ("esq", 0.00669437999014, 11),
      ("e0sq", 0.00673949674228, 11),
      ("e", 0.0818191908426, 10),
  )
  def test_wgs84_derived_values(self, name, expected, places):
    self.assertAlmostEqual(getattr(ellipsoid.WGS84, name), expected,
                           places=places)

  def test_eccentricity_relations(self):
    c = ellipsoid.WGS84
    self.assertAlmostEqual(c.esq, c.e**2, places=15)
    self.assertAlmostEqual(c.esq, 2 * c.f - c.f**2, places=14)
    self.assertAlmostEqual(c.e0sq, (c.a**2 - c.b**2) / c.b**2, places=12)
    # e1 reduces to the third flattening f / (2 - f).
    self.assertAlmostEqual(c.e1, c.f / (2 - c.f), places=14)

  def test_quarter_meridian(self):
    c = ellipsoid.WGS84
    # At phi = pi/2 every sine term vanishes.
    self.assertAlmostEqual(c.a * c.mc1 * math.pi / 2, 10_001_965.729,
                           delta=0.01)

  def test_meridian_coefficients(self):
    c = ellipsoid.WGS84
    esq = c.esq
    self.assertEqual(c.mc1,
                     1 - esq * (1 / 4 + esq * (3 / 64 + 5 / 256 * esq)))
    self.assertEqual(c.mc2, esq * (3 / 8 + esq * (3 / 32 + 45 / 1024 * esq)))
    self.assertEqual(c.mc3, math.pow(esq, 2) * (15 / 256 + esq * 45 / 1204))
    self.assertEqual(c.mc4, math.pow(esq, 3) * 35 / 3072)
    self.assertGreater(c.mc1, c.mc2)
    self.assertGreater(c.mc2, c.mc3)
    self.assertGreater(c.mc3, c.mc4)

  def test_sphere(self):
    c = ellipsoid.derive(1.0, math.inf, 1.0)
    self.assertEqual(c.b, 1.0)
    self.assertEqual(c.esq, 0.0)
    self.assertEqual(c.e1, 0.0)
    self.assertEqual(c.mc1, 1.0)
    self.assertEqual((c.mc2, c.mc3, c.mc4), (0.0, 0.0, 0.0))

  def test_constants_are_frozen(self):
    with self.assertRaises(dataclasses.FrozenInstanceError):
      ellipsoid.WGS84.a = 1.0  # pytype: disable=attribute-error


if __name__ == "__main__":
  absltest.main()
