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

"""Tests for coordinate value types."""

import dataclasses
import json

from absl.testing import absltest
from absl.testing import parameterized
from geoutm import coords


class HemisphereTest(parameterized.TestCase):

  @parameterized.parameters(
      ("north", coords.Hemisphere.NORTH),
      ("North", coords.Hemisphere.NORTH),
      (" N ", coords.Hemisphere.NORTH),
      ("south", coords.Hemisphere.SOUTH),
      ("s", coords.Hemisphere.SOUTH),
      (coords.Hemisphere.SOUTH, coords.Hemisphere.SOUTH),
  )
  def test_parse(self, value, expected):
    self.assertIs(coords.Hemisphere.parse(value), expected)

  @parameterized.parameters("east", "", "northern")
  def test_parse_fails(self, value):
    with self.assertRaisesRegex(ValueError, "Unknown hemisphere"):
      coords.Hemisphere.parse(value)

  @parameterized.parameters(
      (coords.Hemisphere.NORTH, 18, "EPSG:32618"),
      (coords.Hemisphere.SOUTH, 10, "EPSG:32710"),
      (coords.Hemisphere.NORTH, 49, "EPSG:32649"),
      (coords.Hemisphere.SOUTH, 9, "EPSG:32709"),
  )
  def test_epsg(self, hemisphere, zone, expected_epsg):
    self.assertEqual(hemisphere.epsg(zone), expected_epsg)


class PointsTest(absltest.TestCase):

  def test_utm_point_json(self):
    point = coords.UtmPoint(easting=391984.4643429378,
                            northing=6464146.921846279)
    self.assertEqual(json.loads(point.to_json()),
                     {"easting": 391984.4643429378,
                      "northing": 6464146.921846279})
    self.assertEqual(coords.UtmPoint.from_json(point.to_json()), point)

  def test_geodetic_point_dict(self):
    point = coords.GeodeticPoint(latitude=-31.95, longitude=115.85)
    self.assertEqual(point.to_dict(), {"latitude": -31.95, "longitude": 115.85})

  def test_unpacking(self):
    lat, lon = coords.GeodeticPoint(1.0, 2.0)
    self.assertEqual((lat, lon), (1.0, 2.0))
    self.assertEqual(tuple(coords.UtmPoint(3.0, 4.0)), (3.0, 4.0))

  def test_frozen(self):
    point = coords.UtmPoint(3.0, 4.0)
    with self.assertRaises(dataclasses.FrozenInstanceError):
      point.easting = 5.0  # pytype: disable=attribute-error


if __name__ == "__main__":
  absltest.main()
