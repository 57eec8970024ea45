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

r"""Converts a single point between WGS84 lat/lon and UTM.

Example command lines:
python -m geoutm.convert --direction=forward \
--latitude=-31.953512 --longitude=115.857048

python -m geoutm.convert --direction=inverse \
--easting=391984.46 --northing=6464146.92 --zone=50 --hemisphere=south \
--config=geoutm/configs/default.py --config.output_format=json
"""

import os

from absl import app
from absl import flags
from absl import logging
from geoutm import coords
from geoutm import projection
from geoutm import validation
import ml_collections
from ml_collections import config_flags

_DEFAULT_CONFIG = os.path.join(os.path.dirname(__file__), "configs",
                               "default.py")

flags.DEFINE_enum("direction", "forward", ["forward", "inverse"],
                  "forward: lat/lon to UTM. inverse: UTM to lat/lon.")
flags.DEFINE_float("latitude", None, "Latitude in decimal degrees.")
flags.DEFINE_float("longitude", None, "Longitude in decimal degrees.")
flags.DEFINE_float("easting", None, "UTM easting in meters.")
flags.DEFINE_float("northing", None, "UTM northing in meters.")
flags.DEFINE_integer("zone", None, "UTM zone number (1-60).")
flags.DEFINE_string("hemisphere", None, "north or south (or N/S).")
config_flags.DEFINE_config_file("config", _DEFAULT_CONFIG,
                                "Conversion config.", lock_config=True)
FLAGS = flags.FLAGS


def convert_forward(latitude: float, longitude: float,
                    config: ml_collections.ConfigDict) -> coords.UtmPoint:
  if config.strict:
    validation.check_latitude(latitude)
    validation.check_longitude(longitude)
  return projection.forward(latitude, longitude)


def convert_inverse(easting: float, northing: float, zone: int,
                    hemisphere: str,
                    config: ml_collections.ConfigDict) -> coords.GeodeticPoint:
  hemisphere = coords.Hemisphere.parse(hemisphere)
  if config.strict:
    validation.check_easting(easting)
    validation.check_northing(northing)
    validation.check_zone(zone)
  return projection.inverse(easting, northing, zone, hemisphere)


def format_point(point: coords.UtmPoint | coords.GeodeticPoint,
                 config: ml_collections.ConfigDict) -> str:
  """Renders a point as whitespace separated values or JSON."""
  if config.output_format == "json":
    return point.to_json()
  assert config.output_format == "text", (
      f"Unsupported output_format: {config.output_format}")
  return " ".join(f"{v:.{config.precision}f}" for v in point)


def run(config: ml_collections.ConfigDict, direction: str, **kwargs) -> str:
  """Runs one conversion and returns the formatted result."""
  if direction == "forward":
    point = convert_forward(kwargs["latitude"], kwargs["longitude"], config)
  else:
    point = convert_inverse(kwargs["easting"], kwargs["northing"],
                            kwargs["zone"], kwargs["hemisphere"], config)
  logging.info("Converted (%s) %s -> %s", direction, kwargs, point)
  return format_point(point, config)


def main(argv):
  if len(argv) > 1:
    raise app.UsageError("Too many command-line arguments.")
  logging.info("Config: %s", FLAGS.config)
  if FLAGS.direction == "forward":
    required = ("latitude", "longitude")
  else:
    required = ("easting", "northing", "zone", "hemisphere")
  missing = [name for name in required if FLAGS[name].value is None]
  if missing:
    raise app.UsageError(
        f"--direction={FLAGS.direction} requires: {', '.join(missing)}")
  try:
    result = run(FLAGS.config, FLAGS.direction,
                 **{name: FLAGS[name].value for name in required})
  except ValueError as e:  # Includes validation.OutOfRangeError.
    logging.error("Conversion rejected: %s", e)
    raise app.UsageError(str(e)) from e
  print(result)


def run_main():
  app.run(main)


if __name__ == "__main__":
  run_main()
