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

"""Default config for the geoutm.convert command line.

Fields can be overridden on the command line, eg.
  --config=geoutm/configs/default.py --config.strict=True
"""

from ml_collections import config_dict as cd


def get_config():
  config = cd.ConfigDict()
  config.strict = False  # Reject inputs outside the UTM envelope.
  config.output_format = "text"  # "text" or "json".
  config.precision = 10  # Decimal places in text output.
  return config
