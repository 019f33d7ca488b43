# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
lvlcodes: result codes returned by a license validation check.

Subsystems:
  - codes: the ResultCode enumeration, lookups, and descriptions
  - config: YAML config loading and schema validation
  - logging: structured JSON logger
  - cli: the `lvlcodes` command
"""

__version__ = "1.0.0"
