"""Static marine reference data.

Reference data that doesn't change with API calls: the fixed dashboard
locations, named ocean regions and the sea-state / temperature scales.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from tidepool.reference.conditions import temperature_condition as temperature_condition
from tidepool.reference.conditions import wave_condition as wave_condition
from tidepool.reference.geography import DASHBOARD_LOCATIONS as DASHBOARD_LOCATIONS
from tidepool.reference.geography import OCEAN_REGIONS as OCEAN_REGIONS
from tidepool.reference.geography import BoundingBox as BoundingBox
from tidepool.reference.geography import NamedLocation as NamedLocation
from tidepool.reference.geography import location_name as location_name
