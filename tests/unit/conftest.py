"""Unit test configuration.

Unit tests should be fast and isolated - no network access.
"""

import pytest


pytestmark = pytest.mark.unit
