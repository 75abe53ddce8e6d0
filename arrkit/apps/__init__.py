"""Per-backend bindings of the generic CRUD facade."""

from __future__ import annotations

from arrkit.apps.base import ArrApp
from arrkit.apps.lidarr import Lidarr
from arrkit.apps.prowlarr import Prowlarr
from arrkit.apps.radarr import Radarr
from arrkit.apps.readarr import Readarr
from arrkit.apps.sonarr import Sonarr

__all__ = ["ArrApp", "Lidarr", "Prowlarr", "Radarr", "Readarr", "Sonarr"]
