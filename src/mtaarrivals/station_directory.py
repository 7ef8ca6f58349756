"""Static station directory built from GTFS stops data."""

import csv
import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .exceptions import DirectoryLoadError
from .models import StationRecord

logger = logging.getLogger(__name__)


class StationDirectory:
    """Bidirectional lookup between stop IDs and station names.

    Built once from tabular rows and read-only afterwards. Both mappings are
    derived from the same records, so they always agree with each other.
    """

    def __init__(self, records: Iterable[StationRecord] = ()):
        id_to_name: Dict[str, str] = {}
        name_to_ids: Dict[str, List[str]] = {}  # name -> [stop_ids], source order

        for record in records:
            # Later duplicates of a stop ID override earlier ones
            id_to_name[record.stop_id] = record.name
            name_to_ids.setdefault(record.name, []).append(record.stop_id)

        self._id_to_name = id_to_name
        self._name_to_ids: Dict[str, Tuple[str, ...]] = {
            name: tuple(ids) for name, ids in name_to_ids.items()
        }

    @classmethod
    def build(cls, rows: Iterable[Sequence[str]]) -> "StationDirectory":
        """
        Build a directory from raw table rows.

        Args:
            rows: Ordered rows where field 0 is the stop ID and field 1 the
                station name. The first row is a header and is skipped, as are
                rows with fewer than two fields. Extra fields are ignored.

        Returns:
            StationDirectory instance.
        """
        return cls(_records_from_rows(rows))

    @property
    def id_to_name(self) -> Mapping[str, str]:
        return MappingProxyType(self._id_to_name)

    @property
    def name_to_ids(self) -> Mapping[str, Tuple[str, ...]]:
        return MappingProxyType(self._name_to_ids)

    def name_for(self, stop_id: str, default: Optional[str] = None) -> Optional[str]:
        """Get the station name for a stop ID."""
        return self._id_to_name.get(stop_id, default)

    def ids_for(self, name: str) -> List[str]:
        """Get every stop ID sharing a station name, in source order."""
        return list(self._name_to_ids.get(name, ()))

    def __contains__(self, stop_id: object) -> bool:
        return stop_id in self._id_to_name

    def __len__(self) -> int:
        return len(self._id_to_name)

    def __repr__(self) -> str:
        return f"StationDirectory({len(self._id_to_name)} stops, {len(self._name_to_ids)} names)"


def _records_from_rows(rows: Iterable[Sequence[str]]) -> Iterable[StationRecord]:
    for index, row in enumerate(rows):
        if index == 0:
            continue  # header
        if len(row) < 2:
            continue
        yield StationRecord(stop_id=row[0], name=row[1])


def _read_rows(path: str) -> List[List[str]]:
    try:
        with open(path, "r", newline="", encoding="utf-8") as f:
            return list(csv.reader(f))
    except OSError as e:
        raise DirectoryLoadError(f"failed to open stops file: {e}") from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise DirectoryLoadError(f"failed to parse CSV: {e}") from e


def load_station_directory(path: str) -> StationDirectory:
    """
    Load a station directory from a GTFS stops CSV file.

    Args:
        path: Path to stops.csv / stops.txt (stop_id, stop_name, ...).

    Returns:
        StationDirectory instance.

    Raises:
        DirectoryLoadError: If the file is unreadable or not valid CSV.
    """
    logger.info(f"Loading station directory from {path}")
    directory = StationDirectory.build(_read_rows(path))
    logger.info(f"Loaded {len(directory)} stops")
    return directory


def load_stop_names(path: str) -> Dict[str, str]:
    """Load only the stop ID -> station name mapping from a stops CSV file."""
    return dict(load_station_directory(path).id_to_name)
