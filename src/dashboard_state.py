"""Load-once lifecycle for the dashboard: loading, ready or failed."""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

import pandas as pd

from aggregations import compute_all, key_insights
from data_loader import load_listings

logger = logging.getLogger(__name__)


class LoadStatus(Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def _plain(value):
    """Turn numpy/pandas scalars into JSON-friendly Python values."""
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    if hasattr(value, 'item'):
        return _plain(value.item())
    return value


def _records(frame: pd.DataFrame) -> List[Dict[str, Any]]:
    return [{k: _plain(v) for k, v in row.items()} for row in frame.to_dict(orient='records')]


@dataclass(frozen=True)
class DashboardData:
    """Everything the page draws, derived from one load."""

    listings: pd.DataFrame
    summary: Dict[str, Any]
    by_borough: pd.DataFrame
    by_room_type: pd.DataFrame
    price_distribution: pd.DataFrame
    review_distribution: pd.DataFrame
    availability_distribution: pd.DataFrame

    @classmethod
    def from_listings(cls, listings: pd.DataFrame) -> "DashboardData":
        return cls(listings=listings, **compute_all(listings))

    def views(self) -> Dict[str, Any]:
        return {
            'summary': self.summary,
            'by_borough': self.by_borough,
            'by_room_type': self.by_room_type,
            'price_distribution': self.price_distribution,
            'review_distribution': self.review_distribution,
            'availability_distribution': self.availability_distribution,
        }

    def insights(self) -> List[str]:
        return key_insights(self.views())

    def to_dict(self) -> Dict[str, Any]:
        """Aggregates as plain values (listings excluded); NaN and inf become None."""
        return {
            'summary': {k: _plain(v) for k, v in self.summary.items()},
            'by_borough': _records(self.by_borough),
            'by_room_type': _records(self.by_room_type),
            'price_distribution': _records(self.price_distribution),
            'review_distribution': _records(self.review_distribution),
            'availability_distribution': _records(self.availability_distribution),
        }


@dataclass(frozen=True)
class DashboardState:
    status: LoadStatus
    data: Optional[DashboardData] = None
    error: Optional[str] = None

    @classmethod
    def loading(cls) -> "DashboardState":
        return cls(LoadStatus.LOADING)

    @classmethod
    def ready(cls, data: DashboardData) -> "DashboardState":
        return cls(LoadStatus.READY, data=data)

    @classmethod
    def failed(cls, reason: str) -> "DashboardState":
        return cls(LoadStatus.FAILED, error=reason)

    @property
    def is_ready(self) -> bool:
        return self.status is LoadStatus.READY


def load_dashboard(path: Optional[str] = None) -> DashboardState:
    """Read, parse and aggregate once; never leaves the caller stuck loading."""
    try:
        listings = load_listings(path)
        data = DashboardData.from_listings(listings)
    except Exception as e:  # Any read, parse or aggregation error ends in Failed
        logger.exception("Error loading listings data")
        return DashboardState.failed(str(e))
    return DashboardState.ready(data)
