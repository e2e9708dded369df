import logging
import math
import os
from typing import NamedTuple

from dotenv import load_dotenv

load_dotenv()

DATA_PATH = os.getenv("STR_DASHBOARD_DATA", "data/airbnb.csv")
LOG_LEVEL = os.getenv("STR_DASHBOARD_LOG_LEVEL", "INFO").upper()
MAP_LIMIT = int(os.getenv("STR_DASHBOARD_MAP_LIMIT", "500"))  # markers drawn on the map


class RangeBin(NamedTuple):
    """One histogram bucket, both bounds inclusive."""
    label: str
    min: float
    max: float


# Columns parsed as numbers, 0 when missing or unparseable
INTEGER_FIELDS = [
    'id', 'host_id', 'price', 'minimum_nights', 'number_of_reviews',
    'calculated_host_listings_count', 'availability_365',
]
# Columns parsed as numbers, NaN when missing (0 is a real coordinate / rate)
NULLABLE_FIELDS = ['latitude', 'longitude', 'reviews_per_month']

BOROUGH_FIELD = 'neighbourhood_group'
ROOM_TYPE_FIELD = 'room_type'

PRICE_BINS = [
    RangeBin('$0-50', 0, 50),
    RangeBin('$51-100', 51, 100),
    RangeBin('$101-200', 101, 200),
    RangeBin('$201-500', 201, 500),
    RangeBin('$500+', 501, math.inf),
]

REVIEW_BINS = [
    RangeBin('0 Reviews', 0, 0),
    RangeBin('1-10 Reviews', 1, 10),
    RangeBin('11-50 Reviews', 11, 50),
    RangeBin('51-100 Reviews', 51, 100),
    RangeBin('100+ Reviews', 101, math.inf),
]

AVAILABILITY_BINS = [
    RangeBin('0-30 days', 0, 30),
    RangeBin('31-90 days', 31, 90),
    RangeBin('91-180 days', 91, 180),
    RangeBin('181-365 days', 181, 365),
]

NYC_CENTER = [40.7128, -74.0060]  # fallback map centre


def configure_logging(level=None):
    """Set up root logging once for the app."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
