import logging

import numpy as np
import pandas as pd

from config import (
    AVAILABILITY_BINS,
    BOROUGH_FIELD,
    PRICE_BINS,
    REVIEW_BINS,
    ROOM_TYPE_FIELD,
)

logger = logging.getLogger(__name__)

LOW_REVIEW_MAX = 10  # "few reviews" cut-off used by key_insights
LOW_AVAILABILITY_MAX = 90  # "limited availability" cut-off, in days


def _numeric(df, field, fill=0.0):
    """Return a numeric column, or a constant column when it is missing."""
    if field in df.columns:
        return df[field]
    return pd.Series(fill, index=df.index, dtype=float)


def _mean(series, total):
    if total == 0:
        return np.nan  # Undefined, not 0
    return float(series.sum()) / total


def compute_summary(df):
    """Headline numbers for the four stat cards."""
    total = len(df)
    return {
        'total_listings': total,
        'avg_price': _mean(_numeric(df, 'price'), total),
        'avg_reviews': _mean(_numeric(df, 'number_of_reviews'), total),
        'avg_availability': _mean(_numeric(df, 'availability_365'), total),
    }


def _fmt(value, decimals):
    if pd.isna(value):
        return 'n/a'
    return f"{value:.{decimals}f}"


def format_summary(summary):
    """Render summary values the way the stat cards show them."""
    return {
        'total_listings': f"{summary['total_listings']:,}",
        'avg_price': _fmt(summary['avg_price'], 2),
        'avg_reviews': _fmt(summary['avg_reviews'], 2),
        'avg_availability': _fmt(summary['avg_availability'], 0),
    }


def compute_category_rollup(df, key_field, value_field='price'):
    """
    Count listings and average price per category.

    Categories keep the order in which they first appear. A missing key
    column puts every listing in a single '' category.
    """
    if key_field in df.columns:
        keys = df[key_field]
    else:
        keys = pd.Series('', index=df.index)
    frame = pd.DataFrame({
        'name': keys.to_numpy(),
        'value': _numeric(df, value_field).to_numpy(),
    })
    rollup = (frame.groupby('name', sort=False, dropna=False)
                   .agg(count=('value', 'size'), total_price=('value', 'sum'))
                   .reset_index())
    rollup['avg_price'] = rollup['total_price'] / rollup['count']
    return rollup


def validate_bins(bins):
    """Bins must be ordered and must not overlap; gaps between them are fine."""
    previous = None
    for b in bins:
        if b.min > b.max:
            raise ValueError(f"Bin {b.label!r} has min {b.min} greater than max {b.max}")
        if previous is not None and b.min <= previous.max:
            raise ValueError(f"Bin {b.label!r} overlaps or precedes bin {previous.label!r}")
        previous = b


def compute_histogram(df, bins, value_field):
    """Count listings whose value lies in each inclusive [min, max] bin."""
    validate_bins(bins)
    values = _numeric(df, value_field, fill=np.nan)  # Missing column matches no bin
    rows = []
    for b in bins:
        rows.append({
            'range': b.label,
            'min': b.min,
            'max': b.max,
            'count': int(values.between(b.min, b.max).sum()),
        })
    return pd.DataFrame(rows, columns=['range', 'min', 'max', 'count'])


def compute_all(df):
    """Every view the dashboard draws, computed from one listings frame."""
    views = {
        'summary': compute_summary(df),
        'by_borough': compute_category_rollup(df, BOROUGH_FIELD),
        'by_room_type': compute_category_rollup(df, ROOM_TYPE_FIELD),
        'price_distribution': compute_histogram(df, PRICE_BINS, 'price'),
        'review_distribution': compute_histogram(df, REVIEW_BINS, 'number_of_reviews'),
        'availability_distribution': compute_histogram(df, AVAILABILITY_BINS, 'availability_365'),
    }
    logger.debug("Computed views for %d listings", len(df))
    return views


def _share_up_to(hist, limit, total):
    # Listings in bins that end at or below the limit
    return hist.loc[hist['max'] <= limit, 'count'].sum() / total


def key_insights(views):
    """Short sentences describing the data, for the insights card."""
    total = views['summary']['total_listings']
    if total == 0:
        return []

    insights = []
    boroughs = views['by_borough']
    if not boroughs.empty:
        top = boroughs.loc[boroughs['count'].idxmax()]
        insights.append(
            f"{top['name']} has the most listings ({top['count']:,}, {top['count'] / total:.0%} of the total)"
        )
        priciest = boroughs.loc[boroughs['avg_price'].idxmax()]
        insights.append(
            f"{priciest['name']} has the highest average price (${priciest['avg_price']:,.0f} per night)"
        )

    rooms = views['by_room_type']
    if not rooms.empty:
        common = rooms.loc[rooms['count'].idxmax()]
        insights.append(f"{common['name']} is the most common room type ({common['count'] / total:.0%})")

    prices = views['price_distribution']
    if prices['count'].sum() > 0:
        busiest = prices.loc[prices['count'].idxmax()]
        insights.append(f"The {busiest['range']} range holds the most listings ({busiest['count']:,})")

    low_reviews = _share_up_to(views['review_distribution'], LOW_REVIEW_MAX, total)
    insights.append(f"{low_reviews:.0%} of listings have {LOW_REVIEW_MAX} or fewer reviews")

    low_availability = _share_up_to(views['availability_distribution'], LOW_AVAILABILITY_MAX, total)
    insights.append(f"{low_availability:.0%} of listings are available {LOW_AVAILABILITY_MAX} days a year or less")
    return insights
