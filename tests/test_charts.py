"""Tests for the Plotly figures and the Folium map."""

import sys
from pathlib import Path

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import folium
import pytest
from aggregations import compute_all
from charts import (
    borough_count_chart,
    borough_price_chart,
    distribution_chart,
    listings_map,
    price_color,
    room_type_pie,
)
from config import NYC_CENTER
from data_loader import parse_listings

SAMPLE = (
    "id,name,price,room_type,neighbourhood_group,number_of_reviews,availability_365,latitude,longitude\n"
    "1,Sunny room,100,Private room,Manhattan,5,200,40.75,-73.98\n"
    "2,Garden flat,50,Entire home/apt,Brooklyn,0,10,40.65,-73.95\n"
    "3,Loft,301,Entire home/apt,Manhattan,12,90,,\n"
)


@pytest.fixture
def listings():
    return parse_listings(SAMPLE)


@pytest.fixture
def views(listings):
    return compute_all(listings)


def _markers(m):
    return [c for c in m._children.values() if isinstance(c, folium.CircleMarker)]


class TestFigures:

    def test_borough_count_chart(self, views):
        fig = borough_count_chart(views['by_borough'])
        assert list(fig.data[0].x) == ['Manhattan', 'Brooklyn']
        assert list(fig.data[0].y) == [2, 1]

    def test_borough_price_chart_rounds(self, views):
        fig = borough_price_chart(views['by_borough'])
        assert list(fig.data[0].y) == [200.0, 50.0]  # (100 + 301) / 2 = 200.5 rounds to even

    def test_room_type_pie(self, views):
        fig = room_type_pie(views['by_room_type'])
        assert list(fig.data[0].labels) == ['Private room', 'Entire home/apt']
        assert list(fig.data[0].values) == [1, 2]

    def test_distribution_chart(self, views):
        fig = distribution_chart(views['price_distribution'], "Price Distribution", '#ffc658')
        assert list(fig.data[0].x) == ['$0-50', '$51-100', '$101-200', '$201-500', '$500+']
        assert list(fig.data[0].y) == [1, 1, 0, 1, 0]
        assert fig.layout.title.text == "Price Distribution"


class TestListingsMap:

    def test_skips_missing_coordinates(self, listings):
        m = listings_map(listings)
        assert len(_markers(m)) == 2

    def test_limit(self, listings):
        assert len(_markers(listings_map(listings, limit=1))) == 1

    def test_center_on_listings(self, listings):
        m = listings_map(listings)
        assert m.location == pytest.approx([40.70, -73.965])

    def test_no_coordinates(self):
        df = parse_listings("id,price\n1,100\n")
        m = listings_map(df)
        assert m.location == NYC_CENTER
        assert _markers(m) == []

    @pytest.mark.parametrize("price,color", [(0, 'green'), (100, 'green'), (150, 'orange'), (201, 'red')])
    def test_price_color(self, price, color):
        assert price_color(price) == color
