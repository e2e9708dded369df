import streamlit as st
import sys
from streamlit_folium import st_folium

sys.path.insert(0, "src")  # Modules live in src/

from config import DATA_PATH, configure_logging
from aggregations import format_summary
from charts import (
    COLORS,
    borough_count_chart,
    borough_price_chart,
    distribution_chart,
    listings_map,
    room_type_pie,
)
from dashboard_state import LoadStatus, load_dashboard

configure_logging()
st.set_page_config(page_title="Rental Listings Dashboard", layout="wide")

path = st.sidebar.text_input("CSV file", value=DATA_PATH)  # Which dataset to load

with st.spinner("Loading listings data..."):
    state = load_dashboard(path)

if state.status is LoadStatus.FAILED:
    st.error(f"Could not load listings: {state.error}")  # Distinct from loading, no endless spinner
    st.stop()

data = state.data
summary = format_summary(data.summary)

st.title("Rental Listings Analysis")
st.caption(f"Analysis of {summary['total_listings']} listings")

if data.summary['total_listings'] == 0:
    st.warning("The file has no listings.")
    st.stop()

# Summary cards
col1, col2, col3, col4 = st.columns(4)
col1.metric("Total Listings", summary['total_listings'])
col2.metric("Average Price", f"${summary['avg_price']}")
col3.metric("Average Reviews", summary['avg_reviews'])
col4.metric("Avg Availability", f"{summary['avg_availability']} days")

# Charts grid
left, right = st.columns(2)
with left:
    st.subheader("Listings by Borough")
    st.plotly_chart(borough_count_chart(data.by_borough), use_container_width=True)
with right:
    st.subheader("Average Price by Borough")
    st.plotly_chart(borough_price_chart(data.by_borough), use_container_width=True)

left, right = st.columns(2)
with left:
    st.subheader("Room Type Distribution")
    st.plotly_chart(room_type_pie(data.by_room_type), use_container_width=True)
with right:
    st.subheader("Price Distribution")
    st.plotly_chart(distribution_chart(data.price_distribution, None, COLORS[2]), use_container_width=True)

left, right = st.columns(2)
with left:
    st.subheader("Review Distribution")
    st.plotly_chart(distribution_chart(data.review_distribution, None, COLORS[3]), use_container_width=True)
with right:
    st.subheader("Availability Distribution")
    st.plotly_chart(distribution_chart(data.availability_distribution, None, COLORS[4]), use_container_width=True)

# Map of listings
st.subheader("Listings Map")
st_folium(listings_map(data.listings), width=700, height=500)  # Display the map

# Key insights
st.subheader("Key Insights")
for insight in data.insights():
    st.markdown(f"- {insight}")
