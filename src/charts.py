import folium
import pandas as pd
import plotly.express as px

from config import MAP_LIMIT, NYC_CENTER

COLORS = ['#8884d8', '#82ca9d', '#ffc658', '#ff7c7c', '#8dd1e1']


def borough_count_chart(by_borough):
    fig = px.bar(by_borough, x='name', y='count', labels={'name': 'Borough', 'count': 'Listings'})
    fig.update_traces(marker_color=COLORS[0])
    return fig


def borough_price_chart(by_borough):
    data = by_borough.assign(avg_price=by_borough['avg_price'].round())  # whole dollars on the bars
    fig = px.bar(data, x='name', y='avg_price', labels={'name': 'Borough', 'avg_price': 'Average Price ($)'})
    fig.update_traces(marker_color=COLORS[1], hovertemplate='%{x}<br>$%{y}<extra></extra>')
    return fig


def room_type_pie(by_room_type):
    fig = px.pie(by_room_type, names='name', values='count', color_discrete_sequence=COLORS)
    fig.update_traces(textinfo='label+percent')
    return fig


def distribution_chart(hist, title, color):
    """Bar chart for one histogram view (range on x, count on y)."""
    fig = px.bar(hist, x='range', y='count', title=title, labels={'range': 'Range', 'count': 'Listings'})
    fig.update_traces(marker_color=color)
    return fig


def price_color(price):
    if price > 200:  # premium
        return 'red'
    elif price > 100:  # mid range
        return 'orange'
    return 'green'  # budget


def listings_map(df, limit=MAP_LIMIT):
    """Folium map of listings that have both coordinates."""
    if {'latitude', 'longitude'} <= set(df.columns):
        located = df[df['latitude'].notna() & df['longitude'].notna()]
    else:
        located = df.iloc[0:0]

    if located.empty:
        center = NYC_CENTER
    else:
        center = [located['latitude'].mean(), located['longitude'].mean()]
    m = folium.Map(location=center, zoom_start=11)

    for _, row in located.head(limit).iterrows():  # Loop through the first few for performance
        price = row['price'] if 'price' in row.index else 0
        color = price_color(price)
        label = row['name'] if 'name' in row.index and pd.notna(row['name']) else 'Listing'
        folium.CircleMarker(
            location=[row['latitude'], row['longitude']],
            radius=5,
            color=color,
            fill=True,
            fillColor=color,
            fillOpacity=0.7,
            popup=f"{label} | ${price:.0f}/night",
            weight=1,
        ).add_to(m)
    return m
