"""Chart components using Plotly for data visualization."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd

from gear_sizer.growth import analyze_growth_trend, months_between
from gear_sizer.models import FamilyMember


def _empty_chart(message: str):
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        xref="paper", yref="paper",
        x=0.5, y=0.5, showarrow=False
    )
    return fig


def create_height_history_chart(member: FamilyMember):
    """Create line chart of height over time with the fitted growth trend.

    Args:
        member: FamilyMember with measurement_history entries

    Returns:
        Plotly figure
    """
    history = sorted(member.measurement_history, key=lambda e: e.recorded_at)
    if not history:
        return _empty_chart("No measurement history")

    df = pd.DataFrame(
        [(e.recorded_at, e.height) for e in history],
        columns=['Date', 'Height'],
    )

    fig = px.line(
        df,
        x='Date',
        y='Height',
        title=f"{member.name}'s Height",
        markers=True
    )

    # Trend line through the first and last dates, anchored at the mean
    if len(history) >= 2:
        trend = analyze_growth_trend(history)
        t0 = history[0].recorded_at
        months = [months_between(t0, e.recorded_at) for e in history]
        mean_x = sum(months) / len(months)
        mean_y = df['Height'].mean()
        ends = [history[0].recorded_at, history[-1].recorded_at]
        fitted = [mean_y + trend.growth_rate_cm_per_month * (m - mean_x) for m in (months[0], months[-1])]
        fig.add_trace(go.Scatter(
            x=ends,
            y=fitted,
            mode='lines',
            name=f"Trend ({trend.growth_rate_cm_per_month:.2f} cm/month)",
            line={'dash': 'dash', 'color': 'red' if trend.is_growing else 'gray'},
        ))

    fig.update_layout(
        xaxis_title="Date",
        yaxis_title="Height (cm)",
        hovermode='x unified'
    )

    return fig


def create_size_range_chart(rows: list, title: str = "Recommended Lengths"):
    """Create horizontal range bars with the recommended value marked.

    Args:
        rows: List of (label, min, max, recommended) tuples in cm

    Returns:
        Plotly figure
    """
    if not rows:
        return _empty_chart("No sizing results")

    df = pd.DataFrame(rows, columns=['Item', 'Min', 'Max', 'Recommended'])
    df['Span'] = df['Max'] - df['Min']

    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=df['Item'],
        x=df['Span'],
        base=df['Min'],
        orientation='h',
        name='Range',
        marker_color='#4ECDC4',
    ))
    fig.add_trace(go.Scatter(
        y=df['Item'],
        x=df['Recommended'],
        mode='markers',
        name='Recommended',
        marker={'color': '#FF6B6B', 'size': 14, 'symbol': 'diamond'},
    ))

    fig.update_layout(
        title=title,
        xaxis_title="Length (cm)",
        showlegend=True,
        height=120 + 60 * len(rows),
    )

    return fig


def create_shoe_size_chart(sizes: dict):
    """Create bar chart comparing a foot's size across systems.

    Args:
        sizes: Mapping of system label to size (from AllShoeSizes.as_dict)

    Returns:
        Plotly figure
    """
    df = pd.DataFrame(list(sizes.items()), columns=['System', 'Size'])
    df = df[df['System'] != 'Mondopoint']

    fig = px.bar(
        df,
        x='System',
        y='Size',
        title='Size by System',
        text='Size',
        color_discrete_sequence=['#4ECDC4']
    )
    fig.update_traces(textposition='outside')

    return fig
