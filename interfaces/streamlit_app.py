"""
Streamlit web interface for the fixed-point normal distribution toolkit.

Interactive UI with tabs for:
- Point evaluation of the CDF and PDF
- CDF curve against the double-precision reference
- Absolute error profile
"""

import streamlit as st
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from scipy.stats import norm

from fixedcdf.core.distributions import cdf, pdf
from fixedcdf.core.fixed_point import from_fixed, to_fixed
from fixedcdf.utils.constants import ACCURACY_TOLERANCE, WAD

st.set_page_config(page_title="Fixed-Point Normal CDF", layout="wide")

st.title("Fixed-Point Normal CDF")
st.markdown("Deterministic Gaussian CDF in 18-decimal integer arithmetic")

# Sidebar parameters (decimal text keeps the inputs exact)
st.sidebar.header("Distribution Parameters")
mean_text = st.sidebar.text_input("Mean (μ)", value="0")
std_dev_text = st.sidebar.text_input("Standard Deviation (σ)", value="1")
width = st.sidebar.slider("Plot half-width (σ)", 1.0, 15.0, 6.0)
points = st.sidebar.slider("Plot points", 50, 2000, 400)

try:
    mean = to_fixed(mean_text)
    std_dev = to_fixed(std_dev_text)
    cdf(mean, mean, std_dev)
except (TypeError, ValueError, ArithmeticError) as e:
    st.error(f"Error: {e}")
    st.stop()

# Integer grid around the mean
half_span = int(width * std_dev)
xs = [mean - half_span + (2 * half_span * i) // (points - 1) for i in range(points)]
values = [cdf(x, mean, std_dev) for x in xs]
reference = norm.cdf(np.array([(x - mean) / std_dev for x in xs]))
fixed = np.array(values, dtype=np.float64) / WAD
errors = np.abs(fixed - reference)
x_real = [float(from_fixed(x)) for x in xs]

tab1, tab2, tab3 = st.tabs(["Evaluate", "CDF Curve", "Error Profile"])

with tab1:
    st.header("Point Evaluation")

    x_text = st.text_input("x", value=mean_text)
    try:
        x = to_fixed(x_text)
    except (TypeError, ValueError, ArithmeticError) as e:
        st.error(f"Error: {e}")
        st.stop()

    col1, col2 = st.columns(2)

    with col1:
        cdf_value = cdf(x, mean, std_dev)
        st.metric(label="CDF", value=f"{from_fixed(cdf_value):f}")
        st.caption(f"Raw: {cdf_value}")

    with col2:
        pdf_value = pdf(x, mean, std_dev)
        st.metric(label="PDF", value=f"{from_fixed(pdf_value):f}")
        st.caption(f"Raw: {pdf_value}")

    reference_value = float(norm.cdf((x - mean) / std_dev))
    st.table(pd.DataFrame({
        "Quantity": ["Fixed-point CDF", "scipy reference", "Absolute error"],
        "Value": [
            f"{cdf_value / WAD:.18f}",
            f"{reference_value:.18f}",
            f"{abs(cdf_value / WAD - reference_value):.3e}",
        ],
    }))

with tab2:
    st.header("CDF vs Reference")

    fig_cdf = go.Figure()
    fig_cdf.add_trace(go.Scatter(x=x_real, y=fixed, name="Fixed-point"))
    fig_cdf.add_trace(go.Scatter(x=x_real, y=reference, name="scipy", line=dict(dash="dot")))
    fig_cdf.update_layout(title="Normal CDF", xaxis_title="x", yaxis_title="P(X ≤ x)")
    st.plotly_chart(fig_cdf, use_container_width=True)

with tab3:
    st.header("Absolute Error")

    fig_err = go.Figure()
    fig_err.add_trace(go.Scatter(x=x_real, y=errors, name="|error|", line=dict(color="orange")))
    fig_err.add_hline(y=ACCURACY_TOLERANCE, line=dict(color="red", dash="dash"))
    fig_err.update_layout(title="Absolute Error vs scipy", xaxis_title="x", yaxis_title="Error", yaxis_type="log")
    st.plotly_chart(fig_err, use_container_width=True)

    st.metric(label="Max error", value=f"{errors.max():.3e}")
    if np.any(np.diff(np.array(values, dtype=np.int64)) < 0):
        st.error("CDF is not monotone on this grid")
    else:
        st.success("CDF is monotone on this grid")
