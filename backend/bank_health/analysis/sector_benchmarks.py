"""
Bank sector benchmarks.

Median-style reference values for US commercial banks. Each scored metric is
compared against its benchmark as a percentage difference (see
metric_scorer.py). Percent metrics are in percent units (1.05 = 1.05%).
"""

BANK_BENCHMARKS: dict[str, float] = {
    "roa":               1.05,
    "roe":               10.5,
    "nim":               3.2,
    "efficiency_ratio":  55.0,
    "net_profit_margin": 25.0,
    "npl_ratio":         0.8,
    "loan_to_assets":    65.0,
    "current_ratio":     0.30,
    "car":               13.0,
    "debt_to_equity":    1.2,
    "rotce":             15.0,
    "tbvps":             55.0,
    "cet1":              12.0,
}

# Display names used in strengths/concerns and data gaps
METRIC_LABELS: dict[str, str] = {
    "roa":               "Return on Assets",
    "roe":               "Return on Equity",
    "nim":               "Net Interest Margin",
    "efficiency_ratio":  "Efficiency Ratio",
    "net_profit_margin": "Net Profit Margin",
    "npl_ratio":         "NPL Ratio",
    "loan_to_assets":    "Loan-to-Assets",
    "current_ratio":     "Current Ratio",
    "car":               "Capital Adequacy Ratio",
    "debt_to_equity":    "Debt-to-Equity",
    "rotce":             "Return on Tangible Common Equity",
    "tbvps":             "Tangible Book Value per Share",
    "cet1":              "CET1 Ratio",
}

# Scored categories: (metric key, direction). Each category is worth 25 points
# split evenly across its metrics.
SAFETY_METRICS: list[tuple[str, str]] = [
    ("npl_ratio", "lower-is-better"),
    ("car", "higher-is-better"),
    ("cet1", "higher-is-better"),
    ("debt_to_equity", "lower-is-better"),
]
PROFITABILITY_METRICS: list[tuple[str, str]] = [
    ("roa", "higher-is-better"),
    ("roe", "higher-is-better"),
    ("nim", "higher-is-better"),
    ("rotce", "higher-is-better"),
    ("efficiency_ratio", "lower-is-better"),
]
CATEGORY_POINTS = 25.0

# Aliases: alternate metric names used by data providers
_ALIASES: dict[str, str] = {
    "returnonassets":          "roa",
    "return on assets":        "roa",
    "returnonequity":          "roe",
    "return on equity":        "roe",
    "netinterestmargin":       "nim",
    "net interest margin":     "nim",
    "efficiency":              "efficiency_ratio",
    "efficiency ratio":        "efficiency_ratio",
    "netprofitmargin":         "net_profit_margin",
    "net profit margin":       "net_profit_margin",
    "npl":                     "npl_ratio",
    "nplratio":                "npl_ratio",
    "loantoassets":            "loan_to_assets",
    "loan-to-assets":          "loan_to_assets",
    "currentratio":            "current_ratio",
    "capitaladequacyratio":    "car",
    "capital adequacy ratio":  "car",
    "debttoequity":            "debt_to_equity",
    "debt-to-equity":          "debt_to_equity",
    "cet1ratio":               "cet1",
}


def get_bank_benchmark(metric: str) -> float | None:
    """Return the benchmark for a metric key, accepting provider aliases."""
    if not metric:
        return None
    if metric in BANK_BENCHMARKS:
        return BANK_BENCHMARKS[metric]
    key = metric.lower().strip()
    canonical = _ALIASES.get(key, key.replace(" ", "_"))
    return BANK_BENCHMARKS.get(canonical)
