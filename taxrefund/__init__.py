"""Personal income-tax refund estimator with a keyword tax chatbot."""

__version__ = "0.1.0"
