# app/messages/metrics_messages.py

# ✅ Positive
PERFORMANCE_METRICS_SUCCESS = "Model performance metrics are provided."

# ❌ Errors
PERFORMANCE_METRICS_FAILED = "Failed to load model performance metrics."
