# app/messages/analysis_messages.py

# ✅ Positive
SENTIMENT_ANALYSIS_SUCCESS = "Sentiment analysis completed successfully."
BATCH_ANALYSIS_SUCCESS = "Batch sentiment analysis completed successfully."
SAMPLE_REVIEWS_SUCCESS = "Sample reviews are provided."


# ❌ Errors
EMPTY_INPUT = "Please enter a review to analyze."
ANALYSIS_TIMEOUT = "Sentiment analysis took too long. Please try again."
ANALYSIS_FAILED = "Sentiment analysis failed due to internal server error."
