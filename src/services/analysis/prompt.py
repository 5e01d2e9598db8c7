"""
Fixed instructions and JSON response schema for testimonial analysis.

The schema uses the OpenAPI subset accepted by Gemini's ``response_schema``.
Field names are the wire contract parsed by ``ReportData``.
"""

_SENTIMENT_VALUES = ["Positive", "Neutral", "Negative"]

ANALYSIS_PROMPT = """\
You are an expert audio analyst. I have provided an audio file of a dealer testimonial.
Your task is to transcribe it verbatim, translate it to English, and perform a detailed sentiment analysis.

Instructions:
1.  **Transcribe:** Listen to the audio and transcribe the speech verbatim in its original language. \
Break the transcript into sections of 20-30 seconds, including timestamps (e.g., [00:00 - 00:25]).
2.  **Translate:** Provide a faithful, conversational English translation for each transcribed section.
3.  **Analyze:**
    -   **Write a concise overall summary** of the testimonial in 2-3 sentences.
    -   Determine the overall sentiment (Positive, Neutral, Negative) with a confidence score.
    -   Identify key emotional markers (e.g., Trust, Satisfaction, Excitement).
    -   Extract key positive phrases and any negative/frictional points mentioned.
    -   Identify and extract the most impactful, marketable quotes from the English translation.
4.  **Format:** Structure your entire output according to the provided JSON schema. \
Ensure the 'marketableQuotes' array is populated with the best quotes for marketing use.
"""


def _sentiment_schema() -> dict:
    return {
        "type": "OBJECT",
        "properties": {
            "sentiment": {
                "type": "STRING",
                "enum": _SENTIMENT_VALUES,
                "description": "Can be 'Positive', 'Negative', or 'Neutral'",
            },
            "confidence": {
                "type": "NUMBER",
                "description": "A value between 0 and 1",
            },
        },
        "required": ["sentiment", "confidence"],
    }


def _string_list(description: str) -> dict:
    return {"type": "ARRAY", "items": {"type": "STRING"}, "description": description}


RESPONSE_SCHEMA: dict = {
    "type": "OBJECT",
    "properties": {
        "overallSummary": {
            "type": "STRING",
            "description": (
                "A concise summary of the entire testimonial in a few sentences, "
                "capturing the main points and overall tone."
            ),
        },
        "overallSentiment": _sentiment_schema(),
        "emotionalMarkers": _string_list(
            "List of identified emotional tones like 'Trust', 'Satisfaction'."
        ),
        "keyPositivePhrases": _string_list("Exact key phrases that are positive."),
        "frictionalPoints": _string_list("Any points of friction or negativity mentioned."),
        "marketableQuotes": _string_list(
            "Short, impactful quotes from the translation suitable for marketing."
        ),
        "sections": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "timestamp": {"type": "STRING", "description": "e.g., '[00:00 - 00:28]'"},
                    "original": {
                        "type": "STRING",
                        "description": "The verbatim transcript in the original language.",
                    },
                    "translation": {"type": "STRING", "description": "The English translation."},
                    "sentiment": _sentiment_schema(),
                    "notes": {"type": "STRING", "description": "Brief analysis of this section."},
                },
                "required": ["timestamp", "original", "translation", "sentiment", "notes"],
            },
        },
    },
    "required": [
        "overallSummary",
        "overallSentiment",
        "emotionalMarkers",
        "keyPositivePhrases",
        "frictionalPoints",
        "marketableQuotes",
        "sections",
    ],
}

# Fields checked before full validation; without them nothing can be rendered.
ESSENTIAL_FIELDS = ("overallSummary", "overallSentiment", "sections")
