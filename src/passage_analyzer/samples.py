from __future__ import annotations

DEMO_PASSAGE = (
    "The implementation of artificial intelligence technologies requires comprehensive "
    "understanding of algorithmic processes and computational methodologies. Modern "
    "systems utilize sophisticated machine learning frameworks to analyze complex "
    "data patterns and generate predictive models. Organizations must consider "
    "ethical implications while developing these advanced technological solutions "
    "for real-world applications and user interactions."
)
